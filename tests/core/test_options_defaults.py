import pytest

from termopts_core.options.defaults import (
    CURSOR_STYLES,
    DEFAULT_OPTIONS,
    FONT_WEIGHT_OPTIONS,
    get_default_options,
    is_option_key,
)
from termopts_core.options.schema import TerminalOptions
from termopts_core.options.sanitizer import sanitize_option


def test_get_default_options_returns_deep_copy():
    options_a = get_default_options()
    options_b = get_default_options()

    assert options_a is not options_b
    options_a["theme"]["background"] = "#000000"
    options_a["cols"] = 132
    assert DEFAULT_OPTIONS["theme"] == {}
    assert DEFAULT_OPTIONS["cols"] == 80


def test_default_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_OPTIONS["cols"] = 100  # type: ignore[index]


def test_schema_and_default_table_share_key_set():
    assert set(TerminalOptions.__annotations__) == set(DEFAULT_OPTIONS)


def test_is_option_key():
    assert is_option_key("scrollback")
    assert not is_option_key("doesNotExist")
    assert not is_option_key(None)
    assert not is_option_key(["cols"])


@pytest.mark.parametrize("key", sorted(DEFAULT_OPTIONS))
def test_every_default_passes_its_own_rule(key):
    assert sanitize_option(key, DEFAULT_OPTIONS[key]) == DEFAULT_OPTIONS[key]


def test_closed_value_sets():
    assert DEFAULT_OPTIONS["cursorStyle"] in CURSOR_STYLES
    assert DEFAULT_OPTIONS["fontWeight"] in FONT_WEIGHT_OPTIONS
    assert DEFAULT_OPTIONS["fontWeightBold"] in FONT_WEIGHT_OPTIONS


def test_typed_record_is_exported_with_the_store():
    from termopts_core.options import OptionsService, TerminalOptions as exported

    assert exported is TerminalOptions
    assert set(OptionsService().raw_options) == set(exported.__annotations__)
    assert set(get_default_options()) == set(exported.__annotations__)
