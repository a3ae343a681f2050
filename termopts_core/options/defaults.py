"""Default option values for the terminal options store."""

from __future__ import annotations

from copy import deepcopy
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple, cast

from ..platform_info import is_mac
from .schema import TerminalOptions

# NOTE:
# Every key here is a recognized option; a key missing from this table is
# unknown everywhere. The table is read-only, copies handed to callers come
# from get_default_options().

_DEFAULT_OPTIONS: Dict[str, Any] = {
    "cols": 80,
    "rows": 24,
    "cursorBlink": False,
    "cursorStyle": "block",
    "cursorWidth": 1,
    "customGlyphs": True,
    "drawBoldTextInBrightColors": True,
    "fastScrollModifier": "alt",
    "fastScrollSensitivity": 5,
    "fontFamily": "courier-new, courier, monospace",
    "fontSize": 15,
    "fontWeight": "normal",
    "fontWeightBold": "bold",
    "lineHeight": 1.0,
    "letterSpacing": 0,
    "linkHandler": None,
    "logLevel": "info",
    "scrollback": 1000,
    "scrollSensitivity": 1,
    "screenReaderMode": False,
    "smoothScrollDuration": 0,
    "macOptionIsMeta": False,
    "macOptionClickForcesSelection": False,
    "minimumContrastRatio": 1,
    "disableStdin": False,
    "allowProposedApi": False,
    "allowTransparency": False,
    "tabStopWidth": 8,
    "theme": {},
    "rightClickSelectsWord": is_mac(),
    "windowOptions": {},
    "windowsMode": False,
    "wordSeparator": " ()[]{}',\"`",
    "altClickMovesCursor": True,
    "convertEol": False,
    "termName": "xterm",
    "cancelEvents": False,
    "overviewRulerWidth": None,
}

DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType(_DEFAULT_OPTIONS)

CURSOR_STYLES: Tuple[str, ...] = ("block", "underline", "bar")

FONT_WEIGHT_OPTIONS: Tuple[str, ...] = (
    "normal",
    "bold",
    "100",
    "200",
    "300",
    "400",
    "500",
    "600",
    "700",
    "800",
    "900",
)

MAX_SCROLLBACK = 4294967295


def is_option_key(key: Any) -> bool:
    """Return True if ``key`` names a recognized option."""
    return isinstance(key, str) and key in _DEFAULT_OPTIONS


def get_default_options() -> TerminalOptions:
    """Return a deep copy of the default option table."""
    return cast(TerminalOptions, deepcopy(_DEFAULT_OPTIONS))
