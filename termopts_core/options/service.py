"""Options store: validated reads and writes plus change notification."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional

from ..events import Disposable, EventEmitter
from .defaults import DEFAULT_OPTIONS, is_option_key
from .errors import UnknownOptionError
from .schema import TerminalOptions
from .sanitizer import merge_options, sanitize_option

logger = logging.getLogger(__name__)


def _values_equal(old: Any, new: Any) -> bool:
    # True and 1 compare equal in Python but are different option values
    if isinstance(old, bool) != isinstance(new, bool):
        return False
    return old is new or old == new


class OptionsView(MutableMapping):
    """
    Live per-key view over an :class:`OptionsService`.

    Reading ``view.cursorStyle`` or ``view["cursorStyle"]`` is
    ``service.get("cursorStyle")``; assigning either form is
    ``service.set("cursorStyle", value)``. Nothing is cached here.

    Unknown names raise :class:`AttributeError` through the attribute form
    (reading or assigning) and :class:`UnknownOptionError` through the item
    form, so ``getattr``/``hasattr`` keep their usual meaning.
    """

    __slots__ = ("_service",)

    def __init__(self, service: "OptionsService"):
        object.__setattr__(self, "_service", service)

    def __getitem__(self, key: str) -> Any:
        return self._service.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self._service.set(key, value)

    def __delitem__(self, key: str) -> None:
        raise TypeError(f"Option {key!r} cannot be deleted")

    def __iter__(self) -> Iterator[str]:
        return iter(DEFAULT_OPTIONS)

    def __len__(self) -> int:
        return len(DEFAULT_OPTIONS)

    def __contains__(self, key: object) -> bool:
        return is_option_key(key)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, i.e. for option names
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._service.get(name)
        except UnknownOptionError as exc:
            raise AttributeError(str(exc)) from exc

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            self._service.set(name, value)
        except UnknownOptionError as exc:
            raise AttributeError(str(exc)) from exc

    def __dir__(self) -> Iterable[str]:
        return list(DEFAULT_OPTIONS)

    def __repr__(self) -> str:
        return f"OptionsView({dict(self._service.raw_options)!r})"


class OptionsService:
    """
    Validated, observable terminal option store.

    Args:
        options: Caller overrides. Unknown keys are ignored; values that fail
            validation are logged and the default is kept, so construction
            never raises.

    Attributes:
        raw_options: The authoritative option values. Writes should go
            through :meth:`set` or :attr:`options` so they are validated.
        options: Live view; see :class:`OptionsView`.
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        self.raw_options: TerminalOptions = merge_options(None, options)
        self.options = OptionsView(self)
        self._on_option_change: EventEmitter[str] = EventEmitter()

    def get(self, key: str) -> Any:
        if not is_option_key(key):
            raise UnknownOptionError(key)
        return self.raw_options[key]

    def set(self, key: str, value: Any) -> None:
        if not is_option_key(key):
            raise UnknownOptionError(key)

        value = sanitize_option(key, value)
        old = self.raw_options[key]
        if _values_equal(old, value):
            return
        self.raw_options[key] = value
        logger.debug("Option %s changed: %r -> %r", key, old, value)
        self._on_option_change.fire(key)

    get_option = get
    set_option = set

    def on_option_change(self, listener: Callable[[str], None]) -> Disposable:
        """Call ``listener(key)`` after every committed change."""
        return self._on_option_change.event(listener)

    def on_specific_option_change(self, key: str, listener: Callable[[Any], None]) -> Disposable:
        """Call ``listener(new_value)`` after ``key`` changes."""
        if not is_option_key(key):
            raise UnknownOptionError(key)

        def _handler(changed: str) -> None:
            if changed == key:
                listener(self.raw_options[key])

        return self.on_option_change(_handler)

    def on_multiple_option_change(self, keys: Iterable[str], listener: Callable[[], None]) -> Disposable:
        """Call ``listener()`` after any of ``keys`` changes."""
        watched = frozenset(keys)
        unknown = sorted(key for key in watched if not is_option_key(key))
        if unknown:
            raise UnknownOptionError(unknown[0])

        def _handler(changed: str) -> None:
            if changed in watched:
                listener()

        return self.on_option_change(_handler)

    def dispose(self) -> None:
        """Drop every change subscription."""
        self._on_option_change.dispose()
