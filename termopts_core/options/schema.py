"""TypedDict definitions for the terminal option set.

One field per option. The key set here and the key set of
``DEFAULT_OPTIONS`` in :mod:`termopts_core.options.defaults` must stay
identical; ``tests/core/test_options_defaults.py`` checks this.
"""

from __future__ import annotations

from typing import Any, Callable, Literal, MutableMapping, Optional, TypedDict, Union

__all__ = [
    "CursorStyle",
    "FastScrollModifier",
    "FontWeight",
    "LogLevel",
    "ThemeConfig",
    "WindowOptionsConfig",
    "TerminalOptions",
]


CursorStyle = Literal["block", "underline", "bar"]

FastScrollModifier = Literal["none", "alt", "ctrl", "shift"]

FontWeight = Union[
    Literal["normal", "bold", "100", "200", "300", "400", "500", "600", "700", "800", "900"],
    int,
    float,
]

LogLevel = Literal["trace", "debug", "info", "warn", "error", "off"]

LinkHandler = Callable[..., Any]


class ThemeConfig(TypedDict, total=False):
    foreground: str
    background: str
    cursor: str
    cursorAccent: str
    selectionBackground: str
    selectionForeground: str
    selectionInactiveBackground: str
    black: str
    red: str
    green: str
    yellow: str
    blue: str
    magenta: str
    cyan: str
    white: str
    brightBlack: str
    brightRed: str
    brightGreen: str
    brightYellow: str
    brightBlue: str
    brightMagenta: str
    brightCyan: str
    brightWhite: str


WindowOptionsConfig = MutableMapping[str, bool]


class TerminalOptions(TypedDict, total=False):
    cols: int
    rows: int
    cursorBlink: bool
    cursorStyle: CursorStyle
    cursorWidth: int
    customGlyphs: bool
    drawBoldTextInBrightColors: bool
    fastScrollModifier: FastScrollModifier
    fastScrollSensitivity: float
    fontFamily: str
    fontSize: float
    fontWeight: FontWeight
    fontWeightBold: FontWeight
    lineHeight: float
    letterSpacing: float
    linkHandler: Optional[LinkHandler]
    logLevel: LogLevel
    scrollback: int
    scrollSensitivity: float
    screenReaderMode: bool
    smoothScrollDuration: int
    macOptionIsMeta: bool
    macOptionClickForcesSelection: bool
    minimumContrastRatio: float
    disableStdin: bool
    allowProposedApi: bool
    allowTransparency: bool
    tabStopWidth: int
    theme: ThemeConfig
    rightClickSelectsWord: bool
    windowOptions: WindowOptionsConfig
    windowsMode: bool
    wordSeparator: str
    altClickMovesCursor: bool
    convertEol: bool
    termName: str
    cancelEvents: bool
    overviewRulerWidth: Optional[int]
