"""Per-key sanitize-and-validate rules for terminal options."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Dict, Mapping, Optional, cast

from .defaults import (
    CURSOR_STYLES,
    DEFAULT_OPTIONS,
    FONT_WEIGHT_OPTIONS,
    MAX_SCROLLBACK,
    get_default_options,
    is_option_key,
)
from .errors import ValidationError
from .schema import TerminalOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SanitizeResult:
    """Outcome of sanitizing one candidate value."""

    key: str
    value: Any = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the sanitized value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


Rule = Callable[[str, Any], Any]


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a numeric option value
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    # Only floats can be NaN; big ints would overflow math.isnan
    return isinstance(value, float) and math.isnan(value)


def _require_number(key: str, value: Any) -> Real:
    if not _is_number(value) or _is_nan(value):
        raise ValidationError(key, value, "must be numeric")
    return value


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


# Rules -----------------------------------------------------------------


def _cursor_style(key: str, value: Any) -> Any:
    if not value:
        value = DEFAULT_OPTIONS[key]
    if value not in CURSOR_STYLES:
        raise ValidationError(key, value, f"must be one of {', '.join(CURSOR_STYLES)}")
    return value


def _fallback_to_default(key: str, value: Any) -> Any:
    if not value:
        return DEFAULT_OPTIONS[key]
    return value


def _font_weight(key: str, value: Any) -> Any:
    if _is_number(value) and 1 <= value <= 1000:
        return value
    if value in FONT_WEIGHT_OPTIONS:
        return value
    return DEFAULT_OPTIONS[key]


def _minimum_one(key: str, value: Any) -> Any:
    if _require_number(key, value) < 1:
        raise ValidationError(key, value, "cannot be less than 1")
    return value


def _cursor_width(key: str, value: Any) -> Any:
    _require_number(key, value)
    if isinstance(value, float) and math.isinf(value):
        raise ValidationError(key, value, "must be finite")
    return _minimum_one(key, math.floor(value))


def _contrast_ratio(key: str, value: Any) -> Any:
    # Bounds are exact tenths, so clamping before rounding gives the same result
    value = max(1, min(21, _require_number(key, value)))
    return _round_half_up(value * 10) / 10


def _scrollback(key: str, value: Any) -> Any:
    value = min(_require_number(key, value), MAX_SCROLLBACK)
    if value < 0:
        raise ValidationError(key, value, "cannot be less than 0")
    return value


def _strictly_positive(key: str, value: Any) -> Any:
    if _require_number(key, value) <= 0:
        raise ValidationError(key, value, "cannot be less than or equal to 0")
    return value


def _required_dimension(key: str, value: Any) -> Any:
    if _is_number(value) and value == 0:
        return value
    if not value or _is_nan(value):
        raise ValidationError(key, value, "must be numeric")
    return value


_RULES: Dict[str, Rule] = {
    "cursorStyle": _cursor_style,
    "wordSeparator": _fallback_to_default,
    "fontWeight": _font_weight,
    "fontWeightBold": _font_weight,
    "cursorWidth": _cursor_width,
    "lineHeight": _minimum_one,
    "tabStopWidth": _minimum_one,
    "minimumContrastRatio": _contrast_ratio,
    "scrollback": _scrollback,
    "fastScrollSensitivity": _strictly_positive,
    "scrollSensitivity": _strictly_positive,
    "rows": _required_dimension,
    "cols": _required_dimension,
}


def sanitize_option(key: str, value: Any) -> Any:
    """
    Normalize ``value`` for option ``key``.

    Keys without a rule are returned unmodified.

    Raises:
        ValidationError: ``value`` is not acceptable for ``key``. Type and
            arithmetic errors raised by a rule are reported the same way.
    """
    rule = _RULES.get(key)
    if rule is None:
        return value
    try:
        return rule(key, value)
    except ValidationError:
        raise
    except (TypeError, ValueError, ArithmeticError) as exc:
        raise ValidationError(key, value, f"could not be sanitized ({exc})") from exc


def try_sanitize_option(key: str, value: Any) -> SanitizeResult:
    """Like :func:`sanitize_option` but report failure as a result."""
    try:
        return SanitizeResult(key=key, value=sanitize_option(key, value))
    except ValidationError as exc:
        return SanitizeResult(key=key, error=exc)


def merge_options(
    base: Mapping[str, Any] | None,
    overrides: Mapping[str, Any] | None,
) -> TerminalOptions:
    """
    Apply sanitized overrides on top of ``base``.

    Args:
        base: Starting option values. ``None`` means the default table.
        overrides: Caller supplied values (can be None).

    Returns:
        A new dictionary. Unknown keys in ``overrides`` are ignored and
        rejected values keep the ``base`` value; both are logged.
    """
    merged = get_default_options() if base is None else cast(TerminalOptions, dict(base))
    if not overrides:
        return merged

    for key, value in overrides.items():
        if not is_option_key(key):
            logger.debug("Ignoring unknown option %r", key)
            continue
        result = try_sanitize_option(key, value)
        if not result.ok:
            logger.error("Invalid value for option %s, keeping %r: %s", key, merged.get(key), result.error)
            continue
        merged[key] = result.value
    return merged
