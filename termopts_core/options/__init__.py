"""Terminal option store: defaults, sanitizer and the observable service."""

from .defaults import DEFAULT_OPTIONS, get_default_options, is_option_key
from .errors import OptionsError, UnknownOptionError, ValidationError
from .schema import TerminalOptions
from .sanitizer import SanitizeResult, merge_options, sanitize_option, try_sanitize_option
from .service import OptionsService, OptionsView

__all__ = [
    "DEFAULT_OPTIONS",
    "get_default_options",
    "is_option_key",
    "OptionsError",
    "UnknownOptionError",
    "ValidationError",
    "TerminalOptions",
    "SanitizeResult",
    "merge_options",
    "sanitize_option",
    "try_sanitize_option",
    "OptionsService",
    "OptionsView",
]
