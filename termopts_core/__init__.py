"""Canonical re-exports for the termopts core public API surface."""

from .events import Disposable, EventEmitter
from .log_service import LogService
from .options import (
    DEFAULT_OPTIONS,
    OptionsError,
    OptionsService,
    OptionsView,
    UnknownOptionError,
    ValidationError,
    get_default_options,
)

__all__ = [
    'Disposable',
    'EventEmitter',
    'LogService',
    'DEFAULT_OPTIONS',
    'OptionsError',
    'OptionsService',
    'OptionsView',
    'UnknownOptionError',
    'ValidationError',
    'get_default_options',
]
