"""
Exception hierarchy for the options store.

Unknown keys and rejected values are reported with separate exception
types so callers can tell a typo apart from a bad value.
"""

from typing import Any


class OptionsError(Exception):
    """Base class for option store errors"""

    def __init__(self, message: str, key: str):
        self.key = key
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class UnknownOptionError(OptionsError, KeyError):
    """The key is not a recognized option"""

    def __init__(self, key: Any):
        super().__init__(f'No option with key "{key}"', key)


class ValidationError(OptionsError, ValueError):
    """The value was rejected by the option's sanitize rule"""

    def __init__(self, key: str, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"{key} {reason}, value: {value!r}", key)
