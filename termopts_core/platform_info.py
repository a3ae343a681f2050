"""Host platform checks used when picking option defaults."""

from __future__ import annotations

import platform


def is_mac() -> bool:
    """Return True when running on macOS."""
    return platform.system() == "Darwin"
