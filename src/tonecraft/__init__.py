"""
tonecraft - accessible design-token CSS for UI components.

Parses colors, derives interaction-state and elevation variants, enforces
WCAG contrast, and composes themes through a component/variant/state
cascade tree into CSS declarations or custom properties.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.color import Color
from .core.errors import (
    InvalidArgumentRange,
    InvalidColorFormat,
    InvalidOperation,
    ThemeConfigError,
    TonecraftError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "Color",
    "TonecraftError",
    "InvalidColorFormat",
    "InvalidArgumentRange",
    "InvalidOperation",
    "ThemeConfigError",
]
