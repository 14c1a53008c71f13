"""
tonecraft Intermediate Representation (IR) types.

Closed key sets for the cascade tree and the pydantic models describing a
theme configuration file.
"""

from .themeconfig import (
    DEFAULT_VAR_PREFIX,
    OverrideRule,
    PaletteConfig,
    ThemeConfig,
)
from .theming import (
    COLOR_PROPERTIES,
    CONTRAST_TRACKED_PROPERTIES,
    ComponentState,
    ComponentType,
    StyleProperty,
    ThemeVariant,
)

__all__ = [
    # Key sets
    "ComponentType",
    "ThemeVariant",
    "ComponentState",
    "StyleProperty",
    "COLOR_PROPERTIES",
    "CONTRAST_TRACKED_PROPERTIES",
    # Configuration
    "DEFAULT_VAR_PREFIX",
    "PaletteConfig",
    "OverrideRule",
    "ThemeConfig",
]
