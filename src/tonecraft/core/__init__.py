"""Core tonecraft functionality: colors, contrast, derivation, IR and config loading."""

from . import ir
from .borders import component_border_color, divider_border_color
from .color import BLACK, TRANSPARENT, WHITE, Color, parse_color, try_parse_color
from .contrast import (
    ContrastOutcome,
    contrast_ratio,
    ensure_minimum_contrast,
    relative_luminance,
    resolve_contrast,
)
from .derive import derive_state, shift_lightness, to_elevation
from .errors import (
    ErrorContext,
    InvalidArgumentRange,
    InvalidColorFormat,
    InvalidOperation,
    ThemeConfigError,
    TonecraftError,
)
from .themeconfig_loader import load_theme_config, save_theme_config

__all__ = [
    "ir",
    "Color",
    "BLACK",
    "WHITE",
    "TRANSPARENT",
    "parse_color",
    "try_parse_color",
    "ContrastOutcome",
    "relative_luminance",
    "contrast_ratio",
    "ensure_minimum_contrast",
    "resolve_contrast",
    "shift_lightness",
    "derive_state",
    "to_elevation",
    "component_border_color",
    "divider_border_color",
    "TonecraftError",
    "InvalidColorFormat",
    "InvalidArgumentRange",
    "InvalidOperation",
    "ThemeConfigError",
    "ErrorContext",
    "load_theme_config",
    "save_theme_config",
]
