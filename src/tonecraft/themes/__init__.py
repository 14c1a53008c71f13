"""
Theme cascade tree, palettes and CSS generation for tonecraft.

Provides:
- ThemeTree: four-level component/variant/state/property override tree
- ThemeNavigator: per-level key selection
- BrandPalette: background-driven color sets
- ThemeBuilder: ThemeConfig → ThemeTree
- generate_theme_css: ThemeTree → stylesheet
"""

from .builder import ThemeBuilder, build_theme
from .cascade import (
    ComponentNode,
    StyleNode,
    StylePatch,
    ThemePatch,
    ThemeTree,
    VariantNode,
)
from .css_generator import CssBuilder, generate_theme_css
from .navigator import ThemeNavigator
from .palette import BrandPalette
from .resolver import build_resolved_theme, resolve_theme, resolve_theme_css
from .values import StyleValue

__all__ = [
    # Tree
    "ThemeTree",
    "ComponentNode",
    "VariantNode",
    "StyleNode",
    "StyleValue",
    "StylePatch",
    "ThemePatch",
    "ThemeNavigator",
    # CSS
    "CssBuilder",
    "generate_theme_css",
    # Palettes / building
    "BrandPalette",
    "ThemeBuilder",
    "build_theme",
    "resolve_theme",
    "build_resolved_theme",
    "resolve_theme_css",
]
