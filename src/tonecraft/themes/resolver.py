"""
Theme resolver for tonecraft.

Resolves the final ThemeConfig by merging, in increasing precedence:
1. Base configuration (e.g. a project's tonecraft.yaml)
2. Each override configuration, in order

Scalars only override when the later layer set them explicitly; palettes
merge per variant; override rules accumulate so later rules run last.
"""

from __future__ import annotations

from typing import Any

from tonecraft.core.ir.themeconfig import ThemeConfig
from tonecraft.core.ir.theming import ThemeVariant

from .builder import ThemeBuilder
from .cascade import ThemeTree
from .css_generator import generate_theme_css

_SCALAR_FIELDS = ("name", "description", "var_prefix", "min_contrast")


def resolve_theme(
    base: ThemeConfig | None = None,
    *overrides: ThemeConfig | dict[str, Any],
) -> ThemeConfig:
    """
    Resolve the final configuration by merging overrides onto ``base``.

    Args:
        base: Base configuration (defaults to ``ThemeConfig()``)
        overrides: Later layers as ThemeConfig or raw mappings

    Returns:
        Merged ThemeConfig
    """
    resolved = base or ThemeConfig()
    for layer in overrides:
        if not layer:
            continue
        config = layer if isinstance(layer, ThemeConfig) else ThemeConfig.model_validate(layer)
        resolved = _merge_configs(resolved, config)
    return resolved


def _merge_configs(base: ThemeConfig, override: ThemeConfig) -> ThemeConfig:
    """
    Merge one override layer into ``base``.

    Precedence: override > base
    """
    explicit = override.model_fields_set
    updates: dict[str, Any] = {
        name: getattr(override, name) for name in _SCALAR_FIELDS if name in explicit
    }

    palettes: dict[ThemeVariant, Any] = dict(base.palettes)
    palettes.update(override.palettes)
    updates["palettes"] = palettes

    if "components" in explicit:
        updates["components"] = list(override.components)

    updates["overrides"] = [*base.overrides, *override.overrides]

    return base.model_copy(update=updates)


def build_resolved_theme(
    base: ThemeConfig | None = None,
    *overrides: ThemeConfig | dict[str, Any],
) -> ThemeTree:
    """Resolve the configuration layers and build the tree."""
    return ThemeBuilder(resolve_theme(base, *overrides)).build()


def resolve_theme_css(
    base: ThemeConfig | None = None,
    *overrides: ThemeConfig | dict[str, Any],
) -> str:
    """Resolve, build and render the stylesheet in one call."""
    config = resolve_theme(base, *overrides)
    tree = ThemeBuilder(config).build()
    return generate_theme_css(tree, config.var_prefix, config.name)
