"""Shared pytest fixtures for tonecraft tests."""

from pathlib import Path

import pytest

from tonecraft.core.ir import (
    ComponentState,
    ComponentType,
    OverrideRule,
    PaletteConfig,
    StyleProperty,
    ThemeConfig,
    ThemeVariant,
)


@pytest.fixture
def light_dark_config() -> ThemeConfig:
    """Return a configuration with light and dark palettes."""
    return ThemeConfig(
        name="acme",
        palettes={
            ThemeVariant.LIGHT: PaletteConfig(background="#FFFFFF"),
            ThemeVariant.DARK: PaletteConfig(background="#121212", accent="#82AAFF"),
        },
    )


@pytest.fixture
def link_underline_rule() -> OverrideRule:
    """Return an override rule that underlines hovered links."""
    return OverrideRule(
        components=[ComponentType.LINK],
        states=[ComponentState.HOVERED],
        properties=[StyleProperty.TEXT_DECORATION_LINE],
        value="underline",
    )


@pytest.fixture
def theme_yaml(tmp_path: Path) -> Path:
    """Write a small tonecraft.yaml and return its path."""
    path = tmp_path / "tonecraft.yaml"
    path.write_text(
        """
name: acme
var_prefix: acme
palettes:
  light:
    background: "#FFFFFF"
  dark:
    background: "#121212"
    accent: "rgb(130 170 255)"
components: [surface, link]
overrides:
  - components: [link]
    states: [hovered]
    properties: [text-decoration-line]
    value: underline
"""
    )
    return path
