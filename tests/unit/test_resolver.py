"""Tests for layered theme configuration resolution."""

from __future__ import annotations

from tonecraft.core.ir.themeconfig import PaletteConfig, ThemeConfig
from tonecraft.core.ir.theming import ComponentType, ThemeVariant
from tonecraft.themes.resolver import build_resolved_theme, resolve_theme, resolve_theme_css


class TestResolveTheme:
    """Tests for resolve_theme merging."""

    def test_no_layers_returns_defaults(self):
        assert resolve_theme() == ThemeConfig()

    def test_base_only(self, light_dark_config):
        assert resolve_theme(light_dark_config) is light_dark_config

    def test_scalars_override_only_when_set(self):
        base = ThemeConfig(name="base", var_prefix="acme", min_contrast=7.0)
        merged = resolve_theme(base, {"name": "child"})
        assert merged.name == "child"
        assert merged.var_prefix == "acme"
        assert merged.min_contrast == 7.0

    def test_palettes_merge_per_variant(self, light_dark_config):
        merged = resolve_theme(
            light_dark_config,
            {"palettes": {"dark": {"background": "#000000"}}},
        )
        assert merged.palettes[ThemeVariant.LIGHT] == PaletteConfig(background="#FFFFFF")
        assert merged.palettes[ThemeVariant.DARK].background == "#000000"

    def test_components_replaced_when_explicit(self, light_dark_config):
        merged = resolve_theme(light_dark_config, {"components": ["text"]})
        assert merged.components == [ComponentType.TEXT]

        untouched = resolve_theme(light_dark_config, {"name": "x"})
        assert untouched.components == list(ComponentType)

    def test_overrides_accumulate(self, light_dark_config, link_underline_rule):
        first = ThemeConfig(overrides=[link_underline_rule])
        second = {
            "overrides": [{"components": ["text"], "properties": ["font-weight"], "value": "700"}]
        }
        merged = resolve_theme(light_dark_config, first, second)
        assert len(merged.overrides) == 2
        assert merged.overrides[0] == link_underline_rule

    def test_empty_layers_skipped(self, light_dark_config):
        merged = resolve_theme(light_dark_config, {}, None)  # type: ignore[arg-type]
        assert merged == light_dark_config


class TestResolvedOutput:
    """Tests for the build/render shortcuts."""

    def test_build_resolved_theme(self, light_dark_config):
        tree = build_resolved_theme(light_dark_config, {"components": ["link"]})
        assert tree.get(ComponentType.LINK) is not None
        assert tree.get(ComponentType.SURFACE) is None

    def test_resolve_theme_css(self, light_dark_config):
        css = resolve_theme_css(light_dark_config, {"var_prefix": "acme"})
        assert css.startswith("/* tonecraft theme: acme */")
        assert ":root {" in css
        assert "--acme-surface-default-background-color: #FFFFFFFF;" in css
