"""
Tests for CSS output.

Covers CssBuilder declaration handling and full stylesheet generation.
"""

from __future__ import annotations

# =============================================================================
# CssBuilder
# =============================================================================


class TestCssBuilder:
    """Tests for the declaration collector."""

    def test_compact_output(self):
        from tonecraft.themes.css_generator import CssBuilder

        builder = CssBuilder().add("color", "red").add("background-color", "blue")
        assert builder.to_string() == "color:red;background-color:blue;"
        assert str(builder) == builder.to_string()
        assert len(builder) == 2

    def test_first_write_wins(self):
        from tonecraft.themes.css_generator import CssBuilder

        builder = CssBuilder().add("color", "red").add("color", "blue")
        assert builder.to_string() == "color:red;"

    def test_blank_ignored(self):
        from tonecraft.themes.css_generator import CssBuilder

        builder = CssBuilder().add("color", "  ").add("", "red").add("color", None)
        assert len(builder) == 0
        assert builder.to_string() == ""

    def test_prefixed_names(self):
        from tonecraft.themes.css_generator import CssBuilder

        builder = CssBuilder().add("color", "red", var_prefix="TC_link")
        assert builder.to_string() == "--tc-link-color:red;"

    def test_add_declarations_skips_malformed(self):
        from tonecraft.themes.css_generator import CssBuilder

        builder = CssBuilder().add_declarations("color: red; background-color:blue;junk")
        assert builder.items() == [("color", "red"), ("background-color", "blue")]


# =============================================================================
# Stylesheet generation
# =============================================================================


def _two_variant_tree():
    from tonecraft.core.ir.theming import (
        ComponentState,
        ComponentType,
        StyleProperty,
        ThemeVariant,
    )
    from tonecraft.themes.cascade import ThemeTree
    from tonecraft.themes.navigator import ThemeNavigator

    tree = ThemeTree()
    nav = ThemeNavigator(
        components=(ComponentType.SURFACE,),
        states=(ComponentState.DEFAULT,),
        properties=(StyleProperty.BACKGROUND_COLOR,),
    )
    tree.set(nav.with_variants(ThemeVariant.LIGHT), "#FFFFFF")
    tree.set(nav.with_variants(ThemeVariant.DARK), "#121212")
    return tree


class TestGenerateThemeCss:
    """Tests for generate_theme_css."""

    def test_header(self):
        from tonecraft.themes.css_generator import generate_theme_css

        css = generate_theme_css(_two_variant_tree(), "tc", "acme")
        assert css.startswith("/* tonecraft theme: acme */")

    def test_variant_blocks(self):
        from tonecraft.themes.css_generator import generate_theme_css

        css = generate_theme_css(_two_variant_tree(), "tc")
        assert ":root {" in css
        assert '[data-theme="dark"] {' in css
        assert "high-contrast" not in css

    def test_variable_names_omit_variant(self):
        from tonecraft.themes.css_generator import generate_theme_css

        css = generate_theme_css(_two_variant_tree(), "tc")
        assert "  --tc-surface-default-background-color: #FFFFFFFF;" in css
        assert "  --tc-surface-default-background-color: #121212FF;" in css
        assert "--tc-surface-light-" not in css

    def test_default_prefix(self):
        from tonecraft.themes.css_generator import generate_theme_css

        css = generate_theme_css(_two_variant_tree())
        assert "--tc-surface-default-background-color" in css

    def test_empty_tree(self):
        from tonecraft.themes.cascade import ThemeTree
        from tonecraft.themes.css_generator import generate_theme_css

        css = generate_theme_css(ThemeTree())
        assert "{" not in css
