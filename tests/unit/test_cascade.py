"""
Tests for the theme cascade tree.

Covers set/get across the four levels, contrast re-enforcement, focus
guards, CSS emission, cascade merging and patches.
"""

from __future__ import annotations

import pytest

from tonecraft.core.color import Color
from tonecraft.core.contrast import contrast_ratio
from tonecraft.core.ir.theming import (
    ComponentState,
    ComponentType,
    StyleProperty,
    ThemeVariant,
)
from tonecraft.themes.cascade import StyleNode, StylePatch, ThemePatch, ThemeTree
from tonecraft.themes.navigator import ThemeNavigator
from tonecraft.themes.values import StyleValue


@pytest.fixture
def surface_nav() -> ThemeNavigator:
    """Navigator for the light default surface."""
    return ThemeNavigator(
        components=(ComponentType.SURFACE,),
        variants=(ThemeVariant.LIGHT,),
        states=(ComponentState.DEFAULT,),
    )


# =============================================================================
# StyleValue
# =============================================================================


class TestStyleValue:
    """Tests for leaf value coercion."""

    def test_color_property_parses_colors(self):
        value = StyleValue.for_property(StyleProperty.COLOR, "#fff")
        assert value.is_color
        assert value.value == "#FFFFFFFF"

    def test_color_keyword_stays_text(self):
        value = StyleValue.for_property(StyleProperty.COLOR, "currentColor")
        assert not value.is_color
        assert value.value == "currentColor"

    def test_non_color_property_keeps_text(self):
        value = StyleValue.for_property(StyleProperty.FONT_FAMILY, "red")
        assert not value.is_color

    def test_none_is_blank(self):
        assert StyleValue.for_property(StyleProperty.COLOR, None).is_blank

    def test_try_parse_color(self):
        assert StyleValue.try_parse_color("nope") == (False, None)
        ok, value = StyleValue.try_parse_color("black")
        assert ok
        assert value.color == Color(0, 0, 0)


# =============================================================================
# Set / get
# =============================================================================


class TestSetAndGet:
    """Tests for ThemeTree.set and lookups."""

    def test_set_and_get_value(self, surface_nav):
        tree = ThemeTree()
        tree.set(surface_nav.with_properties(StyleProperty.FONT_WEIGHT), "700")
        value = tree.get_value(
            ComponentType.SURFACE,
            ThemeVariant.LIGHT,
            ComponentState.DEFAULT,
            StyleProperty.FONT_WEIGHT,
        )
        assert value == StyleValue("700")

    def test_missing_levels_return_none(self):
        tree = ThemeTree()
        assert (
            tree.get_value(
                ComponentType.LINK, ThemeVariant.DARK, ComponentState.HOVERED, StyleProperty.COLOR
            )
            is None
        )
        assert tree.get_style(ComponentType.LINK, ThemeVariant.DARK, ComponentState.HOVERED) is None

    def test_empty_level_sets_every_key(self):
        tree = ThemeTree()
        nav = ThemeNavigator(
            components=(ComponentType.TEXT,), properties=(StyleProperty.FONT_WEIGHT,)
        )
        tree.set(nav, "400")
        assert len(tree) == 1
        assert len(tree.get(ComponentType.TEXT)) == ThemeVariant.count()
        assert len(tree.get(ComponentType.TEXT).get(ThemeVariant.DARK)) == ComponentState.count()

    def test_blank_value_removes(self, surface_nav):
        tree = ThemeTree()
        nav = surface_nav.with_properties(StyleProperty.FONT_WEIGHT)
        tree.set(nav, "700")
        tree.set(nav, "   ")
        style = tree.get_style(ComponentType.SURFACE, ThemeVariant.LIGHT, ComponentState.DEFAULT)
        assert StyleProperty.FONT_WEIGHT not in style

    def test_subtree_replacement_copies(self):
        tree = ThemeTree()
        node = StyleNode().set_property(StyleProperty.FONT_WEIGHT, "700")
        nav = ThemeNavigator(
            components=(ComponentType.LINK,),
            variants=(ThemeVariant.DARK,),
            states=(ComponentState.HOVERED,),
        )
        tree.set(nav, node)
        node.set_property(StyleProperty.FONT_WEIGHT, "100")

        value = tree.get_value(
            ComponentType.LINK, ThemeVariant.DARK, ComponentState.HOVERED, StyleProperty.FONT_WEIGHT
        )
        assert value.value == "700"

    def test_wrong_node_type_rejected(self, surface_nav):
        tree = ThemeTree()
        with pytest.raises(TypeError):
            tree.set(surface_nav, ThemeTree())


# =============================================================================
# Contrast enforcement
# =============================================================================


class TestContrastEnforcement:
    """Tests for automatic re-contrasting on color writes."""

    def test_setting_background_recontrasts_tracked_colors(self, surface_nav):
        tree = ThemeTree()
        tree.set(surface_nav.with_properties(StyleProperty.COLOR), "#777777")
        tree.set(surface_nav.with_properties(StyleProperty.ACCENT_COLOR), "#888888")
        tree.set(surface_nav.with_properties(StyleProperty.BORDER_COLOR), "#999999")
        tree.set(surface_nav.with_properties(StyleProperty.BACKGROUND_COLOR), "#808080")

        style = tree.get_style(ComponentType.SURFACE, ThemeVariant.LIGHT, ComponentState.DEFAULT)
        background = style.get_color(StyleProperty.BACKGROUND_COLOR)
        assert background == Color(128, 128, 128)
        for prop in (StyleProperty.COLOR, StyleProperty.ACCENT_COLOR, StyleProperty.BORDER_COLOR):
            assert contrast_ratio(style.get_color(prop), background) >= 4.5

        css = tree.to_css(surface_nav)
        assert "background-color:#808080FF;" in css
        assert "color:#777777FF;" not in css

    def test_no_background_no_adjustment(self, surface_nav):
        tree = ThemeTree()
        tree.set(surface_nav.with_properties(StyleProperty.COLOR), "#777777")
        value = tree.get_value(
            ComponentType.SURFACE, ThemeVariant.LIGHT, ComponentState.DEFAULT, StyleProperty.COLOR
        )
        assert value.value == "#777777FF"

    def test_transparent_background_skipped(self):
        node = StyleNode()
        node.set_property(StyleProperty.COLOR, "#777777")
        node.set_property(StyleProperty.BACKGROUND_COLOR, "transparent")
        assert node.get_color(StyleProperty.COLOR) == Color(119, 119, 119)

    def test_non_color_write_does_not_recontrast(self):
        node = StyleNode()
        node.set_property(StyleProperty.BACKGROUND_COLOR, "#808080")
        node._values[StyleProperty.COLOR.ordinal] = StyleValue.from_color(Color(128, 128, 128))
        node.set_property(StyleProperty.FONT_WEIGHT, "700")
        assert node.get_color(StyleProperty.COLOR) == Color(128, 128, 128)

    def test_style_patch_applies_in_order(self):
        node = StylePatch.of(background_color="#fff", color="#fff").apply()
        assert contrast_ratio(node.get_color(StyleProperty.COLOR), Color(255, 255, 255)) >= 4.5


# =============================================================================
# Focus guards
# =============================================================================


class TestFocusGuards:
    """Tests for the always-visible focus outline."""

    def _focused(self, prop: StyleProperty) -> ThemeNavigator:
        return ThemeNavigator(
            components=(ComponentType.LINK,),
            variants=(ThemeVariant.LIGHT,),
            states=(ComponentState.FOCUSED, ComponentState.HOVERED),
            properties=(prop,),
        )

    def _get(self, tree: ThemeTree, state: ComponentState, prop: StyleProperty) -> str:
        return tree.get_value(ComponentType.LINK, ThemeVariant.LIGHT, state, prop).value

    def test_outline_style_none_is_replaced_when_focused(self):
        tree = ThemeTree()
        tree.set(self._focused(StyleProperty.OUTLINE_STYLE), "none")
        assert self._get(tree, ComponentState.FOCUSED, StyleProperty.OUTLINE_STYLE) == "solid"
        assert self._get(tree, ComponentState.HOVERED, StyleProperty.OUTLINE_STYLE) == "none"

    def test_outline_style_other_values_kept(self):
        tree = ThemeTree()
        tree.set(self._focused(StyleProperty.OUTLINE_STYLE), "dashed")
        assert self._get(tree, ComponentState.FOCUSED, StyleProperty.OUTLINE_STYLE) == "dashed"

    def test_outline_width_forced_thick_when_focused(self):
        tree = ThemeTree()
        tree.set(self._focused(StyleProperty.OUTLINE_WIDTH), "1px")
        assert self._get(tree, ComponentState.FOCUSED, StyleProperty.OUTLINE_WIDTH) == "thick"
        assert self._get(tree, ComponentState.HOVERED, StyleProperty.OUTLINE_WIDTH) == "1px"

    def test_guards_apply_to_replaced_subtrees(self):
        tree = ThemeTree()
        node = StyleNode().set_property(StyleProperty.OUTLINE_STYLE, "none")
        nav = ThemeNavigator(
            components=(ComponentType.LINK,),
            variants=(ThemeVariant.LIGHT,),
            states=(ComponentState.FOCUSED,),
        )
        tree.set(nav, node)
        assert self._get(tree, ComponentState.FOCUSED, StyleProperty.OUTLINE_STYLE) == "solid"


# =============================================================================
# CSS emission
# =============================================================================


class TestBuildCss:
    """Tests for to_css / to_css_variables."""

    def _tree(self, surface_nav: ThemeNavigator) -> ThemeTree:
        tree = ThemeTree()
        tree.set(surface_nav.with_properties(StyleProperty.BACKGROUND_COLOR), "#FFFFFF")
        tree.set(surface_nav.with_properties(StyleProperty.COLOR), "#000000")
        return tree

    def test_bare_declarations(self, surface_nav):
        tree = self._tree(surface_nav)
        assert tree.to_css(surface_nav) == "background-color:#FFFFFFFF;color:#000000FF;"

    def test_prefixed_declarations(self, surface_nav):
        tree = self._tree(surface_nav)
        assert tree.to_css(surface_nav, var_prefix="tc") == (
            "--tc-surface-light-default-background-color:#FFFFFFFF;"
            "--tc-surface-light-default-color:#000000FF;"
        )

    def test_prefix_is_normalized(self, surface_nav):
        tree = self._tree(surface_nav)
        css = tree.to_css(surface_nav, var_prefix="  TC_")
        assert css.startswith("--tc-surface-light-default-")

    def test_property_selection(self, surface_nav):
        tree = self._tree(surface_nav)
        nav = surface_nav.with_properties(StyleProperty.COLOR, StyleProperty.FONT_SIZE)
        assert tree.to_css(nav) == "color:#000000FF;"

    def test_absent_keys_are_skipped(self, surface_nav):
        tree = self._tree(surface_nav)
        nav = ThemeNavigator(components=(ComponentType.LINK, ComponentType.SURFACE))
        assert tree.to_css(nav) == "background-color:#FFFFFFFF;color:#000000FF;"

    def test_empty_navigator_walks_enum_order(self):
        tree = ThemeTree()
        base = ThemeNavigator(variants=(ThemeVariant.LIGHT,), states=(ComponentState.DEFAULT,))
        tree.set(
            base.with_components(ComponentType.TEXT).with_properties(StyleProperty.FONT_WEIGHT),
            "700",
        )
        tree.set(
            base.with_components(ComponentType.LINK).with_properties(
                StyleProperty.TEXT_DECORATION_LINE
            ),
            "underline",
        )
        assert tree.to_css() == "text-decoration-line:underline;font-weight:700;"

    def test_to_css_variables(self, surface_nav):
        tree = self._tree(surface_nav)
        css = tree.to_css_variables(ThemeVariant.LIGHT)
        assert "--tc-surface-light-default-background-color:#FFFFFFFF;" in css
        assert tree.to_css_variables(ThemeVariant.DARK) == ""


# =============================================================================
# Cascade
# =============================================================================


class TestCascade:
    """Tests for merging trees and patches."""

    def _nav(self) -> ThemeNavigator:
        return ThemeNavigator(
            components=(ComponentType.LINK,),
            variants=(ThemeVariant.LIGHT,),
            states=(ComponentState.DEFAULT,),
        )

    def _value(self, tree: ThemeTree, prop: StyleProperty) -> str | None:
        value = tree.get_value(ComponentType.LINK, ThemeVariant.LIGHT, ComponentState.DEFAULT, prop)
        return value.value if value is not None else None

    def test_later_present_values_win(self):
        base = ThemeTree()
        base.set(self._nav().with_properties(StyleProperty.COLOR), "#000000")
        base.set(self._nav().with_properties(StyleProperty.FONT_WEIGHT), "400")
        override = ThemeTree()
        override.set(self._nav().with_properties(StyleProperty.FONT_WEIGHT), "700")

        merged = base.cascade(override)
        assert self._value(merged, StyleProperty.FONT_WEIGHT) == "700"
        assert self._value(merged, StyleProperty.COLOR) == "#000000FF"
        # Inputs untouched
        assert self._value(base, StyleProperty.FONT_WEIGHT) == "400"

    def test_background_patch_recontrasts_existing_colors(self):
        base = ThemeTree()
        base.set(self._nav().with_properties(StyleProperty.BACKGROUND_COLOR), "#FFFFFF")
        base.set(self._nav().with_properties(StyleProperty.COLOR), "#000000")
        patch = ThemePatch().add(self._nav(), StylePatch.of(background_color="#000000"))

        merged = base.cascade(patch)
        style = merged.get_style(ComponentType.LINK, ThemeVariant.LIGHT, ComponentState.DEFAULT)
        background = style.get_color(StyleProperty.BACKGROUND_COLOR)
        text = style.get_color(StyleProperty.COLOR)
        assert background == Color(0, 0, 0)
        assert contrast_ratio(text, background) >= 4.5
        # Base keeps its own pairing
        assert self._value(base, StyleProperty.COLOR) == "#000000FF"

    def test_non_color_patch_leaves_colors_alone(self):
        base = ThemeTree()
        base.set(self._nav().with_properties(StyleProperty.COLOR), "#777777")
        override = ThemeTree()
        override.set(self._nav().with_properties(StyleProperty.FONT_WEIGHT), "700")

        merged = base.cascade(override)
        assert self._value(merged, StyleProperty.COLOR) == "#777777FF"

    def test_new_branches_are_copied(self):
        base = ThemeTree()
        override = ThemeTree()
        override.set(self._nav().with_properties(StyleProperty.FONT_WEIGHT), "700")

        merged = base.cascade(override)
        override.set(self._nav().with_properties(StyleProperty.FONT_WEIGHT), "100")
        assert self._value(merged, StyleProperty.FONT_WEIGHT) == "700"

    def test_multiple_overrides_apply_left_to_right(self):
        base = ThemeTree()
        first = ThemeTree().set(self._nav().with_properties(StyleProperty.FONT_WEIGHT), "500")
        second = ThemeTree().set(self._nav().with_properties(StyleProperty.FONT_WEIGHT), "900")
        merged = base.cascade(first, second)
        assert self._value(merged, StyleProperty.FONT_WEIGHT) == "900"

    def test_theme_patch(self):
        base = ThemeTree()
        base.set(self._nav().with_properties(StyleProperty.FONT_WEIGHT), "400")
        patch = ThemePatch().add(self._nav(), StylePatch.of(font_weight="700", font_style="italic"))

        merged = patch.apply_to(base)
        assert self._value(merged, StyleProperty.FONT_WEIGHT) == "700"
        assert self._value(merged, StyleProperty.FONT_STYLE) == "italic"
        assert self._value(base, StyleProperty.FONT_STYLE) is None

    def test_style_patch_bool(self):
        assert not StylePatch()
        assert StylePatch.of(color="red")
        assert not StylePatch.of(color=None)
