"""Tests for ThemeNavigator selectors."""

from __future__ import annotations

import dataclasses

import pytest


class TestThemeNavigator:
    """Tests for navigator construction."""

    def test_default_selects_nothing_explicitly(self):
        from tonecraft.themes.navigator import ThemeNavigator

        nav = ThemeNavigator()
        assert nav.components == ()
        assert nav.variants == ()
        assert nav.states == ()
        assert nav.properties == ()

    def test_builders_return_new_instances(self):
        from tonecraft.core.ir.theming import ComponentType
        from tonecraft.themes.navigator import ThemeNavigator

        base = ThemeNavigator()
        nav = base.with_components(ComponentType.LINK)
        assert base.components == ()
        assert nav.components == (ComponentType.LINK,)

    def test_duplicates_dropped_in_order(self):
        from tonecraft.core.ir.theming import ComponentState
        from tonecraft.themes.navigator import ThemeNavigator

        nav = ThemeNavigator().with_states(
            ComponentState.PRESSED, ComponentState.HOVERED, ComponentState.PRESSED
        )
        assert nav.states == (ComponentState.PRESSED, ComponentState.HOVERED)

    def test_values_are_coerced(self):
        from tonecraft.core.ir.theming import StyleProperty
        from tonecraft.themes.navigator import ThemeNavigator

        nav = ThemeNavigator().with_properties("color", "border-color")
        assert nav.properties == (StyleProperty.COLOR, StyleProperty.BORDER_COLOR)

    def test_all(self):
        from tonecraft.core.ir.theming import StyleProperty, ThemeVariant
        from tonecraft.themes.navigator import ThemeNavigator

        nav = ThemeNavigator.all()
        assert nav.variants == tuple(ThemeVariant)
        assert nav.properties == tuple(StyleProperty)
        assert ThemeNavigator().with_all_states() == ThemeNavigator(states=nav.states)

    def test_contrast_variants(self):
        from tonecraft.core.ir.theming import ThemeVariant
        from tonecraft.themes.navigator import ThemeNavigator

        assert ThemeNavigator().with_contrast_variants(high_contrast=False).variants == (
            ThemeVariant.LIGHT,
            ThemeVariant.DARK,
        )
        assert ThemeNavigator().with_contrast_variants(high_contrast=True).variants == (
            ThemeVariant.HIGH_CONTRAST_LIGHT,
            ThemeVariant.HIGH_CONTRAST_DARK,
        )

    def test_from_rule(self, link_underline_rule):
        from tonecraft.core.ir.theming import ComponentState, ComponentType
        from tonecraft.themes.navigator import ThemeNavigator

        nav = ThemeNavigator.from_rule(link_underline_rule)
        assert nav.components == (ComponentType.LINK,)
        assert nav.variants == ()
        assert nav.states == (ComponentState.HOVERED,)

    def test_frozen(self):
        from tonecraft.themes.navigator import ThemeNavigator

        with pytest.raises(dataclasses.FrozenInstanceError):
            ThemeNavigator().components = ()  # type: ignore[misc]

    def test_select_empty_means_all(self):
        from tonecraft.core.ir.theming import ThemeVariant
        from tonecraft.themes.navigator import select

        assert select((), ThemeVariant) == tuple(ThemeVariant)
        assert select((ThemeVariant.DARK,), ThemeVariant) == (ThemeVariant.DARK,)
