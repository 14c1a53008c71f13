"""
Selectors for the theme cascade tree.

A ThemeNavigator lists the keys to visit at each of the four tree levels.
An empty tuple at a level means "every key of that level" for ``set`` and
"every present child" for CSS emission.

Usage:
    nav = (
        ThemeNavigator()
        .with_components(ComponentType.LINK)
        .with_contrast_variants(high_contrast=False)
        .with_states(ComponentState.HOVERED)
        .with_properties(StyleProperty.COLOR)
    )
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from tonecraft.core.ir.theming import (
    ComponentState,
    ComponentType,
    StyleProperty,
    ThemeVariant,
)

if TYPE_CHECKING:
    from tonecraft.core.ir.themeconfig import OverrideRule


@dataclass(frozen=True)
class ThemeNavigator:
    """Per-level key selection for tree traversal."""

    components: tuple[ComponentType, ...] = ()
    variants: tuple[ThemeVariant, ...] = ()
    states: tuple[ComponentState, ...] = ()
    properties: tuple[StyleProperty, ...] = ()

    @classmethod
    def all(cls) -> ThemeNavigator:
        """Explicitly select every key at every level."""
        return cls(
            components=tuple(ComponentType),
            variants=tuple(ThemeVariant),
            states=tuple(ComponentState),
            properties=tuple(StyleProperty),
        )

    @classmethod
    def from_rule(cls, rule: OverrideRule) -> ThemeNavigator:
        return cls(
            components=tuple(rule.components),
            variants=tuple(rule.variants),
            states=tuple(rule.states),
            properties=tuple(rule.properties),
        )

    def with_components(self, *items: ComponentType) -> ThemeNavigator:
        return replace(self, components=_keys(ComponentType, items))

    def with_variants(self, *items: ThemeVariant) -> ThemeNavigator:
        return replace(self, variants=_keys(ThemeVariant, items))

    def with_states(self, *items: ComponentState) -> ThemeNavigator:
        return replace(self, states=_keys(ComponentState, items))

    def with_properties(self, *items: StyleProperty) -> ThemeNavigator:
        return replace(self, properties=_keys(StyleProperty, items))

    def with_all_components(self) -> ThemeNavigator:
        return self.with_components(*ComponentType)

    def with_all_variants(self) -> ThemeNavigator:
        return self.with_variants(*ThemeVariant)

    def with_all_states(self) -> ThemeNavigator:
        return self.with_states(*ComponentState)

    def with_all_properties(self) -> ThemeNavigator:
        return self.with_properties(*StyleProperty)

    def with_contrast_variants(self, high_contrast: bool) -> ThemeNavigator:
        """Select the light/dark pair, or the high-contrast pair."""
        if high_contrast:
            return self.with_variants(
                ThemeVariant.HIGH_CONTRAST_LIGHT, ThemeVariant.HIGH_CONTRAST_DARK
            )
        return self.with_variants(ThemeVariant.LIGHT, ThemeVariant.DARK)


def _keys(enum_cls, items: Iterable) -> tuple:
    """Coerce to enum members, dropping duplicates but keeping order."""
    seen: dict = {}
    for item in items:
        member = enum_cls(item)
        seen.setdefault(member, None)
    return tuple(seen)


def select(requested: tuple, enum_cls) -> tuple:
    """Keys to visit when setting: an empty selection means every member."""
    return requested if requested else tuple(enum_cls)
