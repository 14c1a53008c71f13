"""
Theme cascade tree.

Four fixed levels, each stored as a list indexed by enum ordinal:

    ThemeTree       ComponentType  → ComponentNode
    ComponentNode   ThemeVariant   → VariantNode
    VariantNode     ComponentState → StyleNode
    StyleNode       StyleProperty  → StyleValue

``set`` mutates in place, creating missing nodes on the way down. Setting a
color re-contrasts the node's foreground colors against its background.
``cascade`` returns a new tree where later, present values win, and re-contrasts
nodes that received a color.
``build_css`` walks read-only.

Usage:
    tree = ThemeTree()
    nav = ThemeNavigator().with_components(ComponentType.SURFACE)
    tree.set(nav.with_properties(StyleProperty.BACKGROUND_COLOR), "#202020")
    tree.to_css(nav.with_variants(ThemeVariant.DARK), var_prefix="tc")
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, ClassVar

from tonecraft.core.color import Color
from tonecraft.core.contrast import WCAG_AA_NORMAL, ensure_minimum_contrast
from tonecraft.core.ir.themeconfig import DEFAULT_VAR_PREFIX
from tonecraft.core.ir.theming import (
    CONTRAST_TRACKED_PROPERTIES,
    ComponentState,
    ComponentType,
    StyleProperty,
    ThemeVariant,
)
from tonecraft.core.strings import join_css_name, to_css_name

from .css_generator import CssBuilder
from .navigator import ThemeNavigator, select
from .values import StyleValue

logger = logging.getLogger(__name__)

FOCUS_OUTLINE_STYLE = "solid"
FOCUS_OUTLINE_WIDTH = "thick"


# =============================================================================
# Leaf level
# =============================================================================


class StyleNode:
    """Property → value mapping for one component / variant / state."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: list[StyleValue | None] = [None] * StyleProperty.count()

    def __len__(self) -> int:
        return sum(1 for value in self._values if value is not None)

    def __contains__(self, prop: object) -> bool:
        return isinstance(prop, StyleProperty) and self._values[prop.ordinal] is not None

    def __iter__(self) -> Iterator[StyleProperty]:
        return (prop for prop, _ in self.items())

    def __repr__(self) -> str:
        body = ", ".join(f"{prop.value}={value.value!r}" for prop, value in self.items())
        return f"StyleNode({body})"

    def items(self) -> Iterator[tuple[StyleProperty, StyleValue]]:
        """Present values in enumeration order."""
        for prop in StyleProperty:
            value = self._values[prop.ordinal]
            if value is not None:
                yield prop, value

    def get(self, prop: StyleProperty) -> StyleValue | None:
        return self._values[StyleProperty(prop).ordinal]

    def get_color(self, prop: StyleProperty) -> Color | None:
        value = self.get(prop)
        return value.color if value is not None else None

    def copy(self) -> StyleNode:
        clone = StyleNode()
        clone._values = list(self._values)
        return clone

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def set(
        self,
        navigator: ThemeNavigator,
        value: StyleValue | Color | str | None,
        focused: bool = False,
    ) -> StyleNode:
        """
        Set ``value`` on every selected property (all when none selected).

        Blank values remove the property. Any color write re-runs contrast
        enforcement for the node.
        """
        if value is not None and not isinstance(value, (StyleValue, Color, str)):
            raise TypeError(f"Cannot store {type(value).__name__} in a StyleNode")

        touched_color = False
        for prop in select(navigator.properties, StyleProperty):
            stored = self._store(prop, StyleValue.for_property(prop, value), focused)
            if stored is not None and stored.is_color:
                touched_color = True

        if touched_color:
            self.ensure_contrast()
        return self

    def set_property(
        self,
        prop: StyleProperty,
        value: StyleValue | Color | str | None,
        focused: bool = False,
    ) -> StyleNode:
        return self.set(ThemeNavigator(properties=(StyleProperty(prop),)), value, focused)

    def _store(self, prop: StyleProperty, value: StyleValue, focused: bool) -> StyleValue | None:
        if value.is_blank:
            self._values[prop.ordinal] = None
            return None
        if focused:
            value = _guard_focused(prop, value)
        self._values[prop.ordinal] = value
        return value

    def apply_focus_guards(self) -> StyleNode:
        for prop, value in list(self.items()):
            self._values[prop.ordinal] = _guard_focused(prop, value)
        return self

    def ensure_contrast(self, minimum_ratio: float = WCAG_AA_NORMAL) -> StyleNode:
        """
        Push every tracked foreground color to ``minimum_ratio`` against the
        background. No-op without an opaque-enough background color.
        """
        background = self.get_color(StyleProperty.BACKGROUND_COLOR)
        if background is None or background.is_transparent():
            return self

        for prop in CONTRAST_TRACKED_PROPERTIES:
            color = self.get_color(prop)
            if color is None:
                continue
            adjusted = ensure_minimum_contrast(color, background, minimum_ratio)
            if adjusted != color:
                logger.debug(
                    "Re-contrasted %s %s -> %s over %s", prop.value, color, adjusted, background
                )
                self._values[prop.ordinal] = StyleValue.from_color(adjusted)
        return self

    # -------------------------------------------------------------------------
    # Merge / output
    # -------------------------------------------------------------------------

    def cascade(self, other: StyleNode) -> StyleNode:
        """
        New node: ``other``'s present values override this node's.

        When ``other`` brings any color, tracked colors are re-contrasted
        against the merged background.
        """
        merged = self.copy()
        touched_color = False
        for prop, value in other.items():
            merged._values[prop.ordinal] = value
            touched_color = touched_color or value.is_color
        if touched_color:
            merged.ensure_contrast()
        return merged

    def build_css(
        self,
        builder: CssBuilder,
        navigator: ThemeNavigator,
        var_prefix: str | None = None,
        **_: Any,
    ) -> CssBuilder:
        requested = navigator.properties
        props = requested if requested else tuple(prop for prop, _ in self.items())
        for prop in props:
            value = self.get(prop)
            if value is not None:
                builder.add(prop.value, value.value, var_prefix)
        return builder


def _guard_focused(prop: StyleProperty, value: StyleValue) -> StyleValue:
    """Focused states always keep a visible outline."""
    if prop is StyleProperty.OUTLINE_STYLE and value.value.strip().lower() == "none":
        return StyleValue.of(FOCUS_OUTLINE_STYLE)
    if prop is StyleProperty.OUTLINE_WIDTH and value.value.strip().lower() != FOCUS_OUTLINE_WIDTH:
        return StyleValue.of(FOCUS_OUTLINE_WIDTH)
    return value


# =============================================================================
# Branch levels
# =============================================================================


class _BranchNode:
    """Fixed-size list of children indexed by the ordinal of ``_key_cls``."""

    _key_cls: ClassVar[Any]
    _child_cls: ClassVar[Any]
    _nav_field: ClassVar[str]

    __slots__ = ("_children",)

    def __init__(self) -> None:
        self._children: list[Any] = [None] * self._key_cls.count()

    def __len__(self) -> int:
        return sum(1 for child in self._children if child is not None)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, self._key_cls) and self._children[key.ordinal] is not None

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.items())

    def items(self) -> Iterator[tuple[Any, Any]]:
        for key in self._key_cls:
            child = self._children[key.ordinal]
            if child is not None:
                yield key, child

    def get(self, key: Any) -> Any:
        return self._children[self._key_cls(key).ordinal]

    def get_or_create(self, key: Any) -> Any:
        key = self._key_cls(key)
        child = self._children[key.ordinal]
        if child is None:
            child = self._child_cls()
            self._children[key.ordinal] = child
        return child

    def copy(self) -> Any:
        clone = type(self)()
        clone._children = [child.copy() if child is not None else None for child in self._children]
        return clone

    def set(self, navigator: ThemeNavigator, value: Any) -> Any:
        """
        Walk to every selected child (all when none selected).

        A value of the child node type replaces that subtree; anything else
        is passed down.
        """
        for key in select(getattr(navigator, self._nav_field), self._key_cls):
            if isinstance(value, self._child_cls):
                self._children[key.ordinal] = self._adopt(key, value.copy())
                continue
            self._set_child(key, self.get_or_create(key), navigator, value)
        return self

    def _adopt(self, key: Any, child: Any) -> Any:
        return child

    def _set_child(self, key: Any, child: Any, navigator: ThemeNavigator, value: Any) -> None:
        child.set(navigator, value)

    def cascade(self, other: Any) -> Any:
        """New node: ``other``'s present values override this node's."""
        merged = self.copy()
        for key, other_child in other.items():
            mine = merged._children[key.ordinal]
            merged._children[key.ordinal] = (
                other_child.copy() if mine is None else mine.cascade(other_child)
            )
        return merged

    def _child_prefix(
        self, var_prefix: str | None, key: Any, variant_in_prefix: bool
    ) -> str | None:
        if not var_prefix:
            return None
        return join_css_name(var_prefix, key.value)

    def build_css(
        self,
        builder: CssBuilder,
        navigator: ThemeNavigator,
        var_prefix: str | None = None,
        variant_in_prefix: bool = True,
    ) -> CssBuilder:
        requested = getattr(navigator, self._nav_field)
        keys = requested if requested else tuple(key for key, _ in self.items())
        for key in keys:
            child = self.get(key)
            if child is None:
                continue
            child.build_css(
                builder,
                navigator,
                self._child_prefix(var_prefix, key, variant_in_prefix),
                variant_in_prefix=variant_in_prefix,
            )
        return builder


class VariantNode(_BranchNode):
    """State → StyleNode for one component variant."""

    _key_cls = ComponentState
    _child_cls = StyleNode
    _nav_field = "states"
    __slots__ = ()

    def _adopt(self, key: ComponentState, child: StyleNode) -> StyleNode:
        if key is ComponentState.FOCUSED:
            child.apply_focus_guards()
        return child

    def _set_child(
        self,
        key: ComponentState,
        child: StyleNode,
        navigator: ThemeNavigator,
        value: Any,
    ) -> None:
        child.set(navigator, value, focused=key is ComponentState.FOCUSED)


class ComponentNode(_BranchNode):
    """Variant → VariantNode for one component."""

    _key_cls = ThemeVariant
    _child_cls = VariantNode
    _nav_field = "variants"
    __slots__ = ()

    def _child_prefix(
        self, var_prefix: str | None, key: ThemeVariant, variant_in_prefix: bool
    ) -> str | None:
        if not variant_in_prefix:
            return var_prefix or None
        return super()._child_prefix(var_prefix, key, variant_in_prefix)


class ThemeTree(_BranchNode):
    """Root of the cascade tree: component → ComponentNode."""

    _key_cls = ComponentType
    _child_cls = ComponentNode
    _nav_field = "components"
    __slots__ = ()

    def get_value(
        self,
        component: ComponentType,
        variant: ThemeVariant,
        state: ComponentState,
        prop: StyleProperty,
    ) -> StyleValue | None:
        """Single leaf lookup; ``None`` when any level is absent."""
        component_node = self.get(component)
        if component_node is None:
            return None
        variant_node = component_node.get(variant)
        if variant_node is None:
            return None
        style_node = variant_node.get(state)
        if style_node is None:
            return None
        return style_node.get(prop)

    def get_style(
        self,
        component: ComponentType,
        variant: ThemeVariant,
        state: ComponentState,
    ) -> StyleNode | None:
        component_node = self.get(component)
        variant_node = component_node.get(variant) if component_node is not None else None
        return variant_node.get(state) if variant_node is not None else None

    def cascade(self, *overrides: ThemeTree | ThemePatch) -> ThemeTree:
        """Merge overrides left to right into a new tree."""
        merged = self.copy()
        for override in overrides:
            other = override.to_tree() if isinstance(override, ThemePatch) else override
            merged = _BranchNode.cascade(merged, other)
        return merged

    def build_css(
        self,
        builder: CssBuilder,
        navigator: ThemeNavigator,
        var_prefix: str | None = None,
        variant_in_prefix: bool = True,
    ) -> CssBuilder:
        prefix = to_css_name(var_prefix) if var_prefix else None
        return super().build_css(builder, navigator, prefix or None, variant_in_prefix)

    def to_css(self, navigator: ThemeNavigator | None = None, var_prefix: str | None = None) -> str:
        """Declarations for the selected nodes as one string."""
        return self.build_css(CssBuilder(), navigator or ThemeNavigator(), var_prefix).to_string()

    def to_css_variables(self, variant: ThemeVariant, var_prefix: str = DEFAULT_VAR_PREFIX) -> str:
        """Every component and state of ``variant`` as custom properties."""
        builder = CssBuilder()
        for component in ComponentType:
            for state in ComponentState:
                navigator = ThemeNavigator(
                    components=(component,), variants=(variant,), states=(state,)
                )
                self.build_css(builder, navigator, var_prefix)
        return builder.to_string()

    def variant_declarations(
        self, variant: ThemeVariant, var_prefix: str | None = None
    ) -> list[tuple[str, str]]:
        """Custom properties for ``variant`` with the variant left out of the names."""
        builder = CssBuilder()
        navigator = ThemeNavigator(variants=(variant,))
        prefix = var_prefix or DEFAULT_VAR_PREFIX
        self.build_css(builder, navigator, prefix, variant_in_prefix=False)
        return builder.items()


# =============================================================================
# Patches
# =============================================================================


@dataclass(frozen=True)
class StylePatch:
    """Sparse set of property values; only present entries override."""

    values: Mapping[StyleProperty, StyleValue | Color | str] = field(default_factory=dict)

    @classmethod
    def of(cls, **properties: StyleValue | Color | str | None) -> StylePatch:
        """Build from keyword names, e.g. ``StylePatch.of(background_color="#fff")``."""
        values = {
            StyleProperty.from_key(name): value
            for name, value in properties.items()
            if value is not None
        }
        return cls(values)

    def __bool__(self) -> bool:
        return bool(self.values)

    def apply(self, node: StyleNode | None = None, focused: bool = False) -> StyleNode:
        """New StyleNode: ``node`` with this patch set on top."""
        result = node.copy() if node is not None else StyleNode()
        for prop, value in self.values.items():
            result.set_property(prop, value, focused)
        return result


@dataclass(frozen=True)
class ThemePatch:
    """Ordered (navigator, StylePatch) entries merged into a tree by ``cascade``."""

    entries: tuple[tuple[ThemeNavigator, StylePatch], ...] = ()

    def add(self, navigator: ThemeNavigator, patch: StylePatch) -> ThemePatch:
        return ThemePatch(self.entries + ((navigator, patch),))

    def to_tree(self) -> ThemeTree:
        tree = ThemeTree()
        for navigator, patch in self.entries:
            for prop, value in patch.values.items():
                tree.set(replace(navigator, properties=(prop,)), value)
        return tree

    def apply_to(self, tree: ThemeTree) -> ThemeTree:
        return tree.cascade(self)
