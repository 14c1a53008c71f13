"""
Theme builder.

Turns a ThemeConfig into a populated ThemeTree:
1. Brand palettes per variant, re-derived for every interaction state
2. Focus outline defaults (offset, style, width) for the focused state
3. Override rules, in file order

High-contrast variants and the focused outline geometry are locked.
An override rule that names them explicitly is rejected; a rule that
leaves variants (or states) open only reaches the unlocked ones.
"""

from __future__ import annotations

import logging

from tonecraft.core.errors import make_config_error
from tonecraft.core.ir.themeconfig import OverrideRule, ThemeConfig
from tonecraft.core.ir.theming import ComponentState, StyleProperty, ThemeVariant

from .cascade import FOCUS_OUTLINE_STYLE, FOCUS_OUTLINE_WIDTH, ThemeTree
from .navigator import ThemeNavigator, select
from .palette import BrandPalette
from .values import StyleValue

logger = logging.getLogger(__name__)

FOCUS_OUTLINE_OFFSET = "4px"

LOCKED_FOCUS_PROPERTIES = (
    StyleProperty.OUTLINE_OFFSET,
    StyleProperty.OUTLINE_STYLE,
    StyleProperty.OUTLINE_WIDTH,
)


class ThemeBuilder:
    """Apply a ThemeConfig to a fresh ThemeTree."""

    def __init__(self, config: ThemeConfig | None = None):
        self.config = config or ThemeConfig()
        self.tree = ThemeTree()
        self._variants: list[ThemeVariant] = []

    def build(self) -> ThemeTree:
        """Build (or rebuild) the tree from the configuration."""
        self.tree = ThemeTree()
        self._variants = []
        self._apply_palettes()
        self._apply_focus_defaults()
        for index, rule in enumerate(self.config.overrides):
            self._apply_override(index, rule)
        return self.tree

    def set(self, navigator: ThemeNavigator, value: StyleValue | str | None) -> ThemeBuilder:
        """
        Guarded ``set`` for callers customizing a built tree.

        Raises:
            ThemeConfigError: If the target names a high-contrast variant or
                the focused outline geometry.
        """
        navigator = self._open_selectors(navigator)
        error = self._locked_target(navigator)
        if error:
            raise make_config_error(error)
        self.tree.set(navigator, value)
        return self

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def _base_navigator(self) -> ThemeNavigator:
        return ThemeNavigator(components=tuple(self.config.components))

    def _apply_palettes(self) -> None:
        for variant in ThemeVariant:
            base = BrandPalette.for_variant(
                variant, self.config.palette_for(variant), self.config.min_contrast
            )
            if base is None:
                logger.debug(f"No palette configured for {variant.value}; skipping")
                continue

            self._variants.append(variant)
            for state in ComponentState:
                palette = base.for_state(state)
                node = palette.to_style_patch().apply(focused=state is ComponentState.FOCUSED)
                navigator = self._base_navigator().with_variants(variant).with_states(state)
                self.tree.set(navigator, node)

    def _apply_focus_defaults(self) -> None:
        if not self._variants:
            return
        navigator = (
            self._base_navigator()
            .with_variants(*self._variants)
            .with_states(ComponentState.FOCUSED)
        )
        defaults = {
            StyleProperty.OUTLINE_OFFSET: FOCUS_OUTLINE_OFFSET,
            StyleProperty.OUTLINE_STYLE: FOCUS_OUTLINE_STYLE,
            StyleProperty.OUTLINE_WIDTH: FOCUS_OUTLINE_WIDTH,
        }
        for prop, value in defaults.items():
            self.tree.set(navigator.with_properties(prop), value)

    def _apply_override(self, index: int, rule: OverrideRule) -> None:
        navigator = self._open_selectors(ThemeNavigator.from_rule(rule))
        error = self._locked_target(navigator)
        if error:
            raise make_config_error(error, key_path=f"overrides.{index}")
        logger.debug(f"Applying override {index}: {rule.value!r}")
        self.tree.set(navigator, rule.value)

    # -------------------------------------------------------------------------
    # Guards
    # -------------------------------------------------------------------------

    @staticmethod
    def _open_selectors(navigator: ThemeNavigator) -> ThemeNavigator:
        """Narrow open (empty) selectors to the keys a caller may change."""
        if not navigator.variants:
            navigator = navigator.with_contrast_variants(high_contrast=False)

        properties = select(navigator.properties, StyleProperty)
        if not navigator.states and any(prop in LOCKED_FOCUS_PROPERTIES for prop in properties):
            navigator = navigator.with_states(
                *(state for state in ComponentState if state is not ComponentState.FOCUSED)
            )
        return navigator

    @staticmethod
    def _locked_target(navigator: ThemeNavigator) -> str | None:
        if any(variant.is_high_contrast for variant in navigator.variants):
            return "Cannot alter high-contrast variants"

        properties = select(navigator.properties, StyleProperty)
        if ComponentState.FOCUSED in navigator.states and any(
            prop in LOCKED_FOCUS_PROPERTIES for prop in properties
        ):
            return "Cannot change focused outline offset, style or width"
        return None


def build_theme(config: ThemeConfig) -> ThemeTree:
    """Convenience wrapper: ``ThemeBuilder(config).build()``."""
    return ThemeBuilder(config).build()
