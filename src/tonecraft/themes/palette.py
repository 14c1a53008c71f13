"""
Brand palette derivation.

A BrandPalette is the set of colors a component needs, all derived from a
single background: text, caret, accent, border, outline and
text-decoration. Every derived text color meets 4.5:1 against the
background; the border follows the non-text divider rule.

Usage:
    palette = BrandPalette.from_background(Color.parse("#1E1E2E"))
    hovered = palette.for_state(ComponentState.HOVERED)
    node = hovered.to_style_patch().apply()
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from tonecraft.core.borders import component_border_color
from tonecraft.core.color import BLACK, WHITE, Color
from tonecraft.core.contrast import WCAG_AA_NORMAL, ensure_minimum_contrast
from tonecraft.core.derive import derive_state
from tonecraft.core.ir.themeconfig import PaletteConfig
from tonecraft.core.ir.theming import ComponentState, StyleProperty, ThemeVariant

from .cascade import StylePatch

# Fixed high-contrast accents (Material A700 blue / A400 yellow)
HIGH_CONTRAST_LIGHT_ACCENT = Color.parse("bluea700")
HIGH_CONTRAST_DARK_ACCENT = Color.parse("yellowa400")


@dataclass(frozen=True)
class BrandPalette:
    """Resolved colors for one surface."""

    background: Color
    foreground: Color
    accent: Color
    border: Color
    caret: Color
    outline: Color
    text_decoration: Color
    high_contrast: bool = False

    @classmethod
    def from_background(
        cls,
        background: Color,
        *,
        foreground: Color | None = None,
        accent: Color | None = None,
        border: Color | None = None,
        min_contrast: float = WCAG_AA_NORMAL,
    ) -> BrandPalette:
        """
        Derive a palette from ``background``.

        Explicit ``foreground`` / ``accent`` are kept as starting points and
        still pushed to ``min_contrast``; an explicit ``border`` is used as is.
        """
        fg_start = foreground if foreground is not None else background.to_foreground()
        fg = ensure_minimum_contrast(fg_start, background, min_contrast)

        accent_start = accent if accent is not None else fg.to_accent()
        resolved_accent = ensure_minimum_contrast(accent_start, background, min_contrast)

        resolved_border = (
            border if border is not None else component_border_color(fg, background)
        )

        return cls(
            background=background,
            foreground=fg,
            accent=resolved_accent,
            border=resolved_border,
            caret=fg,
            outline=resolved_accent,
            text_decoration=resolved_accent,
        )

    @classmethod
    def for_high_contrast(cls, dark: bool) -> BrandPalette:
        """Fixed black/white palette with a saturated accent."""
        if dark:
            background, foreground, accent = BLACK, WHITE, HIGH_CONTRAST_DARK_ACCENT
        else:
            background, foreground, accent = WHITE, BLACK, HIGH_CONTRAST_LIGHT_ACCENT
        return cls(
            background=background,
            foreground=foreground,
            accent=accent,
            border=accent,
            caret=foreground,
            outline=accent,
            text_decoration=foreground,
            high_contrast=True,
        )

    @classmethod
    def from_config(
        cls,
        config: PaletteConfig,
        min_contrast: float = WCAG_AA_NORMAL,
    ) -> BrandPalette:
        return cls.from_background(
            Color.parse(config.background),
            foreground=Color.parse(config.foreground) if config.foreground else None,
            accent=Color.parse(config.accent) if config.accent else None,
            border=Color.parse(config.border) if config.border else None,
            min_contrast=min_contrast,
        )

    @classmethod
    def for_variant(
        cls,
        variant: ThemeVariant,
        config: PaletteConfig | None = None,
        min_contrast: float = WCAG_AA_NORMAL,
    ) -> BrandPalette | None:
        """
        Palette for a variant: high-contrast variants use the fixed palettes
        unless configured; other variants need a configuration.
        """
        if config is not None:
            palette = cls.from_config(config, min_contrast)
            if variant.is_high_contrast:
                return replace(palette, high_contrast=True)
            return palette
        if variant.is_high_contrast:
            return cls.for_high_contrast(dark=variant.is_dark)
        return None

    def for_state(self, state: ComponentState, high_contrast: bool | None = None) -> BrandPalette:
        """
        Re-derive for an interaction state by shifting the background.

        High-contrast palettes are returned unchanged.
        """
        if high_contrast is None:
            high_contrast = self.high_contrast
        if high_contrast:
            return self
        background = derive_state(self.background, state)
        if background == self.background:
            return self
        return BrandPalette.from_background(
            background, foreground=self.foreground, accent=self.accent
        )

    def to_style_patch(self) -> StylePatch:
        return StylePatch(
            {
                StyleProperty.BACKGROUND_COLOR: self.background,
                StyleProperty.COLOR: self.foreground,
                StyleProperty.ACCENT_COLOR: self.accent,
                StyleProperty.BORDER_COLOR: self.border,
                StyleProperty.CARET_COLOR: self.caret,
                StyleProperty.OUTLINE_COLOR: self.outline,
                StyleProperty.TEXT_DECORATION_COLOR: self.text_decoration,
            }
        )
