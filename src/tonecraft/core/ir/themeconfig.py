"""
Theme configuration IR types.

Defines the structure of tonecraft.yaml: per-variant brand palettes, the
components to style, and ordered override rules that are applied to the
cascade tree after palette colors.

Example:
    name: acme
    var_prefix: acme
    palettes:
      light:
        background: "#FFFFFF"
      dark:
        background: "#121212"
        accent: "rgb(130 170 255)"
    overrides:
      - components: [link]
        states: [hovered]
        properties: [text-decoration-line]
        value: underline
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..color import try_parse_color
from .theming import ComponentState, ComponentType, StyleProperty, ThemeVariant

DEFAULT_VAR_PREFIX = "tc"


def _coerce_keys(enum_cls: Any, value: Any) -> Any:
    """Accept enum values, member names, or a single string for a list field."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if isinstance(value, (list, tuple)):
        return [enum_cls.from_key(item) if isinstance(item, str) else item for item in value]
    return value


def _check_color(value: str | None) -> str | None:
    if value is None:
        return None
    ok, _ = try_parse_color(value)
    if not ok:
        raise ValueError(f"Invalid color string: {value!r}")
    return value


# =============================================================================
# Palettes
# =============================================================================


class PaletteConfig(BaseModel):
    """
    Brand colors for one theme variant.

    Only ``background`` is required; every other color is derived from it
    when omitted.
    """

    model_config = ConfigDict(frozen=True)

    background: str = Field(description="Surface color the palette is built on")
    foreground: str | None = Field(default=None, description="Text color override")
    accent: str | None = Field(default=None, description="Accent / link color override")
    border: str | None = Field(default=None, description="Border color override")

    @field_validator("background", "foreground", "accent", "border")
    @classmethod
    def validate_color(cls, value: str | None) -> str | None:
        return _check_color(value)


# =============================================================================
# Overrides
# =============================================================================


class OverrideRule(BaseModel):
    """
    Set one value at every matching tree position.

    An empty selector list matches every key of that level.
    """

    model_config = ConfigDict(frozen=True)

    components: list[ComponentType] = Field(default_factory=list)
    variants: list[ThemeVariant] = Field(default_factory=list)
    states: list[ComponentState] = Field(default_factory=list)
    properties: list[StyleProperty] = Field(
        min_length=1, description="CSS properties to set (at least one)"
    )
    value: str = Field(description="CSS value or color text; blank removes the value")

    @field_validator("components", mode="before")
    @classmethod
    def coerce_components(cls, value: Any) -> Any:
        return _coerce_keys(ComponentType, value)

    @field_validator("variants", mode="before")
    @classmethod
    def coerce_variants(cls, value: Any) -> Any:
        return _coerce_keys(ThemeVariant, value)

    @field_validator("states", mode="before")
    @classmethod
    def coerce_states(cls, value: Any) -> Any:
        return _coerce_keys(ComponentState, value)

    @field_validator("properties", mode="before")
    @classmethod
    def coerce_properties(cls, value: Any) -> Any:
        return _coerce_keys(StyleProperty, value)


# =============================================================================
# Root
# =============================================================================


class ThemeConfig(BaseModel):
    """Root of tonecraft.yaml."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="default", description="Theme name (used in CSS header)")
    description: str | None = Field(default=None, description="Optional description")
    var_prefix: str = Field(
        default=DEFAULT_VAR_PREFIX, description="Custom-property prefix, e.g. --tc-..."
    )
    min_contrast: float = Field(
        default=4.5, ge=1.0, le=21.0, description="Text contrast target for derived colors"
    )
    palettes: dict[ThemeVariant, PaletteConfig] = Field(
        default_factory=dict, description="Brand palette per variant"
    )
    components: list[ComponentType] = Field(
        default_factory=lambda: list(ComponentType),
        description="Components that receive palette colors",
    )
    overrides: list[OverrideRule] = Field(
        default_factory=list, description="Override rules, applied in order"
    )

    @field_validator("palettes", mode="before")
    @classmethod
    def coerce_palette_keys(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                ThemeVariant.from_key(key) if isinstance(key, str) else key: palette
                for key, palette in value.items()
            }
        return value

    @field_validator("components", mode="before")
    @classmethod
    def coerce_components(cls, value: Any) -> Any:
        return _coerce_keys(ComponentType, value)

    def palette_for(self, variant: ThemeVariant) -> PaletteConfig | None:
        return self.palettes.get(variant)
