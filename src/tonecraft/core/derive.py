"""
Interaction-state and elevation derivation.

Pure HSV-space transforms from a base color. "Lightening" flips to
darkening when the base value is already >= 0.5, so every derived state is
visibly different from its base. High-contrast variants skip derivation.

Usage:
    from tonecraft.core.derive import derive_state

    hovered = derive_state(base, ComponentState.HOVERED)
"""

from __future__ import annotations

from .channel import clamp_unit
from .color import Color
from .errors import InvalidArgumentRange
from .ir.theming import ComponentState

# Value deltas per interaction state
HOVERED_DELTA = 0.06
FOCUSED_DELTA = 0.10
PRESSED_DELTA = 0.14
DRAGGED_DELTA = 0.18

# Desaturation amounts
DISABLED_DESATURATE = 0.6
VISITED_DESATURATE = 0.3
MID_VALUE_BLEND = 0.15

# Elevation levels 1..5
ELEVATION_DELTAS: tuple[float, ...] = (0.02, 0.04, 0.06, 0.08, 0.10)

FOREGROUND_DELTA = 0.9
ACCENT_DELTA = 0.6


def shift_lightness(color: Color, delta: float) -> Color:
    """Move V by ``delta``; darkens when V >= 0.5, lightens otherwise."""
    direction = -1.0 if color.v >= 0.5 else 1.0
    value = clamp_unit(color.v + direction * delta)
    return Color.from_hsva(color.h, color.s, value, color.alpha)


def desaturate(color: Color, amount: float, value_blend: float = MID_VALUE_BLEND) -> Color:
    """Reduce saturation by ``amount`` and pull V toward 0.5 by ``value_blend``."""
    saturation = clamp_unit(color.s - clamp_unit(amount))
    value = color.v + (0.5 - color.v) * clamp_unit(value_blend)
    return Color.from_hsva(color.h, saturation, value, color.alpha)


def to_hovered(color: Color) -> Color:
    return shift_lightness(color, HOVERED_DELTA)


def to_focused(color: Color) -> Color:
    return shift_lightness(color, FOCUSED_DELTA)


def to_pressed(color: Color) -> Color:
    return shift_lightness(color, PRESSED_DELTA)


def to_dragged(color: Color) -> Color:
    return shift_lightness(color, DRAGGED_DELTA)


def to_disabled(color: Color) -> Color:
    return desaturate(color, DISABLED_DESATURATE)


def to_visited(color: Color) -> Color:
    return desaturate(color, VISITED_DESATURATE)


def to_elevation(color: Color, level: int) -> Color:
    """
    Surface color for elevation ``level`` (1-5).

    Raises:
        InvalidArgumentRange: If ``level`` is not in 1..5.
    """
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidArgumentRange("level", level, 1, len(ELEVATION_DELTAS))
    if not 1 <= level <= len(ELEVATION_DELTAS):
        raise InvalidArgumentRange("level", level, 1, len(ELEVATION_DELTAS))
    return shift_lightness(color, ELEVATION_DELTAS[level - 1])


def to_foreground(color: Color) -> Color:
    """Strong shift used as the starting point for text over ``color``."""
    return shift_lightness(color, FOREGROUND_DELTA)


def to_accent(color: Color) -> Color:
    return shift_lightness(color, ACCENT_DELTA)


_STATE_TRANSFORMS = {
    ComponentState.HOVERED: to_hovered,
    ComponentState.FOCUSED: to_focused,
    ComponentState.PRESSED: to_pressed,
    ComponentState.DRAGGED: to_dragged,
    ComponentState.DISABLED: to_disabled,
    ComponentState.VISITED: to_visited,
}


def derive_state(
    color: Color,
    state: ComponentState,
    high_contrast: bool = False,
) -> Color:
    """
    Derive the color for an interaction state.

    ``DEFAULT`` and every high-contrast request return ``color`` unchanged.
    """
    if high_contrast:
        return color
    transform = _STATE_TRANSFORMS.get(ComponentState(state))
    if transform is None:
        return color
    return transform(color)
