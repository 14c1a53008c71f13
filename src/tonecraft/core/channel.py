"""
8-bit color channel helpers.

A channel is a plain ``int`` in [0, 255]. This module provides the
normalized [0, 1] view, the sRGB transfer curve in both directions, and
plain / gamma-correct interpolation between two channel values.

All normalized → byte conversions clamp first and then round half-to-even
(Python's ``round``), so 0.5 * 255 = 127.5 becomes 128.
"""

from __future__ import annotations

import math

from .errors import InvalidArgumentRange

CHANNEL_MIN = 0
CHANNEL_MAX = 255
RGB_MAX = 255.0

# sRGB transfer function (IEC 61966-2-1)
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_GAMMA = 2.4
SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308


def validate_channel(value: int, name: str = "channel") -> int:
    """Return ``value`` if it is an integer in [0, 255], else raise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentRange(name, value, CHANNEL_MIN, CHANNEL_MAX)
    if not CHANNEL_MIN <= value <= CHANNEL_MAX:
        raise InvalidArgumentRange(name, value, CHANNEL_MIN, CHANNEL_MAX)
    return value


def clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, value))


def clamp_to_byte(value: float) -> int:
    """Scale a normalized value to a byte without range checks (clamps instead)."""
    return int(min(CHANNEL_MAX, max(CHANNEL_MIN, round(value * RGB_MAX))))


def to_normalized(value: int) -> float:
    return value / RGB_MAX


def from_normalized(value: float, name: str = "value") -> int:
    """
    Convert a normalized [0, 1] value to a byte.

    Raises:
        InvalidArgumentRange: If the value is not finite or outside [0, 1].
    """
    if not math.isfinite(value) or not 0.0 <= value <= 1.0:
        raise InvalidArgumentRange(name, value, 0.0, 1.0)
    return clamp_to_byte(value)


def try_from_normalized(value: float) -> tuple[bool, int]:
    """Non-raising variant of :func:`from_normalized`; returns ``(ok, byte)``."""
    try:
        return True, from_normalized(value)
    except InvalidArgumentRange:
        return False, 0


def srgb_to_linear(value: int) -> float:
    """Linearize one sRGB channel (the WCAG EOTF)."""
    c = value / RGB_MAX
    if c <= SRGB_TO_LINEAR_TH:
        return c / SRGB_SLOPE
    return ((c + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA


def linear_to_srgb(value: float) -> int:
    """Encode a linear-light value back to an sRGB byte."""
    linear = clamp_unit(value)
    if linear <= LINEAR_TO_SRGB_TH:
        c = linear * SRGB_SLOPE
    else:
        c = SRGB_DIVISOR * linear ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET
    return clamp_to_byte(c)


def _factor(factor: float) -> float:
    # Non-finite factors collapse to the start value
    return clamp_unit(factor) if math.isfinite(factor) else 0.0


def lerp_byte(start: int, end: int, factor: float) -> int:
    """Plain interpolation in encoded sRGB space."""
    t = _factor(factor)
    return int(min(CHANNEL_MAX, max(CHANNEL_MIN, round(start + (end - start) * t))))


def lerp_linear_byte(start: int, end: int, factor: float) -> int:
    """Gamma-correct interpolation: blend in linear light, re-encode to sRGB."""
    t = _factor(factor)
    a = srgb_to_linear(start)
    b = srgb_to_linear(end)
    return linear_to_srgb(a + (b - a) * t)
