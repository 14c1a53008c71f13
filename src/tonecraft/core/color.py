"""
Immutable RGBA color value.

A Color is constructed from byte channels or parsed from text:

- Hex: ``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``
- Functional RGB: ``rgb(r, g, b)``, ``rgba(r, g, b, a)`` and the CSS Color 4
  space-separated form ``rgb(r g b / a)``
- Functional HSV: ``hsv(h, s, v)``, ``hsva(h, s, v, a)``
- Named colors from :mod:`tonecraft.core.named_colors`

HSV components are derived from R, G, B on construction and are never
stored independently. Equality, hashing and ordering use (r, g, b, a) only.

Usage:
    from tonecraft.core.color import Color

    Color.parse("#fff").to_string()          # "#FFFFFFFF"
    Color.parse("rgb(255 0 0 / .5)").a       # 128
    ok, color = Color.try_parse("nope")      # (False, Color(0, 0, 0, 0))
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .channel import (
    CHANNEL_MAX,
    clamp_to_byte,
    clamp_unit,
    from_normalized,
    lerp_byte,
    lerp_linear_byte,
    to_normalized,
    validate_channel,
)
from .errors import InvalidArgumentRange, InvalidColorFormat
from .named_colors import lookup_named_color

if TYPE_CHECKING:
    from .contrast import ContrastOutcome

HUE_MAX = 360.0
HUE_SECTOR = 60.0

# =============================================================================
# Grammar
# =============================================================================

_NUMBER = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"
_ALPHA = r"(?P<alpha>(?:0?\.\d+|0|1(?:\.0+)?|(?:100|[1-9]?\d)%))"
_CHANNEL = r"([+-]?(?:\d{1,3}(?:\.\d+)?%?))"

_HEX_PATTERN = re.compile(
    r"#([0-9A-F]{3}|[0-9A-F]{4}|[0-9A-F]{6}|[0-9A-F]{8})",
    re.IGNORECASE,
)
_RGBA_PATTERN = re.compile(
    rf"rgba\s*\(\s*{_CHANNEL}\s*,\s*{_CHANNEL}\s*,\s*{_CHANNEL}\s*,\s*{_ALPHA}\s*\)",
    re.IGNORECASE,
)
_RGB_PATTERN = re.compile(
    rf"rgb\s*\(\s*{_CHANNEL}\s*,\s*{_CHANNEL}\s*,\s*{_CHANNEL}\s*\)",
    re.IGNORECASE,
)
_RGB_CSS4_PATTERN = re.compile(
    rf"rgba?\s*\(\s*({_NUMBER}%?)\s+({_NUMBER}%?)\s+({_NUMBER}%?)"
    rf"(?:\s*/\s*{_ALPHA})?\s*\)",
    re.IGNORECASE,
)
_HSVA_PATTERN = re.compile(
    rf"hsva\s*\(\s*({_NUMBER})\s*,\s*({_NUMBER}%?)\s*,\s*({_NUMBER}%?)\s*,\s*{_ALPHA}\s*\)",
    re.IGNORECASE,
)
_HSV_PATTERN = re.compile(
    rf"hsv\s*\(\s*({_NUMBER})\s*,\s*({_NUMBER}%?)\s*,\s*({_NUMBER}%?)\s*\)",
    re.IGNORECASE,
)


# =============================================================================
# Conversions
# =============================================================================


def rgb_to_hsv(red: int, green: int, blue: int) -> tuple[float, float, float]:
    """
    Convert byte channels to (hue degrees, saturation, value).

    The hue sector is picked from the byte that is the maximum; ties resolve
    in the order R, G, B. Grays (delta == 0) get hue 0.
    """
    max_byte = max(red, green, blue)
    min_byte = min(red, green, blue)

    max_n = max_byte / 255.0
    min_n = min_byte / 255.0
    delta = max_n - min_n

    r_n = red / 255.0
    g_n = green / 255.0
    b_n = blue / 255.0

    value = max_n
    saturation = 0.0 if max_n <= 0.0 else delta / max_n

    if delta == 0.0:
        return 0.0, saturation, value

    if red >= green and red >= blue:
        hue = HUE_SECTOR * ((g_n - b_n) / delta)
    elif green >= red and green >= blue:
        hue = HUE_SECTOR * ((b_n - r_n) / delta + 2.0)
    else:
        hue = HUE_SECTOR * ((r_n - g_n) / delta + 4.0)

    if hue < 0.0:
        hue += HUE_MAX

    return hue, saturation, value


def normalize_hue(hue: float) -> float:
    """Wrap any finite hue into [0, 360)."""
    return (hue % HUE_MAX + HUE_MAX) % HUE_MAX


def hsv_to_rgb(hue: float, saturation: float, value: float) -> tuple[int, int, int]:
    """Convert HSV (hue degrees, s/v in [0, 1]) to byte channels."""
    hue = normalize_hue(hue)

    chroma = value * saturation
    prime = hue / HUE_SECTOR
    x = chroma * (1.0 - abs(prime % 2.0 - 1.0))
    m = value - chroma

    if prime < 1:
        red, green, blue = chroma, x, 0.0
    elif prime < 2:
        red, green, blue = x, chroma, 0.0
    elif prime < 3:
        red, green, blue = 0.0, chroma, x
    elif prime < 4:
        red, green, blue = 0.0, x, chroma
    elif prime < 5:
        red, green, blue = x, 0.0, chroma
    else:
        red, green, blue = chroma, 0.0, x

    return clamp_to_byte(red + m), clamp_to_byte(green + m), clamp_to_byte(blue + m)


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True, order=True)
class Color:
    """
    Immutable RGBA color with derived HSV.

    Attributes:
        r, g, b, a: Byte channels in [0, 255]; ``a`` defaults to opaque.
        h: Hue in degrees [0, 360), derived.
        s: Saturation in [0, 1], derived.
        v: Value in [0, 1], derived.
    """

    r: int
    g: int
    b: int
    a: int = CHANNEL_MAX
    h: float = field(init=False, compare=False, repr=False)
    s: float = field(init=False, compare=False, repr=False)
    v: float = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        validate_channel(self.r, "r")
        validate_channel(self.g, "g")
        validate_channel(self.b, "b")
        validate_channel(self.a, "a")

        hue, saturation, value = rgb_to_hsv(self.r, self.g, self.b)
        object.__setattr__(self, "h", hue)
        object.__setattr__(self, "s", saturation)
        object.__setattr__(self, "v", value)

    def __str__(self) -> str:
        return self.to_string()

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_rgba(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> Color:
        """Build from byte channels and a normalized alpha."""
        return cls(red, green, blue, from_normalized(alpha, "alpha"))

    @classmethod
    def from_hsva(
        cls,
        hue: float,
        saturation: float,
        value: float,
        alpha: float = 1.0,
    ) -> Color:
        """
        Build from HSV(A).

        Hue wraps into [0, 360); saturation, value and alpha are clamped to
        [0, 1].
        """
        red, green, blue = hsv_to_rgb(
            normalize_hue(hue), clamp_unit(saturation), clamp_unit(value)
        )
        return cls(red, green, blue, clamp_to_byte(clamp_unit(alpha)))

    @classmethod
    def parse(cls, text: str) -> Color:
        """
        Parse color text.

        Raises:
            InvalidColorFormat: If the text is empty, malformed, out of range,
                or an unknown name.
        """
        return parse_color(text)

    @classmethod
    def try_parse(cls, text: str | None) -> tuple[bool, Color]:
        """Non-raising parse; returns ``(False, Color(0, 0, 0, 0))`` on failure."""
        return try_parse_color(text)

    @classmethod
    def from_string(cls, text: str) -> Color:
        """Explicit string → color conversion (alias of :meth:`parse`)."""
        return parse_color(text)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """Canonical ``#RRGGBBAA`` form, uppercase hex, alpha always present."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"

    def to_hsva(self) -> tuple[float, float, float, float]:
        return self.h, self.s, self.v, to_normalized(self.a)

    @property
    def alpha(self) -> float:
        """Alpha as a normalized [0, 1] value."""
        return to_normalized(self.a)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_opaque(self) -> bool:
        return self.a == CHANNEL_MAX

    def is_transparent(self) -> bool:
        return self.a == 0

    def is_light(self) -> bool:
        """True when relative luminance is at least 0.5."""
        return self.relative_luminance() >= 0.5

    def is_dark(self) -> bool:
        return self.relative_luminance() < 0.5

    # -------------------------------------------------------------------------
    # Transforms (all return new colors)
    # -------------------------------------------------------------------------

    def with_alpha(self, alpha: int) -> Color:
        """Same RGB with a new byte alpha."""
        return Color(self.r, self.g, self.b, alpha)

    def invert(self) -> Color:
        return Color(255 - self.r, 255 - self.g, 255 - self.b, self.a)

    def lerp(self, end: Color, factor: float) -> Color:
        """Plain sRGB interpolation of all four channels."""
        return Color(
            lerp_byte(self.r, end.r, factor),
            lerp_byte(self.g, end.g, factor),
            lerp_byte(self.b, end.b, factor),
            lerp_byte(self.a, end.a, factor),
        )

    def lerp_linear(self, end: Color, factor: float) -> Color:
        """Gamma-correct interpolation of RGB; alpha is blended plainly."""
        return Color(
            lerp_linear_byte(self.r, end.r, factor),
            lerp_linear_byte(self.g, end.g, factor),
            lerp_linear_byte(self.b, end.b, factor),
            lerp_byte(self.a, end.a, factor),
        )

    def lerp_linear_preserve_alpha(self, end: Color, factor: float) -> Color:
        """Gamma-correct interpolation of RGB keeping this color's alpha."""
        return Color(
            lerp_linear_byte(self.r, end.r, factor),
            lerp_linear_byte(self.g, end.g, factor),
            lerp_linear_byte(self.b, end.b, factor),
            self.a,
        )

    # -------------------------------------------------------------------------
    # Contrast shortcuts (see tonecraft.core.contrast)
    # -------------------------------------------------------------------------

    def relative_luminance(self) -> float:
        from .contrast import relative_luminance

        return relative_luminance(self)

    def contrast_ratio(self, background: Color) -> float:
        from .contrast import contrast_ratio

        return contrast_ratio(self, background)

    def ensure_minimum_contrast(self, background: Color, minimum_ratio: float = 3.0) -> Color:
        from .contrast import ensure_minimum_contrast

        return ensure_minimum_contrast(self, background, minimum_ratio)

    def resolve_contrast(self, background: Color, minimum_ratio: float = 3.0) -> ContrastOutcome:
        from .contrast import resolve_contrast

        return resolve_contrast(self, background, minimum_ratio)

    def to_foreground(self) -> Color:
        """Starting point for text drawn on this color."""
        from .derive import to_foreground

        return to_foreground(self)

    def to_accent(self) -> Color:
        from .derive import to_accent

        return to_accent(self)


TRANSPARENT = Color(0, 0, 0, 0)
BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


# =============================================================================
# Parsing
# =============================================================================


def parse_color(text: str) -> Color:
    """
    Parse any supported color syntax into a Color.

    Raises:
        InvalidColorFormat: Carrying the offending text.
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidColorFormat(text, "empty value")

    trimmed = text.strip()
    lowered = trimmed.lower()

    if lowered.startswith("hsv"):
        return _parse_hsva(trimmed, text)
    if lowered.startswith("rgb"):
        return _parse_rgba(trimmed, text)
    if trimmed.startswith("#"):
        return _parse_hex(trimmed, text)

    canonical = lookup_named_color(trimmed)
    if canonical is None:
        raise InvalidColorFormat(text, "unknown color name")
    return _parse_hex(canonical, text)


def try_parse_color(text: str | None, default: Color = TRANSPARENT) -> tuple[bool, Color]:
    """Parse without raising; returns ``(ok, color_or_default)``."""
    if text is None:
        return False, default
    try:
        return True, parse_color(text)
    except InvalidColorFormat:
        return False, default


def _parse_hex(value: str, original: str) -> Color:
    match = _HEX_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidColorFormat(original, "invalid hex color")

    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "FF"

    return Color(
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
        int(digits[6:8], 16),
    )


def _parse_rgba(value: str, original: str) -> Color:
    match = (
        _RGBA_PATTERN.fullmatch(value)
        or _RGB_PATTERN.fullmatch(value)
        or _RGB_CSS4_PATTERN.fullmatch(value)
    )
    if match is None:
        raise InvalidColorFormat(original, "invalid rgb(a) syntax")

    red = _parse_channel(match.group(1), original)
    green = _parse_channel(match.group(2), original)
    blue = _parse_channel(match.group(3), original)
    alpha_text = match.group("alpha") if "alpha" in match.re.groupindex else None
    alpha = _parse_alpha(alpha_text, original) if alpha_text else CHANNEL_MAX

    return Color(red, green, blue, alpha)


def _parse_hsva(value: str, original: str) -> Color:
    match = _HSVA_PATTERN.fullmatch(value) or _HSV_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidColorFormat(original, "invalid hsv(a) syntax")

    hue = _parse_float(match.group(1), original)
    saturation = _parse_percent(match.group(2), original)
    val = _parse_percent(match.group(3), original)
    alpha_text = match.group("alpha") if "alpha" in match.re.groupindex else None
    alpha = _parse_alpha(alpha_text, original) if alpha_text else CHANNEL_MAX

    red, green, blue = hsv_to_rgb(normalize_hue(hue), saturation, val)
    return Color(red, green, blue, alpha)


def _parse_float(text: str, original: str) -> float:
    try:
        number = float(text)
    except ValueError:
        raise InvalidColorFormat(original, f"invalid number {text!r}") from None
    if not math.isfinite(number):
        raise InvalidColorFormat(original, f"non-finite number {text!r}")
    return number


def _parse_channel(text: str, original: str) -> int:
    """Integer 0-255, or ``N%`` of 255."""
    trimmed = text.strip()
    if trimmed.endswith("%"):
        percent = _parse_float(trimmed[:-1].strip(), original)
        if not 0.0 <= percent <= 100.0:
            raise InvalidColorFormat(original, f"channel percentage out of range: {text}")
        return clamp_to_byte(percent / 100.0)

    try:
        channel = int(trimmed)
    except ValueError:
        raise InvalidColorFormat(original, f"channel is not an integer: {text}") from None
    if not 0 <= channel <= CHANNEL_MAX:
        raise InvalidColorFormat(original, f"channel out of range: {text}")
    return channel


def _parse_alpha(text: str, original: str) -> int:
    """Fraction 0-1, or ``N%``."""
    trimmed = text.strip()
    if trimmed.endswith("%"):
        percent = _parse_float(trimmed[:-1].strip(), original)
        return clamp_to_byte(clamp_unit(percent / 100.0))

    alpha = _parse_float(trimmed, original)
    try:
        return from_normalized(alpha, "alpha")
    except InvalidArgumentRange:
        raise InvalidColorFormat(original, f"alpha out of range: {text}") from None


def _parse_percent(text: str, original: str) -> float:
    """
    Saturation / value component.

    ``N%`` is a percentage. A bare number <= 1 is a fraction, a bare number
    > 1 is a percentage (so a bare 1 means 100%).
    """
    trimmed = text.strip()
    had_percent = trimmed.endswith("%")
    number = _parse_float(trimmed[:-1].strip() if had_percent else trimmed, original)

    if had_percent:
        percent = number
    elif number <= 1.0:
        percent = number * 100.0
    else:
        percent = number

    if not 0.0 <= percent <= 100.0:
        raise InvalidColorFormat(original, f"percentage out of range: {text}")
    return percent / 100.0
