"""
WCAG contrast engine.

Relative luminance, contrast ratio, and the iterative search that moves a
foreground color until it reaches a minimum ratio against a background.

Search order for ``ensure_minimum_contrast``:
1. Value rail: vary only HSV value (hue/saturation fixed), in the direction
   a ±2% probe says increases contrast.
2. Gamma-correct blend toward white, then toward black.
3. First success wins (rail, white, black); otherwise the highest-ratio
   candidate seen across all three searches is returned.

Every search runs at most 18 bisection steps and stops early once the
bracket is narrower than 1e-4, so results are deterministic.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .channel import clamp_unit, srgb_to_linear
from .color import BLACK, WHITE, Color, hsv_to_rgb
from .errors import InvalidArgumentRange, InvalidOperation

logger = logging.getLogger(__name__)

# Relative luminance coefficients (ITU-R BT.709)
LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722
WCAG_LUMINANCE_OFFSET = 0.05

# WCAG 2.1 thresholds
WCAG_MIN_RATIO = 1.0
WCAG_MAX_RATIO = 21.0
WCAG_AA_LARGE = 3.0
WCAG_AA_NORMAL = 4.5
WCAG_AAA_LARGE = 4.5
WCAG_AAA_NORMAL = 7.0
NON_TEXT_MIN_RATIO = 3.0

# Search parameters
SEARCH_ITERATIONS = 18
SEARCH_EPSILON = 1e-4
DIRECTION_PROBE_STEP = 0.02


@dataclass(frozen=True)
class ContrastOutcome:
    """Result of a contrast search. Never persisted."""

    color: Color
    ratio: float
    met: bool


def relative_luminance(color: Color) -> float:
    """WCAG relative luminance of the RGB channels (alpha ignored)."""
    return (
        LUMA_R * srgb_to_linear(color.r)
        + LUMA_G * srgb_to_linear(color.g)
        + LUMA_B * srgb_to_linear(color.b)
    )


def contrast_ratio(foreground: Color, background: Color) -> float:
    """
    WCAG contrast ratio in [1, 21]; symmetric in its arguments.

    Raises:
        InvalidOperation: If the ratio is not finite.
    """
    fg_l = relative_luminance(foreground)
    bg_l = relative_luminance(background)
    lighter = max(fg_l, bg_l)
    darker = min(fg_l, bg_l)
    ratio = (lighter + WCAG_LUMINANCE_OFFSET) / (darker + WCAG_LUMINANCE_OFFSET)

    if not math.isfinite(ratio):
        raise InvalidOperation(
            f"Contrast ratio of {foreground} over {background} is not a finite number"
        )
    return ratio


def meets_wcag(ratio: float, level: str = "AA", large_text: bool = False) -> bool:
    """Check a ratio against the WCAG AA / AAA text thresholds."""
    level = level.upper()
    if level == "AA":
        return ratio >= (WCAG_AA_LARGE if large_text else WCAG_AA_NORMAL)
    if level == "AAA":
        return ratio >= (WCAG_AAA_LARGE if large_text else WCAG_AAA_NORMAL)
    raise ValueError(f"Unknown WCAG level: {level}")


def validate_ratio(minimum_ratio: float) -> float:
    if not math.isfinite(minimum_ratio) or not (
        WCAG_MIN_RATIO <= minimum_ratio <= WCAG_MAX_RATIO
    ):
        raise InvalidArgumentRange(
            "minimum_ratio", minimum_ratio, WCAG_MIN_RATIO, WCAG_MAX_RATIO
        )
    return minimum_ratio


# =============================================================================
# Searches
# =============================================================================


def _on_value_rail(color: Color, value: float) -> Color:
    red, green, blue = hsv_to_rgb(color.h, color.s, clamp_unit(value))
    return Color(red, green, blue, color.a)


def value_direction(foreground: Color, background: Color) -> int:
    """
    Probe V ± 2% and return +1 (brighten) or -1 (darken).

    Brightening is chosen only when it is strictly better.
    """
    up = _on_value_rail(foreground, foreground.v + DIRECTION_PROBE_STEP)
    down = _on_value_rail(foreground, foreground.v - DIRECTION_PROBE_STEP)
    return 1 if contrast_ratio(up, background) > contrast_ratio(down, background) else -1


def search_value_rail(
    foreground: Color,
    direction: int,
    background: Color,
    minimum_ratio: float,
    history: list[float] | None = None,
) -> ContrastOutcome:
    """
    Bisect the HSV value axis between the current value and the pole in
    ``direction`` for the smallest change that meets ``minimum_ratio``.

    Args:
        history: If given, the best ratio seen is appended after every step.
    """
    near = foreground.v
    far = 1.0 if direction > 0 else 0.0

    best_ratio = -1.0
    best_color = _on_value_rail(foreground, foreground.v)
    found = False

    for _ in range(SEARCH_ITERATIONS):
        mid = clamp_unit(0.5 * (near + far))
        candidate = _on_value_rail(foreground, mid)
        ratio = contrast_ratio(candidate, background)

        if ratio > best_ratio:
            best_ratio = ratio
            best_color = candidate
        if history is not None:
            history.append(best_ratio)

        if ratio >= minimum_ratio:
            found = True
            far = mid
        else:
            near = mid

        if abs(far - near) < SEARCH_EPSILON:
            break

    if not found:
        return ContrastOutcome(best_color, best_ratio, False)

    final = _on_value_rail(foreground, far)
    return ContrastOutcome(final, contrast_ratio(final, background), True)


def search_toward_pole(
    foreground: Color,
    pole: Color,
    background: Color,
    minimum_ratio: float,
    history: list[float] | None = None,
) -> ContrastOutcome:
    """
    Bisect a gamma-correct blend from ``foreground`` toward ``pole`` for the
    smallest blend factor that meets ``minimum_ratio``. Alpha is preserved.
    """
    low = 0.0
    high = 1.0

    best_ratio = -1.0
    best_color = foreground
    met = False

    for _ in range(SEARCH_ITERATIONS):
        mid = clamp_unit(0.5 * (low + high))
        candidate = foreground.lerp_linear_preserve_alpha(pole, mid)
        ratio = contrast_ratio(candidate, background)

        if ratio > best_ratio:
            best_ratio = ratio
            best_color = candidate
        if history is not None:
            history.append(best_ratio)

        if ratio >= minimum_ratio:
            met = True
            high = mid
        else:
            low = mid

        if high - low < SEARCH_EPSILON:
            break

    final = foreground.lerp_linear_preserve_alpha(pole, high) if met else best_color
    return ContrastOutcome(final, contrast_ratio(final, background), met)


def resolve_contrast(
    foreground: Color,
    background: Color,
    minimum_ratio: float = NON_TEXT_MIN_RATIO,
) -> ContrastOutcome:
    """
    Run the full contrast resolution and return the outcome.

    Raises:
        InvalidArgumentRange: If ``minimum_ratio`` is outside [1, 21].
    """
    validate_ratio(minimum_ratio)

    start_ratio = contrast_ratio(foreground, background)
    if start_ratio >= minimum_ratio:
        return ContrastOutcome(foreground, start_ratio, True)

    direction = value_direction(foreground, background)
    rail = search_value_rail(foreground, direction, background, minimum_ratio)
    if rail.met:
        return rail

    logger.debug(
        "Value rail missed %.2f for %s over %s (best %.3f); trying poles",
        minimum_ratio,
        foreground,
        background,
        rail.ratio,
    )

    toward_white = search_toward_pole(
        foreground, WHITE.with_alpha(foreground.a), background, minimum_ratio
    )
    toward_black = search_toward_pole(
        foreground, BLACK.with_alpha(foreground.a), background, minimum_ratio
    )

    if toward_white.met:
        return toward_white
    if toward_black.met:
        return toward_black

    best = rail
    if toward_white.ratio > best.ratio:
        best = toward_white
    if toward_black.ratio > best.ratio:
        best = toward_black

    logger.debug(
        "No search met %.2f over %s; best effort %s at %.3f",
        minimum_ratio,
        background,
        best.color,
        best.ratio,
    )
    return best


def ensure_minimum_contrast(
    foreground: Color,
    background: Color,
    minimum_ratio: float = NON_TEXT_MIN_RATIO,
) -> Color:
    """Return ``foreground`` adjusted to reach ``minimum_ratio`` (best effort)."""
    return resolve_contrast(foreground, background, minimum_ratio).color
