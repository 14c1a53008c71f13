"""
Border and divider color derivation.

A component border must reach non-text contrast (3:1 by default) against
at least one adjacent surface: the component fill or the outer background.
Without a fill the border is a plain divider on a single surface.
"""

from __future__ import annotations

import logging
import math

from .color import BLACK, WHITE, Color
from .contrast import NON_TEXT_MIN_RATIO, contrast_ratio, ensure_minimum_contrast

logger = logging.getLogger(__name__)

# Blend applied when a border would outshine the text it surrounds
HIERARCHY_BLEND = 0.15
# Foreground vs border below this ratio counts as merged
MERGE_THRESHOLD = 1.5
MERGE_NUDGE = 0.10


def high_contrast_stroke(surface: Color) -> Color:
    """Black on light surfaces, white on dark ones."""
    return BLACK if surface.is_light() else WHITE


def divider_border_color(
    foreground: Color,
    surface: Color,
    min_contrast: float = NON_TEXT_MIN_RATIO,
    high_contrast: bool = False,
) -> Color:
    """
    Divider on a single surface.

    Starts from the surface itself pushed to ``min_contrast`` and softens it
    toward the surface when it would out-contrast the text.
    """
    if high_contrast:
        return high_contrast_stroke(surface)

    stroke = ensure_minimum_contrast(surface, surface, min_contrast)
    if contrast_ratio(stroke, surface) > contrast_ratio(foreground, surface):
        stroke = stroke.lerp_linear_preserve_alpha(surface, HIERARCHY_BLEND)
    return stroke


def _passing_score(border: Color, fill: Color, outer: Color, min_contrast: float) -> float:
    """Lowest contrast among the adjacencies that pass, or +inf if none do."""
    passing = [
        ratio
        for ratio in (contrast_ratio(border, fill), contrast_ratio(border, outer))
        if ratio >= min_contrast
    ]
    return min(passing) if passing else math.inf


def component_border_color(
    foreground: Color,
    outer_background: Color,
    fill: Color | None = None,
    min_contrast: float = NON_TEXT_MIN_RATIO,
    high_contrast: bool = False,
) -> Color:
    """
    Border for a component drawn with ``fill`` over ``outer_background``.

    Args:
        foreground: Text color of the component.
        outer_background: Surface the component sits on.
        fill: Component fill; ``None`` falls back to the divider rule.
        min_contrast: Non-text contrast target.
        high_contrast: Return ``foreground`` as a maximal outline.

    Returns:
        The derived border color.
    """
    if high_contrast:
        return foreground

    if fill is None:
        return divider_border_color(foreground, outer_background, min_contrast)

    from_fill = ensure_minimum_contrast(fill, fill, min_contrast)
    from_outer = ensure_minimum_contrast(outer_background, outer_background, min_contrast)

    fill_score = _passing_score(from_fill, fill, outer_background, min_contrast)
    outer_score = _passing_score(from_outer, fill, outer_background, min_contrast)

    # Ties go to the fill-derived candidate
    border = from_fill if fill_score <= outer_score else from_outer

    if math.isinf(min(fill_score, outer_score)):
        logger.debug(
            "No border candidate reaches %.2f over fill %s / outer %s",
            min_contrast,
            fill,
            outer_background,
        )

    if contrast_ratio(border, fill) > contrast_ratio(foreground, fill):
        border = border.lerp_linear_preserve_alpha(fill, HIERARCHY_BLEND)

    if contrast_ratio(foreground, border) < MERGE_THRESHOLD:
        pole = BLACK if fill.is_light() else WHITE
        border = border.lerp_linear_preserve_alpha(pole, MERGE_NUDGE)

    return border
