"""Locate the input color on a pattern's lightness curve."""

from __future__ import annotations

import logging
from decimal import Decimal

from shaderamp.defaults import (
    STRONG_CORRECTION_AMBIGUITY,
    STRONG_CORRECTION_DISTANCE,
    STRONG_CORRECTION_MAX_SHADE,
    STRONG_CORRECTION_MIN_SHADE,
    TIE_BREAK_MAX_DIFF,
    TIE_BREAK_MIN_HUE,
    TIE_BREAK_MIN_LIGHTNESS,
)
from shaderamp.types import ClosestMatch, OklchColor, Pattern, Shade, ShadeMatch
from . import patterns

logger = logging.getLogger(__name__)


def calc_closest(pattern: Pattern, lightness: Decimal) -> ClosestMatch:
    """Rank all shades by lightness distance; return the best two.

    Ties keep ascending shade order.
    """
    candidates = sorted(
        (ShadeMatch(shade, abs(lightness - definition.lightness))
         for shade, definition in pattern.shades.items()),
        key=lambda match: match.diff,
    )
    return ClosestMatch(candidates[0], candidates[1] if len(candidates) > 1 else None)


def has_competing_mid_shades(match: ClosestMatch) -> bool:
    """400 narrowly beats 500."""
    second = match.second_closest
    return (
        second is not None
        and match.closest.shade == Shade.SHADE_400
        and second.shade == Shade.SHADE_500
        and abs(match.closest.diff - second.diff) < TIE_BREAK_MAX_DIFF
    )


def get_closest_shade(color: OklchColor, pattern: Pattern) -> Shade:
    """Closest shade by lightness, with the orange/yellow boundary tie-break.

    Light amber colors in the orange pattern that fall almost halfway
    between 400 and 500 are assigned 500.
    """
    hue = color.hue if color.hue is not None else Decimal(0)
    match = calc_closest(pattern, color.lightness)

    if (
        pattern is patterns.ORANGE
        and hue > TIE_BREAK_MIN_HUE
        and color.lightness > TIE_BREAK_MIN_LIGHTNESS
        and has_competing_mid_shades(match)
    ):
        logger.debug("Boundary tie-break: %s -> 500", color.to_css())
        return Shade.SHADE_500

    return match.closest.shade


def needs_strong_correction(color: OklchColor, pattern: Pattern, closest_shade: Shade) -> bool:
    """Whether the input aligns poorly with the pattern's shades.

    Only mid-range shades (300-700) are checked. The input is flagged when
    it is far from the nearest shade, or when the two nearest shades are
    almost equally close. Informational; the palette itself is unaffected.
    """
    if not STRONG_CORRECTION_MIN_SHADE <= closest_shade <= STRONG_CORRECTION_MAX_SHADE:
        return False

    match = calc_closest(pattern, color.lightness)

    if match.closest.diff > STRONG_CORRECTION_DISTANCE:
        return True

    second = match.second_closest
    if second is not None and abs(match.closest.diff - second.diff) < STRONG_CORRECTION_AMBIGUITY:
        return True

    return False
