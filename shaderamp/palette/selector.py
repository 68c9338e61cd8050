"""Choose the reference pattern for an input color."""

from __future__ import annotations

from bisect import bisect_right
from decimal import Decimal

from shaderamp.defaults import GRAY_CHROMA, NEAR_WHITE_CHROMA, NEAR_WHITE_LIGHTNESS
from shaderamp.types import OklchColor, Pattern
from . import patterns

# Lower hue bound (inclusive) of each family after red, which starts at 0.
HUE_BOUNDARIES: tuple[tuple[Decimal, Pattern], ...] = (
    (Decimal("38"), patterns.ORANGE),
    (Decimal("70.4"), patterns.YELLOW),
    (Decimal("135"), patterns.GREEN),
    (Decimal("215"), patterns.CYAN),
    (Decimal("230"), patterns.SKY),
    (Decimal("250"), patterns.BLUE),
    (Decimal("318"), patterns.PINK),
)

_CUTOFFS = tuple(bound for bound, _ in HUE_BOUNDARIES)
_FAMILIES = (patterns.WARM_RED,) + tuple(pattern for _, pattern in HUE_BOUNDARIES)


def is_neutral(color: OklchColor) -> bool:
    """True when the color should follow the gray pattern.

    Chroma below GRAY_CHROMA is gray at any lightness. Above that, only
    near-white colors with very little chroma count as gray; a pale but
    clearly tinted color keeps its hue family.
    """
    if color.hue is None or color.chroma < GRAY_CHROMA:
        return True
    return color.lightness >= NEAR_WHITE_LIGHTNESS and color.chroma < NEAR_WHITE_CHROMA


def hue_family(hue: Decimal) -> Pattern:
    """Chromatic pattern for a hue in degrees (any value, wraps at 360)."""
    # Decimal % keeps the sign of the dividend
    wrapped = Decimal(hue) % 360
    if wrapped < 0:
        wrapped += 360
    return _FAMILIES[bisect_right(_CUTOFFS, wrapped)]


def select_pattern(color: OklchColor) -> Pattern:
    """Pattern for `color`: neutral for grays, otherwise by hue range."""
    if is_neutral(color):
        return patterns.NEUTRAL
    return hue_family(color.hue)
