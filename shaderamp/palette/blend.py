"""Per-shade chroma blending between the input color and the pattern.

Next to the matched shade, chroma follows the user's input; towards the
ends of the ramp it moves linearly to the pattern's own chroma (scaled by
how saturated the input is relative to the pattern). Lightness always
comes from the pattern and hue always from the input.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from shaderamp.defaults import BLEND_MAX_SHADE, BLEND_MIN_SHADE, MAX_CHROMA, MIN_PATTERN_CHROMA
from shaderamp.types import OklchColor, Pattern, Shade, ShadeDefinition, ShadesAround

_ONE = Decimal(1)


def calc_chroma_scale(color: OklchColor, pattern: Pattern, closest_shade: Shade) -> Decimal:
    """Input chroma relative to the pattern's chroma at the closest shade.

    1 when the pattern has (almost) no chroma there, e.g. grays and edges.
    """
    pattern_chroma = pattern[closest_shade].chroma
    if pattern_chroma <= MIN_PATTERN_CHROMA:
        return _ONE
    return color.chroma / pattern_chroma


def calc_shades_around(shades: Iterable[Shade], closest_shade: Shade) -> ShadesAround:
    """Split the 50-950 shades into those above and below `closest_shade`."""
    ramp = sorted(s for s in shades if BLEND_MIN_SHADE <= s <= BLEND_MAX_SHADE)
    return ShadesAround(
        above=tuple(s for s in ramp if s > closest_shade),
        below=tuple(s for s in ramp if s < closest_shade),
    )


def calc_blend_ratio(shade: Shade, closest_shade: Shade, shades_around: ShadesAround) -> Decimal:
    """Weight of the pattern chroma at `shade` (0 = input, 1 = pattern).

    Edge shades are always fully pattern. Elsewhere the ratio grows by one
    step per shade away from the closest shade, reaching 1 at 50 / 950.
    """
    if shade in Shade.edges():
        return _ONE

    if shade > closest_shade and shades_around.above:
        steps = shades_around.above.index(shade) + 1
        return Decimal(steps) / len(shades_around.above)

    if shade < closest_shade and shades_around.below:
        steps = shades_around.below[::-1].index(shade) + 1
        return Decimal(steps) / len(shades_around.below)

    return _ONE


def calc_color(
    shade: Shade,
    closest_shade: Shade,
    color: OklchColor,
    shade_def: ShadeDefinition,
    chroma_scale: Decimal,
    shades_around: ShadesAround,
) -> OklchColor:
    """Compute the color for one shade.

    Args:
        shade: Shade being generated
        closest_shade: Shade matched to the input color
        color: Parsed input color
        shade_def: Pattern definition for `shade`
        chroma_scale: From calc_chroma_scale()
        shades_around: From calc_shades_around()

    Returns:
        The input color itself at the closest shade; otherwise the pattern
        lightness with blended chroma (capped at MAX_CHROMA) and the input hue.
    """
    if shade == closest_shade:
        return color

    ratio = calc_blend_ratio(shade, closest_shade, shades_around)
    blended = color.chroma * (_ONE - ratio) + shade_def.chroma * chroma_scale * ratio

    return OklchColor(
        lightness=shade_def.lightness,
        chroma=min(blended, MAX_CHROMA),
        hue=color.hue,
        alpha=color.alpha,
    )
