"""Generate a 13-step shade ramp from one color."""

from __future__ import annotations

import logging

from shaderamp.colorspace import oklch_to_hex
from shaderamp.colorspace.gamut import GamutMethod
from shaderamp.defaults import DEFAULT_GAMUT_METHOD
from shaderamp.parse import parse_color, parse_hex, parse_oklch
from shaderamp.types import OklchColor, PaletteStep
from .blend import calc_chroma_scale, calc_color, calc_shades_around
from .matching import get_closest_shade, needs_strong_correction
from .selector import select_pattern

logger = logging.getLogger(__name__)

Palette = tuple[PaletteStep, ...]


def format_hex(color: OklchColor, gamut: GamutMethod = DEFAULT_GAMUT_METHOD) -> str:
    """Gamut-mapped '#rrggbb' for an exact OKLCH color."""
    hue = None if color.hue is None else float(color.hue)
    return oklch_to_hex(float(color.lightness), float(color.chroma), hue, gamut=gamut)


def generate_palette(color: OklchColor, gamut: GamutMethod = DEFAULT_GAMUT_METHOD) -> Palette:
    """Build the full ramp for `color`.

    Args:
        color: Input color, e.g. from parse_color()
        gamut: How out-of-sRGB shades are mapped for the hex output

    Returns:
        13 PaletteSteps in ascending shade order. Exactly one has
        `is_closest` set, and its `oklch` is `color` itself.
    """
    pattern = select_pattern(color)
    closest_shade = get_closest_shade(color, pattern)
    chroma_scale = calc_chroma_scale(color, pattern, closest_shade)
    shades_around = calc_shades_around(pattern, closest_shade)
    is_ambiguous = needs_strong_correction(color, pattern, closest_shade)

    logger.debug(
        "%s -> pattern %s, closest %d%s",
        color.to_css(), pattern.name, closest_shade,
        " (strong correction)" if is_ambiguous else "",
    )

    steps = []
    for shade, shade_def in pattern.shades.items():
        shade_color = calc_color(
            shade, closest_shade, color, shade_def, chroma_scale, shades_around,
        )
        is_closest = shade == closest_shade
        steps.append(PaletteStep(
            shade=shade,
            hex=format_hex(shade_color, gamut),
            oklch=shade_color,
            is_closest=is_closest,
            needs_strong_correction=is_closest and is_ambiguous,
        ))

    return tuple(sorted(steps, key=lambda step: step.shade))


def generate_palette_from_hex(text: str, gamut: GamutMethod = DEFAULT_GAMUT_METHOD) -> Palette:
    """Ramp for a 3/6 digit hex color. Raises ParseError."""
    return generate_palette(parse_hex(text), gamut)


def generate_palette_from_oklch_string(text: str, gamut: GamutMethod = DEFAULT_GAMUT_METHOD) -> Palette:
    """Ramp for an `oklch()` string, keeping its exact digits. Raises ParseError."""
    return generate_palette(parse_oklch(text), gamut)


def parse_color_to_palette(text: str, gamut: GamutMethod = DEFAULT_GAMUT_METHOD) -> Palette:
    """Ramp for a hex or `oklch()` string. Raises ParseError."""
    return generate_palette(parse_color(text), gamut)
