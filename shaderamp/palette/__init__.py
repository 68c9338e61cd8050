"""Shade ramp generation.

Pipeline: select a reference pattern for the input hue, find the shade
whose lightness is closest to the input, then fill every other shade with
the pattern's lightness and a chroma blended between input and pattern.

Example:
    from shaderamp.palette import parse_color_to_palette

    for step in parse_color_to_palette("#3b82f6"):
        print(step.shade, step.hex, "*" if step.is_closest else "")
"""

from .patterns import PATTERNS, get_pattern, list_patterns
from .selector import select_pattern, hue_family, is_neutral
from .matching import calc_closest, get_closest_shade, needs_strong_correction
from .blend import calc_blend_ratio, calc_chroma_scale, calc_color, calc_shades_around
from .generate import (
    Palette,
    format_hex,
    generate_palette,
    generate_palette_from_hex,
    generate_palette_from_oklch_string,
    parse_color_to_palette,
)

__all__ = [
    # High-level API
    'Palette',
    'generate_palette',
    'generate_palette_from_hex',
    'generate_palette_from_oklch_string',
    'parse_color_to_palette',
    'format_hex',
    # Patterns
    'PATTERNS',
    'get_pattern',
    'list_patterns',
    'select_pattern',
    'hue_family',
    'is_neutral',
    # Matching
    'calc_closest',
    'get_closest_shade',
    'needs_strong_correction',
    # Blending
    'calc_blend_ratio',
    'calc_chroma_scale',
    'calc_color',
    'calc_shades_around',
]
