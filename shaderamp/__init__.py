"""Design-system shade ramps from a single color.

Example:
    from shaderamp import parse_color_to_palette, ParseError

    try:
        palette = parse_color_to_palette("oklch(68.1% 0.162 75.834)")
    except ParseError:
        ...  # keep the previous palette
"""

from shaderamp.types import (
    OklchColor,
    PaletteStep,
    Pattern,
    Shade,
    ShadeDefinition,
    ShadesAround,
)
from shaderamp.parse import ColorError, ParseError, parse_color, parse_hex, parse_oklch
from shaderamp.palette import (
    Palette,
    generate_palette,
    generate_palette_from_hex,
    generate_palette_from_oklch_string,
    parse_color_to_palette,
)

__version__ = "0.1.0"

__all__ = [
    'OklchColor',
    'PaletteStep',
    'Pattern',
    'Shade',
    'ShadeDefinition',
    'ShadesAround',
    'Palette',
    'parse_color',
    'parse_hex',
    'parse_oklch',
    'generate_palette',
    'generate_palette_from_hex',
    'generate_palette_from_oklch_string',
    'parse_color_to_palette',
    'ColorError',
    'ParseError',
]
