"""Color string parsing with exact decimal precision.

Example:
    from shaderamp.parse import parse_color

    color = parse_color("oklch(68.1% 0.162 75.834)")
    color.lightness  # Decimal('0.681'), not 0.68099999...
"""

from .parser import parse_color, parse_hex, parse_oklch, extract_precise_value
from .errors import ColorError, ParseError

__all__ = [
    'parse_color',
    'parse_hex',
    'parse_oklch',
    'extract_precise_value',
    # Errors
    'ColorError',
    'ParseError',
]
