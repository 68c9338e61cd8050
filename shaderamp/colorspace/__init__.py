"""OKLCH color space conversions, gamut mapping, and hex formatting.

This module provides:
- OKLCH <-> sRGB conversions
- Gamut mapping (clip or chroma compression)
- Hex string parsing and formatting

Example:
    from shaderamp.colorspace import hex_to_oklch, oklch_to_hex

    L, C, H = hex_to_oklch("#3b82f6")
    oklch_to_hex(L, C * 1.5, H)  # gamut-compressed back into sRGB
"""

from .oklch import (
    oklch_to_oklab,
    oklab_to_oklch,
    oklab_to_linear_rgb,
    linear_rgb_to_oklab,
    linear_to_srgb,
    srgb_to_linear,
    oklch_to_srgb,
    srgb_to_oklch,
)

from .gamut import (
    is_in_gamut,
    gamut_clip,
    gamut_compress,
    gamut_map_to_srgb,
    max_chroma_for_lh,
)

from .hex import (
    is_valid_hex,
    hex_to_srgb,
    srgb_to_hex,
    hex_to_oklch,
    oklch_to_hex,
)

__all__ = [
    # OKLCH conversions
    'oklch_to_oklab',
    'oklab_to_oklch',
    'oklab_to_linear_rgb',
    'linear_rgb_to_oklab',
    'linear_to_srgb',
    'srgb_to_linear',
    'oklch_to_srgb',
    'srgb_to_oklch',
    # Gamut mapping
    'is_in_gamut',
    'gamut_clip',
    'gamut_compress',
    'gamut_map_to_srgb',
    'max_chroma_for_lh',
    # Hex
    'is_valid_hex',
    'hex_to_srgb',
    'srgb_to_hex',
    'hex_to_oklch',
    'oklch_to_hex',
]
