"""Gamut mapping for out-of-gamut OKLCH values.

Not all (L, C, H) combinations produce valid sRGB. High chroma at
extreme lightness is particularly problematic, and palette shades near
white or black routinely land outside the sRGB cube.

Strategies:
- clip: Hard-clip RGB to [0,1], fast but can shift hue/lightness
- compress: Reduce C until in-gamut, preserves L and H intent
"""

from typing import Literal

import numpy as np

from shaderamp.defaults import GAMUT_SEARCH_STEPS, GAMUT_TOLERANCE
from .oklch import oklch_to_srgb, srgb_to_oklch

GamutMethod = Literal['clip', 'compress']


# === Gamut checking ===

def is_in_gamut(L, C, H, tolerance: float = GAMUT_TOLERANCE) -> np.ndarray:
    """Check if OKLCH values produce valid sRGB (all channels in [0,1])."""
    rgb = oklch_to_srgb(L, C, H)
    in_range = (rgb >= -tolerance) & (rgb <= 1 + tolerance)
    return np.all(in_range, axis=-1)


# === Gamut mapping methods ===

def gamut_clip(L, C, H) -> np.ndarray:
    """Convert to sRGB and hard-clip to [0,1].

    Returns:
        RGB array (..., 3) with values clamped to [0,1]
    """
    return np.clip(oklch_to_srgb(L, C, H), 0.0, 1.0)


def max_chroma_for_lh(L, H, steps: int = GAMUT_SEARCH_STEPS) -> np.ndarray:
    """Find maximum valid chroma for given L and H via binary search."""
    L = np.asarray(L, dtype=np.float64)
    H = np.asarray(H, dtype=np.float64)
    lo = np.zeros(np.broadcast(L, H).shape)
    hi = np.full_like(lo, 0.5)  # 0.5 is always out of gamut

    for _ in range(steps):
        mid = (lo + hi) / 2
        valid = is_in_gamut(L, mid, H)
        lo = np.where(valid, mid, lo)
        hi = np.where(valid, hi, mid)

    return lo


def gamut_compress(L, C, H, method: Literal['clip', 'chroma'] = 'chroma'):
    """Bring out-of-gamut colors into sRGB gamut.

    Args:
        L, C, H: OKLCH values
        method: 'clip' for RGB clipping, 'chroma' for chroma reduction

    Returns:
        (L, C, H) tuple with adjusted values
    """
    if method == 'clip':
        return srgb_to_oklch(gamut_clip(L, C, H))

    if method == 'chroma':
        # In-gamut colors keep their chroma untouched
        C = np.asarray(C, dtype=np.float64)
        inside = is_in_gamut(L, C, H)
        if np.all(inside):
            return L, C, H
        return L, np.where(inside, C, np.minimum(C, max_chroma_for_lh(L, H))), H

    raise ValueError(f"Unknown gamut method: {method}")


def gamut_map_to_srgb(L, C, H, method: GamutMethod = 'compress') -> np.ndarray:
    """OKLCH -> sRGB guaranteed inside the unit cube.

    `compress` lowers chroma at fixed L and H for colors outside sRGB
    (in-gamut colors are untouched); `clip` clamps the RGB channels.
    Raises ValueError for any other method.
    """
    if method == 'clip':
        return gamut_clip(L, C, H)

    if method == 'compress':
        L_safe, C_safe, H_safe = gamut_compress(L, C, H, method='chroma')
        return np.clip(oklch_to_srgb(L_safe, C_safe, H_safe), 0.0, 1.0)

    raise ValueError(f"Unknown method: {method}")
