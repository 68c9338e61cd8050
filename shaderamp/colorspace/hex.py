"""Hex color strings <-> sRGB / OKLCH."""

from __future__ import annotations

import re

import numpy as np

from shaderamp.defaults import ACHROMATIC_EPSILON, DEFAULT_GAMUT_METHOD
from .gamut import GamutMethod, gamut_map_to_srgb
from .oklch import srgb_to_oklch

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_valid_hex(hex_color: str) -> bool:
    """True for 3 or 6 digit hex colors, with or without '#'."""
    return _HEX_RE.match(hex_color) is not None


def hex_to_srgb(hex_color: str) -> tuple[float, float, float]:
    """Convert hex color string to RGB tuple (0-1 range).

    Args:
        hex_color: 3 or 6 digit hex string (with or without '#' prefix)

    Returns:
        Tuple of (r, g, b) in [0, 1] range

    Raises:
        ValueError: If the string is not a 3 or 6 digit hex color

    Example:
        >>> hex_to_srgb("#f00")
        (1.0, 0.0, 0.0)
    """
    match = _HEX_RE.match(hex_color)
    if match is None:
        raise ValueError(f"Invalid hex color: {hex_color!r}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    r = int(digits[0:2], 16) / 255.0
    g = int(digits[2:4], 16) / 255.0
    b = int(digits[4:6], 16) / 255.0
    return (r, g, b)


def srgb_to_hex(rgb) -> str:
    """Convert an sRGB triplet in [0, 1] to lowercase '#rrggbb'."""
    rgb_u8 = np.round(np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 1.0) * 255.0).astype(int)
    return f"#{rgb_u8[0]:02x}{rgb_u8[1]:02x}{rgb_u8[2]:02x}"


def oklch_to_hex(
    L: float,
    C: float,
    H: float | None,
    gamut: GamutMethod = DEFAULT_GAMUT_METHOD,
) -> str:
    """Format a single OKLCH color as hex, gamut-mapped into sRGB.

    A missing hue renders as 0 degrees, which is how CSS treats `none`.
    """
    hue = 0.0 if H is None else float(H)
    rgb = gamut_map_to_srgb(float(L), float(C), hue, method=gamut)
    return srgb_to_hex(rgb)


def hex_to_oklch(hex_color: str) -> tuple[float, float, float | None]:
    """Convert a hex color to (L, C, H).

    H is None for achromatic colors, whose hue is meaningless.

    Raises:
        ValueError: If the string is not a 3 or 6 digit hex color
    """
    rgb = np.array(hex_to_srgb(hex_color))
    L, C, H = srgb_to_oklch(rgb)
    L, C, H = float(L), float(C), float(H)
    if C < ACHROMATIC_EPSILON:
        return L, 0.0, None
    return L, C, H
