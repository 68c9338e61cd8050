"""OKLCH color space conversions.

Reference: https://bottosson.github.io/posts/oklab/

Every function broadcasts over numpy arrays and also takes plain floats,
so the palette code can convert one color at a time while tests sweep
whole grids.
"""

import numpy as np

# Björn Ottosson's reference matrices, row-major

RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

LMS_TO_RGB = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])


def _transform(matrix, x, y, z):
    """Apply a 3x3 matrix to broadcast channel arrays."""
    stacked = np.stack(np.broadcast_arrays(x, y, z), axis=-1).astype(np.float64)
    out = stacked @ matrix.T
    return out[..., 0], out[..., 1], out[..., 2]


def oklch_to_oklab(L, C, H):
    """OKLCH -> OKLab. H in degrees."""
    H_rad = np.radians(H)
    return L, C * np.cos(H_rad), C * np.sin(H_rad)


def oklab_to_oklch(L, a, b):
    """OKLab -> OKLCH. Returns H in degrees [0, 360)."""
    C = np.hypot(a, b)
    H = np.degrees(np.arctan2(b, a)) % 360
    return L, C, H


def oklab_to_linear_rgb(L, a, b):
    lms_ = _transform(OKLAB_TO_LMS, L, a, b)
    return _transform(LMS_TO_RGB, *(c**3 for c in lms_))


def linear_rgb_to_oklab(r, g, b):
    lms = _transform(RGB_TO_LMS, r, g, b)
    # cbrt keeps the sign for slightly negative LMS from out-of-gamut input
    return _transform(LMS_TO_OKLAB, *(np.cbrt(c) for c in lms))


def linear_to_srgb(x):
    """Linear RGB -> sRGB transfer function (per channel)."""
    x = np.asarray(x, dtype=np.float64)
    encoded = 1.055 * np.power(np.maximum(x, 0.0031308), 1 / 2.4) - 0.055
    return np.where(x <= 0.0031308, 12.92 * x, encoded)


def srgb_to_linear(x):
    """sRGB -> linear RGB (per channel)."""
    x = np.asarray(x, dtype=np.float64)
    decoded = np.power((np.maximum(x, 0.04045) + 0.055) / 1.055, 2.4)
    return np.where(x <= 0.04045, x / 12.92, decoded)


def oklch_to_srgb(L, C, H) -> np.ndarray:
    """OKLCH -> gamma-encoded sRGB.

    Args:
        L: Lightness (0-1)
        C: Chroma (0 to about 0.4)
        H: Hue in degrees

    Returns:
        Array of shape (..., 3). Out-of-gamut colors fall outside [0, 1];
        see gamut.py for mapping them back.
    """
    linear = oklab_to_linear_rgb(*oklch_to_oklab(L, C, H))
    return np.stack([linear_to_srgb(c) for c in linear], axis=-1)


def srgb_to_oklch(rgb) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Gamma-encoded sRGB array (..., 3) in [0, 1] -> (L, C, H)."""
    linear = srgb_to_linear(rgb)
    return oklab_to_oklch(*linear_rgb_to_oklab(linear[..., 0], linear[..., 1], linear[..., 2]))
