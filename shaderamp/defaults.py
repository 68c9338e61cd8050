"""Central place for shaderamp tuning constants."""

from decimal import Decimal

# Pattern selection: chroma below GRAY_CHROMA is always neutral
GRAY_CHROMA: Decimal = Decimal("0.01")
# Near-white colors of any hue look neutral
NEAR_WHITE_LIGHTNESS: Decimal = Decimal("0.95")
NEAR_WHITE_CHROMA: Decimal = Decimal("0.015")

# Orange/yellow boundary tie-break between shades 400 and 500
TIE_BREAK_MIN_HUE: Decimal = Decimal("65")
TIE_BREAK_MIN_LIGHTNESS: Decimal = Decimal("0.75")
TIE_BREAK_MAX_DIFF: Decimal = Decimal("0.015")

# Strong correction (ambiguous match) detection
STRONG_CORRECTION_MIN_SHADE: int = 300
STRONG_CORRECTION_MAX_SHADE: int = 700
STRONG_CORRECTION_DISTANCE: Decimal = Decimal("0.05")  # far from every shade
STRONG_CORRECTION_AMBIGUITY: Decimal = Decimal("0.02")  # two shades nearly tied

# Chroma blending
MAX_CHROMA: Decimal = Decimal("0.37")  # approx. P3 ceiling
MIN_PATTERN_CHROMA: Decimal = Decimal("0.001")  # below this, chroma scale is 1
BLEND_MIN_SHADE: int = 50
BLEND_MAX_SHADE: int = 950

# Hex output
DEFAULT_GAMUT_METHOD = "compress"
GAMUT_SEARCH_STEPS: int = 20
GAMUT_TOLERANCE: float = 1e-4
ACHROMATIC_EPSILON: float = 1e-5  # hex inputs below this chroma have no hue
