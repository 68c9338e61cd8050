"""Reference lightness/chroma curves, one per hue family.

Each pattern lists (lightness, chroma) for shades 50-950. Shade 0 is
always pure white and shade 1000 pure black, both with zero chroma.
Values are hand-tuned against a curated design-token scale.
"""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from shaderamp.types import Pattern, Shade, ShadeDefinition

_RAMP = tuple(shade for shade in Shade if shade not in Shade.edges())

_WHITE = ShadeDefinition(Decimal(1), Decimal(0))
_BLACK = ShadeDefinition(Decimal(0), Decimal(0))


def _pattern(name: str, rows: list[tuple[str, str]]) -> Pattern:
    """Build a pattern from (lightness, chroma) rows for shades 50-950."""
    if len(rows) != len(_RAMP):
        raise ValueError(f"Pattern {name!r} needs {len(_RAMP)} rows, got {len(rows)}")
    shades = {Shade.SHADE_0: _WHITE, Shade.SHADE_1000: _BLACK}
    for shade, (lightness, chroma) in zip(_RAMP, rows):
        shades[shade] = ShadeDefinition(Decimal(lightness), Decimal(chroma))
    return Pattern(name, shades)


# Red, rose
WARM_RED = _pattern("warm-red", [
    ("0.971", "0.014"),  # 50
    ("0.941", "0.03"),   # 100
    ("0.892", "0.06"),   # 200
    ("0.81", "0.115"),   # 300
    ("0.712", "0.19"),   # 400
    ("0.645", "0.246"),  # 500
    ("0.586", "0.253"),  # 600
    ("0.514", "0.222"),  # 700
    ("0.455", "0.188"),  # 800
    ("0.41", "0.159"),   # 900
    ("0.271", "0.105"),  # 950
])

# Orange through amber. 400 and 500 sit close together so that
# amber-like inputs near the yellow boundary land between them.
ORANGE = _pattern("orange", [
    ("0.984", "0.019"),
    ("0.958", "0.048"),
    ("0.912", "0.098"),
    ("0.855", "0.15"),
    ("0.795", "0.184"),
    ("0.755", "0.2"),
    ("0.66", "0.2"),
    ("0.554", "0.178"),
    ("0.472", "0.147"),
    ("0.411", "0.118"),
    ("0.273", "0.078"),
])

# Yellow, lime
YELLOW = _pattern("yellow", [
    ("0.987", "0.026"),
    ("0.967", "0.066"),
    ("0.937", "0.126"),
    ("0.897", "0.181"),
    ("0.844", "0.205"),
    ("0.782", "0.191"),
    ("0.676", "0.168"),
    ("0.554", "0.144"),
    ("0.473", "0.122"),
    ("0.415", "0.102"),
    ("0.283", "0.071"),
])

# Green, emerald, teal
GREEN = _pattern("green", [
    ("0.982", "0.018"),
    ("0.962", "0.044"),
    ("0.925", "0.084"),
    ("0.871", "0.15"),
    ("0.792", "0.209"),
    ("0.723", "0.219"),
    ("0.627", "0.194"),
    ("0.527", "0.154"),
    ("0.448", "0.119"),
    ("0.393", "0.095"),
    ("0.266", "0.065"),
])

CYAN = _pattern("cyan", [
    ("0.984", "0.019"),
    ("0.956", "0.045"),
    ("0.917", "0.08"),
    ("0.865", "0.127"),
    ("0.789", "0.154"),
    ("0.715", "0.143"),
    ("0.609", "0.126"),
    ("0.52", "0.105"),
    ("0.45", "0.085"),
    ("0.398", "0.07"),
    ("0.302", "0.056"),
])

SKY = _pattern("sky", [
    ("0.977", "0.013"),
    ("0.951", "0.026"),
    ("0.901", "0.058"),
    ("0.828", "0.111"),
    ("0.746", "0.16"),
    ("0.685", "0.169"),
    ("0.588", "0.158"),
    ("0.5", "0.134"),
    ("0.443", "0.11"),
    ("0.391", "0.09"),
    ("0.293", "0.066"),
])

# Blue, indigo, violet, purple
BLUE = _pattern("blue", [
    ("0.97", "0.014"),
    ("0.932", "0.032"),
    ("0.882", "0.059"),
    ("0.809", "0.105"),
    ("0.707", "0.165"),
    ("0.623", "0.214"),
    ("0.546", "0.245"),
    ("0.488", "0.243"),
    ("0.424", "0.199"),
    ("0.379", "0.146"),
    ("0.282", "0.091"),
])

# Fuchsia, pink
PINK = _pattern("pink", [
    ("0.971", "0.014"),
    ("0.948", "0.028"),
    ("0.899", "0.061"),
    ("0.823", "0.12"),
    ("0.718", "0.202"),
    ("0.656", "0.241"),
    ("0.592", "0.249"),
    ("0.525", "0.223"),
    ("0.459", "0.187"),
    ("0.408", "0.153"),
    ("0.284", "0.109"),
])

# Slate, gray, zinc, stone
NEUTRAL = _pattern("neutral", [
    ("0.985", "0.002"),
    ("0.968", "0.003"),
    ("0.923", "0.007"),
    ("0.871", "0.011"),
    ("0.707", "0.024"),
    ("0.554", "0.026"),
    ("0.444", "0.025"),
    ("0.373", "0.025"),
    ("0.278", "0.022"),
    ("0.212", "0.022"),
    ("0.139", "0.019"),
])


PATTERNS: Mapping[str, Pattern] = MappingProxyType({
    pattern.name: pattern
    for pattern in (WARM_RED, ORANGE, YELLOW, GREEN, CYAN, SKY, BLUE, PINK, NEUTRAL)
})


def get_pattern(name: str) -> Pattern:
    """Get a pattern by name. Raises KeyError for unknown names."""
    return PATTERNS[name]


def list_patterns() -> list[str]:
    """List all pattern names."""
    return list(PATTERNS.keys())
