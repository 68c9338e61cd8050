"""Core data types for shaderamp."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping


class Shade(enum.IntEnum):
    """A rung on the generated ramp, numbered like design tokens."""

    SHADE_0 = 0
    SHADE_50 = 50
    SHADE_100 = 100
    SHADE_200 = 200
    SHADE_300 = 300
    SHADE_400 = 400
    SHADE_500 = 500
    SHADE_600 = 600
    SHADE_700 = 700
    SHADE_800 = 800
    SHADE_900 = 900
    SHADE_950 = 950
    SHADE_1000 = 1000

    @classmethod
    def edges(cls) -> tuple[Shade, Shade]:
        """Pure white and pure black ends of the ramp."""
        return (cls.SHADE_0, cls.SHADE_1000)


def format_decimal(value: Decimal) -> str:
    """Plain (never exponent) notation without trailing zeros."""
    text = format(value.normalize(), "f")
    return "0" if text == "-0" else text


@dataclass(frozen=True)
class OklchColor:
    """An OKLCH color held in exact decimals.

    Attributes:
        lightness: 0-1
        chroma: >= 0, typically below 0.4
        hue: Degrees. None for achromatic colors (CSS `none`), not the same as 0
        alpha: 0-1. None when the source had no alpha component
    """
    lightness: Decimal
    chroma: Decimal
    hue: Decimal | None = None
    alpha: Decimal | None = None

    def to_css(self) -> str:
        """Render as `oklch(L% C H)` using the exact decimal digits."""
        lightness = format_decimal(self.lightness * 100)
        chroma = format_decimal(self.chroma)
        hue = "none" if self.hue is None else format_decimal(self.hue)
        if self.alpha is None:
            return f"oklch({lightness}% {chroma} {hue})"
        return f"oklch({lightness}% {chroma} {hue} / {format_decimal(self.alpha)})"


@dataclass(frozen=True)
class ShadeDefinition:
    """Reference (lightness, chroma) for one shade of one pattern."""
    lightness: Decimal
    chroma: Decimal


@dataclass(frozen=True, eq=False)
class Pattern:
    """Reference curve for one hue family.

    Every Shade must be present; the mapping is stored read-only.
    """
    name: str
    shades: Mapping[Shade, ShadeDefinition] = field(repr=False)

    def __post_init__(self):
        missing = [shade for shade in Shade if shade not in self.shades]
        if missing:
            raise ValueError(
                f"Pattern {self.name!r} is missing shades {[int(s) for s in missing]}"
            )
        ordered = {shade: self.shades[shade] for shade in Shade}
        object.__setattr__(self, "shades", MappingProxyType(ordered))

    def __getitem__(self, shade: Shade) -> ShadeDefinition:
        return self.shades[Shade(shade)]

    def __iter__(self):
        return iter(self.shades)


@dataclass(frozen=True)
class ShadesAround:
    """Ramp shades (50-950) strictly above and below the closest shade."""
    above: tuple[Shade, ...]
    below: tuple[Shade, ...]


@dataclass(frozen=True)
class ShadeMatch:
    shade: Shade
    diff: Decimal


@dataclass(frozen=True)
class ClosestMatch:
    closest: ShadeMatch
    second_closest: ShadeMatch | None


@dataclass(frozen=True)
class PaletteStep:
    """One generated shade.

    Attributes:
        shade: Position on the ramp
        hex: Gamut-mapped '#rrggbb'
        oklch: Exact color before gamut mapping
        is_closest: True on the shade that reproduces the input color
        needs_strong_correction: Input sits far from, or between, standard shades.
            Only ever set on the closest step.
    """
    shade: Shade
    hex: str
    oklch: OklchColor
    is_closest: bool
    needs_strong_correction: bool
