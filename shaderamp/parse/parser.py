"""Parse color strings into exact-decimal OKLCH colors.

coloraide does the syntax validation and unit handling for `oklch()`
strings. Its result is a binary float, so `oklch(68.1% ...)` comes back as
0.6809999.... The digits the user actually typed are recovered from the
original text: every numeric literal is tokenized, and each channel takes
the first unused literal whose integer part agrees with coloraide's value.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal

from coloraide import Color

from shaderamp.colorspace import hex_to_oklch, is_valid_hex
from shaderamp.types import OklchColor
from .errors import ParseError

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(
    r"([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)(%|deg|grad|rad|turn)?",
    re.IGNORECASE,
)

# Value of one percent, per channel (CSS Color 4: 100% chroma is 0.4)
_PERCENT_UNIT = {
    'lightness': Decimal("0.01"),
    'chroma': Decimal("0.004"),
    'alpha': Decimal("0.01"),
}

# Float noise such as 69.99999999999999 for `70%` is rounded away first
_ANCHOR_DIGITS = 9

# Degrees per angle unit. `rad` has no exact decimal conversion.
_ANGLE_UNIT = {
    None: Decimal(1),
    'deg': Decimal(1),
    'grad': Decimal("0.9"),
    'turn': Decimal(360),
}


@dataclass
class _Token:
    number: str
    suffix: str | None
    used: bool = False


def _tokenize(text: str) -> list[_Token]:
    return [
        _Token(match.group(1), match.group(2).lower() if match.group(2) else None)
        for match in _NUMBER_RE.finditer(text)
    ]


def _unit_for(token: _Token, channel: str) -> Decimal | None:
    """Channel units per literal unit, or None if the token can't feed the channel."""
    if channel == 'hue':
        return _ANGLE_UNIT.get(token.suffix)
    if token.suffix is None:
        return Decimal(1)
    if token.suffix == '%':
        return _PERCENT_UNIT[channel]
    return None


def _take_literal(tokens: list[_Token], channel: str, value: float) -> Decimal:
    """Recover the exact decimal for one channel from the tokenized input.

    Args:
        tokens: Literals from the original string; matched ones are marked used
        channel: 'lightness', 'chroma', 'hue' or 'alpha'
        value: coloraide's float for the channel, in channel units

    Returns:
        Decimal built from the matching literal, or from `value` if none matches
    """
    baseline = Decimal(repr(float(value)))
    for token in tokens:
        if token.used:
            continue
        unit = _unit_for(token, channel)
        if unit is None:
            continue
        literal = Decimal(token.number)
        if int(literal) != int(round(baseline / unit, _ANCHOR_DIGITS)):
            continue
        token.used = True
        return literal * unit

    logger.debug("No literal matches %s=%r, using float value", channel, value)
    return baseline


_ZERO = Decimal(0)
_ONE = Decimal(1)


def _clamp(value: Decimal | None, low: Decimal, high: Decimal | None) -> Decimal:
    """Clamp into [low, high]; a missing value counts as `low`."""
    if value is None or value < low:
        return low
    if high is not None and value > high:
        return high
    return value


def extract_precise_value(text: str, channel: str, value: float) -> Decimal:
    """Exact decimal for a single channel value parsed from `text`.

    Example:
        >>> extract_precise_value("oklch(68.1% 0.162 75.834)", "lightness", 0.681)
        Decimal('0.681')
    """
    return _take_literal(_tokenize(text), channel, value)


def parse_oklch(text: str) -> OklchColor:
    """Parse a CSS `oklch()` string, keeping the literal decimal digits.

    Args:
        text: e.g. "oklch(68.1% 0.162 75.834)" or "oklch(50% 0 none / 0.5)"

    Returns:
        OklchColor. `hue` is None for `none`, `alpha` is None unless written.

    Raises:
        ParseError: If coloraide rejects the string, it is not oklch(), or a
            component is infinite
    """
    text = text.strip()
    try:
        color = Color(text)
    except ValueError as exc:
        raise ParseError(f"Invalid color string: {text!r}") from exc

    if color.space() != 'oklch':
        raise ParseError(f"Expected an oklch() color, got {color.space()}: {text!r}")

    tokens = _tokenize(text)

    def channel(name: str) -> Decimal | None:
        value = color[name]
        if math.isnan(value):
            return None
        if math.isinf(value):
            raise ParseError(f"Non-finite component in {text!r}")
        return _take_literal(tokens, name, value)

    # `none` lightness/chroma are missing components, which CSS treats as 0
    lightness = channel('lightness')
    chroma = channel('chroma')
    hue = channel('hue')
    alpha = channel('alpha') if '/' in text else None

    # Out-of-range components clamp the way CSS does at parse time
    return OklchColor(
        lightness=_clamp(lightness, _ZERO, _ONE),
        chroma=_clamp(chroma, _ZERO, None),
        hue=hue,
        alpha=None if alpha is None else _clamp(alpha, _ZERO, _ONE),
    )


def parse_hex(text: str) -> OklchColor:
    """Parse a 3 or 6 digit hex color (with or without '#').

    Raises:
        ParseError: If the string is not a hex color
    """
    text = text.strip()
    if not is_valid_hex(text):
        raise ParseError(f"Invalid hex color: {text!r}")

    L, C, H = hex_to_oklch(text)
    return OklchColor(
        lightness=Decimal(repr(L)),
        chroma=Decimal(repr(C)),
        hue=None if H is None else Decimal(repr(H)),
    )


def parse_color(text: str) -> OklchColor:
    """Parse either a hex color or an `oklch()` string.

    Raises:
        ParseError: For anything else
    """
    text = text.strip()
    if is_valid_hex(text):
        return parse_hex(text)
    if text.lower().startswith('oklch('):
        return parse_oklch(text)
    raise ParseError(f"Expected a hex color or oklch() string, got {text!r}")
