"""Test configuration for shaderamp."""

from decimal import Decimal

import pytest

from shaderamp.types import OklchColor


@pytest.fixture
def make_color():
    """Build an OklchColor from plain numbers or strings."""
    def _make(lightness, chroma, hue=None, alpha=None):
        return OklchColor(
            lightness=Decimal(str(lightness)),
            chroma=Decimal(str(chroma)),
            hue=None if hue is None else Decimal(str(hue)),
            alpha=None if alpha is None else Decimal(str(alpha)),
        )
    return _make
