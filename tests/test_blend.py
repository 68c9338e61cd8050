"""Tests for chroma blending across the ramp."""

from decimal import Decimal

import pytest

from shaderamp.palette import calc_blend_ratio, calc_chroma_scale, calc_color, calc_shades_around
from shaderamp.palette import patterns
from shaderamp.types import Shade, ShadesAround

S = Shade


class TestShadesAround:
    """Partition of the 50-950 ramp."""

    def test_middle(self):
        around = calc_shades_around(list(Shade), S.SHADE_500)
        assert around.above == (S.SHADE_600, S.SHADE_700, S.SHADE_800, S.SHADE_900, S.SHADE_950)
        assert around.below == (S.SHADE_50, S.SHADE_100, S.SHADE_200, S.SHADE_300, S.SHADE_400)

    def test_edges_excluded(self):
        around = calc_shades_around(list(Shade), S.SHADE_0)
        assert around.below == ()
        assert len(around.above) == 11
        assert S.SHADE_1000 not in around.above

    def test_closest_at_ramp_end(self):
        around = calc_shades_around(list(Shade), S.SHADE_950)
        assert around.above == ()
        assert around.below[-1] == S.SHADE_900

    def test_unsorted_input(self):
        around = calc_shades_around(reversed(list(Shade)), S.SHADE_500)
        assert around.below == (S.SHADE_50, S.SHADE_100, S.SHADE_200, S.SHADE_300, S.SHADE_400)


class TestBlendRatio:
    """Linear ramp from input chroma to pattern chroma."""

    @pytest.fixture
    def around_500(self):
        return calc_shades_around(list(Shade), S.SHADE_500)

    @pytest.mark.parametrize("shade, expected", [
        (S.SHADE_600, "0.2"),
        (S.SHADE_700, "0.4"),
        (S.SHADE_950, "1"),
        (S.SHADE_400, "0.2"),
        (S.SHADE_300, "0.4"),
        (S.SHADE_50, "1"),
    ])
    def test_ratios_around_500(self, around_500, shade, expected):
        assert calc_blend_ratio(shade, S.SHADE_500, around_500) == Decimal(expected)

    @pytest.mark.parametrize("closest", list(Shade))
    def test_edges_always_full(self, closest):
        around = calc_shades_around(list(Shade), closest)
        for edge in Shade.edges():
            if edge != closest:
                assert calc_blend_ratio(edge, closest, around) == 1

    def test_empty_side(self):
        around = ShadesAround(above=(), below=())
        assert calc_blend_ratio(S.SHADE_600, S.SHADE_500, around) == 1
        assert calc_blend_ratio(S.SHADE_400, S.SHADE_500, around) == 1

    def test_closest_is_white(self):
        around = calc_shades_around(list(Shade), S.SHADE_0)
        assert calc_blend_ratio(S.SHADE_50, S.SHADE_0, around) == Decimal(1) / 11
        assert calc_blend_ratio(S.SHADE_950, S.SHADE_0, around) == 1

    def test_closest_is_black(self):
        around = calc_shades_around(list(Shade), S.SHADE_1000)
        assert calc_blend_ratio(S.SHADE_950, S.SHADE_1000, around) == Decimal(1) / 11
        assert calc_blend_ratio(S.SHADE_50, S.SHADE_1000, around) == 1

    def test_monotonic_away_from_closest(self):
        around = calc_shades_around(list(Shade), S.SHADE_300)
        ratios = [calc_blend_ratio(s, S.SHADE_300, around) for s in around.above]
        assert ratios == sorted(ratios)
        assert ratios[-1] == 1


class TestChromaScale:

    def test_relative_to_pattern(self, make_color):
        color = make_color(0.623, 0.107, 260)
        assert calc_chroma_scale(color, patterns.BLUE, S.SHADE_500) == Decimal("0.5")

    def test_zero_pattern_chroma(self, make_color):
        color = make_color(1, 0.05, 260)
        assert calc_chroma_scale(color, patterns.BLUE, S.SHADE_0) == 1

    def test_tiny_pattern_chroma(self, make_color):
        color = make_color(0.98, 0.004, 260)
        assert calc_chroma_scale(color, patterns.NEUTRAL, S.SHADE_50) == 2


class TestCalcColor:
    """Per-shade color computation."""

    @pytest.fixture
    def around_500(self):
        return calc_shades_around(list(Shade), S.SHADE_500)

    def test_closest_returns_input(self, make_color, around_500):
        color = make_color("0.623", "0.107", "259.815", "0.8")
        result = calc_color(
            S.SHADE_500, S.SHADE_500, color, patterns.BLUE[S.SHADE_500], Decimal("0.5"), around_500,
        )
        assert result is color

    def test_blended_chroma(self, make_color, around_500):
        color = make_color("0.623", "0.107", "259.815")
        result = calc_color(
            S.SHADE_600, S.SHADE_500, color, patterns.BLUE[S.SHADE_600], Decimal("0.5"), around_500,
        )
        # 0.107 * 0.8 + 0.245 * 0.5 * 0.2
        assert result.chroma == Decimal("0.1101")
        assert result.lightness == Decimal("0.546")
        assert result.hue == Decimal("259.815")

    def test_edge_has_no_input_chroma(self, make_color, around_500):
        color = make_color("0.623", "0.3", "259.815")
        result = calc_color(
            S.SHADE_0, S.SHADE_500, color, patterns.BLUE[S.SHADE_0], Decimal("1.4"), around_500,
        )
        assert result.chroma == 0
        assert result.lightness == 1

    def test_chroma_capped(self, make_color, around_500):
        color = make_color("0.623", "0.36", "259.815")
        scale = Decimal("0.36") / Decimal("0.214")
        result = calc_color(
            S.SHADE_700, S.SHADE_500, color, patterns.BLUE[S.SHADE_700], scale, around_500,
        )
        assert result.chroma == Decimal("0.37")

    def test_alpha_carried(self, make_color, around_500):
        color = make_color("0.623", "0.107", "259.815", "0.5")
        result = calc_color(
            S.SHADE_900, S.SHADE_500, color, patterns.BLUE[S.SHADE_900], Decimal("0.5"), around_500,
        )
        assert result.alpha == Decimal("0.5")

    def test_missing_hue_stays_missing(self, make_color, around_500):
        color = make_color("0.554", "0.02")
        result = calc_color(
            S.SHADE_900, S.SHADE_500, color, patterns.NEUTRAL[S.SHADE_900], Decimal(1), around_500,
        )
        assert result.hue is None
