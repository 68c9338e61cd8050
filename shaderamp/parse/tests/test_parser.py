"""Tests for exact-decimal color parsing."""

from decimal import Decimal

import pytest

from shaderamp.parse import (
    ColorError,
    ParseError,
    extract_precise_value,
    parse_color,
    parse_hex,
    parse_oklch,
)


class TestInvalidInput:
    """Inputs that must raise ParseError."""

    @pytest.mark.parametrize("text", [
        "",
        "not a color",
        "#ff0000",
        "rgb(255, 0, 0)",
        "hsl(0 100% 50%)",
        "oklch(50% 0)",
        "oklch(",
        "oklch(1e999 0.1 120)",
        "oklch(50% 1e999 120)",
    ])
    def test_parse_oklch_rejects(self, text):
        with pytest.raises(ParseError):
            parse_oklch(text)

    @pytest.mark.parametrize("text", ["", "#12", "#ggg", "oklch(50% 0 0)", "blue"])
    def test_parse_hex_rejects(self, text):
        with pytest.raises(ParseError):
            parse_hex(text)

    @pytest.mark.parametrize("text", ["not a color", "", "rgb(0 0 0)", "#12345", "oklch(nope)"])
    def test_parse_color_rejects(self, text):
        with pytest.raises(ParseError):
            parse_color(text)

    def test_parse_error_is_color_error(self):
        assert issubclass(ParseError, ColorError)


class TestPrecision:
    """Literal digits survive parsing exactly."""

    @pytest.mark.parametrize("text", [
        "oklch(68.1% 0.162 75.834)",
        "oklch(0.681 0.162 75.834)",
        "oklch(68.1% 0.162 75.834deg)",
    ])
    def test_exact_digits(self, text):
        color = parse_oklch(text)
        assert color.lightness == Decimal("0.681")
        assert color.chroma == Decimal("0.162")
        assert color.hue == Decimal("75.834")
        assert color.alpha is None

    def test_exact_digits_are_not_float_artifacts(self):
        color = parse_oklch("oklch(68.1% 0.162 75.834)")
        assert str(color.lightness) == "0.681"
        assert str(color.chroma) == "0.162"

    def test_hue_of_zero(self):
        color = parse_oklch("oklch(50% 0 0)")
        assert color.lightness == Decimal("0.5")
        assert color.chroma == Decimal(0)
        assert color.hue == Decimal(0)

    def test_same_integer_parts_are_matched_in_order(self):
        """Lightness and chroma both truncate to 0 but keep their own digits."""
        color = parse_oklch("oklch(0.5 0.25 0.75)")
        assert color.lightness == Decimal("0.5")
        assert color.chroma == Decimal("0.25")
        assert color.hue == Decimal("0.75")

    def test_percent_chroma(self):
        """100% chroma is 0.4."""
        color = parse_oklch("oklch(60% 50% 120)")
        assert color.chroma == Decimal("0.2")

    def test_turn_hue(self):
        color = parse_oklch("oklch(60% 0.1 0.25turn)")
        assert color.hue == Decimal("90")

    def test_grad_hue(self):
        color = parse_oklch("oklch(60% 0.1 100grad)")
        assert color.hue == Decimal("90")

    def test_rad_hue_falls_back_to_float(self):
        color = parse_oklch("oklch(60% 0.1 1rad)")
        assert float(color.hue) == pytest.approx(57.29578, abs=1e-4)

    def test_alpha(self):
        color = parse_oklch("oklch(68.1% 0.162 75.834 / 0.5)")
        assert color.alpha == Decimal("0.5")

    def test_percent_alpha(self):
        color = parse_oklch("oklch(68.1% 0.162 75.834 / 25%)")
        assert color.alpha == Decimal("0.25")

    def test_surrounding_whitespace(self):
        color = parse_oklch("  oklch(68.1% 0.162 75.834)  ")
        assert color.lightness == Decimal("0.681")

    def test_extract_precise_value(self):
        assert extract_precise_value("oklch(68.1% 0.162 75.834)", "lightness", 0.681) == Decimal("0.681")

    def test_extract_precise_value_miss(self):
        """No matching literal falls back to the float value."""
        assert extract_precise_value("oklch(50% 0.1 1rad)", "hue", 57.5) == Decimal("57.5")


class TestNoneKeyword:
    """`none` hue means no hue at all, not hue 0."""

    @pytest.mark.parametrize("text, lightness, chroma", [
        ("oklch(50% 0 none)", "0.5", "0"),
        ("oklch(75% 0.05 none)", "0.75", "0.05"),
        ("oklch(100% 0 none)", "1", "0"),
    ])
    def test_hue_absent(self, text, lightness, chroma):
        color = parse_oklch(text)
        assert color.hue is None
        assert color.lightness == Decimal(lightness)
        assert color.chroma == Decimal(chroma)

    def test_none_lightness_is_zero(self):
        color = parse_oklch("oklch(none 0.1 120)")
        assert color.lightness == Decimal(0)
        assert color.chroma == Decimal("0.1")
        assert color.hue == Decimal("120")


class TestHex:
    """Hex inputs convert through OKLCH."""

    @pytest.mark.parametrize("text", ["#3b82f6", "3b82f6", "#3B82F6"])
    def test_forms(self, text):
        color = parse_hex(text)
        assert float(color.lightness) == pytest.approx(0.623, abs=1e-3)
        assert float(color.hue) == pytest.approx(259.8, abs=0.1)
        assert color.alpha is None

    def test_short_form(self):
        assert parse_hex("#fff") == parse_hex("#ffffff")

    def test_gray_is_achromatic(self):
        color = parse_hex("#6b7280")
        assert color.hue is not None
        assert parse_hex("#777").hue is None


class TestParseColor:
    """Auto-detection between hex and oklch()."""

    def test_hex(self):
        assert parse_color("#3b82f6") == parse_hex("#3b82f6")

    def test_bare_hex(self):
        assert parse_color("abc") == parse_hex("#aabbcc")

    def test_oklch(self):
        assert parse_color("oklch(68.1% 0.162 75.834)") == parse_oklch("oklch(68.1% 0.162 75.834)")

    def test_whitespace(self):
        assert parse_color("  #3b82f6\n") == parse_hex("#3b82f6")


class TestToCss:
    """OklchColor renders back to the digits it was parsed from."""

    @pytest.mark.parametrize("text", [
        "oklch(68.1% 0.162 75.834)",
        "oklch(50% 0 none)",
        "oklch(68.1% 0.162 75.834 / 0.5)",
    ])
    def test_roundtrip(self, text):
        assert parse_oklch(text).to_css() == text


class TestClamping:
    """Out-of-range components are clamped like CSS does."""

    @pytest.mark.parametrize("text, lightness", [
        ("oklch(150% 0.1 120)", "1"),
        ("oklch(-20% 0.1 120)", "0"),
        ("oklch(68.1 0.162 75.834)", "1"),
    ])
    def test_lightness(self, text, lightness):
        assert parse_oklch(text).lightness == Decimal(lightness)

    def test_negative_chroma_is_zero(self):
        color = parse_oklch("oklch(50% -0.1 120)")
        assert color.chroma == Decimal(0)
        assert color.hue == Decimal("120")

    def test_alpha(self):
        assert parse_oklch("oklch(50% 0.1 120 / 150%)").alpha == Decimal(1)

    def test_in_range_digits_untouched(self):
        color = parse_oklch("oklch(100% 0.4 120)")
        assert color.to_css() == "oklch(100% 0.4 120)"
