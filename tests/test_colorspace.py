# Copyright (c) 2026 Paletta
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (RGB ↔ hex ↔ HSL ↔ LAB ↔ LCH ↔ xy)."""

import numpy as np
import pytest

from paletta.errors import InvalidColorFormat
from paletta.schema import ColorInfo, HSLColor, LABColor, RGBColor
from paletta.science.colorspace import (
    as_color_info,
    brighten,
    darken,
    hex_to_rgb,
    hsl_to_rgb,
    hsl_to_srgb,
    lab_to_rgb,
    lab_to_lch,
    lab_to_srgb,
    lch_to_lab,
    linear_to_srgb,
    normalize_hex,
    parse_color,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_xy_chromaticity,
    srgb_to_hsl,
    srgb_to_lab,
    srgb_to_linear,
    srgb_to_uint8,
)


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use the linear segment."""
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-10)

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)


class TestHex:
    """Hex encoding and parsing."""

    def test_red(self):
        assert rgb_to_hex(255, 0, 0) == "#FF0000"

    def test_uppercase_and_padded(self):
        assert rgb_to_hex(10, 171, 205) == "#0AABCD"

    def test_clamps_out_of_range(self):
        assert rgb_to_hex(300, -20, 128) == "#FF0080"

    def test_rounds_fractional_channels(self):
        assert rgb_to_hex(254.6, 0.4, 0) == "#FF0000"

    def test_rejects_nan(self):
        with pytest.raises(InvalidColorFormat):
            rgb_to_hex(float("nan"), 0, 0)

    def test_rejects_non_numeric(self):
        with pytest.raises(InvalidColorFormat):
            rgb_to_hex("red", 0, 0)

    def test_parse_six_digit(self):
        assert hex_to_rgb("#FF8800") == RGBColor(255, 136, 0)

    def test_parse_lowercase_without_hash(self):
        assert hex_to_rgb("ff8800") == RGBColor(255, 136, 0)

    def test_parse_three_digit_shorthand(self):
        assert hex_to_rgb("#F80") == RGBColor(255, 136, 0)

    @pytest.mark.parametrize("bad", ["", "#", "#12345", "#1234567", "#GG0000", "12", "#FF00"])
    def test_rejects_malformed(self, bad):
        with pytest.raises(InvalidColorFormat):
            hex_to_rgb(bad)

    def test_rejects_non_string(self):
        with pytest.raises(InvalidColorFormat):
            hex_to_rgb(0xFF0000)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            hex_to_rgb("not a color")

    def test_normalize(self):
        assert normalize_hex("abc") == "#AABBCC"

    def test_roundtrip_all_gray_levels(self):
        for v in range(256):
            assert hex_to_rgb(rgb_to_hex(v, v, v)) == RGBColor(v, v, v)

    def test_roundtrip_random_colors(self):
        rng = np.random.default_rng(7)
        for r, g, b in rng.integers(0, 256, size=(200, 3)).tolist():
            assert hex_to_rgb(rgb_to_hex(r, g, b)).to_tuple() == (r, g, b)


class TestParseColor:
    """Every accepted color input coerces to RGBColor."""

    def test_hex_string(self):
        assert parse_color("#00FF00") == RGBColor(0, 255, 0)

    def test_tuple(self):
        assert parse_color((0, 0, 255)) == RGBColor(0, 0, 255)

    def test_rgb_color_passthrough(self):
        rgb = RGBColor(1, 2, 3)
        assert parse_color(rgb) is rgb

    def test_color_info(self):
        info = ColorInfo.from_hex("#123456")
        assert parse_color(info) == RGBColor(0x12, 0x34, 0x56)

    def test_rejects_other_types(self):
        with pytest.raises(InvalidColorFormat):
            parse_color(42)

    def test_rejects_wrong_length(self):
        with pytest.raises(InvalidColorFormat):
            parse_color((1, 2))

    def test_as_color_info_keeps_identity(self):
        info = ColorInfo.from_hex("#123456")
        assert as_color_info(info) is info

    def test_as_color_info_builds_record(self):
        info = as_color_info("#ff0000")
        assert info.hex == "#FF0000"
        assert info.name == "Red"


class TestHSL:
    """RGB ↔ HSL conversions."""

    def test_red(self):
        assert rgb_to_hsl(255, 0, 0) == HSLColor(0, 100, 50)

    def test_blue(self):
        assert rgb_to_hsl(0, 0, 255) == HSLColor(240, 100, 50)

    def test_gray_is_achromatic(self):
        hsl = rgb_to_hsl(128, 128, 128)
        assert hsl.h == 0
        assert hsl.s == 0
        assert hsl.is_achromatic

    def test_white(self):
        assert rgb_to_hsl(255, 255, 255) == HSLColor(0, 0, 100)

    def test_hsl_to_rgb_primaries(self):
        assert hsl_to_rgb(0, 1.0, 0.5) == RGBColor(255, 0, 0)
        assert hsl_to_rgb(120, 1.0, 0.5) == RGBColor(0, 255, 0)
        assert hsl_to_rgb(240, 1.0, 0.5) == RGBColor(0, 0, 255)

    def test_hsl_to_rgb_dark_green(self):
        assert hsl_to_rgb(120, 1.0, 0.25) == RGBColor(0, 128, 0)

    def test_hue_wraps(self):
        assert hsl_to_rgb(360, 1.0, 0.5) == hsl_to_rgb(0, 1.0, 0.5)

    def test_array_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        np.testing.assert_allclose(hsl_to_srgb(srgb_to_hsl(srgb)), srgb, atol=1e-10)

    def test_hue_range(self):
        hsl = srgb_to_hsl(np.random.RandomState(0).random((500, 3)))
        assert np.all(hsl[:, 0] >= 0.0)
        assert np.all(hsl[:, 0] < 360.0)


class TestLAB:
    """RGB ↔ CIE LAB conversions."""

    def test_white(self):
        lab = rgb_to_lab(255, 255, 255)
        assert lab.l == pytest.approx(100.0, abs=0.01)
        assert lab.a == pytest.approx(0.0, abs=0.01)
        assert lab.b == pytest.approx(0.0, abs=0.01)

    def test_black(self):
        assert rgb_to_lab(0, 0, 0) == LABColor(0.0, 0.0, 0.0)

    def test_red_reference_values(self):
        lab = rgb_to_lab(255, 0, 0)
        assert lab.l == pytest.approx(53.24, abs=0.05)
        assert lab.a == pytest.approx(80.09, abs=0.05)
        assert lab.b == pytest.approx(67.20, abs=0.05)

    def test_rounded_to_two_decimals(self):
        lab = rgb_to_lab(12, 200, 77)
        for value in (lab.l, lab.a, lab.b):
            assert round(value, 2) == value

    def test_roundtrip_within_one_unit(self):
        rng = np.random.default_rng(3)
        for r, g, b in rng.integers(0, 256, size=(100, 3)).tolist():
            back = lab_to_rgb(rgb_to_lab(r, g, b))
            assert abs(back.r - r) <= 1
            assert abs(back.g - g) <= 1
            assert abs(back.b - b) <= 1

    def test_array_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        np.testing.assert_allclose(lab_to_srgb(srgb_to_lab(srgb)), srgb, atol=1e-8)

    def test_lab_to_rgb_accepts_sequence(self):
        assert lab_to_rgb((100.0, 0.0, 0.0)) == RGBColor(255, 255, 255)

    def test_lab_to_rgb_clips_out_of_gamut(self):
        rgb = lab_to_rgb((50.0, 200.0, -200.0))
        assert all(0 <= v <= 255 for v in rgb.to_tuple())

    def test_lab_to_rgb_rejects_nan(self):
        with pytest.raises(InvalidColorFormat):
            lab_to_rgb((float("nan"), 0.0, 0.0))


class TestLCH:
    """RGB → CIE LCH."""

    def test_gray_has_zero_chroma_and_hue(self):
        lch = rgb_to_lch(128, 128, 128)
        assert lch.c == 0.0
        assert lch.h == 0.0

    def test_red(self):
        lch = rgb_to_lch(255, 0, 0)
        assert lch.l == pytest.approx(53.24, abs=0.05)
        assert lch.c == pytest.approx(104.55, abs=0.1)
        assert lch.h == pytest.approx(40.0, abs=0.1)

    def test_blue_hue_is_positive(self):
        lch = rgb_to_lch(0, 0, 255)
        assert 0.0 <= lch.h < 360.0
        assert lch.h == pytest.approx(306.29, abs=0.1)

    def test_array_roundtrip(self):
        rng = np.random.default_rng(8)
        lab = np.column_stack([
            rng.uniform(0.0, 100.0, 64),
            rng.uniform(-128.0, 127.0, 64),
            rng.uniform(-128.0, 127.0, 64),
        ])
        lch = lab_to_lch(lab)
        assert np.all((lch[:, 2] >= 0.0) & (lch[:, 2] < 360.0))
        np.testing.assert_allclose(lch_to_lab(lch), lab, atol=1e-9)

    def test_lch_to_lab_axes(self):
        np.testing.assert_allclose(lch_to_lab([50.0, 10.0, 90.0]), [50.0, 0.0, 10.0], atol=1e-12)
        np.testing.assert_allclose(lch_to_lab([50.0, 10.0, 180.0]), [50.0, -10.0, 0.0], atol=1e-12)


class TestChromaticityAndLuminance:
    """xy chromaticity and WCAG relative luminance."""

    def test_white_is_d65(self):
        xy = rgb_to_xy_chromaticity(255, 255, 255)
        assert xy.x == pytest.approx(0.31, abs=1e-9)
        assert xy.y == pytest.approx(0.33, abs=1e-9)

    def test_black_is_origin(self):
        xy = rgb_to_xy_chromaticity(0, 0, 0)
        assert (xy.x, xy.y) == (0.0, 0.0)

    def test_red_primary(self):
        xy = rgb_to_xy_chromaticity(255, 0, 0)
        assert xy.x == pytest.approx(0.64, abs=0.01)
        assert xy.y == pytest.approx(0.33, abs=0.01)

    def test_luminance_extremes(self):
        assert relative_luminance(255, 255, 255) == pytest.approx(1.0)
        assert relative_luminance(0, 0, 0) == 0.0

    def test_luminance_weights(self):
        assert relative_luminance(255, 0, 0) == pytest.approx(0.2126)
        assert relative_luminance(0, 255, 0) == pytest.approx(0.7152)
        assert relative_luminance(0, 0, 255) == pytest.approx(0.0722)


class TestBrightenDarken:
    """LAB-lightness adjustments."""

    def test_darken_black_stays_black(self):
        assert darken("#000000") == "#000000"

    def test_brighten_white_stays_white(self):
        assert brighten("#FFFFFF") == "#FFFFFF"

    def test_darken_lowers_luminance(self):
        before = relative_luminance(*hex_to_rgb("#777777").to_tuple())
        after = relative_luminance(*hex_to_rgb(darken("#777777", 0.3)).to_tuple())
        assert after < before

    def test_brighten_raises_luminance(self):
        before = relative_luminance(*hex_to_rgb("#336699").to_tuple())
        after = relative_luminance(*hex_to_rgb(brighten("#336699")).to_tuple())
        assert after > before

    def test_output_is_canonical_hex(self):
        out = brighten("#abc", 0.5)
        assert out == normalize_hex(out)


class TestQuantize:
    def test_rounds_half_up(self):
        out = srgb_to_uint8(np.array([0.5, 0.0, 1.0]))
        assert out.tolist() == [128, 0, 255]

    def test_clips(self):
        assert srgb_to_uint8(np.array([-0.2, 1.3, 0.5])).tolist() == [0, 255, 128]
