# Copyright (c) 2026 Paletta
# SPDX-License-Identifier: MIT

"""Tests for classification, naming, harmonies and descriptive science."""

import json

import numpy as np
import pytest

from paletta.errors import InvalidColorFormat
from paletta.schema import ColorInfo, EducationalColorInfo
from paletta.science.colorspace import rgb_to_hex
from paletta.science.naming import (
    CATEGORY_TABLE,
    HUE_CATEGORIES,
    classify,
    color_name,
    color_science,
    color_temperature,
    create_advanced_color_info,
    describe_wavelength,
    enhance_color,
    estimate_wavelength,
    harmonies,
    hue_name,
    psychology_effects,
    wheel_position,
)


class TestClassify:
    """Category labels."""

    def test_exact_table(self):
        for hex_color, label in CATEGORY_TABLE.items():
            assert classify(hex_color) == label

    def test_red(self):
        assert classify(rgb_to_hex(255, 0, 0)) == "red"

    def test_lowercase_and_shorthand(self):
        assert classify("#f00") == "red"

    def test_dark_tone(self):
        assert classify("#1A1A1A") == "dark tone"

    def test_light_tone(self):
        assert classify("#F0F0F0") == "light tone"

    def test_gray_tone(self):
        assert classify("#777777") == "gray tone"

    @pytest.mark.parametrize("hex_color,label", [
        ("#FF8000", "orange"),
        ("#0080FF", "sky-blue"),
        ("#8000FF", "violet"),
        ("#BC00BC", "purple"),
        ("#FF0020", "red"),
        ("#FF0040", "magenta"),
    ])
    def test_hue_bands(self, hex_color, label):
        assert classify(hex_color) == label

    def test_total_function(self):
        labels = set(HUE_CATEGORIES) | set(CATEGORY_TABLE.values())
        labels |= {"dark tone", "light tone", "gray tone"}
        rng = np.random.default_rng(21)
        for r, g, b in rng.integers(0, 256, size=(300, 3)).tolist():
            assert classify(rgb_to_hex(r, g, b)) in labels

    def test_malformed_raises(self):
        with pytest.raises(InvalidColorFormat):
            classify("#12345")


class TestHarmonies:
    """Hue rotations at constant saturation and lightness."""

    def test_red(self):
        h = harmonies("#FF0000")
        assert h.complementary == ("#00FFFF",)
        assert h.triadic == ("#00FF00", "#0000FF")
        assert h.tetradic == ("#80FF00", "#00FFFF", "#8000FF")
        assert h.analogous == ("#FF0080", "#FF8000")
        assert h.split_complementary == ("#00FF80", "#0080FF")

    def test_gray_rotates_to_itself(self):
        h = harmonies("#808080")
        assert set(h.triadic) == {"#808080"}
        assert h.complementary == ("#808080",)

    def test_lengths(self):
        h = harmonies("#3A7BD5")
        assert (len(h.complementary), len(h.triadic), len(h.tetradic)) == (1, 2, 3)
        assert (len(h.analogous), len(h.split_complementary)) == (2, 2)

    def test_to_dict(self):
        d = harmonies("#FF0000").to_dict()
        assert d["complementary"] == ["#00FFFF"]


class TestColorName:
    """Display names."""

    def test_named_table(self):
        assert color_name("#FF0000") == "Red"
        assert color_name("#ffa500") == "Orange"
        assert color_name("#000080") == "Navy"

    def test_gray_tiers(self):
        assert color_name("#1A1A1A") == "Dark Gray"
        assert color_name("#555555") == "Gray"
        assert color_name("#AAAAAA") == "Light Gray"
        assert color_name("#EEEEEE") == "White"

    def test_dark_and_light(self):
        assert color_name("#200000") == "Dark"
        assert color_name("#FFE0E0") == "Light"

    def test_hue_family(self):
        assert color_name("#FF8000") == "Orange family"
        assert color_name("#FF0020") == "Red family"


class TestColorTemperature:
    def test_warm(self):
        assert color_temperature("#FF0000") == "warm"
        assert color_temperature("#FF8000") == "warm"

    def test_cool(self):
        assert color_temperature("#0000FF") == "cool"
        assert color_temperature("#00FF00") == "cool"

    def test_neutral(self):
        assert color_temperature("#808080") == "neutral"


class TestHueName:
    @pytest.mark.parametrize("angle,name", [
        (0, "red"),
        (30, "red-orange"),
        (60, "orange"),
        (120, "yellow"),
        (240, "blue"),
        (359, "red"),
        (360, "red"),
        (-30, "red-violet"),
    ])
    def test_wheel(self, angle, name):
        assert hue_name(angle) == name


class TestScience:
    """Wavelength, luminance and wheel position."""

    def test_wavelength_segments(self):
        assert estimate_wavelength(0) == 700.0
        assert estimate_wavelength(30) == 662.5
        assert estimate_wavelength(60) == 625.0
        assert estimate_wavelength(330) == 395.0

    def test_wavelength_missing_hue(self):
        assert estimate_wavelength(None) is None
        assert estimate_wavelength(float("nan")) is None

    def test_white(self):
        s = color_science("#FFFFFF")
        assert s.wavelength is None
        assert s.luminance == 1.0
        assert s.chromaticity.x == pytest.approx(0.31)

    def test_red(self):
        s = color_science("#FF0000")
        assert s.wavelength == 700.0
        assert s.luminance == pytest.approx(0.2126)

    def test_wheel_position(self):
        pos = wheel_position("#FF0000")
        assert (pos.angle, pos.radius) == (0, 100)


class TestAdvancedColorInfo:
    def test_black(self):
        info = create_advanced_color_info(0, 0, 0)
        assert isinstance(info, ColorInfo)
        assert info.hex == "#000000"
        assert info.name == "Black"
        assert info.wcag_level == "AAA"
        assert info.contrast_ratio == 21.0
        assert info.delta_e is None

    def test_gray_fails(self):
        info = create_advanced_color_info(119, 119, 119)
        assert info.wcag_level == "FAIL"

    def test_with_base(self):
        info = create_advanced_color_info(255, 0, 0, base="#FF0000")
        assert info.delta_e == 0.0
        assert info.lab.l == pytest.approx(53.24, abs=0.05)

    def test_clamps_channels(self):
        assert create_advanced_color_info(300, -5, 0).hex == "#FF0000"

    def test_to_dict(self):
        d = create_advanced_color_info(0, 0, 0, base="#FFFFFF").to_dict()
        assert d["wcag"] == {"level": "AAA", "contrast_ratio": 21.0}
        assert d["hex"] == "#000000"
        assert d["id"].startswith("color_")
        assert d["delta_e"] == pytest.approx(100.0, abs=0.01)


class TestDescribeWavelength:
    @pytest.mark.parametrize("wavelength,prefix", [
        (750.0, "Deep red region"),
        (700.0, "Deep red region"),
        (699.9, "Red region"),
        (662.5, "Red region"),
        (600.0, "Orange region"),
        (575.0, "Yellow region"),
        (530.0, "Green region"),
        (475.0, "Blue region"),
        (380.0, "Violet region"),
    ])
    def test_regions(self, wavelength, prefix):
        assert describe_wavelength(wavelength).startswith(prefix)

    @pytest.mark.parametrize("wavelength", [379.9, 750.1, 1000.0])
    def test_outside_visible(self, wavelength):
        assert describe_wavelength(wavelength) == "Outside the visible spectrum"

    def test_achromatic(self):
        assert describe_wavelength(color_science("#808080").wavelength).startswith(
            "No dominant wavelength"
        )


class TestPsychologyEffects:
    """Hue moods plus saturation and lightness modifiers."""

    def test_blue(self):
        assert psychology_effects("#0000FF") == (
            "calm", "trustworthy", "stable", "focused", "vivid", "striking",
        )

    def test_hue_wraps_to_red(self):
        assert psychology_effects("#FF0020")[0] == "passionate"

    def test_three_mood_band(self):
        assert psychology_effects("#00FFBF") == (
            "refreshing", "clean", "revitalizing", "vivid", "striking",
        )

    def test_achromatic_has_no_hue_moods(self):
        assert psychology_effects("#808080") == ("subdued", "refined")
        assert psychology_effects("#FFFFFF") == ("subdued", "refined", "airy", "clean")

    def test_capped_at_six(self):
        effects = psychology_effects("#330000")
        assert len(effects) == 6
        assert "weighty" not in effects

    def test_malformed_raises(self):
        with pytest.raises(InvalidColorFormat):
            psychology_effects("#GG0000")


class TestEnhanceColor:
    def test_red(self):
        info = enhance_color("#FF0000")
        assert isinstance(info, EducationalColorInfo)
        assert info.name == "Red"
        assert info.science.wavelength == 700.0
        assert (info.wheel_position.angle, info.wheel_position.radius) == (0, 100)
        assert info.psychology_effects[0] == "passionate"
        assert info.harmonies.complementary == ("#00FFFF",)

    def test_keeps_identity(self):
        base = ColorInfo.from_hex("#3A7BD5", name="Sky", id="sky")
        info = enhance_color(base)
        assert (info.name, info.id) == ("Sky", "sky")

    def test_to_dict(self):
        d = enhance_color("#3A7BD5").to_dict()
        json.dumps(d)
        assert {"science", "wheel_position", "psychology_effects", "harmonies"} <= set(d)
        assert d["hex"] == "#3A7BD5"
