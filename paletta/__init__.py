# Copyright (c) 2026 Paletta
# SPDX-License-Identifier: MIT

"""
Paletta -- Color-science core for palette tools.

Converts between RGB, HSL, CIE LAB/LCH and xy chromaticity, measures
perceptual difference and WCAG contrast, mixes colors, simulates
color-vision deficiencies and names colors.

Quick start::

    from paletta import ColorInfo, mix, check_wcag_compliance

    red = ColorInfo.from_hex("#FF0000")
    blue = ColorInfo.from_hex("#0000FF")
    mix(red, blue).hex                                # '#BC00BC'
    check_wcag_compliance("#777777", "#FFFFFF").aa_level.normal   # False
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from paletta.errors import InsufficientColors, InvalidColorFormat, PalettaError
from paletta.schema import (
    AccessibilityReport,
    AdvancedColorInfo,
    ColorBlindnessResult,
    ColorInfo,
    EducationalColorInfo,
    EducationalMixResult,
    HarmonySet,
    HSLColor,
    LABColor,
    LCHColor,
    MixedColor,
    MixFrame,
    RGBColor,
    WCAGResult,
)
from paletta.science import (
    ContrastConfig,
    SimulationConfig,
    check_wcag_compliance,
    classify,
    color_name,
    contrast_ratio,
    create_advanced_color_info,
    delta_e,
    delta_e_strict,
    enhance_color,
    explain_mix,
    generate_mix_sequence,
    harmonies,
    hex_to_rgb,
    hsl_to_rgb,
    lab_to_rgb,
    mix,
    mix_many,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_xy_chromaticity,
    simulate_color_blindness,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Conversion
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_lab",
    "lab_to_rgb",
    "rgb_to_lch",
    "rgb_to_xy_chromaticity",
    # Difference and contrast
    "delta_e",
    "delta_e_strict",
    "contrast_ratio",
    "check_wcag_compliance",
    "ContrastConfig",
    # Mixing
    "mix",
    "mix_many",
    "generate_mix_sequence",
    "explain_mix",
    # Accessibility
    "simulate_color_blindness",
    "SimulationConfig",
    # Classification
    "classify",
    "harmonies",
    "color_name",
    "create_advanced_color_info",
    "enhance_color",
    # Types (commonly needed)
    "ColorInfo",
    "MixedColor",
    "RGBColor",
    "HSLColor",
    "LABColor",
    "LCHColor",
    "WCAGResult",
    "MixFrame",
    "AccessibilityReport",
    "ColorBlindnessResult",
    "HarmonySet",
    "AdvancedColorInfo",
    "EducationalColorInfo",
    "EducationalMixResult",
    # Errors
    "PalettaError",
    "InvalidColorFormat",
    "InsufficientColors",
    # Version
    "__version__",
]
