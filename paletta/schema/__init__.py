# Copyright (c) 2026 Paletta
# SPDX-License-Identifier: MIT

"""
Schema definitions for the color-science core.

All types in this module are immutable (frozen dataclasses) and fully
determined by their constructor inputs.
"""

from paletta.schema.color_types import (
    AccessibilityReport,
    AdvancedColorInfo,
    Chromaticity,
    ColorBlindnessResult,
    ColorInfo,
    ColorScience,
    ContrastSuggestion,
    EducationalColorInfo,
    EducationalMixResult,
    HarmonySet,
    HSLColor,
    LABColor,
    LCHColor,
    MixedColor,
    MixFrame,
    MixingTheory,
    RGBColor,
    WCAGLevel,
    WCAGResult,
    WCAGSuggestions,
    WheelPosition,
    generate_color_id,
)

__all__ = [
    # Color spaces
    "RGBColor",
    "HSLColor",
    "LABColor",
    "LCHColor",
    "Chromaticity",
    # Identity-bearing records
    "ColorInfo",
    "MixedColor",
    "AdvancedColorInfo",
    "EducationalColorInfo",
    "generate_color_id",
    # Contrast
    "WCAGLevel",
    "WCAGSuggestions",
    "WCAGResult",
    "ContrastSuggestion",
    # Mixing
    "MixFrame",
    "MixingTheory",
    "EducationalMixResult",
    # Accessibility
    "AccessibilityReport",
    "ColorBlindnessResult",
    # Classification
    "HarmonySet",
    "WheelPosition",
    "ColorScience",
]
