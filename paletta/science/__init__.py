# Copyright (c) 2026 Paletta
# SPDX-License-Identifier: MIT

"""
Color-science core for Paletta.

Conversion, perceptual difference, contrast, mixing, accessibility
simulation and classification. All operations are pure and synchronous.
"""

from paletta.science.accessibility import (
    CVDTransform,
    SimulationConfig,
    simulate_color_blindness,
)
from paletta.science.colorspace import (
    brighten,
    darken,
    hex_to_rgb,
    hsl_to_rgb,
    lab_to_rgb,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_xy_chromaticity,
)
from paletta.science.difference import (
    ContrastConfig,
    check_wcag_compliance,
    contrast_ratio,
    delta_e,
    delta_e_cie2000,
    delta_e_matrix,
    delta_e_strict,
    evaluate_palette_wcag,
    suggest_contrast_color,
)
from paletta.science.mixing import (
    MixSequence,
    explain_mix,
    generate_mix_sequence,
    mix,
    mix_many,
    mixing_theory,
    random_color,
)
from paletta.science.naming import (
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

__all__ = [
    # Conversion
    "rgb_to_hex",
    "hex_to_rgb",
    "normalize_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_lab",
    "lab_to_rgb",
    "rgb_to_lch",
    "rgb_to_xy_chromaticity",
    "relative_luminance",
    "brighten",
    "darken",
    # Difference and contrast
    "delta_e",
    "delta_e_strict",
    "delta_e_cie2000",
    "delta_e_matrix",
    "contrast_ratio",
    "check_wcag_compliance",
    "suggest_contrast_color",
    "evaluate_palette_wcag",
    "ContrastConfig",
    # Mixing
    "mix",
    "mix_many",
    "generate_mix_sequence",
    "MixSequence",
    "random_color",
    "mixing_theory",
    "explain_mix",
    # Accessibility
    "simulate_color_blindness",
    "SimulationConfig",
    "CVDTransform",
    # Classification
    "classify",
    "harmonies",
    "color_name",
    "color_temperature",
    "hue_name",
    "wheel_position",
    "estimate_wavelength",
    "describe_wavelength",
    "color_science",
    "psychology_effects",
    "enhance_color",
    "create_advanced_color_info",
]
