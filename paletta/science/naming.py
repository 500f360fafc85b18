# Copyright (c) 2026 Paletta
# SPDX-License-Identifier: MIT

"""
Deterministic color categories, display names and harmonies.

classify() is the coarse category used for grouping (every valid color
gets exactly one label). color_name() is the friendlier display name
stored on ColorInfo. Both read hue from unrounded HSL so that band edges
do not depend on display rounding.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from paletta.schema.color_types import (
    AdvancedColorInfo,
    ColorScience,
    EducationalColorInfo,
    HarmonySet,
    WheelPosition,
)
from paletta.science.colorspace import (
    ColorLike,
    as_color_info,
    hsl_to_srgb,
    parse_color,
    relative_luminance,
    rgb_to_hex,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_xy_chromaticity,
    srgb_to_hsl,
    srgb_to_uint8,
)
from paletta.science.difference import contrast_ratio, delta_e, grade_contrast

# Exact matches checked before any banding
CATEGORY_TABLE = {
    "#000000": "black",
    "#FFFFFF": "white",
    "#FF0000": "red",
    "#00FF00": "green",
    "#0000FF": "blue",
    "#FFFF00": "yellow",
    "#00FFFF": "cyan",
    "#FF00FF": "magenta",
}

# 30° bands centered on 0°, 30°, ..., 330°
HUE_CATEGORIES = (
    "red",
    "orange",
    "yellow",
    "yellow-green",
    "green",
    "blue-green",
    "cyan",
    "sky-blue",
    "blue",
    "violet",
    "purple",
    "magenta",
)

NAMED_COLORS = {
    "#FF0000": "Red",
    "#00FF00": "Green",
    "#0000FF": "Blue",
    "#FFFF00": "Yellow",
    "#FF00FF": "Magenta",
    "#00FFFF": "Cyan",
    "#000000": "Black",
    "#FFFFFF": "White",
    "#808080": "Gray",
    "#FFA500": "Orange",
    "#800080": "Purple",
    "#FFC0CB": "Pink",
    "#A52A2A": "Brown",
    "#008000": "Dark Green",
    "#000080": "Navy",
}

# Upper hue bound (exclusive) and family name; hues >= 345 wrap to red
_NAME_FAMILIES = (
    (15.0, "Red"),
    (45.0, "Orange"),
    (75.0, "Yellow"),
    (150.0, "Green"),
    (180.0, "Cyan"),
    (250.0, "Blue"),
    (290.0, "Purple"),
    (345.0, "Pink"),
)

WHEEL_NAMES = (
    "red",
    "red-orange",
    "orange",
    "yellow-orange",
    "yellow",
    "yellow-green",
    "green",
    "blue-green",
    "blue",
    "blue-violet",
    "violet",
    "red-violet",
)

# (hue start, hue end, wavelength at start, wavelength at end) in nm
_WAVELENGTH_SEGMENTS = (
    (0.0, 60.0, 700.0, 625.0),
    (60.0, 120.0, 625.0, 530.0),
    (120.0, 180.0, 530.0, 500.0),
    (180.0, 240.0, 500.0, 475.0),
    (240.0, 300.0, 475.0, 410.0),
    (300.0, 360.0, 410.0, 380.0),
)

# Lower bound (inclusive, nm) and description, longest wavelength first
_WAVELENGTH_REGIONS = (
    (700.0, "Deep red region - strong presence and passion"),
    (650.0, "Red region - warm and passionate"),
    (590.0, "Orange region - energetic and approachable"),
    (570.0, "Yellow region - bright and eye-catching"),
    (495.0, "Green region - natural and soothing"),
    (450.0, "Blue region - calm and trustworthy"),
    (380.0, "Violet region - mysterious and noble"),
)
_OUTSIDE_VISIBLE = "Outside the visible spectrum"

# Upper hue bound (exclusive) and moods; hues >= 345 wrap to the first entry
_HUE_EFFECTS = (
    (15.0, ("passionate", "energetic", "exciting", "attention-grabbing")),
    (45.0, ("warm", "friendly", "creative", "lively")),
    (75.0, ("bright", "optimistic", "cautionary", "intellectual")),
    (150.0, ("natural", "soothing", "growth", "balance")),
    (180.0, ("refreshing", "clean", "revitalizing")),
    (250.0, ("calm", "trustworthy", "stable", "focused")),
    (290.0, ("mysterious", "noble", "inventive", "imaginative")),
    (345.0, ("elegant", "romantic", "affectionate", "soft")),
)

_WHITE = "#FFFFFF"


def _hsl(color: ColorLike) -> tuple[float, float, float]:
    """Unrounded (H degrees, S fraction, L fraction)."""
    rgb = parse_color(color)
    h, s, l = srgb_to_hsl(np.array(rgb.to_tuple(), dtype=np.float64) / 255.0)
    return float(h), float(s), float(l)


def _band(hue: float, width: float = 30.0) -> int:
    """Index of the band centered on a multiple of width."""
    return int(((hue + width / 2.0) % 360.0) // width)


# =============================================================================
# Classification
# =============================================================================


def classify(hex_color: ColorLike) -> str:
    """
    Map a color to exactly one category label.

    Order: exact table, then LAB lightness extremes ("dark tone" below 20,
    "light tone" above 80), then low saturation ("gray tone"), then one
    of twelve 30° hue bands.

    Raises:
        InvalidColorFormat: If the color cannot be parsed.

    Example:
        >>> classify("#FF0000")
        'red'
        >>> classify("#1A1A1A")
        'dark tone'
    """
    rgb = parse_color(hex_color)
    exact = CATEGORY_TABLE.get(rgb.hex)
    if exact is not None:
        return exact

    lab = rgb_to_lab(rgb.r, rgb.g, rgb.b)
    if lab.l < 20.0:
        return "dark tone"
    if lab.l > 80.0:
        return "light tone"

    h, s, _ = _hsl(rgb)
    if s < 0.1:
        return "gray tone"
    return HUE_CATEGORIES[_band(h)]


def color_name(hex_color: ColorLike) -> str:
    """
    Display name for a color.

    Exact matches come from NAMED_COLORS. Otherwise low-saturation colors
    get a gray tier, very dark or very light colors get "Dark"/"Light",
    and the rest a hue family such as "Orange family".
    """
    rgb = parse_color(hex_color)
    named = NAMED_COLORS.get(rgb.hex)
    if named is not None:
        return named

    h, s, l = _hsl(rgb)
    if s < 0.1:
        if l < 0.2:
            return "Dark Gray"
        if l < 0.5:
            return "Gray"
        if l < 0.8:
            return "Light Gray"
        return "White"

    if l < 0.15:
        return "Dark"
    if l > 0.85:
        return "Light"

    for upper, family in _NAME_FAMILIES:
        if h < upper:
            return f"{family} family"
    return "Red family"


def color_temperature(hex_color: ColorLike) -> str:
    """
    "warm", "cool" or "neutral".

    Achromatic colors are neutral. Hues in [45, 135] and [225, 315] are
    cool; everything else is warm.
    """
    h, s, _ = _hsl(hex_color)
    if s == 0.0:
        return "neutral"
    if 45.0 <= h <= 135.0 or 225.0 <= h <= 315.0:
        return "cool"
    return "warm"


def hue_name(angle: float) -> str:
    """Name of a hue angle on a 12-point artist's wheel (any angle, wraps)."""
    return WHEEL_NAMES[_band(float(angle) % 360.0)]


# =============================================================================
# Harmonies
# =============================================================================


def _rotate(hsl: tuple[float, float, float], offsets: tuple[float, ...]) -> tuple[str, ...]:
    h, s, l = hsl
    arr = np.array([[(h + off) % 360.0, s, l] for off in offsets], dtype=np.float64)
    return tuple(rgb_to_hex(*rgb) for rgb in srgb_to_uint8(hsl_to_srgb(arr)).tolist())


def harmonies(hex_color: ColorLike) -> HarmonySet:
    """
    Hue rotations of a color at its own saturation and lightness.

    Returns:
        HarmonySet with complementary (+180), triadic (+120, +240),
        tetradic (+90, +180, +270), analogous (-30, +30) and
        split-complementary (+150, +210) hex strings.

    Example:
        >>> harmonies("#FF0000").complementary
        ('#00FFFF',)
    """
    hsl = _hsl(hex_color)
    return HarmonySet(
        complementary=_rotate(hsl, (180.0,)),
        triadic=_rotate(hsl, (120.0, 240.0)),
        tetradic=_rotate(hsl, (90.0, 180.0, 270.0)),
        analogous=_rotate(hsl, (-30.0, 30.0)),
        split_complementary=_rotate(hsl, (150.0, 210.0)),
    )


# =============================================================================
# Descriptive Science
# =============================================================================


def wheel_position(color: ColorLike) -> WheelPosition:
    """Hue angle (degrees) and saturation radius (percent) on an HSL wheel."""
    hsl = as_color_info(color).hsl
    return WheelPosition(angle=hsl.h, radius=hsl.s)


def estimate_wavelength(hue: Optional[float]) -> Optional[float]:
    """
    Approximate dominant wavelength (nm) for an HSL hue.

    Piecewise linear over six 60° segments from 700 nm (red) down to
    380 nm. Purples past 300° have no spectral wavelength; the last
    segment is a visual continuation. Returns None for a missing hue.
    """
    if hue is None or not math.isfinite(hue):
        return None
    h = float(hue) % 360.0
    for start, end, wl_start, wl_end in _WAVELENGTH_SEGMENTS:
        if h < end:
            return round(wl_start + (h - start) / (end - start) * (wl_end - wl_start), 1)
    return _WAVELENGTH_SEGMENTS[-1][3]


def color_science(color: ColorLike) -> ColorScience:
    """
    Physical description: wavelength, luminance and xy chromaticity.

    Achromatic colors have no dominant wavelength.
    """
    rgb = parse_color(color)
    h, s, _ = _hsl(rgb)
    return ColorScience(
        wavelength=estimate_wavelength(h) if s > 0.0 else None,
        luminance=round(relative_luminance(rgb.r, rgb.g, rgb.b), 4),
        chromaticity=rgb_to_xy_chromaticity(rgb.r, rgb.g, rgb.b),
    )


def describe_wavelength(wavelength: Optional[float]) -> str:
    """
    Region of the visible spectrum a wavelength (nm) falls in, with the
    impression it usually carries.

    Example:
        >>> describe_wavelength(662.5)
        'Red region - warm and passionate'
    """
    if wavelength is None or not math.isfinite(wavelength):
        return "No dominant wavelength - achromatic"
    wl = float(wavelength)
    if not 380.0 <= wl <= 750.0:
        return _OUTSIDE_VISIBLE
    for lower, text in _WAVELENGTH_REGIONS:
        if wl >= lower:
            return text
    return _OUTSIDE_VISIBLE


def psychology_effects(color: ColorLike) -> tuple[str, ...]:
    """
    Moods commonly associated with a color, at most six.

    Hue associations come first, then saturation (below 0.3 or above 0.7)
    and lightness (below 0.3 or above 0.7) modifiers. Achromatic colors
    have no hue association.

    Example:
        >>> psychology_effects("#0000FF")
        ('calm', 'trustworthy', 'stable', 'focused', 'vivid', 'striking')
    """
    h, s, l = _hsl(color)
    effects: list[str] = []

    if s > 0.0:
        if h >= 345.0:
            effects.extend(_HUE_EFFECTS[0][1])
        else:
            for upper, moods in _HUE_EFFECTS:
                if h < upper:
                    effects.extend(moods)
                    break

    if s < 0.3:
        effects.extend(("subdued", "refined"))
    elif s > 0.7:
        effects.extend(("vivid", "striking"))

    if l < 0.3:
        effects.extend(("weighty", "steady"))
    elif l > 0.7:
        effects.extend(("airy", "clean"))

    return tuple(effects[:6])


def enhance_color(color: ColorLike) -> EducationalColorInfo:
    """
    Annotate a color with its science, wheel position, moods and harmonies.

    A ColorInfo input keeps its name and id.
    """
    info = as_color_info(color)
    return EducationalColorInfo(
        hex=info.hex,
        rgb=info.rgb,
        hsl=info.hsl,
        name=info.name,
        id=info.id,
        science=color_science(info),
        wheel_position=wheel_position(info),
        psychology_effects=psychology_effects(info),
        harmonies=harmonies(info),
    )


def create_advanced_color_info(
    r: float,
    g: float,
    b: float,
    base: Optional[ColorLike] = None,
) -> AdvancedColorInfo:
    """
    Build a ColorInfo with LAB, LCH and its contrast grade against white.

    Args:
        r, g, b: Channel values (clamped to 0-255 and rounded)
        base: Optional reference color; when given, delta_e holds the
            CIE76 distance to it

    Raises:
        InvalidColorFormat: If a channel is not a finite number.
    """
    info = as_color_info((r, g, b))
    rgb = info.rgb
    ratio = contrast_ratio(info, _WHITE)
    return AdvancedColorInfo(
        hex=info.hex,
        rgb=rgb,
        hsl=info.hsl,
        name=info.name,
        id=info.id,
        lab=rgb_to_lab(rgb.r, rgb.g, rgb.b),
        lch=rgb_to_lch(rgb.r, rgb.g, rgb.b),
        wcag_level=grade_contrast(ratio),
        contrast_ratio=ratio,
        delta_e=delta_e(info, base) if base is not None else None,
    )
