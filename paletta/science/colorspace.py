# Copyright (c) 2026 Paletta
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
    sRGB → Linear RGB → XYZ (D65) → CIE LAB → CIE LCH
    sRGB ↔ HSL
    Linear RGB → XYZ → xy chromaticity

References:
- sRGB: IEC 61966-2-1 piecewise transfer function
- CIE LAB: CIE 15:2004, D65 reference white

The array layer works on float64 arrays of shape (..., 3) with sRGB in
[0, 1]. The scalar API on top of it takes 0-255 channels and hex strings,
validates them, and returns the immutable value types from paletta.schema.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from numbers import Real
from typing import Union

import numpy as np
from numpy.typing import NDArray

from paletta.errors import InvalidColorFormat
from paletta.schema.color_types import (
    Chromaticity,
    ColorInfo,
    HSLColor,
    LABColor,
    LCHColor,
    RGBColor,
)

ColorLike = Union[ColorInfo, RGBColor, str, Sequence]


# =============================================================================
# Constants
# =============================================================================

# Linear sRGB → XYZ, D65 (IEC 61966-2-1)
_SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_XYZ_TO_SRGB = np.linalg.inv(_SRGB_TO_XYZ)

# D65 reference white (2° observer), Y normalized to 1
D65_WHITE = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)

# CIE constants for the LAB companding function
_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0

# WCAG relative luminance weights
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

# LAB lightness change per brighten/darken unit
BRIGHTEN_STEP = 18.0

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Decode sRGB values [0,1] to linear light.

    - For values <= 0.04045: value / 12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.0) + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Encode linear light to sRGB values [0,1].

    Out-of-gamut input is clipped to [0, 1].
    """
    linear = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    return np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(linear, 1.0 / 2.4) - 0.055,
    )


# =============================================================================
# Linear RGB ↔ XYZ ↔ LAB ↔ LCH
# =============================================================================


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Linear RGB (..., 3) to CIE XYZ (..., 3), Y of white = 1."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _SRGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """CIE XYZ (..., 3) to linear RGB (..., 3). May fall outside [0, 1]."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_SRGB)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIE LAB relative to D65.

    Args:
        xyz: Array of shape (..., 3)

    Returns:
        Array of shape (..., 3) with (L, a, b); L in [0, 100] for in-gamut input
    """
    ratio = np.asarray(xyz, dtype=np.float64) / D65_WHITE
    f = np.where(
        ratio > _LAB_EPSILON,
        np.cbrt(ratio),
        (_LAB_KAPPA * ratio + 16.0) / 116.0,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE LAB (D65) to CIE XYZ. Inverse of xyz_to_lab."""
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (L + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    fx3 = fx ** 3
    fz3 = fz ** 3
    xr = np.where(fx3 > _LAB_EPSILON, fx3, (116.0 * fx - 16.0) / _LAB_KAPPA)
    yr = np.where(L > _LAB_KAPPA * _LAB_EPSILON, fy ** 3, L / _LAB_KAPPA)
    zr = np.where(fz3 > _LAB_EPSILON, fz3, (116.0 * fz - 16.0) / _LAB_KAPPA)

    return np.stack([xr, yr, zr], axis=-1) * D65_WHITE


def lab_to_lch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert LAB to LCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with (L, C, H); H in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.hypot(a, b)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def lch_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert LCH (H in degrees) to LAB."""
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


# =============================================================================
# Convenience: sRGB ↔ LAB (full chain)
# =============================================================================


def srgb_to_lab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to CIE LAB.

    Full chain: sRGB → Linear RGB → XYZ → LAB
    """
    return xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear(srgb)))


def lab_to_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE LAB to sRGB [0,1].

    Full chain: LAB → XYZ → Linear RGB → sRGB
    Values are clipped to [0, 1] (gamut mapped).
    """
    return linear_to_srgb(xyz_to_linear_rgb(lab_to_xyz(lab)))


def srgb_uint8_to_lab(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Convert 0-255 sRGB values of shape (..., 3) to CIE LAB."""
    return srgb_to_lab(np.asarray(pixels, dtype=np.float64) / 255.0)


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def srgb_to_hsl(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HSL.

    Returns:
        Array of shape (..., 3) with (H, S, L): H in degrees [0, 360),
        S and L as fractions [0, 1]. Achromatic colors get H = 0, S = 0.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    r, g, b = srgb[..., 0], srgb[..., 1], srgb[..., 2]

    c_max = np.max(srgb, axis=-1)
    c_min = np.min(srgb, axis=-1)
    delta = c_max - c_min
    L = (c_max + c_min) / 2.0

    chromatic = delta > 0.0
    # Substitute 1 where achromatic so no division produces NaN
    safe_delta = np.where(chromatic, delta, 1.0)
    s_denom = 1.0 - np.abs(2.0 * L - 1.0)
    S = np.where(chromatic, delta / np.where(s_denom > 0.0, s_denom, 1.0), 0.0)

    h = np.where(
        c_max == r,
        ((g - b) / safe_delta) % 6.0,
        np.where(
            c_max == g,
            (b - r) / safe_delta + 2.0,
            (r - g) / safe_delta + 4.0,
        ),
    )
    H = np.where(chromatic, (60.0 * h) % 360.0, 0.0)

    return np.stack([H, np.clip(S, 0.0, 1.0), L], axis=-1)


def hsl_to_srgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSL (H in degrees, S/L fractions) to sRGB [0,1].

    Hue wraps modulo 360; S and L are clipped to [0, 1].
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    H = hsl[..., 0] % 360.0
    S = np.clip(hsl[..., 1], 0.0, 1.0)
    L = np.clip(hsl[..., 2], 0.0, 1.0)

    amplitude = S * np.minimum(L, 1.0 - L)

    def channel(n: float) -> NDArray[np.float64]:
        k = (n + H / 30.0) % 12.0
        return L - amplitude * np.clip(np.minimum(k - 3.0, 9.0 - k), -1.0, 1.0)

    return np.clip(np.stack([channel(0.0), channel(8.0), channel(4.0)], axis=-1), 0.0, 1.0)


# =============================================================================
# Input Validation
# =============================================================================


def _round2(value: float) -> float:
    """Round to 2 decimals, normalizing -0.0 to 0.0."""
    return round(float(value), 2) + 0.0


def srgb_to_uint8(srgb: NDArray[np.float64]) -> NDArray[np.int64]:
    """sRGB [0,1] to 0-255 ints, rounding half up."""
    return np.floor(np.clip(srgb, 0.0, 1.0) * 255.0 + 0.5).astype(np.int64)


def _channels(r: float, g: float, b: float) -> NDArray[np.float64]:
    """
    Validate and clamp RGB channels.

    Non-numeric or non-finite channels raise InvalidColorFormat. Finite
    values outside [0, 255] are clamped, since derived values may overflow
    slightly through floating-point rounding.

    Returns:
        Array of shape (3,) with channel values in [0, 255]
    """
    for value in (r, g, b):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidColorFormat((r, g, b), f"channel {value!r} is not a number")
        if not math.isfinite(value):
            raise InvalidColorFormat((r, g, b), f"channel {value!r} is not finite")
    return np.clip(np.array([r, g, b], dtype=np.float64), 0.0, 255.0)


def normalize_hex(hex_color: str) -> str:
    """
    Validate a hex color and return it in canonical "#RRGGBB" form.

    Accepts "#RGB", "RGB", "#RRGGBB" and "RRGGBB", case-insensitive.
    Shorthand is expanded by doubling each nibble ("#F80" → "#FF8800").

    Raises:
        InvalidColorFormat: For anything else.
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(hex_color, "hex color must be a string")
    match = _HEX_PATTERN.fullmatch(hex_color)
    if match is None:
        raise InvalidColorFormat(hex_color, "expected #RGB or #RRGGBB")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return "#" + digits.upper()


def parse_color(color: ColorLike) -> RGBColor:
    """
    Coerce any accepted color input to an RGBColor.

    Accepts ColorInfo (and subclasses), RGBColor, hex strings, and
    (r, g, b) sequences of numbers.

    Raises:
        InvalidColorFormat: If the input cannot be interpreted as a color.
    """
    if isinstance(color, ColorInfo):
        return color.rgb
    if isinstance(color, RGBColor):
        return color
    if isinstance(color, str):
        return hex_to_rgb(color)
    if isinstance(color, Sequence) and len(color) == 3:
        return hex_to_rgb(rgb_to_hex(*color))
    raise InvalidColorFormat(color, "unsupported color type")


def as_color_info(color: ColorLike) -> ColorInfo:
    """Return ColorInfo input unchanged; build a fresh ColorInfo otherwise."""
    if isinstance(color, ColorInfo):
        return color
    rgb = parse_color(color)
    return ColorInfo.from_rgb(rgb.r, rgb.g, rgb.b)


# =============================================================================
# Scalar API
# =============================================================================


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert RGB channels to an uppercase hex string.

    Channels are clamped to [0, 255] and rounded to integers first.

    Example:
        >>> rgb_to_hex(255, 0, 0)
        '#FF0000'
    """
    ri, gi, bi = (int(v) for v in srgb_to_uint8(_channels(r, g, b) / 255.0))
    return f"#{ri:02X}{gi:02X}{bi:02X}"


def hex_to_rgb(hex_color: str) -> RGBColor:
    """
    Parse a 3- or 6-digit hex string (leading '#' optional) to RGBColor.

    Raises:
        InvalidColorFormat: If the string is malformed.
    """
    digits = normalize_hex(hex_color)
    return RGBColor(
        r=int(digits[1:3], 16),
        g=int(digits[3:5], 16),
        b=int(digits[5:7], 16),
    )


def rgb_to_hsl(r: float, g: float, b: float) -> HSLColor:
    """
    Convert RGB channels to display HSL.

    Hue is rounded to integer degrees, saturation and lightness to integer
    percent. Achromatic colors report hue 0.
    """
    H, S, L = srgb_to_hsl(_channels(r, g, b) / 255.0)
    hue = int(round(float(H))) % 360
    return HSLColor(h=hue, s=int(round(float(S) * 100)), l=int(round(float(L) * 100)))


def hsl_to_rgb(h: float, s: float, l: float) -> RGBColor:
    """
    Convert HSL to RGBColor.

    Args:
        h: Hue in degrees (wraps modulo 360)
        s: Saturation as a fraction [0, 1]
        l: Lightness as a fraction [0, 1]
    """
    r, g, b = (int(v) for v in srgb_to_uint8(hsl_to_srgb(np.array([h, s, l], dtype=np.float64))))
    return RGBColor(r=r, g=g, b=b)


def rgb_to_lab(r: float, g: float, b: float) -> LABColor:
    """
    Convert RGB channels to CIE LAB (D65), rounded to 2 decimals.

    Example:
        >>> rgb_to_lab(255, 255, 255)
        LABColor(l=100.0, a=0.0, b=0.0)
    """
    L, a, b_ = srgb_to_lab(_channels(r, g, b) / 255.0)
    return LABColor(l=min(max(_round2(L), 0.0), 100.0), a=_round2(a), b=_round2(b_))


def lab_to_rgb(lab: Union[LABColor, Sequence[float]]) -> RGBColor:
    """
    Convert CIE LAB to RGBColor, clipping out-of-gamut values.

    Args:
        lab: A LABColor or an (L, a, b) sequence
    """
    if isinstance(lab, LABColor):
        values = (lab.l, lab.a, lab.b)
    else:
        values = tuple(lab)
    if len(values) != 3 or not all(
        isinstance(v, Real) and not isinstance(v, bool) and math.isfinite(v) for v in values
    ):
        raise InvalidColorFormat(lab, "expected finite (L, a, b)")
    r, g, b = (int(v) for v in srgb_to_uint8(lab_to_srgb(np.array(values, dtype=np.float64))))
    return RGBColor(r=r, g=g, b=b)


def rgb_to_lch(r: float, g: float, b: float) -> LCHColor:
    """
    Convert RGB channels to CIE LCH, rounded to 2 decimals.

    Colors whose rounded chroma is 0 report hue 0.
    """
    L, C, H = lab_to_lch(srgb_to_lab(_channels(r, g, b) / 255.0))
    chroma = _round2(C)
    hue = _round2(H) % 360.0 if chroma > 0.0 else 0.0
    return LCHColor(l=min(max(_round2(L), 0.0), 100.0), c=chroma, h=hue)


def rgb_to_xy_chromaticity(r: float, g: float, b: float) -> Chromaticity:
    """
    Convert RGB channels to CIE 1931 xy chromaticity, rounded to 2 decimals.

    Black has no chromaticity and reports (0, 0).
    """
    X, Y, Z = linear_rgb_to_xyz(srgb_to_linear(_channels(r, g, b) / 255.0))
    total = X + Y + Z
    if total <= 0.0:
        return Chromaticity(x=0.0, y=0.0)
    return Chromaticity(x=_round2(X / total), y=_round2(Y / total))


def relative_luminance(r: float, g: float, b: float) -> float:
    """WCAG relative luminance in [0, 1] (unrounded)."""
    linear = srgb_to_linear(_channels(r, g, b) / 255.0)
    return float(np.clip(np.dot(linear, LUMINANCE_WEIGHTS), 0.0, 1.0))


def brighten(hex_color: str, amount: float = 1.0) -> str:
    """
    Raise LAB lightness by BRIGHTEN_STEP per unit of amount.

    The result is gamut-clipped and re-encoded as hex. Negative amounts
    darken.
    """
    rgb = hex_to_rgb(hex_color)
    lab = srgb_uint8_to_lab(np.array(rgb.to_tuple()))
    lab[0] += BRIGHTEN_STEP * amount
    r, g, b = (int(v) for v in srgb_to_uint8(lab_to_srgb(lab)))
    return f"#{r:02X}{g:02X}{b:02X}"


def darken(hex_color: str, amount: float = 1.0) -> str:
    """Lower LAB lightness by BRIGHTEN_STEP per unit of amount."""
    return brighten(hex_color, -amount)
