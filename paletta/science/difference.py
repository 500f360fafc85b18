# Copyright (c) 2026 Paletta
# SPDX-License-Identifier: MIT

"""
Perceptual color difference and WCAG contrast.

ΔE metrics (CIE LAB, 0-100-ish scale):
- delta_e: CIE76, Euclidean distance. Black vs white = 100.
- delta_e_strict: CIE94 (graphic arts). Never larger than CIE76.
- delta_e_cie2000: CIEDE2000.

Reference bands:
- ΔE < 1: imperceptible to the human eye
- ΔE < 2: perceptible only on close inspection
- ΔE < 3.5: perceptible at a glance
- ΔE < 5: colors look distinctly different
- ΔE >= 5: colors look completely different

Error policy: these are aggregate-friendly functions. A malformed color
never raises here; ΔE falls back to PENALTY_DELTA_E and contrast to
MIN_CONTRAST_RATIO, with a warning logged.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from paletta.errors import InvalidColorFormat
from paletta.schema.color_types import (
    ContrastSuggestion,
    WCAGLevel,
    WCAGResult,
    WCAGSuggestions,
)
from paletta.science.colorspace import (
    ColorLike,
    brighten,
    parse_color,
    relative_luminance,
    srgb_uint8_to_lab,
)

logger = logging.getLogger(__name__)

PENALTY_DELTA_E = 100.0
MIN_CONTRAST_RATIO = 1.0
MAX_CONTRAST_RATIO = 21.0


@dataclass(frozen=True)
class ContrastConfig:
    """Configuration for WCAG grading and the suggestion search."""

    # WCAG 2.1 thresholds
    aa_normal: float = 4.5
    aa_large: float = 3.0
    aaa_normal: float = 7.0
    aaa_large: float = 4.5

    # Suggestion search: stop at target, after max_iterations accepted
    # steps, or as soon as a step does not improve the ratio
    target_ratio: float = 4.5
    step: float = 0.3
    max_iterations: int = 20


# =============================================================================
# ΔE Formulas (LAB arrays, broadcasting)
# =============================================================================


def delta_e_cie76_lab(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
) -> NDArray[np.float64]:
    """CIE76: Euclidean distance between LAB arrays of shape (..., 3)."""
    delta = np.asarray(lab1, dtype=np.float64) - np.asarray(lab2, dtype=np.float64)
    return np.sqrt(np.sum(delta ** 2, axis=-1))


def delta_e_cie94_lab(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
    *,
    k_l: float = 1.0,
    k_c: float = 1.0,
    k_h: float = 1.0,
    k_1: float = 0.045,
    k_2: float = 0.015,
) -> NDArray[np.float64]:
    """
    CIE94 color difference.

    Textbook CIE94 weights chroma and hue by the chroma of the reference
    color, which makes it asymmetric. The geometric mean of both chromas is
    used instead so that ΔE(a, b) == ΔE(b, a). With the default k factors
    the weighting functions are >= 1, so the result never exceeds CIE76.

    K factors:
        k_1: 0.045 graphic arts, 0.048 textiles
        k_2: 0.015 graphic arts, 0.014 textiles
        k_l: 1 default, 2 textiles
    """
    lab1 = np.asarray(lab1, dtype=np.float64)
    lab2 = np.asarray(lab2, dtype=np.float64)

    C1 = np.hypot(lab1[..., 1], lab1[..., 2])
    C2 = np.hypot(lab2[..., 1], lab2[..., 2])

    delta_L = lab1[..., 0] - lab2[..., 0]
    delta_C = C1 - C2
    delta_a = lab1[..., 1] - lab2[..., 1]
    delta_b = lab1[..., 2] - lab2[..., 2]
    delta_H_sq = np.clip(delta_a ** 2 + delta_b ** 2 - delta_C ** 2, 0.0, None)

    C_ref = np.sqrt(C1 * C2)
    S_L = 1.0
    S_C = 1.0 + k_1 * C_ref
    S_H = 1.0 + k_2 * C_ref

    return np.sqrt(
        (delta_L / (k_l * S_L)) ** 2
        + (delta_C / (k_c * S_C)) ** 2
        + delta_H_sq / (k_h * S_H) ** 2
    )


def delta_e_cie2000_lab(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
    *,
    k_l: float = 1.0,
    k_c: float = 1.0,
    k_h: float = 1.0,
) -> NDArray[np.float64]:
    """
    CIEDE2000 color difference (Sharma, Wu & Dalal formulation).

    Inputs broadcast against each other, so (N, 1, 3) vs (1, N, 3) yields
    an (N, N) distance matrix.
    """
    lab1 = np.asarray(lab1, dtype=np.float64)
    lab2 = np.asarray(lab2, dtype=np.float64)
    L1, a1, b1 = lab1[..., 0], lab1[..., 1], lab1[..., 2]
    L2, a2, b2 = lab2[..., 0], lab2[..., 1], lab2[..., 2]

    avg_L = (L1 + L2) / 2.0
    avg_C = (np.hypot(a1, b1) + np.hypot(a2, b2)) / 2.0

    G = 0.5 * (1.0 - np.sqrt(avg_C ** 7 / (avg_C ** 7 + 25.0 ** 7)))
    a1p = (1.0 + G) * a1
    a2p = (1.0 + G) * a2

    C1p = np.hypot(a1p, b1)
    C2p = np.hypot(a2p, b2)
    avg_Cp = (C1p + C2p) / 2.0

    h1p = np.degrees(np.arctan2(b1, a1p)) % 360.0
    h2p = np.degrees(np.arctan2(b2, a2p)) % 360.0

    achromatic = (C1p * C2p) == 0.0

    dhp = h2p - h1p
    dhp = np.where(dhp > 180.0, dhp - 360.0, dhp)
    dhp = np.where(dhp < -180.0, dhp + 360.0, dhp)
    dhp = np.where(achromatic, 0.0, dhp)

    delta_Lp = L2 - L1
    delta_Cp = C2p - C1p
    delta_Hp = 2.0 * np.sqrt(C1p * C2p) * np.sin(np.radians(dhp / 2.0))

    h_sum = h1p + h2p
    avg_hp = np.where(
        np.abs(h1p - h2p) <= 180.0,
        h_sum / 2.0,
        np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
    )
    avg_hp = np.where(achromatic, h_sum, avg_hp)

    T = (
        1.0
        - 0.17 * np.cos(np.radians(avg_hp - 30.0))
        + 0.24 * np.cos(np.radians(2.0 * avg_hp))
        + 0.32 * np.cos(np.radians(3.0 * avg_hp + 6.0))
        - 0.20 * np.cos(np.radians(4.0 * avg_hp - 63.0))
    )

    delta_ro = 30.0 * np.exp(-(((avg_hp - 275.0) / 25.0) ** 2))
    R_C = 2.0 * np.sqrt(avg_Cp ** 7 / (avg_Cp ** 7 + 25.0 ** 7))
    S_L = 1.0 + (0.015 * (avg_L - 50.0) ** 2) / np.sqrt(20.0 + (avg_L - 50.0) ** 2)
    S_C = 1.0 + 0.045 * avg_Cp
    S_H = 1.0 + 0.015 * avg_Cp * T
    R_T = -np.sin(np.radians(2.0 * delta_ro)) * R_C

    term_L = delta_Lp / (k_l * S_L)
    term_C = delta_Cp / (k_c * S_C)
    term_H = delta_Hp / (k_h * S_H)

    return np.sqrt(np.clip(
        term_L ** 2 + term_C ** 2 + term_H ** 2 + R_T * term_C * term_H,
        0.0,
        None,
    ))


DELTA_E_METRICS: dict[str, Callable[..., NDArray[np.float64]]] = {
    "cie76": delta_e_cie76_lab,
    "cie94": delta_e_cie94_lab,
    "cie2000": delta_e_cie2000_lab,
}


# =============================================================================
# ΔE Public API
# =============================================================================


def _lab_or_none(color: ColorLike) -> Optional[NDArray[np.float64]]:
    """LAB vector for a color, or None (logged) if it is malformed."""
    try:
        rgb = parse_color(color)
    except InvalidColorFormat as exc:
        logger.warning("Cannot compare malformed color %r: %s", color, exc)
        return None
    return srgb_uint8_to_lab(np.array(rgb.to_tuple()))


def _metric(name: str) -> Callable[..., NDArray[np.float64]]:
    try:
        return DELTA_E_METRICS[name]
    except KeyError:
        raise ValueError(
            f"Unknown ΔE metric {name!r}, expected one of {sorted(DELTA_E_METRICS)}"
        ) from None


def _delta_e(color1: ColorLike, color2: ColorLike, metric: str) -> float:
    formula = _metric(metric)
    lab1 = _lab_or_none(color1)
    lab2 = _lab_or_none(color2)
    if lab1 is None or lab2 is None:
        return PENALTY_DELTA_E

    value = float(formula(lab1, lab2))
    if not math.isfinite(value):
        logger.warning("ΔE (%s) of %r and %r is not finite", metric, color1, color2)
        return PENALTY_DELTA_E
    return float(np.round(value, 2))


def delta_e(color1: ColorLike, color2: ColorLike) -> float:
    """
    Perceptual color difference (CIE76), rounded to 2 decimals.

    0 means identical; pure black vs pure white is 100. Malformed input
    returns PENALTY_DELTA_E (100) instead of raising.

    Example:
        >>> delta_e("#FF0000", "#FF0000")
        0.0
    """
    return _delta_e(color1, color2, "cie76")


def delta_e_strict(color1: ColorLike, color2: ColorLike) -> float:
    """
    Stricter industrial color difference (CIE94), rounded to 2 decimals.

    Always <= delta_e() for the same pair. Malformed input returns
    PENALTY_DELTA_E.
    """
    return _delta_e(color1, color2, "cie94")


def delta_e_cie2000(color1: ColorLike, color2: ColorLike) -> float:
    """CIEDE2000 color difference, rounded to 2 decimals."""
    return _delta_e(color1, color2, "cie2000")


def delta_e_matrix(
    colors: Sequence[ColorLike],
    metric: str = "cie76",
) -> NDArray[np.float64]:
    """
    Vectorized pairwise ΔE for a palette.

    Args:
        colors: Palette of N colors (any accepted color input)
        metric: "cie76", "cie94" or "cie2000"

    Returns:
        Symmetric (N, N) array rounded to 2 decimals. Every entry that
        involves a malformed color is PENALTY_DELTA_E.
    """
    formula = _metric(metric)
    labs = [_lab_or_none(c) for c in colors]
    n = len(labs)
    if n == 0:
        return np.zeros((0, 0), dtype=np.float64)

    valid = np.array([lab is not None for lab in labs], dtype=np.bool_)
    lab_arr = np.array([
        lab if lab is not None else np.zeros(3) for lab in labs
    ], dtype=np.float64)

    dists = np.round(formula(lab_arr[:, np.newaxis, :], lab_arr[np.newaxis, :, :]), 2)
    dists[~(valid[:, np.newaxis] & valid[np.newaxis, :])] = PENALTY_DELTA_E
    return dists


def describe_delta_e(value: float) -> str:
    """Human-readable band for a ΔE value."""
    if value <= 0.0:
        return "identical"
    if value < 1.0:
        return "imperceptible to the human eye"
    if value < 2.0:
        return "perceptible only on close inspection"
    if value < 3.5:
        return "perceptible at a glance"
    if value < 5.0:
        return "colors look distinctly different"
    return "colors look completely different"


# =============================================================================
# WCAG Contrast
# =============================================================================


def _luminance_or_none(color: ColorLike) -> Optional[float]:
    try:
        rgb = parse_color(color)
    except InvalidColorFormat as exc:
        logger.warning("Cannot compute contrast for malformed color %r: %s", color, exc)
        return None
    return relative_luminance(rgb.r, rgb.g, rgb.b)


def _ratio(lum1: float, lum2: float) -> float:
    """WCAG ratio (L1 + 0.05) / (L2 + 0.05) with L1 the lighter one."""
    lighter, darker = max(lum1, lum2), min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(foreground: ColorLike, background: ColorLike) -> float:
    """
    WCAG contrast ratio in [1, 21], rounded to 2 decimals.

    Symmetric in its arguments. Malformed input returns MIN_CONTRAST_RATIO.

    Example:
        >>> contrast_ratio("#000000", "#FFFFFF")
        21.0
    """
    lum1 = _luminance_or_none(foreground)
    lum2 = _luminance_or_none(background)
    if lum1 is None or lum2 is None:
        return MIN_CONTRAST_RATIO
    return min(max(round(_ratio(lum1, lum2), 2), MIN_CONTRAST_RATIO), MAX_CONTRAST_RATIO)


def grade_contrast(ratio: float, config: Optional[ContrastConfig] = None) -> str:
    """Grade a ratio for normal text: "AAA", "AA" or "FAIL"."""
    cfg = config or ContrastConfig()
    if ratio >= cfg.aaa_normal:
        return "AAA"
    if ratio >= cfg.aa_normal:
        return "AA"
    return "FAIL"


def suggest_contrast_color(
    foreground: ColorLike,
    background: ColorLike,
    direction: str = "darker",
    config: Optional[ContrastConfig] = None,
) -> ContrastSuggestion:
    """
    Brighten or darken a foreground until it reaches the target contrast.

    Each iteration moves LAB lightness by config.step brighten units. The
    search stops when the target ratio is reached, when max_iterations
    steps have been taken, or when a step fails to improve the ratio (e.g.
    the color is already clipped at white or black). Termination is
    guaranteed for every input, including foreground == background.

    Args:
        foreground: Color to adjust
        background: Fixed background
        direction: "lighter" or "darker"
        config: Thresholds and search bounds (defaults if None)

    Returns:
        ContrastSuggestion with the best color found and the number of
        accepted steps.

    Raises:
        InvalidColorFormat: If either color is malformed.
        ValueError: If direction is not "lighter" or "darker".
    """
    if direction not in ("lighter", "darker"):
        raise ValueError(f"direction must be 'lighter' or 'darker', got {direction!r}")
    cfg = config or ContrastConfig()

    fg = parse_color(foreground)
    bg = parse_color(background)
    bg_lum = relative_luminance(bg.r, bg.g, bg.b)
    step = cfg.step if direction == "lighter" else -cfg.step

    current = fg.hex
    ratio = _ratio(relative_luminance(fg.r, fg.g, fg.b), bg_lum)
    iterations = 0

    while ratio < cfg.target_ratio and iterations < cfg.max_iterations:
        candidate = brighten(current, step)
        candidate_rgb = parse_color(candidate)
        candidate_ratio = _ratio(
            relative_luminance(candidate_rgb.r, candidate_rgb.g, candidate_rgb.b),
            bg_lum,
        )
        if candidate_ratio <= ratio:
            logger.debug(
                "%s search for %s on %s stopped without improvement after %d steps",
                direction, fg.hex, bg.hex, iterations,
            )
            break
        current, ratio = candidate, candidate_ratio
        iterations += 1

    return ContrastSuggestion(hex=current, contrast_ratio=ratio, iterations=iterations)


def _display(color: ColorLike) -> str:
    """Canonical hex for valid input, str() for anything else."""
    try:
        return parse_color(color).hex
    except InvalidColorFormat:
        return str(color)


def _empty_wcag_result(foreground: str, background: str) -> WCAGResult:
    """Fail-safe result for inputs that cannot be evaluated."""
    return WCAGResult(
        foreground=foreground,
        background=background,
        contrast_ratio=MIN_CONTRAST_RATIO,
        aa_level=WCAGLevel(normal=False, large=False),
        aaa_level=WCAGLevel(normal=False, large=False),
        suggestions=WCAGSuggestions(light_version=foreground, dark_version=foreground),
    )


def check_wcag_compliance(
    foreground: ColorLike,
    background: ColorLike,
    config: Optional[ContrastConfig] = None,
) -> WCAGResult:
    """
    WCAG 2.1 contrast check with improvement suggestions.

    - AA: normal text >= 4.5, large text >= 3.0
    - AAA: normal text >= 7.0, large text >= 4.5

    Levels are graded on the ratio rounded to 2 decimals. Suggestions are
    the results of the lighter and darker searches of
    suggest_contrast_color(); either may equal the foreground when that
    direction cannot improve contrast.

    Malformed input yields ratio 1.0, all levels failing and both
    suggestions equal to the foreground.

    Example:
        >>> check_wcag_compliance("#000000", "#FFFFFF").aaa_level.normal
        True
    """
    cfg = config or ContrastConfig()
    fg_display = _display(foreground)
    bg_display = _display(background)

    lum_fg = _luminance_or_none(foreground)
    lum_bg = _luminance_or_none(background)
    if lum_fg is None or lum_bg is None:
        return _empty_wcag_result(fg_display, bg_display)

    ratio = contrast_ratio(foreground, background)
    light = suggest_contrast_color(foreground, background, "lighter", cfg)
    dark = suggest_contrast_color(foreground, background, "darker", cfg)

    return WCAGResult(
        foreground=fg_display,
        background=bg_display,
        contrast_ratio=ratio,
        aa_level=WCAGLevel(normal=ratio >= cfg.aa_normal, large=ratio >= cfg.aa_large),
        aaa_level=WCAGLevel(normal=ratio >= cfg.aaa_normal, large=ratio >= cfg.aaa_large),
        suggestions=WCAGSuggestions(light_version=light.hex, dark_version=dark.hex),
    )


def evaluate_palette_wcag(
    colors: Sequence[ColorLike],
    config: Optional[ContrastConfig] = None,
) -> tuple[WCAGResult, ...]:
    """WCAG results for every unordered pair (i < j) of a palette."""
    return tuple(
        check_wcag_compliance(colors[i], colors[j], config)
        for i in range(len(colors))
        for j in range(i + 1, len(colors))
    )
