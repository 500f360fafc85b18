# Copyright (c) 2026 Paletta
# SPDX-License-Identifier: MIT

"""
Color-vision deficiency simulation and palette distinguishability.

The anomaly simulations are deliberately coarse HSL approximations, not
physiological cone models: each variant collapses a hue band toward the
hue it is confused with and desaturates it. Monochromacy replaces every
color with the gray of equal relative luminance.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from paletta.errors import InvalidColorFormat
from paletta.schema.color_types import (
    AccessibilityReport,
    ColorBlindnessResult,
    ColorInfo,
)
from paletta.science.colorspace import (
    ColorLike,
    as_color_info,
    hsl_to_srgb,
    relative_luminance,
    srgb_to_hsl,
    srgb_to_uint8,
)
from paletta.science.difference import delta_e_matrix

logger = logging.getLogger(__name__)

RECOMMENDATIONS = (
    "Increase the lightness difference between colors",
    "Add non-color cues such as shape or size",
    "Combine colors with patterns or textures",
)


@dataclass(frozen=True)
class CVDTransform:
    """
    Hue-band approximation of one anomalous trichromacy.

    A chromatic color whose hue lies in [hue_low, hue_high] has its hue
    moved toward target_hue by pull (1.0 collapses it onto target_hue)
    and its saturation multiplied by saturation_factor.
    """
    name: str
    hue_low: float
    hue_high: float
    target_hue: float
    pull: float = 1.0
    saturation_factor: float = 1.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.hue_low <= self.hue_high <= 360.0:
            raise ValueError(
                f"hue band must satisfy 0 <= low <= high <= 360, "
                f"got [{self.hue_low}, {self.hue_high}]"
            )
        if not 0.0 <= self.pull <= 1.0:
            raise ValueError(f"pull must be 0-1, got {self.pull}")
        if not 0.0 <= self.saturation_factor <= 1.0:
            raise ValueError(
                f"saturation_factor must be 0-1, got {self.saturation_factor}"
            )

    def apply(self, hsl: np.ndarray) -> np.ndarray:
        """
        Transform an (..., 3) HSL array (H degrees, S and L fractions).

        Achromatic entries and hues outside the band pass unchanged.
        """
        out = np.array(hsl, dtype=np.float64, copy=True)
        h, s = out[..., 0], out[..., 1]
        affected = (s > 0.0) & (h >= self.hue_low) & (h <= self.hue_high)
        out[..., 0] = np.where(affected, h + self.pull * (self.target_hue - h), h)
        out[..., 1] = np.where(affected, s * self.saturation_factor, s)
        return out


def _default_transforms() -> tuple[CVDTransform, ...]:
    return (
        CVDTransform("protanomaly", 0.0, 60.0, 60.0, pull=1.0, saturation_factor=0.7),
        CVDTransform("deuteranomaly", 60.0, 180.0, 60.0, pull=1.0, saturation_factor=0.6),
        CVDTransform("tritanomaly", 180.0, 300.0, 180.0, pull=1.0, saturation_factor=0.8),
    )


@dataclass(frozen=True)
class SimulationConfig:
    """Configuration for color-vision simulation and evaluation."""

    # Anomaly variants, in report order
    transforms: tuple[CVDTransform, ...] = field(default_factory=_default_transforms)

    # Pairs closer than this (CIE76) are reported as confusable
    confusion_threshold: float = 3.0

    def transform(self, name: str) -> CVDTransform:
        """Look up a transform by variant name."""
        for t in self.transforms:
            if t.name == name:
                return t
        raise KeyError(f"No transform named {name!r}")


# =============================================================================
# Simulation
# =============================================================================


def _srgb_array(colors: Sequence[ColorInfo]) -> np.ndarray:
    return np.array([c.rgb.to_tuple() for c in colors], dtype=np.float64).reshape(-1, 3) / 255.0


def _rebuild(
    originals: Sequence[ColorInfo],
    channels: np.ndarray,
    variant: str,
) -> tuple[ColorInfo, ...]:
    return tuple(
        ColorInfo.from_rgb(int(r), int(g), int(b), name=f"{c.name} ({variant})")
        for c, (r, g, b) in zip(originals, channels)
    )


def simulate_anomaly(
    colors: Sequence[ColorInfo],
    transform: CVDTransform,
) -> tuple[ColorInfo, ...]:
    """Apply one anomaly transform to a palette."""
    if not colors:
        return ()
    hsl = transform.apply(srgb_to_hsl(_srgb_array(colors)))
    return _rebuild(colors, srgb_to_uint8(hsl_to_srgb(hsl)), transform.name)


def simulate_monochromacy(colors: Sequence[ColorInfo]) -> tuple[ColorInfo, ...]:
    """Replace each color with the gray of the same relative luminance."""
    grays = []
    for c in colors:
        lum = relative_luminance(c.rgb.r, c.rgb.g, c.rgb.b)
        grays.append(np.full(3, lum))
    if not grays:
        return ()
    return _rebuild(colors, srgb_to_uint8(np.array(grays)), "monochromacy")


# =============================================================================
# Evaluation
# =============================================================================


def evaluate_accessibility(
    variants: dict[str, Sequence[ColorInfo]],
    config: Optional[SimulationConfig] = None,
    *,
    positions: Optional[Sequence[int]] = None,
    unparsed: Sequence[int] = (),
) -> AccessibilityReport:
    """
    Report every pair that is confusable under some variant.

    Args:
        variants: Simulated palettes keyed by variant name
        config: Simulation config (uses the confusion threshold)
        positions: Input index of each palette entry, for numbering issues
            when some inputs were dropped (defaults to 0..n-1)
        unparsed: Input indices that could not be parsed; each one is
            reported and its pairs count as PENALTY_DELTA_E apart

    Returns:
        AccessibilityReport; accessible iff no issue was found.
    """
    cfg = config or SimulationConfig()
    issues = [f"color {k + 1} could not be parsed" for k in unparsed]

    for name, palette in variants.items():
        dists = delta_e_matrix(palette)
        n = len(palette)
        index = list(positions) if positions is not None else list(range(n))
        for i in range(n):
            for j in range(i + 1, n):
                d = float(dists[i, j])
                if d < cfg.confusion_threshold:
                    issues.append(
                        f"{name}: color {index[i] + 1} and color {index[j] + 1} "
                        f"are hard to distinguish (ΔE: {d:g})"
                    )

    if issues:
        logger.debug("Palette has %d accessibility issue(s)", len(issues))
        return AccessibilityReport(
            is_accessible=False,
            issues=tuple(issues),
            recommendations=RECOMMENDATIONS,
        )
    return AccessibilityReport(is_accessible=True)


def simulate_color_blindness(
    colors: Sequence[ColorLike],
    config: Optional[SimulationConfig] = None,
) -> ColorBlindnessResult:
    """
    Simulate a palette under each color-vision variant and evaluate it.

    Entries that cannot be parsed are logged, left out of the original and
    simulated palettes, and reported as issues. Issue numbering always
    refers to positions in the input.

    Args:
        colors: Palette (ColorInfo or any accepted color input)
        config: Simulation config (uses defaults if None)

    Returns:
        ColorBlindnessResult with one simulated ColorInfo per parsed input
        per variant, in input order, plus the accessibility report.

    Example:
        >>> result = simulate_color_blindness(["#FF0000", "#FFA500"])
        >>> result.accessibility.is_accessible
        False
    """
    cfg = config or SimulationConfig()
    parsed: list[ColorInfo] = []
    positions: list[int] = []
    unparsed: list[int] = []
    for k, c in enumerate(colors):
        try:
            parsed.append(as_color_info(c))
        except InvalidColorFormat as e:
            logger.warning("Skipping malformed color %d in simulation: %s", k + 1, e)
            unparsed.append(k)
        else:
            positions.append(k)
    original = tuple(parsed)

    variants = {
        "protanomaly": simulate_anomaly(original, cfg.transform("protanomaly")),
        "deuteranomaly": simulate_anomaly(original, cfg.transform("deuteranomaly")),
        "tritanomaly": simulate_anomaly(original, cfg.transform("tritanomaly")),
        "monochromacy": simulate_monochromacy(original),
    }

    return ColorBlindnessResult(
        original=original,
        accessibility=evaluate_accessibility(
            variants, cfg, positions=positions, unparsed=unparsed
        ),
        **variants,
    )
