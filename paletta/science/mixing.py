# Copyright (c) 2026 Paletta
# SPDX-License-Identifier: MIT

"""
Color blending.

Blend space: linear-light sRGB. Channels are gamma-decoded, interpolated
and re-encoded, then quantized to 8 bits (red + blue → #BC00BC, where a
plain sRGB average gives #800080).

N-way blends reduce sequentially: color 1 and 2 at weight 1/2, that result
with color 3 at weight 1/3, and so on, quantizing after every step. The
recorded ratio of an N-way MixedColor is uniform (1/N each) for display,
not the exact weighting.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Optional, Union

import numpy as np

from paletta.errors import InsufficientColors
from paletta.schema.color_types import (
    ColorInfo,
    EducationalMixResult,
    MixedColor,
    MixFrame,
    MixingTheory,
    RGBColor,
)
from paletta.science.colorspace import (
    ColorLike,
    as_color_info,
    linear_to_srgb,
    parse_color,
    srgb_to_linear,
    srgb_to_uint8,
)

MAX_JITTER = 0.1
MULTI_MIX_PREFIX = "Mixed color: "

# Mixes of up to this many colors are explained as light, larger ones as paint
ADDITIVE_MAX_COLORS = 3

_ADDITIVE_THEORY = (
    "Additive color mixing",
    "Combining the primaries of light (red, green and blue) makes new colors. "
    "Screens and displays work this way.",
    (
        "Red + Green = Yellow",
        "Green + Blue = Cyan",
        "Blue + Red = Magenta",
        "Red + Green + Blue = White",
    ),
)
_SUBTRACTIVE_THEORY = (
    "Subtractive color mixing",
    "Like paints and inks, colors get darker the more they are mixed. Each "
    "surface absorbs part of the light and reflects the rest.",
    (
        "Cyan + Magenta = Blue-violet",
        "Magenta + Yellow = Red",
        "Yellow + Cyan = Green",
        "Cyan + Magenta + Yellow = Black",
    ),
)
_APPLICATIONS = {
    "additive": (
        "TV and monitor screens",
        "Smartphone displays",
        "LED lighting",
        "Stage lighting",
    ),
    "subtractive": (
        "Paints and watercolors",
        "CMYK printing",
        "Dyes and pigments",
        "Cosmetics",
    ),
}


# =============================================================================
# Blending Core
# =============================================================================


def blend_rgb(color1: RGBColor, color2: RGBColor, weight: float) -> RGBColor:
    """
    Interpolate two colors in linear light.

    Args:
        color1: Color at weight 0
        color2: Color at weight 1
        weight: Position between them [0, 1]
    """
    lin1 = srgb_to_linear(np.array(color1.to_tuple(), dtype=np.float64) / 255.0)
    lin2 = srgb_to_linear(np.array(color2.to_tuple(), dtype=np.float64) / 255.0)
    mixed = lin1 * (1.0 - weight) + lin2 * weight
    r, g, b = (int(v) for v in srgb_to_uint8(linear_to_srgb(mixed)))
    return RGBColor(r=r, g=g, b=b)


def cumulative_mixes(colors: Sequence[RGBColor]) -> list[RGBColor]:
    """
    Running results of the sequential N-way reduction.

    Entry k is the blend of colors[0..k]; the last entry is the final mix.
    """
    mixes = [colors[0]]
    for i in range(1, len(colors)):
        mixes.append(blend_rgb(mixes[-1], colors[i], 1.0 / (i + 1)))
    return mixes


def _validate_ratio(ratio: float) -> float:
    if isinstance(ratio, bool) or not isinstance(ratio, Real) or not math.isfinite(ratio):
        raise ValueError(f"ratio must be a finite number, got {ratio!r}")
    if not 0.0 <= ratio <= 1.0:
        raise ValueError(f"ratio must be 0-1, got {ratio}")
    return float(ratio)


def _mixed_color(
    rgb: RGBColor,
    parents: Sequence[ColorInfo],
    ratio: tuple[float, ...],
) -> MixedColor:
    info = ColorInfo.from_rgb(rgb.r, rgb.g, rgb.b)
    name = " × ".join(p.name for p in parents)
    if len(parents) > 2:
        name = MULTI_MIX_PREFIX + name
    return MixedColor(
        hex=info.hex,
        rgb=info.rgb,
        hsl=info.hsl,
        name=name,
        parent_colors=tuple(p.id for p in parents),
        ratio=ratio,
    )


# =============================================================================
# Public API
# =============================================================================


def mix(color1: ColorLike, color2: ColorLike, ratio: float = 0.5) -> MixedColor:
    """
    Blend two colors.

    Args:
        color1: First color (returned unchanged at ratio 0)
        color2: Second color (returned unchanged at ratio 1)
        ratio: Weight of color2 [0, 1]

    Returns:
        MixedColor named "<name1> × <name2>" with parent ids of both inputs
        and ratio (1 - ratio, ratio).

    Example:
        >>> red, blue = ColorInfo.from_hex("#FF0000"), ColorInfo.from_hex("#0000FF")
        >>> mix(red, blue).ratio
        (0.5, 0.5)
    """
    weight = _validate_ratio(ratio)
    a = as_color_info(color1)
    b = as_color_info(color2)
    rgb = blend_rgb(a.rgb, b.rgb, weight)
    return _mixed_color(rgb, (a, b), (1.0 - weight, weight))


def mix_many(colors: Sequence[ColorLike]) -> MixedColor:
    """
    Blend two or more colors by sequential pairwise reduction.

    Two colors give the same result as mix(). Three or more are named
    "Mixed color: <name1> × <name2> × ..." with a uniform ratio.

    Raises:
        InsufficientColors: If fewer than 2 colors are given.
    """
    infos = [as_color_info(c) for c in colors]
    if len(infos) < 2:
        raise InsufficientColors(len(infos))

    final = cumulative_mixes([c.rgb for c in infos])[-1]
    n = len(infos)
    return _mixed_color(final, infos, tuple(1.0 / n for _ in infos))


@dataclass(frozen=True)
class MixSequence:
    """
    Lazy, restartable sequence of frames for an animated mix.

    Iterating yields steps + 1 MixFrame objects from progress 0 to 1. Every
    iteration re-seeds the random source, so a seeded sequence replays the
    same frames. The first and last frames are never perturbed and the last
    one is always the exact mix_many() result.

    Attributes:
        colors: Colors in mixing order (at least 2)
        steps: Number of intervals between frames (>= 1)
        jitter: Max perturbation of interior frames as a fraction of one
            step (0 to MAX_JITTER)
        seed: Seed for the perturbation; None draws fresh entropy
    """
    colors: tuple[RGBColor, ...]
    steps: int
    jitter: float = 0.0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate sequence parameters."""
        if len(self.colors) < 2:
            raise InsufficientColors(len(self.colors))
        if isinstance(self.steps, bool) or not isinstance(self.steps, int) or self.steps < 1:
            raise ValueError(f"steps must be a positive integer, got {self.steps!r}")
        if not 0.0 <= self.jitter <= MAX_JITTER:
            raise ValueError(f"jitter must be 0-{MAX_JITTER}, got {self.jitter}")

    def __len__(self) -> int:
        return self.steps + 1

    def __iter__(self) -> Iterator[MixFrame]:
        rng = np.random.default_rng(self.seed)
        mixes = cumulative_mixes(self.colors)
        step_size = 1.0 / self.steps

        for i in range(self.steps + 1):
            if i == 0:
                progress = 0.0
            elif i == self.steps:
                progress = 1.0
            else:
                progress = i * step_size
                if self.jitter > 0.0:
                    offset = rng.uniform(-self.jitter, self.jitter) * step_size
                    progress = min(max(progress + offset, 0.0), 1.0)
            yield MixFrame(hex=self._color_at(progress, mixes).hex, progress=progress)

    def _color_at(self, progress: float, mixes: list[RGBColor]) -> RGBColor:
        """
        Color at a progress value.

        Progress is split into len(colors) - 1 equal stages. Stage k starts
        at the mix of colors[0..k] and moves toward colors[k + 1] until it
        reaches the mix of colors[0..k + 1].
        """
        if progress >= 1.0:
            return mixes[-1]
        stages = len(self.colors) - 1
        scaled = progress * stages
        k = min(int(scaled), stages - 1)
        t = scaled - k
        return blend_rgb(mixes[k], self.colors[k + 1], t / (k + 2))

    def frames(self) -> tuple[MixFrame, ...]:
        """Materialize one pass over the sequence."""
        return tuple(self)


def generate_mix_sequence(
    colors: Sequence[ColorLike],
    steps: int,
    *,
    jitter: float = 0.0,
    seed: Optional[int] = None,
) -> MixSequence:
    """
    Build the frame sequence of a gradual mix for animated display.

    Args:
        colors: Two or more colors, in mixing order
        steps: Number of intervals; the sequence has steps + 1 frames
        jitter: Hand-mixed wobble for interior frames, as a fraction of
            one step (0 disables, at most MAX_JITTER)
        seed: Seed for reproducible jitter

    Raises:
        InsufficientColors: If fewer than 2 colors are given.
        InvalidColorFormat: If a color cannot be parsed.
    """
    return MixSequence(
        colors=tuple(parse_color(c) for c in colors),
        steps=steps,
        jitter=jitter,
        seed=seed,
    )


def random_color(rng: Union[np.random.Generator, int, None] = None) -> ColorInfo:
    """
    A uniformly random ColorInfo.

    Args:
        rng: Generator or seed for reproducible output (None for random)
    """
    generator = np.random.default_rng(rng)
    r, g, b = (int(v) for v in generator.integers(0, 256, size=3))
    return ColorInfo.from_rgb(r, g, b)


# =============================================================================
# Mixing Theory
# =============================================================================


def mixing_type(count: int) -> str:
    """Mixing principle for a mix of count colors: additive up to ADDITIVE_MAX_COLORS."""
    return "additive" if count <= ADDITIVE_MAX_COLORS else "subtractive"


def mixing_theory(parents: Sequence[ColorLike], result: ColorLike) -> MixingTheory:
    """
    Principle behind a mix, with the mix itself as the worked example.

    Example:
        >>> red, blue = ColorInfo.from_hex("#FF0000"), ColorInfo.from_hex("#0000FF")
        >>> mixing_theory([red, blue], mix(red, blue)).explanation
        'Red + Blue = Red × Blue'
    """
    infos = [as_color_info(c) for c in parents]
    if len(infos) < 2:
        raise InsufficientColors(len(infos))
    outcome = as_color_info(result)

    if mixing_type(len(infos)) == "additive":
        title, description, principles = _ADDITIVE_THEORY
    else:
        title, description, principles = _SUBTRACTIVE_THEORY
    return MixingTheory(
        title=title,
        description=description,
        principles=principles,
        explanation=f"{' + '.join(c.name for c in infos)} = {outcome.name}",
    )


def _percentages(ratio: Sequence[float]) -> str:
    return ":".join(str(math.floor(r * 100.0 + 0.5)) for r in ratio)


def explain_mix(parents: Sequence[ColorLike], result: MixedColor) -> EducationalMixResult:
    """
    Attach the theory, a scientific account and applications to a mix.

    Args:
        parents: The colors that were blended, in blend order
        result: The mix() or mix_many() result for those colors

    Raises:
        InsufficientColors: If fewer than 2 parents are given.
        ValueError: If the parent count differs from the result's ratio.
    """
    infos = [as_color_info(c) for c in parents]
    if len(infos) < 2:
        raise InsufficientColors(len(infos))
    if len(infos) != len(result.ratio):
        raise ValueError(
            f"expected {len(result.ratio)} parent colors, got {len(infos)}"
        )
    kind = mixing_type(len(infos))
    if kind == "additive":
        science = (
            "Overlapping wavelengths stimulate the eye's cone cells differently, "
            "so a new color is perceived."
        )
    else:
        science = (
            "Each pigment absorbs certain wavelengths and the reflected light "
            "is perceived as a new color."
        )

    return EducationalMixResult(
        hex=result.hex,
        rgb=result.rgb,
        hsl=result.hsl,
        name=result.name,
        id=result.id,
        parent_colors=result.parent_colors,
        ratio=result.ratio,
        theory=mixing_theory(infos, result),
        mixing_type=kind,
        scientific_explanation=f"{science} The mixing ratio is {_percentages(result.ratio)}%.",
        applications=_APPLICATIONS[kind],
    )
