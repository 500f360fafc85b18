# Copyright (c) 2026 Paletta
# SPDX-License-Identifier: MIT

"""
Value types exchanged by the color-science core.

Design principles:
- Immutable: All types are frozen dataclasses
- Derived: HSL/LAB/LCH/xy are computed from RGB, never the source of truth
- Validated: Constructors reject out-of-range values instead of coercing them
- Serializable: JSON-ready via to_dict()/from_dict()

RGB is the canonical interchange form. Every RGBColor round-trips exactly
through a 7-character uppercase hex string ("#RRGGBB").
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from numbers import Integral
from typing import Optional

from paletta.errors import InvalidColorFormat


# =============================================================================
# Helpers
# =============================================================================

_HEX_RE = re.compile(r"^#[0-9A-F]{6}$")


def generate_color_id() -> str:
    """Generate an opaque per-instance color id like 'color_3f9a0c1b2'."""
    return "color_" + uuid.uuid4().hex[:9]


# =============================================================================
# Color Space Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    An 8-bit sRGB color.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channels are integers in [0, 255]."""
        for channel in ("r", "g", "b"):
            value = getattr(self, channel)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidColorFormat(
                    (self.r, self.g, self.b),
                    f"channel {channel} must be an integer, got {value!r}",
                )
            if not 0 <= value <= 255:
                raise InvalidColorFormat(
                    (self.r, self.g, self.b),
                    f"channel {channel} must be 0-255, got {value}",
                )
            # Normalize numpy integers to plain ints
            object.__setattr__(self, channel, int(value))

    @property
    def hex(self) -> str:
        """Uppercase hex string like "#FF8800"."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])

    @classmethod
    def from_hex(cls, hex_color: str) -> RGBColor:
        """Parse a 3- or 6-digit hex string (leading '#' optional)."""
        from paletta.science.colorspace import hex_to_rgb
        return hex_to_rgb(hex_color)


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    A color in HSL, rounded for display.

    Attributes:
        h: Hue in integer degrees [0, 360). 0 for achromatic colors.
        s: Saturation in integer percent [0, 100]
        l: Lightness in integer percent [0, 100]
    """
    h: int
    s: int
    l: int

    def __post_init__(self) -> None:
        """Validate HSL ranges."""
        if not 0 <= self.h < 360:
            raise ValueError(f"Hue must be 0-360, got {self.h}")
        if not 0 <= self.s <= 100:
            raise ValueError(f"Saturation must be 0-100, got {self.s}")
        if not 0 <= self.l <= 100:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")

    @property
    def is_achromatic(self) -> bool:
        """True if the color has no hue (gray/white/black)."""
        return self.s == 0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSLColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


@dataclass(frozen=True, slots=True)
class LABColor:
    """
    A color in CIE L*a*b* (D65).

    Attributes:
        l: Lightness (0 = black, 100 = white)
        a: Green (-) to red (+), unbounded (typically -128..127)
        b: Blue (-) to yellow (+), unbounded (typically -128..127)
    """
    l: float
    a: float
    b: float

    def __post_init__(self) -> None:
        """Validate lightness is within [0, 100]."""
        if not 0.0 <= self.l <= 100.0:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"l": self.l, "a": self.a, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> LABColor:
        """Deserialize from dictionary."""
        return cls(l=data["l"], a=data["a"], b=data["b"])


@dataclass(frozen=True, slots=True)
class LCHColor:
    """
    Cylindrical form of CIE L*a*b*.

    Attributes:
        l: Lightness [0, 100]
        c: Chroma (>= 0)
        h: Hue in degrees [0, 360). 0 for achromatic colors.
    """
    l: float
    c: float
    h: float

    def __post_init__(self) -> None:
        """Validate LCH ranges."""
        if not 0.0 <= self.l <= 100.0:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")
        if self.c < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.c}")
        if not 0.0 <= self.h < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.h}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"l": self.l, "c": self.c, "h": self.h}

    @classmethod
    def from_dict(cls, data: dict) -> LCHColor:
        """Deserialize from dictionary."""
        return cls(l=data["l"], c=data["c"], h=data["h"])


@dataclass(frozen=True, slots=True)
class Chromaticity:
    """CIE 1931 xy chromaticity coordinates."""
    x: float
    y: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.x <= 1.0 or not 0.0 <= self.y <= 1.0:
            raise ValueError(f"Chromaticity must be within [0, 1], got ({self.x}, {self.y})")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}


# =============================================================================
# Identity-Bearing Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorInfo:
    """
    The unit exchanged with UI, storage and export collaborators.

    Build instances with from_rgb() or from_hex(); the constructor only
    validates that hex and rgb agree.

    Attributes:
        hex: Uppercase hex string ("#RRGGBB")
        rgb: Canonical 8-bit color
        hsl: Display HSL derived from rgb
        name: Human-readable name
        id: Opaque token, unique per instance (not globally registered)
    """
    hex: str
    rgb: RGBColor
    hsl: HSLColor
    name: str
    id: str = field(default_factory=generate_color_id)

    def __post_init__(self) -> None:
        """Validate hex format and its agreement with rgb."""
        if not isinstance(self.hex, str):
            raise InvalidColorFormat(self.hex, "hex must be a string")
        normalized = self.hex.upper()
        if not _HEX_RE.match(normalized):
            raise InvalidColorFormat(self.hex, "expected #RRGGBB")
        if normalized != self.rgb.hex:
            raise InvalidColorFormat(
                self.hex, f"hex does not match rgb {self.rgb.to_tuple()}"
            )
        object.__setattr__(self, "hex", normalized)

    @classmethod
    def from_rgb(
        cls,
        r: float,
        g: float,
        b: float,
        *,
        name: Optional[str] = None,
        id: Optional[str] = None,
    ) -> ColorInfo:
        """
        Create a ColorInfo from RGB channel values.

        Channels are clamped to [0, 255] and rounded. Non-finite values
        raise InvalidColorFormat.
        """
        from paletta.science.colorspace import hex_to_rgb, rgb_to_hex, rgb_to_hsl
        from paletta.science.naming import color_name

        hex_color = rgb_to_hex(r, g, b)
        rgb = hex_to_rgb(hex_color)
        return cls(
            hex=hex_color,
            rgb=rgb,
            hsl=rgb_to_hsl(rgb.r, rgb.g, rgb.b),
            name=name if name is not None else color_name(hex_color),
            id=id if id is not None else generate_color_id(),
        )

    @classmethod
    def from_hex(
        cls,
        hex_color: str,
        *,
        name: Optional[str] = None,
        id: Optional[str] = None,
    ) -> ColorInfo:
        """Create a ColorInfo from a 3- or 6-digit hex string."""
        from paletta.science.colorspace import hex_to_rgb

        rgb = hex_to_rgb(hex_color)
        return cls.from_rgb(rgb.r, rgb.g, rgb.b, name=name, id=id)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "hsl": self.hsl.to_dict(),
            "name": self.name,
            "id": self.id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorInfo:
        """Deserialize from dictionary."""
        return cls(
            hex=data["hex"],
            rgb=RGBColor.from_dict(data["rgb"]),
            hsl=HSLColor.from_dict(data["hsl"]),
            name=data["name"],
            id=data.get("id") or generate_color_id(),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class MixedColor(ColorInfo):
    """
    A ColorInfo produced by blending, with its provenance.

    Attributes:
        parent_colors: Ids of the blended colors, in blend order
        ratio: Weight per parent; same length as parent_colors, sums to 1
    """
    parent_colors: tuple[str, ...]
    ratio: tuple[float, ...]

    def __post_init__(self) -> None:
        """Validate provenance structure."""
        ColorInfo.__post_init__(self)
        if len(self.parent_colors) != len(self.ratio):
            raise ValueError(
                f"ratio must have one entry per parent color: "
                f"{len(self.ratio)} != {len(self.parent_colors)}"
            )
        total = sum(self.ratio)
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"ratio must sum to 1.0, got {total:.6f}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = ColorInfo.to_dict(self)
        d["parent_colors"] = list(self.parent_colors)
        d["ratio"] = list(self.ratio)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> MixedColor:
        """Deserialize from dictionary."""
        return cls(
            hex=data["hex"],
            rgb=RGBColor.from_dict(data["rgb"]),
            hsl=HSLColor.from_dict(data["hsl"]),
            name=data["name"],
            id=data.get("id") or generate_color_id(),
            parent_colors=tuple(data["parent_colors"]),
            ratio=tuple(data["ratio"]),
        )


# =============================================================================
# Contrast Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class WCAGLevel:
    """Pass/fail for normal and large text at one conformance level."""
    normal: bool
    large: bool

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"normal": self.normal, "large": self.large}


@dataclass(frozen=True, slots=True)
class WCAGSuggestions:
    """Adjusted foregrounds that move toward the AA-normal target."""
    light_version: str
    dark_version: str

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"light_version": self.light_version, "dark_version": self.dark_version}


@dataclass(frozen=True, slots=True)
class WCAGResult:
    """
    WCAG 2.1 contrast evaluation of a foreground/background pair.

    Attributes:
        foreground: Foreground color as given by the caller
        background: Background color as given by the caller
        contrast_ratio: Ratio in [1, 21], rounded to 2 decimals
        aa_level: AA pass/fail (normal >= 4.5, large >= 3.0)
        aaa_level: AAA pass/fail (normal >= 7.0, large >= 4.5)
        suggestions: Lighter and darker foregrounds aimed at AA normal
    """
    foreground: str
    background: str
    contrast_ratio: float
    aa_level: WCAGLevel
    aaa_level: WCAGLevel
    suggestions: WCAGSuggestions

    def __post_init__(self) -> None:
        """Validate ratio range."""
        if not 1.0 <= self.contrast_ratio <= 21.0:
            raise ValueError(f"Contrast ratio must be 1-21, got {self.contrast_ratio}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "foreground": self.foreground,
            "background": self.background,
            "contrast_ratio": self.contrast_ratio,
            "aa_level": self.aa_level.to_dict(),
            "aaa_level": self.aaa_level.to_dict(),
            "suggestions": self.suggestions.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class ContrastSuggestion:
    """
    Outcome of one bounded brighten/darken search.

    Attributes:
        hex: Best foreground found (the input if nothing improved)
        contrast_ratio: Its contrast against the background (unrounded)
        iterations: Number of accepted adjustment steps
    """
    hex: str
    contrast_ratio: float
    iterations: int


# =============================================================================
# Mixing Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class MixFrame:
    """
    A single frame of an animated mix.

    Attributes:
        hex: Blended color at this frame
        progress: Position in the transition (0.0-1.0)
    """
    hex: str
    progress: float

    def __post_init__(self) -> None:
        """Validate progress is in range."""
        if not 0.0 <= self.progress <= 1.0:
            raise ValueError(f"Progress must be 0-1, got {self.progress}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"hex": self.hex, "progress": self.progress}


# =============================================================================
# Accessibility Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class AccessibilityReport:
    """
    Distinguishability of a palette across color-vision variants.

    Attributes:
        is_accessible: True iff no pair is confusable under any variant
        issues: One human-readable line per confusable pair and variant
        recommendations: Generic advice, present only when issues exist
    """
    is_accessible: bool
    issues: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "is_accessible": self.is_accessible,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True, slots=True)
class ColorBlindnessResult:
    """
    A palette as seen under each simulated color-vision deficiency.

    Each variant holds one ColorInfo per original color, in the same order.
    """
    original: tuple[ColorInfo, ...]
    protanomaly: tuple[ColorInfo, ...]
    deuteranomaly: tuple[ColorInfo, ...]
    tritanomaly: tuple[ColorInfo, ...]
    monochromacy: tuple[ColorInfo, ...]
    accessibility: AccessibilityReport

    @property
    def variants(self) -> dict[str, tuple[ColorInfo, ...]]:
        """Simulated palettes keyed by variant name."""
        return {
            "protanomaly": self.protanomaly,
            "deuteranomaly": self.deuteranomaly,
            "tritanomaly": self.tritanomaly,
            "monochromacy": self.monochromacy,
        }

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {"original": [c.to_dict() for c in self.original]}
        for name, palette in self.variants.items():
            d[name] = [c.to_dict() for c in palette]
        d["accessibility"] = self.accessibility.to_dict()
        return d


# =============================================================================
# Classification Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class HarmonySet:
    """Hue rotations of a base color at its own saturation and lightness."""
    complementary: tuple[str]
    triadic: tuple[str, str]
    tetradic: tuple[str, str, str]
    analogous: tuple[str, str]
    split_complementary: tuple[str, str]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "complementary": list(self.complementary),
            "triadic": list(self.triadic),
            "tetradic": list(self.tetradic),
            "analogous": list(self.analogous),
            "split_complementary": list(self.split_complementary),
        }


@dataclass(frozen=True, slots=True)
class WheelPosition:
    """Position on an HSL color wheel: hue angle and saturation radius."""
    angle: int
    radius: int


@dataclass(frozen=True, slots=True)
class ColorScience:
    """
    Physical description of a color.

    Attributes:
        wavelength: Approximate dominant wavelength in nm, None if achromatic
        luminance: WCAG relative luminance (0-1, 4 decimals)
        chromaticity: CIE 1931 xy coordinates
    """
    wavelength: Optional[float]
    luminance: float
    chromaticity: Chromaticity

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "wavelength": self.wavelength,
            "luminance": self.luminance,
            "chromaticity": self.chromaticity.to_dict(),
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class AdvancedColorInfo(ColorInfo):
    """
    A ColorInfo with its device-independent coordinates and contrast grade.

    Attributes:
        lab: CIE LAB coordinates
        lch: CIE LCH coordinates
        wcag_level: "AAA", "AA" or "FAIL" for normal text on white
        contrast_ratio: Contrast against white
        delta_e: ΔE to a reference color, None when no reference was given
    """
    lab: LABColor
    lch: LCHColor
    wcag_level: str
    contrast_ratio: float
    delta_e: Optional[float] = None

    def __post_init__(self) -> None:
        ColorInfo.__post_init__(self)
        if self.wcag_level not in ("AAA", "AA", "FAIL"):
            raise ValueError(f"Unknown WCAG level: {self.wcag_level}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = ColorInfo.to_dict(self)
        d.update({
            "lab": self.lab.to_dict(),
            "lch": self.lch.to_dict(),
            "wcag": {"level": self.wcag_level, "contrast_ratio": self.contrast_ratio},
        })
        if self.delta_e is not None:
            d["delta_e"] = self.delta_e
        return d


@dataclass(frozen=True, slots=True, kw_only=True)
class EducationalColorInfo(ColorInfo):
    """
    A ColorInfo annotated for teaching: physics, wheel, mood and harmonies.

    Attributes:
        science: Wavelength, luminance and chromaticity
        wheel_position: Angle and radius on the HSL wheel
        psychology_effects: Up to six associated moods, hue first
        harmonies: Hue rotations of this color
    """
    science: ColorScience
    wheel_position: WheelPosition
    psychology_effects: tuple[str, ...]
    harmonies: HarmonySet

    def __post_init__(self) -> None:
        ColorInfo.__post_init__(self)
        if len(self.psychology_effects) > 6:
            raise ValueError(
                f"at most 6 psychology effects, got {len(self.psychology_effects)}"
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = ColorInfo.to_dict(self)
        d.update({
            "science": self.science.to_dict(),
            "wheel_position": {
                "angle": self.wheel_position.angle,
                "radius": self.wheel_position.radius,
            },
            "psychology_effects": list(self.psychology_effects),
            "harmonies": self.harmonies.to_dict(),
        })
        return d


# =============================================================================
# Mixing Theory Types
# =============================================================================


MIXING_TYPES = ("additive", "subtractive")


@dataclass(frozen=True, slots=True)
class MixingTheory:
    """
    Textbook explanation attached to a mix.

    Attributes:
        title: Name of the principle
        description: One-paragraph summary
        principles: Canonical primary combinations
        explanation: The concrete mix, e.g. "Red + Blue = Red × Blue"
    """
    title: str
    description: str
    principles: tuple[str, ...]
    explanation: str

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "title": self.title,
            "description": self.description,
            "principles": list(self.principles),
            "explanation": self.explanation,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class EducationalMixResult(MixedColor):
    """
    A MixedColor with the theory behind it.

    Attributes:
        theory: Principle and worked example
        mixing_type: "additive" or "subtractive"
        scientific_explanation: Perception or pigment account, with the
            mixing ratio in percent
        applications: Real-world places the principle is used
    """
    theory: MixingTheory
    mixing_type: str
    scientific_explanation: str
    applications: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        MixedColor.__post_init__(self)
        if self.mixing_type not in MIXING_TYPES:
            raise ValueError(f"Unknown mixing type: {self.mixing_type}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = MixedColor.to_dict(self)
        d.update({
            "theory": self.theory.to_dict(),
            "mixing_type": self.mixing_type,
            "scientific_explanation": self.scientific_explanation,
            "applications": list(self.applications),
        })
        return d
