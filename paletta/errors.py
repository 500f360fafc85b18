# Copyright (c) 2026 Paletta
# SPDX-License-Identifier: MIT

"""
Exceptions raised at the boundary of the color-science core.

Parsing functions fail fast with these. Aggregate computations (ΔE tables,
contrast checks, accessibility evaluation) never raise them for a single bad
element; they fall back to sentinel values instead.
"""

from __future__ import annotations


class PalettaError(Exception):
    """Base exception for all Paletta errors."""


class InvalidColorFormat(PalettaError, ValueError):
    """
    Raised when a hex string or RGB triple cannot be parsed.

    Attributes:
        value: The rejected input, kept for error reporting.
    """

    def __init__(self, value: object, reason: str = "") -> None:
        self.value = value
        self.reason = reason
        message = f"Invalid color format: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InsufficientColors(PalettaError, ValueError):
    """Raised when a mixing operation receives fewer colors than it needs."""

    def __init__(self, count: int, required: int = 2) -> None:
        self.count = count
        self.required = required
        super().__init__(
            f"At least {required} colors are required, got {count}"
        )
