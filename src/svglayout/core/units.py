"""Unit normalization and box-model edge insets.

All lengths are normalized once, at construction time, to pixels.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import ConfigurationError

# Root font size used for rem/em
BASE_FONT_SIZE = 16.0

PX_PER_UNIT: dict[str, float] = {
    "": 1.0,
    "px": 1.0,
    "pt": 4.0 / 3.0,
    "in": 96.0,
    "cm": 96.0 / 2.54,
    "mm": 96.0 / 25.4,
}

_LENGTH_RE = re.compile(r"^(-?(?:\d+\.?\d*|\.\d+))([a-z%]*)$", re.IGNORECASE)

Length = float | int | str


def parse_unit(value: Length, base: float = BASE_FONT_SIZE, what: str = "length") -> float:
    """Convert a length to pixels.

    Args:
        value: A number (pixels) or a string such as "12px", "1.5rem", "10pt"
        base: Pixel size of 1rem/1em
        what: Name of the configured property, used in error messages

    Returns:
        The length in pixels

    Raises:
        ConfigurationError: If the value is not a recognized length
    """
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid {what}: {value!r}")
    if isinstance(value, (int, float)):
        number = float(value)
        if not math.isfinite(number):
            raise ConfigurationError(f"Invalid {what}: {value!r}")
        return number
    if not isinstance(value, str):
        raise ConfigurationError(f"Invalid {what}: {value!r}")

    match = _LENGTH_RE.match(value.strip())
    if match is None:
        raise ConfigurationError(f"Invalid {what}: {value!r}")
    number = float(match.group(1))
    unit = match.group(2).lower()

    if unit in ("rem", "em"):
        return number * base
    if unit not in PX_PER_UNIT:
        raise ConfigurationError(f"Unknown unit {unit!r} in {what} {value!r}")
    return number * PX_PER_UNIT[unit]


def parse_non_negative(value: Length, what: str) -> float:
    """Parse a length that must not be negative (spacing, gutters, radii)."""
    pixels = parse_unit(value, what=what)
    if pixels < 0:
        raise ConfigurationError(f"{what} must not be negative, got {value!r}")
    return pixels


@dataclass(frozen=True)
class Insets:
    """Four independent edge insets in pixels (margin, border or padding)."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    def __post_init__(self) -> None:
        for side in ("top", "right", "bottom", "left"):
            if getattr(self, side) < 0:
                raise ConfigurationError(
                    f"Inset '{side}' must not be negative, got {getattr(self, side)}"
                )

    @classmethod
    def parse(cls, value: Any, what: str = "inset") -> Insets:
        """Build insets from a configuration value.

        Accepted forms:
            - None: all sides zero
            - a length: the same value on every side
            - a mapping with any of top/right/bottom/left
            - a sequence of 2 (vertical, horizontal) or 4 (top, right, bottom, left) lengths

        Args:
            value: The configuration value
            what: Property name for error messages (margin, border, padding)

        Returns:
            Parsed Insets

        Raises:
            ConfigurationError: On negative or malformed values
        """
        if value is None:
            return cls()
        if isinstance(value, Insets):
            return value
        if isinstance(value, Mapping):
            unknown = set(value) - {"top", "right", "bottom", "left"}
            if unknown:
                raise ConfigurationError(f"Unknown {what} sides: {sorted(unknown)}")
            sides = {
                side: parse_non_negative(value.get(side, 0), f"{what}.{side}")
                for side in ("top", "right", "bottom", "left")
            }
            return cls(**sides)
        if isinstance(value, Sequence) and not isinstance(value, str):
            parsed = [parse_non_negative(v, what) for v in value]
            if len(parsed) == 2:
                vertical, horizontal = parsed
                return cls(vertical, horizontal, vertical, horizontal)
            if len(parsed) == 4:
                return cls(*parsed)
            raise ConfigurationError(f"{what} takes 2 or 4 values, got {len(parsed)}")
        uniform = parse_non_negative(value, what)
        return cls(uniform, uniform, uniform, uniform)

    @property
    def horizontal(self) -> float:
        """Sum of left and right insets."""
        return self.left + self.right

    @property
    def vertical(self) -> float:
        """Sum of top and bottom insets."""
        return self.top + self.bottom

    def __add__(self, other: Insets) -> Insets:
        return Insets(
            self.top + other.top,
            self.right + other.right,
            self.bottom + other.bottom,
            self.left + other.left,
        )

    def is_zero(self) -> bool:
        return self.top == self.right == self.bottom == self.left == 0
