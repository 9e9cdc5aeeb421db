"""Per-axis sizing modes.

A sizing mode is chosen once, at construction, and never changes:

- ``fixed``: the caller gives the size; children are measured against it
- ``auto``: the size is computed from the children during the Measure phase
- ``relative``: a percentage of the parent's content box on the same axis
- ``fill``: takes whatever the parent offers, or behaves as ``auto`` when the
  parent offers nothing (used for grid cells and columns)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import ConfigurationError, LayoutResolutionError
from .units import parse_unit

_PERCENT_RE = re.compile(r"^\s*(\d+(?:\.\d+)?|\.\d+)\s*%\s*$")


class SizeMode(Enum):
    FIXED = "fixed"
    AUTO = "auto"
    RELATIVE = "relative"
    FILL = "fill"


@dataclass(frozen=True)
class SizeSpec:
    """A parsed width or height setting."""

    mode: SizeMode
    value: float | None = None

    @classmethod
    def parse(cls, value: Any, what: str = "size") -> SizeSpec:
        """Parse a width/height configuration value.

        Args:
            value: None or "auto", a length, or a percentage string such as "50%"
            what: Property name for error messages

        Returns:
            The parsed SizeSpec

        Raises:
            ConfigurationError: If the value is negative or not a valid size
        """
        if isinstance(value, SizeSpec):
            return value
        if value is None or (isinstance(value, str) and value.strip() == "auto"):
            return cls(SizeMode.AUTO)
        if isinstance(value, str):
            match = _PERCENT_RE.match(value)
            if match is not None:
                return cls(SizeMode.RELATIVE, float(match.group(1)) / 100.0)
        pixels = parse_unit(value, what=what)
        if pixels < 0:
            raise ConfigurationError(f"{what} must not be negative, got {value!r}")
        return cls(SizeMode.FIXED, pixels)

    @classmethod
    def fill(cls) -> SizeSpec:
        return cls(SizeMode.FILL)

    @property
    def is_auto(self) -> bool:
        return self.mode is SizeMode.AUTO

    @property
    def is_fixed(self) -> bool:
        return self.mode is SizeMode.FIXED

    def known_before_measure(self) -> bool:
        """Whether the size can be resolved without looking at children."""
        return self.mode in (SizeMode.FIXED, SizeMode.RELATIVE)

    def resolve(self, available: float | None, node: str, what: str) -> float | None:
        """Resolve to pixels given the extent the parent offers.

        Returns:
            The size in pixels, or None when it must be computed from children

        Raises:
            LayoutResolutionError: If a relative size is resolved against an
                auto-sized parent axis
        """
        if self.mode is SizeMode.FIXED:
            return self.value
        if self.mode is SizeMode.AUTO:
            return None
        if self.mode is SizeMode.FILL:
            return available
        if available is None:
            raise LayoutResolutionError(
                f"{what} of {self.value * 100:g}% depends on an auto-sized parent "
                f"whose {what} depends on its children",
                node=node,
            )
        return available * self.value
