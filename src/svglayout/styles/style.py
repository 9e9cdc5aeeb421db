"""Presentation attributes shared by shapes and container backgrounds."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from ..core.errors import ConfigurationError
from ..core.units import parse_non_negative


@dataclass(frozen=True)
class Style:
    """SVG presentation attributes.

    Attributes:
        fill: Fill paint (any SVG color, "none" for hollow shapes)
        stroke: Stroke paint
        stroke_width: Stroke width in pixels
        opacity: Overall opacity, 0 to 1
        dash: Stroke dash pattern in pixels, e.g. (4, 2)
        font_family: Font family for text
        font_weight: Font weight for text
    """

    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    opacity: float | None = None
    dash: tuple[float, ...] | None = None
    font_family: str | None = None
    font_weight: str | None = None

    def __post_init__(self) -> None:
        if self.opacity is not None and not 0.0 <= self.opacity <= 1.0:
            raise ConfigurationError(f"opacity must be between 0 and 1, got {self.opacity}")
        if self.stroke_width is not None and self.stroke_width < 0:
            raise ConfigurationError(
                f"stroke_width must not be negative, got {self.stroke_width}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Style:
        """Build a style from a configuration mapping.

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown style attributes: {sorted(unknown)}")
        values = dict(data)
        if values.get("stroke_width") is not None:
            values["stroke_width"] = parse_non_negative(values["stroke_width"], "stroke_width")
        if values.get("opacity") is not None:
            values["opacity"] = float(values["opacity"])
        if values.get("dash") is not None:
            values["dash"] = tuple(parse_non_negative(d, "dash") for d in values["dash"])
        return cls(**values)

    @classmethod
    def coerce(cls, value: Style | Mapping[str, Any] | None) -> Style:
        """Accept a Style, a mapping of attributes, or None (empty style)."""
        if value is None:
            return cls()
        if isinstance(value, Style):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise ConfigurationError(f"Invalid style: {value!r}")

    def merge(self, other: Style) -> Style:
        """Return a copy with every attribute set in ``other`` overriding this one."""
        overrides = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name) is not None
        }
        return replace(self, **overrides)

    @property
    def is_visible(self) -> bool:
        """Whether this style paints anything on a background rectangle."""
        return (self.fill not in (None, "none")) or (self.stroke not in (None, "none"))

    def to_attributes(self) -> dict[str, Any]:
        """SVG attribute mapping. Unset attributes are omitted."""
        attrs: dict[str, Any] = {
            "fill": self.fill,
            "stroke": self.stroke,
            "stroke-width": self.stroke_width,
            "opacity": self.opacity,
            "font-family": self.font_family,
            "font-weight": self.font_weight,
        }
        if self.dash:
            attrs["stroke-dasharray"] = ",".join(f"{d:g}" for d in self.dash)
        return {key: value for key, value in attrs.items() if value is not None}
