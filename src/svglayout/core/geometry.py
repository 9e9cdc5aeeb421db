"""Points, sizes, rectangles and the named reference points of a box."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from .errors import ConfigurationError


class Point(NamedTuple):
    """A point in pixels. Y grows downwards, as in SVG."""

    x: float
    y: float

    def __add__(self, other: tuple[float, float]) -> Point:  # type: ignore[override]
        return Point(self.x + other[0], self.y + other[1])

    def __sub__(self, other: tuple[float, float]) -> Point:
        return Point(self.x - other[0], self.y - other[1])

    def along(self, axis: Axis) -> float:
        """Coordinate on the given axis."""
        return self.x if axis is Axis.X else self.y


class Size(NamedTuple):
    """Width and height in pixels. None marks an axis not yet resolved."""

    width: float | None
    height: float | None

    def along(self, axis: Axis) -> float | None:
        return self.width if axis is Axis.X else self.height


class Axis(Enum):
    X = "horizontal"
    Y = "vertical"

    @property
    def cross(self) -> Axis:
        return Axis.Y if self is Axis.X else Axis.X


class PointName(Enum):
    """The nine named points every box exposes."""

    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    LEFT_CENTER = "left_center"
    CENTER = "center"
    RIGHT_CENTER = "right_center"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"


# Normalized (x, y) of each named point: x 0=left 1=right, y 0=top 1=bottom
POINT_POSITIONS: dict[PointName, tuple[float, float]] = {
    PointName.TOP_LEFT: (0.0, 0.0),
    PointName.TOP_CENTER: (0.5, 0.0),
    PointName.TOP_RIGHT: (1.0, 0.0),
    PointName.LEFT_CENTER: (0.0, 0.5),
    PointName.CENTER: (0.5, 0.5),
    PointName.RIGHT_CENTER: (1.0, 0.5),
    PointName.BOTTOM_LEFT: (0.0, 1.0),
    PointName.BOTTOM_CENTER: (0.5, 1.0),
    PointName.BOTTOM_RIGHT: (1.0, 1.0),
}


class BoxKind(Enum):
    """The four nested boxes of the box model, outermost first."""

    MARGIN = "margin"
    BORDER = "border"
    PADDING = "padding"
    CONTENT = "content"


class Edge(Enum):
    """An edge (or the center) an element can be aligned against."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"


# Which box and point each alignment edge reads
EDGE_POINTS: dict[Edge, tuple[BoxKind, PointName]] = {
    Edge.LEFT: (BoxKind.MARGIN, PointName.LEFT_CENTER),
    Edge.RIGHT: (BoxKind.MARGIN, PointName.RIGHT_CENTER),
    Edge.TOP: (BoxKind.MARGIN, PointName.TOP_CENTER),
    Edge.BOTTOM: (BoxKind.MARGIN, PointName.BOTTOM_CENTER),
    Edge.CENTER: (BoxKind.CONTENT, PointName.CENTER),
}


class Align(Enum):
    """Alignment along one axis."""

    START = "start"
    CENTER = "center"
    END = "end"

    @classmethod
    def parse(cls, value: Align | str, axis: Axis) -> Align:
        """Parse an alignment label for an axis.

        Horizontal labels are left/center/right, vertical labels are
        top/center/bottom; start/end are accepted on both axes.
        """
        if isinstance(value, Align):
            return value
        labels = _AXIS_LABELS[axis]
        key = str(value).strip().lower()
        if key in labels:
            return labels[key]
        raise ConfigurationError(
            f"Invalid {axis.value} alignment {value!r}, expected one of {sorted(labels)}"
        )

    def edge(self, axis: Axis) -> Edge:
        """The alignment edge this value selects on an axis."""
        if self is Align.CENTER:
            return Edge.CENTER
        if axis is Axis.X:
            return Edge.LEFT if self is Align.START else Edge.RIGHT
        return Edge.TOP if self is Align.START else Edge.BOTTOM

    def fraction(self) -> float:
        """Position of the alignment line as a fraction of an extent."""
        return {Align.START: 0.0, Align.CENTER: 0.5, Align.END: 1.0}[self]


_AXIS_LABELS: dict[Axis, dict[str, Align]] = {
    Axis.X: {"left": Align.START, "center": Align.CENTER, "right": Align.END,
             "start": Align.START, "end": Align.END},
    Axis.Y: {"top": Align.START, "center": Align.CENTER, "bottom": Align.END,
             "start": Align.START, "end": Align.END},
}


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    def point(self, name: PointName | str) -> Point:
        """Get one of the nine named points of this rectangle."""
        if isinstance(name, str):
            name = PointName(name)
        fx, fy = POINT_POSITIONS[name]
        return Point(self.x + fx * self.width, self.y + fy * self.height)

    def shifted(self, offset: tuple[float, float]) -> Rect:
        return Rect(self.x + offset[0], self.y + offset[1], self.width, self.height)

    def corners(self) -> list[Point]:
        return [
            Point(self.left, self.top),
            Point(self.right, self.top),
            Point(self.right, self.bottom),
            Point(self.left, self.bottom),
        ]

    def inset(self, top: float, right: float, bottom: float, left: float) -> Rect:
        """Shrink by the given insets. Never produces a negative extent."""
        return Rect(
            self.x + left,
            self.y + top,
            max(0.0, self.width - left - right),
            max(0.0, self.height - top - bottom),
        )

    def outset(self, top: float, right: float, bottom: float, left: float) -> Rect:
        """Grow by the given insets."""
        return Rect(
            self.x - left,
            self.y - top,
            self.width + left + right,
            self.height + top + bottom,
        )

    def union(self, other: Rect) -> Rect:
        left = min(self.left, other.left)
        top = min(self.top, other.top)
        return Rect(
            left,
            top,
            max(self.right, other.right) - left,
            max(self.bottom, other.bottom) - top,
        )

    @classmethod
    def from_points(cls, points: list[Point]) -> Rect:
        """Smallest rectangle containing all points."""
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
