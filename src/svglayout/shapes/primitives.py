"""Rectangles, circles and lines."""

from __future__ import annotations

from xml.etree import ElementTree as ET

from ..core.errors import ConfigurationError
from ..core.geometry import BoxKind, Point, PointName, Size
from ..core.element import PositionMode
from ..core.sizing import SizeSpec
from ..core.units import parse_non_negative
from ..render.svg import element
from ..styles.style import Style
from .base import Shape


class Rect(Shape):
    """A rectangle. Width and height are the border box.

    Both dimensions are required; either may be a percentage of the parent's
    content box.
    """

    def __init__(self, name: str | None = None, *, width=None, height=None, corner_radius=0, **kwargs) -> None:
        self.width_spec = SizeSpec.parse(width, "width")
        self.height_spec = SizeSpec.parse(height, "height")
        for label, spec in (("width", self.width_spec), ("height", self.height_spec)):
            if spec.is_auto:
                raise ConfigurationError(f"{type(self).__name__} needs a {label}", node=name)
        self.corner_radius = parse_non_negative(corner_radius, "corner_radius")
        self._width = self.width_spec.value if self.width_spec.is_fixed else None
        self._height = self.height_spec.value if self.height_spec.is_fixed else None
        super().__init__(name, **kwargs)

    def size(self) -> Size:
        return Size(self._width, self._height)

    def measure(self, available: Size) -> Size:
        self._width = self.width_spec.resolve(available.width, self.name, "width")
        self._height = self.height_spec.resolve(available.height, self.name, "height")
        return self.size()

    def render_shape(self) -> ET.Element:
        box = self.drawn_box(BoxKind.BORDER)
        radius = self.corner_radius or None
        return element("rect", self.presentation(
            x=box.x, y=box.y, width=box.width, height=box.height, rx=radius, ry=radius,
        ))


class Square(Rect):
    def __init__(self, name: str | None = None, *, size=None, **kwargs) -> None:
        super().__init__(name, width=size, height=size, **kwargs)


class Circle(Shape):
    """A circle. Its border box is the bounding square of the circle."""

    def __init__(self, name: str | None = None, *, radius=None, **kwargs) -> None:
        if radius is None:
            raise ConfigurationError("Circle needs a radius", node=name)
        self.radius = parse_non_negative(radius, "radius")
        super().__init__(name, **kwargs)

    def size(self) -> Size:
        return Size(2 * self.radius, 2 * self.radius)

    def render_shape(self) -> ET.Element:
        center = self.box(BoxKind.BORDER).point(PointName.CENTER) + self.drawn_offset()
        return element("circle", self.presentation(cx=center.x, cy=center.y, r=self.radius))


class Line(Shape):
    """A straight segment between two absolute points.

    A line is positioned by its endpoints, so it is absolute from the start;
    its box is the bounding box of the segment.
    """

    default_style = Style(fill="none", stroke="#2c3e50", stroke_width=1.0)

    def __init__(self, name: str | None = None, *, start=None, end=None, **kwargs) -> None:
        if start is None or end is None:
            raise ConfigurationError("Line needs a start and an end point", node=name)
        start, end = Point(*start), Point(*end)
        origin = Point(min(start.x, end.x), min(start.y, end.y))
        self._start = start - origin
        self._end = end - origin
        super().__init__(name, **kwargs)
        self.mode = PositionMode.ABSOLUTE
        self._absolute = origin

    @property
    def start(self) -> Point:
        return self.resolve_absolute(self.origin + self._start)

    @property
    def end(self) -> Point:
        return self.resolve_absolute(self.origin + self._end)

    def size(self) -> Size:
        return Size(abs(self._end.x - self._start.x), abs(self._end.y - self._start.y))

    def render_shape(self) -> ET.Element:
        start = self.origin + self._start + self.drawn_offset()
        end = self.origin + self._end + self.drawn_offset()
        return element("line", self.presentation(x1=start.x, y1=start.y, x2=end.x, y2=end.y))
