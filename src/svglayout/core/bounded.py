"""Box model: margin, border, padding and content boxes around an element."""

from __future__ import annotations

import warnings
from typing import Protocol, runtime_checkable

import numpy as np

from .element import Element
from .errors import MissingGeometryWarning
from .geometry import EDGE_POINTS, BoxKind, Edge, Point, PointName, Rect, Size
from .units import Insets


def _box_kind(kind: BoxKind | str) -> BoxKind:
    return kind if isinstance(kind, BoxKind) else BoxKind(kind)


def _point_name(name: PointName | str) -> PointName:
    return name if isinstance(name, PointName) else PointName(name)


class Bounded(Element):
    """An element with a size and the four nested boxes of the box model.

    The element's size is its border box. The margin box lies outside it,
    the padding box inside the border and the content box inside the padding.
    Layouts stack margin boxes; the content box is where children go.
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        margin=None,
        border=None,
        padding=None,
        z_order: int = 0,
        parent=None,
        auto_attach: bool = True,
    ) -> None:
        self.margin = Insets.parse(margin, "margin")
        self.border = Insets.parse(border, "border")
        self.padding = Insets.parse(padding, "padding")
        super().__init__(name, z_order=z_order, parent=parent, auto_attach=auto_attach)

    def measure(self, available: Size) -> Size:
        """Measure phase hook. Leaves return their own size."""
        return self.size()

    def outer_size(self) -> Size:
        """Size of the margin box. Unresolved axes stay None."""
        width, height = self.size()
        return Size(
            None if width is None else width + self.margin.horizontal,
            None if height is None else height + self.margin.vertical,
        )

    def _resolved_size(self) -> tuple[float, float]:
        width, height = self.size()
        if width is None or height is None:
            warnings.warn(
                MissingGeometryWarning(
                    f"Size of '{self.name}' queried before it was measured; "
                    "treating unresolved axes as 0"
                ),
                stacklevel=4,
            )
        return width or 0.0, height or 0.0

    def _local_box(self, kind: BoxKind) -> Rect:
        """A box relative to the border-box origin."""
        width, height = self._resolved_size()
        border_box = Rect(0.0, 0.0, width, height)
        if kind is BoxKind.MARGIN:
            m = self.margin
            return border_box.outset(m.top, m.right, m.bottom, m.left)
        if kind is BoxKind.BORDER:
            return border_box
        inner = self.border if kind is BoxKind.PADDING else self.border + self.padding
        return border_box.inset(inner.top, inner.right, inner.bottom, inner.left)

    def box(self, kind: BoxKind | str = BoxKind.BORDER) -> Rect:
        """Untransformed absolute rectangle of one of the four boxes."""
        local = self._local_box(_box_kind(kind))
        origin = self.origin
        return Rect(origin.x + local.x, origin.y + local.y, local.width, local.height)

    def drawn_box(self, kind: BoxKind | str = BoxKind.BORDER) -> Rect:
        """The box as it is written to the markup, with translations applied."""
        return self.box(kind).shifted(self.drawn_offset())

    @property
    def content_origin(self) -> Point:
        """Untransformed top-left corner of the content box.

        Known as soon as the element itself is placed, even before its size is.
        """
        return self.origin + (
            self.border.left + self.padding.left,
            self.border.top + self.padding.top,
        )

    def get_point(
        self,
        box_kind: BoxKind | str = BoxKind.CONTENT,
        name: PointName | str = PointName.CENTER,
    ) -> Point:
        """World coordinates of a named point on one of the boxes.

        Args:
            box_kind: margin, border, padding or content
            name: One of the nine named points (e.g. "top_left", "center")

        Returns:
            The point with this element's and its ancestors' transforms applied
        """
        return self.resolve_absolute(self.box(box_kind).point(_point_name(name)))

    def untransformed_center(self) -> Point:
        return self.box(BoxKind.CONTENT).point(PointName.CENTER)

    def anchor_offset(self, edge: Edge) -> Point:
        """Offset of an alignment edge point from the border-box origin.

        Depends only on size and insets, so layouts can use it before the
        element has a position.
        """
        kind, name = EDGE_POINTS[edge]
        return self._local_box(kind).point(name)

    def alignment_point(self, edge: Edge | str) -> Point:
        """World coordinates of the point layouts align this element by."""
        kind, name = EDGE_POINTS[Edge(edge)]
        return self.get_point(kind, name)

    def bounding_box(self) -> Rect:
        """Axis-aligned world bounding box of the transformed border box."""
        corners = self.box(BoxKind.BORDER).corners()
        if not self.transform_steps():
            return Rect.from_points(corners)
        homogeneous = np.array([[p.x, p.y, 1.0] for p in corners], dtype=np.float64)
        moved = homogeneous @ self.world_matrix().T
        return Rect.from_points([Point(float(x), float(y)) for x, y, _ in moved])

    # Named points of the content box
    @property
    def center(self) -> Point:
        return self.get_point(BoxKind.CONTENT, PointName.CENTER)

    @property
    def top_left(self) -> Point:
        return self.get_point(BoxKind.CONTENT, PointName.TOP_LEFT)

    @property
    def top_center(self) -> Point:
        return self.get_point(BoxKind.CONTENT, PointName.TOP_CENTER)

    @property
    def top_right(self) -> Point:
        return self.get_point(BoxKind.CONTENT, PointName.TOP_RIGHT)

    @property
    def left_center(self) -> Point:
        return self.get_point(BoxKind.CONTENT, PointName.LEFT_CENTER)

    @property
    def right_center(self) -> Point:
        return self.get_point(BoxKind.CONTENT, PointName.RIGHT_CENTER)

    @property
    def bottom_left(self) -> Point:
        return self.get_point(BoxKind.CONTENT, PointName.BOTTOM_LEFT)

    @property
    def bottom_center(self) -> Point:
        return self.get_point(BoxKind.CONTENT, PointName.BOTTOM_CENTER)

    @property
    def bottom_right(self) -> Point:
        return self.get_point(BoxKind.CONTENT, PointName.BOTTOM_RIGHT)

    @property
    def margin_box(self) -> BoxView:
        return BoxView(self, BoxKind.MARGIN)

    @property
    def border_box(self) -> BoxView:
        return BoxView(self, BoxKind.BORDER)

    @property
    def padding_box(self) -> BoxView:
        return BoxView(self, BoxKind.PADDING)

    @property
    def content_box(self) -> BoxView:
        return BoxView(self, BoxKind.CONTENT)


class BoxView:
    """Named points and extent of one box of an element.

    ``element.margin_box.top_left`` is shorthand for
    ``element.get_point("margin", "top_left")``.
    """

    def __init__(self, element: Bounded, kind: BoxKind) -> None:
        self.element = element
        self.kind = kind

    def __getattr__(self, attr: str) -> Point:
        try:
            name = PointName(attr)
        except ValueError:
            raise AttributeError(
                f"{type(self).__name__} has no attribute {attr!r}"
            ) from None
        return self.element.get_point(self.kind, name)

    @property
    def rect(self) -> Rect:
        """The untransformed absolute rectangle."""
        return self.element.box(self.kind)

    @property
    def width(self) -> float:
        return self.rect.width

    @property
    def height(self) -> float:
        return self.rect.height

    def __repr__(self) -> str:
        return f"BoxView({self.element.name!r}, {self.kind.value})"


@runtime_checkable
class Positionable(Protocol):
    """What layouts need from a child."""

    def size(self) -> Size: ...

    def measure(self, available: Size) -> Size: ...

    def get_point(self, box_kind: BoxKind | str = ..., name: PointName | str = ...) -> Point: ...

    def alignment_point(self, edge: Edge | str) -> Point: ...

    def render(self) -> str: ...
