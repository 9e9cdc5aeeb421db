"""Axis stacks: children laid out one after another along an axis."""

from __future__ import annotations

import logging

from ..core.bounded import Bounded
from ..core.errors import ConfigurationError
from ..core.geometry import Align, Axis, Point, Size
from ..core.sizing import SizeSpec
from ..core.units import parse_non_negative
from .container import Container

logger = logging.getLogger(__name__)


def aligned_offset(child: Bounded, axis: Axis, align: Align, extent: float) -> float:
    """Local coordinate of a child's border-box origin on one axis.

    The child's alignment point for ``align`` is put on the matching line of
    a content box of size ``extent``: its leading margin edge on the start
    line, its content center on the middle line, its trailing margin edge on
    the end line.
    """
    line = extent * align.fraction()
    return line - child.anchor_offset(align.edge(axis)).along(axis)


def _on_axis(axis: Axis, main: float, cross: float) -> Point:
    return Point(main, cross) if axis is Axis.X else Point(cross, main)


class Stack(Container):
    """Lays out managed children in insertion order along one axis.

    Main axis: each child follows the previous one's margin box after
    ``spacing`` pixels. Leftover space is distributed according to the
    main-axis alignment, or evenly between children when ``spread`` is set.
    Cross axis: each child's alignment point is put on the start, middle or
    end line of the content box.

    With an auto main axis the stack is exactly as long as its children plus
    spacing and insets. Spread needs a fixed (or percentage) main axis.

    Args:
        axis: Main axis
        spacing: Gap between consecutive children in pixels
        horizontal_alignment: left, center or right
        vertical_alignment: top, center or bottom
        spread: Distribute leftover main-axis space evenly between children
        **kwargs: Container arguments (width, height, padding, ...)
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        axis: Axis = Axis.Y,
        spacing=0,
        horizontal_alignment: Align | str = "left",
        vertical_alignment: Align | str = "top",
        spread: bool = False,
        **kwargs,
    ) -> None:
        self.axis = axis
        self.spacing = parse_non_negative(spacing, "spacing")
        self.horizontal_alignment = Align.parse(horizontal_alignment, Axis.X)
        self.vertical_alignment = Align.parse(vertical_alignment, Axis.Y)
        self.spread = bool(spread)
        if self.spread:
            main_value = kwargs.get("width" if axis is Axis.X else "height")
            if not SizeSpec.parse(main_value).known_before_measure():
                raise ConfigurationError(
                    f"spread needs a fixed {'width' if axis is Axis.X else 'height'}, "
                    f"got {main_value!r}",
                    node=name,
                )
        super().__init__(name, **kwargs)

    def alignment_along(self, axis: Axis) -> Align:
        return self.horizontal_alignment if axis is Axis.X else self.vertical_alignment

    def _measure_children(self, content: Size) -> Size:
        main = cross = 0.0
        count = 0
        for child in self.children:
            child.measure(content)
            if child.is_absolute:
                continue
            extent = Size(*self.outer_extent(child))
            main += extent.along(self.axis)
            cross = max(cross, extent.along(self.axis.cross))
            count += 1
        if count > 1:
            main += self.spacing * (count - 1)
        needed = _on_axis(self.axis, main, cross)
        return Size(needed.x, needed.y)

    def provisional_local(self, child: Bounded) -> Point | None:
        return None

    def _arrange(self) -> None:
        children = self.managed_children
        if not children:
            return
        content = self.content_size_for(*self._resolved_size())
        content_main = content.along(self.axis)
        content_cross = content.along(self.axis.cross)

        extents = [Size(*self.outer_extent(child)).along(self.axis) for child in children]
        total = sum(extents)
        count = len(children)
        gap = self.spacing
        offset = 0.0
        if self.spread:
            if count > 1 and content_main >= total:
                gap = (content_main - total) / (count - 1)
            elif count > 1:
                logger.warning(
                    "Cannot spread %d children (%s px) over %s px in '%s'; "
                    "falling back to spacing %s",
                    count, total, content_main, self.name, self.spacing,
                )
        else:
            used = total + self.spacing * (count - 1)
            leftover = max(0.0, content_main - used)
            offset = leftover * self.alignment_along(self.axis).fraction()

        start = Align.START
        cross_align = self.alignment_along(self.axis.cross)
        for child, extent in zip(children, extents):
            main_pos = offset - child.anchor_offset(start.edge(self.axis)).along(self.axis)
            cross_pos = aligned_offset(child, self.axis.cross, cross_align, content_cross)
            child.set_local_position(_on_axis(self.axis, main_pos, cross_pos))
            offset += extent + gap


class HStack(Stack):
    """Stack laid out left to right."""

    def __init__(self, name: str | None = None, **kwargs) -> None:
        super().__init__(name, axis=Axis.X, **kwargs)


class VStack(Stack):
    """Stack laid out top to bottom."""

    def __init__(self, name: str | None = None, **kwargs) -> None:
        super().__init__(name, axis=Axis.Y, **kwargs)
