"""Overlay stack: every child aligned on both axes inside the content box."""

from __future__ import annotations

from ..core.bounded import Bounded
from ..core.geometry import Align, Axis, Point
from .container import Container
from .stack import aligned_offset


class ZStack(Container):
    """Overlays managed children, each aligned within the content box.

    The auto size is that of the largest child. Grid cells are ZStacks, so a
    child in a cell is aligned by its alignment point like in any stack.
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        horizontal_alignment: Align | str = "center",
        vertical_alignment: Align | str = "center",
        **kwargs,
    ) -> None:
        self.horizontal_alignment = Align.parse(horizontal_alignment, Axis.X)
        self.vertical_alignment = Align.parse(vertical_alignment, Axis.Y)
        super().__init__(name, **kwargs)

    def provisional_local(self, child: Bounded) -> Point | None:
        return None

    def _arrange(self) -> None:
        content = self.content_size_for(*self._resolved_size())
        for child in self.managed_children:
            child.set_local_position(Point(
                aligned_offset(child, Axis.X, self.horizontal_alignment, content.width),
                aligned_offset(child, Axis.Y, self.vertical_alignment, content.height),
            ))

