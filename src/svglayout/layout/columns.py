"""Columns layout: equal-width vertical stacks side by side."""

from __future__ import annotations

import logging

from ..core.bounded import Bounded
from ..core.errors import ConfigurationError
from ..core.geometry import Align, Axis, Point, Size
from ..core.sizing import SizeSpec
from ..core.units import parse_non_negative
from ..styles.style import Style
from .container import Container
from .stack import VStack

logger = logging.getLogger(__name__)


class Column(VStack):
    """One column. Takes the width and height the Columns layout gives it."""

    def __init__(self, owner: Columns, index: int, **kwargs) -> None:
        self.owner = owner
        self.index = index
        super().__init__(
            f"{owner.name}.col{index}",
            width=SizeSpec.fill(),
            height=SizeSpec.fill(),
            auto_attach=False,
            **kwargs,
        )
        self.has_explicit_name = False


class Columns(Container):
    """Splits the content box into ``count`` equal columns.

    Each column stacks its children vertically. All columns get the same
    width (``column_width``, or the fixed width divided among them, or the
    widest column) and the same height.

    Args:
        count: Number of columns
        gutter: Gap between columns
        column_width: Width of each column
        spacing: Gap between children inside a column
        horizontal_alignment: Alignment of children inside their column
        vertical_alignment: Where the children of a column sit vertically
        column_style: Background style for every column
        **kwargs: Container arguments (width, height, padding, ...)
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        count: int = 2,
        gutter=0,
        column_width=None,
        spacing=0,
        horizontal_alignment: Align | str = "left",
        vertical_alignment: Align | str = "top",
        column_style=None,
        **kwargs,
    ) -> None:
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise ConfigurationError(
                f"Columns count must be a positive integer, got {count!r}", node=name
            )
        self.count = count
        self.gutter = parse_non_negative(gutter, "gutter")
        self.column_width = (
            None if column_width is None else parse_non_negative(column_width, "column_width")
        )
        self._column_size: tuple[float | None, float | None] = (self.column_width, None)
        column_args = dict(
            spacing=parse_non_negative(spacing, "spacing"),
            horizontal_alignment=Align.parse(horizontal_alignment, Axis.X),
            vertical_alignment=Align.parse(vertical_alignment, Axis.Y),
            style=Style.coerce(column_style),
        )
        super().__init__(name, **kwargs)
        self.columns: list[Column] = []
        for index in range(count):
            column = Column(self, index, **column_args)
            self.columns.append(column)
            super().add(column)

    def column(self, index: int) -> Column:
        if not 0 <= index < self.count:
            raise ConfigurationError(
                f"Column {index} is outside 0..{self.count - 1}", node=self.name
            )
        return self.columns[index]

    def add(self, child: Bounded, column: int | None = None) -> Bounded:
        """Put a child into a column (default: the one with fewest children).

        Raises:
            ConfigurationError: If the column index is out of range
        """
        if isinstance(child, Column) and child.owner is self:
            return super().add(child)
        if column is None:
            target = min(self.columns, key=lambda col: len(col.managed_children))
        else:
            target = self.column(column)
        target.add(child)
        logger.debug("Put '%s' in column %d of '%s'", child.name, target.index, self.name)
        return child

    def remove(self, child: Bounded) -> bool:
        if super().remove(child):
            return True
        return any(col.remove(child) for col in self.columns)

    def _measure_children(self, content: Size) -> Size:
        gaps = self.gutter * (self.count - 1)
        width = self.column_width
        if width is None and content.width is not None:
            width = max(0.0, (content.width - gaps) / self.count)
        height = content.height

        if width is None or height is None:
            natural_w = natural_h = 0.0
            for col in self.columns:
                col_w, col_h = col.measure(Size(width, height))
                natural_w = max(natural_w, col_w)
                natural_h = max(natural_h, col_h)
            width = natural_w if width is None else width
            height = natural_h if height is None else height

        for col in self.columns:
            col.measure(Size(width, height))
        self._column_size = (width, height)
        return Size(self.count * width + gaps, height)

    def _column_offset(self, index: int) -> Point | None:
        width = self._column_size[0]
        if width is None:
            return None
        return Point(index * (width + self.gutter), 0.0)

    def provisional_local(self, child: Bounded) -> Point | None:
        if isinstance(child, Column):
            return self._column_offset(child.index)
        return None

    def _arrange(self) -> None:
        for col in self.columns:
            if not col.is_absolute:
                col.set_local_position(self._column_offset(col.index))
