"""Grid layout: the content box partitioned into rows x columns cells."""

from __future__ import annotations

import logging
from xml.etree import ElementTree as ET

from ..core.bounded import Bounded
from ..core.errors import ConfigurationError
from ..core.geometry import Align, Axis, Point, Rect, Size
from ..core.sizing import SizeSpec
from ..core.units import parse_non_negative
from ..render.svg import element
from ..styles.style import Style
from .container import Container
from .zstack import ZStack

logger = logging.getLogger(__name__)

CELL_OUTLINE = Style(fill="none", stroke="#95a5a6", stroke_width=0.5, dash=(2.0, 2.0))


class GridCell(ZStack):
    """One cell of a grid. Takes the size the grid gives it.

    Children in a cell are aligned by their alignment point, so shapes
    anchored by center and shapes anchored by corner line up the same way.
    """

    def __init__(self, grid: Grid, row: int, column: int, **kwargs) -> None:
        self.grid = grid
        self.row = row
        self.column = column
        super().__init__(
            f"{grid.name}[{row},{column}]",
            width=SizeSpec.fill(),
            height=SizeSpec.fill(),
            auto_attach=False,
            **kwargs,
        )
        self.has_explicit_name = False

    @property
    def is_empty(self) -> bool:
        return not self.managed_children


def _check_count(label: str, count: int | None, name: str | None) -> int | None:
    if count is None:
        return None
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise ConfigurationError(f"Grid {label} must be a positive integer, got {count!r}", node=name)
    return count


class Grid(Container):
    """Arranges children in equally sized cells.

    At least one of ``columns`` and ``rows`` is required. Children added
    without a cell fill the next empty one: row by row when ``columns`` is
    set, column by column when only ``rows`` is set.

    Cell size comes from ``cell_width``/``cell_height`` when given, else from
    dividing a known grid size, else from the largest child.

    Args:
        columns: Number of columns
        rows: Number of rows
        cell_width: Cell width, or "auto" to size cells from their children
        cell_height: Cell height, or "auto"
        gutter: Gap between cells on both axes
        column_gap: Gap between columns (overrides gutter)
        row_gap: Gap between rows (overrides gutter)
        horizontal_alignment: Default horizontal alignment inside cells
        vertical_alignment: Default vertical alignment inside cells
        show_cells: Draw dashed cell outlines (debugging aid)
        **kwargs: Container arguments (width, height, padding, ...)

    Example:
        grid = Grid(columns=3, cell_width=110, cell_height=110, gutter=12)
        Circle(radius=35, parent=grid)               # cell (0, 0)
        grid.add(Circle(radius=35), row=1, column=1)
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        columns: int | None = None,
        rows: int | None = None,
        cell_width=None,
        cell_height=None,
        gutter=0,
        column_gap=None,
        row_gap=None,
        horizontal_alignment: Align | str = "center",
        vertical_alignment: Align | str = "center",
        show_cells: bool = False,
        **kwargs,
    ) -> None:
        if columns is None and rows is None:
            raise ConfigurationError("Grid needs columns, rows or both", node=name)
        self.columns = _check_count("columns", columns, name)
        self.rows = _check_count("rows", rows, name)

        for label, cell_value in (("width", cell_width), ("height", cell_height)):
            grid_value = kwargs.get(label)
            if cell_value == "auto" and SizeSpec.parse(grid_value).known_before_measure():
                raise ConfigurationError(
                    f"Grid {label} {grid_value!r} is fixed but cell {label} is 'auto'",
                    node=name,
                )
        self.cell_width = (
            None if cell_width in (None, "auto") else parse_non_negative(cell_width, "cell_width")
        )
        self.cell_height = (
            None if cell_height in (None, "auto") else parse_non_negative(cell_height, "cell_height")
        )

        gutter = parse_non_negative(gutter, "gutter")
        self.column_gap = gutter if column_gap is None else parse_non_negative(column_gap, "column_gap")
        self.row_gap = gutter if row_gap is None else parse_non_negative(row_gap, "row_gap")
        self.horizontal_alignment = Align.parse(horizontal_alignment, Axis.X)
        self.vertical_alignment = Align.parse(vertical_alignment, Axis.Y)
        self.show_cells = bool(show_cells)
        self.cells: dict[tuple[int, int], GridCell] = {}
        self._cell_size: tuple[float | None, float | None] = (self.cell_width, self.cell_height)
        super().__init__(name, **kwargs)

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns) currently spanned by the grid."""
        used_rows = max((r + 1 for r, _ in self.cells), default=0)
        used_cols = max((c + 1 for _, c in self.cells), default=0)
        return (
            self.rows if self.rows is not None else used_rows,
            self.columns if self.columns is not None else used_cols,
        )

    def _check_cell(self, row: int, column: int) -> None:
        if (
            row < 0
            or column < 0
            or (self.rows is not None and row >= self.rows)
            or (self.columns is not None and column >= self.columns)
        ):
            raise ConfigurationError(
                f"Cell ({row}, {column}) is outside a grid of "
                f"{self.rows or '*'} rows x {self.columns or '*'} columns",
                node=self.name,
            )

    def cell(
        self,
        row: int,
        column: int,
        *,
        horizontal_alignment: Align | str | None = None,
        vertical_alignment: Align | str | None = None,
    ) -> GridCell:
        """Get (creating if needed) a cell, optionally overriding its alignment.

        Raises:
            ConfigurationError: If the cell is outside the grid
        """
        self._check_cell(row, column)
        cell = self.cells.get((row, column))
        if cell is None:
            cell = GridCell(
                self,
                row,
                column,
                horizontal_alignment=self.horizontal_alignment,
                vertical_alignment=self.vertical_alignment,
            )
            self.cells[(row, column)] = cell
            super().add(cell)
        if horizontal_alignment is not None:
            cell.horizontal_alignment = Align.parse(horizontal_alignment, Axis.X)
        if vertical_alignment is not None:
            cell.vertical_alignment = Align.parse(vertical_alignment, Axis.Y)
        return cell

    def _next_free_cell(self) -> tuple[int, int]:
        row_major = self.columns is not None
        capacity = (self.rows * self.columns) if (self.rows and self.columns) else None
        index = 0
        while capacity is None or index < capacity:
            if row_major:
                position = divmod(index, self.columns)
            else:
                column, row = divmod(index, self.rows)
                position = (row, column)
            cell = self.cells.get(position)
            if cell is None or cell.is_empty:
                return position
            index += 1
        raise ConfigurationError(
            f"Grid is full ({self.rows}x{self.columns} cells occupied)", node=self.name
        )

    def add(self, child: Bounded, row: int | None = None, column: int | None = None) -> Bounded:
        """Put a child into a cell.

        Args:
            child: The element to add
            row: Cell row; with column omitted too, the next empty cell is used
            column: Cell column

        Returns:
            The added element

        Raises:
            ConfigurationError: If the cell is out of range, only one of row and
                column is given, or the grid is full
        """
        if isinstance(child, GridCell) and child.grid is self:
            return super().add(child)
        if (row is None) != (column is None):
            raise ConfigurationError("Give both row and column, or neither", node=self.name)
        if row is None:
            row, column = self._next_free_cell()
        self.cell(row, column).add(child)
        logger.debug("Put '%s' in cell (%d, %d) of '%s'", child.name, row, column, self.name)
        return child

    def remove(self, child: Bounded) -> bool:
        if super().remove(child):
            if isinstance(child, GridCell):
                self.cells.pop((child.row, child.column), None)
            return True
        return any(cell.remove(child) for cell in list(self.cells.values()))

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _divide(self, content: float | None, count: int, gap: float) -> float | None:
        if content is None or count == 0:
            return None
        return max(0.0, (content - gap * (count - 1)) / count)

    def _measure_children(self, content: Size) -> Size:
        rows, columns = self.shape
        cell_w = self.cell_width
        cell_h = self.cell_height
        if cell_w is None:
            cell_w = self._divide(content.width, columns, self.column_gap)
        if cell_h is None:
            cell_h = self._divide(content.height, rows, self.row_gap)

        cells = list(self.cells.values())
        if cell_w is None or cell_h is None:
            natural_w = natural_h = 0.0
            for cell in cells:
                width, height = cell.measure(Size(cell_w, cell_h))
                natural_w = max(natural_w, width)
                natural_h = max(natural_h, height)
            cell_w = natural_w if cell_w is None else cell_w
            cell_h = natural_h if cell_h is None else cell_h

        for cell in cells:
            cell.measure(Size(cell_w, cell_h))
        self._cell_size = (cell_w, cell_h)

        return Size(
            columns * cell_w + self.column_gap * max(0, columns - 1),
            rows * cell_h + self.row_gap * max(0, rows - 1),
        )

    def _cell_offset(self, row: int, column: int) -> Point | None:
        cell_w, cell_h = self._cell_size
        if cell_w is None or cell_h is None:
            return None
        return Point(column * (cell_w + self.column_gap), row * (cell_h + self.row_gap))

    def provisional_local(self, child: Bounded) -> Point | None:
        if isinstance(child, GridCell):
            return self._cell_offset(child.row, child.column)
        return None

    def _arrange(self) -> None:
        for (row, column), cell in self.cells.items():
            if not cell.is_absolute:
                cell.set_local_position(self._cell_offset(row, column))

    def cell_rect(self, row: int, column: int) -> Rect:
        """Untransformed absolute rectangle of a cell, whether or not it holds children."""
        self._check_cell(row, column)
        offset = self._cell_offset(row, column) or Point(0.0, 0.0)
        cell_w, cell_h = self._cell_size
        origin = self.content_origin + offset
        return Rect(origin.x, origin.y, cell_w or 0.0, cell_h or 0.0)

    def render_nodes(self) -> list[ET.Element]:
        nodes = super().render_nodes()
        if not self.show_cells or None in self._cell_size:
            return nodes
        rows, columns = self.shape
        transform = self.transform_attribute()
        offset = self.drawn_offset()
        for row in range(rows):
            for column in range(columns):
                rect = self.cell_rect(row, column).shifted(offset)
                nodes.append(element("rect", {
                    "x": rect.x,
                    "y": rect.y,
                    "width": rect.width,
                    "height": rect.height,
                    **CELL_OUTLINE.to_attributes(),
                    "transform": transform,
                }))
        return nodes
