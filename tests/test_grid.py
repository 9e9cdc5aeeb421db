"""Tests for the grid layout."""

import pytest

from svglayout.core.errors import ConfigurationError
from svglayout.core.geometry import Point, PointName, Size
from svglayout.layout import Artboard, Grid
from svglayout.shapes import Circle, Rect, Square, Text


def _scenario_grid(child):
    with Artboard(width=600, height=600, padding=20) as board:
        grid = Grid(columns=3, cell_width=110, cell_height=110, gutter=12)
        grid.add(child, row=1, column=1)
    board.render()
    return grid


def test_circle_centered_in_cell():
    circle = Circle(radius=35)
    grid = _scenario_grid(circle)
    cell = grid.cell(1, 1)
    assert circle.center == cell.get_point("content", "center")
    assert circle.center == grid.cell_rect(1, 1).point(PointName.CENTER)
    assert circle.center == Point(20 + 122 + 55, 20 + 122 + 55)


@pytest.mark.parametrize("child", [
    Circle(radius=35),
    Rect(width=40, height=90),
    Square(size=13),
    Rect(width=60, height=20, margin=[0, 10]),
])
def test_cell_centering_is_independent_of_shape_type(child):
    grid = _scenario_grid(child)
    assert child.center == grid.cell(1, 1).center


def test_text_centered_in_cell():
    label = Text("cell")
    grid = _scenario_grid(label)
    assert label.center == pytest.approx(grid.cell(1, 1).center)


def test_cell_alignment_override():
    grid = Grid(columns=2, cell_width=100, cell_height=50)
    rect = Rect(width=20, height=10)
    grid.add(rect, row=0, column=1)
    grid.cell(0, 1, horizontal_alignment="right", vertical_alignment="bottom")
    grid.layout()
    assert rect.border_box.bottom_right == Point(200, 50)


def test_auto_fill_is_row_major_with_columns():
    grid = Grid(columns=2, cell_width=10, cell_height=10)
    rects = [Rect(width=5, height=5, parent=grid) for _ in range(3)]
    assert [(r.parent.row, r.parent.column) for r in rects] == [(0, 0), (0, 1), (1, 0)]


def test_auto_fill_is_column_major_with_rows_only():
    grid = Grid(rows=2, cell_width=10, cell_height=10)
    rects = [Rect(width=5, height=5, parent=grid) for _ in range(3)]
    assert [(r.parent.row, r.parent.column) for r in rects] == [(0, 0), (1, 0), (0, 1)]


def test_auto_fill_skips_occupied_cells():
    grid = Grid(columns=2, cell_width=10, cell_height=10)
    grid.add(Rect(width=5, height=5), row=0, column=0)
    rect = Rect(width=5, height=5, parent=grid)
    assert (rect.parent.row, rect.parent.column) == (0, 1)


def test_full_grid_is_rejected():
    grid = Grid(columns=2, rows=1, cell_width=10, cell_height=10)
    Rect(width=5, height=5, parent=grid)
    Rect(width=5, height=5, parent=grid)
    with pytest.raises(ConfigurationError, match="full"):
        Rect(width=5, height=5, parent=grid)


@pytest.mark.parametrize("row,column", [(0, 3), (-1, 0), (2, 0)])
def test_out_of_range_cell_is_rejected(row, column):
    grid = Grid(columns=3, rows=2)
    with pytest.raises(ConfigurationError):
        grid.add(Rect(width=5, height=5), row=row, column=column)


@pytest.mark.parametrize("kwargs", [
    {},
    {"columns": 0},
    {"rows": -2},
    {"columns": 2.5},
    {"columns": 3, "width": 300, "cell_width": "auto"},
    {"columns": 3, "height": "50%", "cell_height": "auto"},
    {"columns": 3, "gutter": -4},
])
def test_invalid_grid_configuration(kwargs):
    with pytest.raises(ConfigurationError):
        Grid(**kwargs)


def test_cell_size_divided_from_fixed_grid_size():
    grid = Grid(columns=4, rows=2, width=430, height=210, gutter=10)
    Rect(width=5, height=5, parent=grid)
    grid.layout()
    assert grid.cell(0, 0).size() == Size(100, 100)
    assert grid.cell_rect(1, 3).origin == Point(330, 110)


def test_cell_size_from_largest_child():
    grid = Grid(columns=2, column_gap=6)
    Rect(width=40, height=20, parent=grid)
    Rect(width=60, height=10, parent=grid)
    assert grid.layout() == Size(2 * 60 + 6, 20)
    assert grid.cell(0, 0).size() == grid.cell(0, 1).size() == Size(60, 20)


def test_auto_rows_grow_with_children():
    grid = Grid(columns=2, cell_width=10, cell_height=10, row_gap=2)
    for _ in range(5):
        Rect(width=5, height=5, parent=grid)
    assert grid.shape == (3, 2)
    assert grid.layout() == Size(20, 34)


def test_show_cells_draws_every_cell():
    grid = Grid(columns=3, rows=2, cell_width=10, cell_height=10, show_cells=True)
    Rect(width=5, height=5, parent=grid)
    grid.layout()
    assert grid.render().count('stroke-dasharray="2,2"') == 6
