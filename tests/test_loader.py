"""Tests for YAML diagram definitions."""

import pytest

from svglayout.core.errors import ConfigurationError
from svglayout.core.geometry import Point, Size
from svglayout.layout import Artboard, DiagramLoader, Grid, VStack
from svglayout.shapes import Circle, Rect

STACK_YAML = """
artboard:
  width: 600
  height: 400
children:
  - type: vstack
    name: stack
    width: 600
    padding: 20
    spacing: 10
    children:
      - {type: rect, width: 100, height: 60}
      - {type: rect, width: 100, height: 60}
      - {type: rect, width: 100, height: 60}
"""


def test_load_string_builds_the_tree():
    board = DiagramLoader().load_string(STACK_YAML)
    assert isinstance(board, Artboard)
    stack = board.find("stack")
    assert isinstance(stack, VStack)
    assert len(stack.children) == 3
    board.render()
    assert stack.size() == Size(600, 240)


def test_grid_cells_and_theme_styles():
    board = DiagramLoader().load_string("""
theme: default
artboard: {width: auto, height: auto}
children:
  - type: grid
    name: grid
    columns: 3
    cell_width: 110
    cell_height: 110
    gutter: 12
    children:
      - {type: circle, name: dot, radius: 35, cell: [1, 1], style: accent}
""")
    board.render()
    grid = board.find("grid")
    dot = board.find("dot")
    assert isinstance(grid, Grid) and isinstance(dot, Circle)
    assert dot.center == Point(177, 177)
    assert dot.style.fill == board.theme.style("accent").fill


def test_position_refers_to_other_nodes():
    board = DiagramLoader().load_string("""
artboard: {width: 400, height: 400, padding: 10}
children:
  - {type: rect, name: anchor, width: 100, height: 50}
  - type: rect
    name: follower
    width: 20
    height: 20
    position:
      anchor: top_left
      to: {node: anchor, point: bottom_right, box: border}
      offset: [5, 5]
""")
    board.render()
    follower = board.find("follower")
    assert follower.is_absolute
    assert follower.top_left == Point(115, 65)


def test_rotate_and_translate_settings():
    board = DiagramLoader().load_string("""
artboard: {width: 400, height: 400}
children:
  - {type: rect, name: a, width: 10, height: 10, rotate: 45}
  - {type: rect, name: b, width: 10, height: 10, translate: [30, 40]}
  - type: rect
    name: c
    width: 10
    height: 10
    rotate: {degrees: 90, pivot: [0, 0]}
""")
    board.render()
    assert board.find("a").transform_attribute() == "rotate(45 5 5)"
    assert board.find("b").center == Point(35, 45)
    assert board.find("c").get_point("border", "top_left") == pytest.approx(Point(0, 0))
    assert board.find("c").get_point("border", "top_right") == pytest.approx(Point(0, 10))


def test_columns_with_explicit_column():
    board = DiagramLoader().load_string("""
artboard: {width: 200, height: auto}
children:
  - type: columns
    name: cols
    count: 2
    width: 200
    children:
      - {type: rect, name: r, width: 10, height: 10, column: 1}
""")
    board.render()
    assert board.find("r").border_box.top_left == Point(100, 0)


@pytest.mark.parametrize("document,message", [
    ("children: [{type: hexagon}]", "Unknown element type"),
    ("children: [{width: 10}]", "type"),
    ("children: [{type: rect, width: 10, height: 10, colour: red}]", "Invalid settings"),
    ("children: [{type: rect, width: 10, height: 10, style: box}]", "without a theme"),
    ("children: [{type: rect, width: 10, height: 10, cell: [0, 0]}]", "only valid inside a grid"),
    ("children: [{type: circle, radius: 3, children: [{type: circle, radius: 1}]}]", "cannot have children"),
    ("children: [{type: rect, name: x, width: 1, height: 1}, {type: rect, name: x, width: 1, height: 1}]",
     "Duplicate"),
    ("children: [{type: rect, width: 1, height: 1, position: {to: {node: nowhere}}}]", "Unknown node"),
    ("- just\n- a list", "mapping"),
    ("children: [{type: rect, width: 1, height: 1, position: [3, 4]}]", "position must be a mapping"),
    ("children: [{type: rect, width: 1, height: 1, position: {at: [0, 0], offset: 5}}]",
     "offset must be a pair"),
    ("children: [{type: rect, width: 1, height: 1, translate: 5}]", "translate must be a pair"),
    ("children: [{type: rect, width: 1, height: 1, translate: {x: 1}}]", "Unknown translate settings"),
    ("children: [{type: rect, width: 1, height: 1, rotate: {pivot: [0, 0]}}]", "rotate needs"),
])
def test_invalid_documents(document, message):
    with pytest.raises(ConfigurationError, match=message):
        DiagramLoader().load_string(document)


def test_malformed_cell_names_the_node():
    with pytest.raises(ConfigurationError, match="cell must be a pair") as excinfo:
        DiagramLoader().load_string("""
children:
  - type: grid
    columns: 2
    cell_width: 10
    cell_height: 10
    children:
      - {type: rect, name: odd, width: 1, height: 1, cell: [1]}
""")
    assert excinfo.value.node == "odd"


def test_load_file_with_local_theme(tmp_path):
    (tmp_path / "mine.yaml").write_text("name: mine\nstyles:\n  loud: {fill: red}\n")
    diagram = tmp_path / "diagram.yaml"
    diagram.write_text("""
theme: mine
artboard: {width: 50, height: 50}
children:
  - {type: rect, name: r, width: 10, height: 10, style: loud}
""")
    board = DiagramLoader().load(diagram)
    rect = board.find("r")
    assert isinstance(rect, Rect)
    assert rect.style.fill == "red"
    assert 'fill="red"' in board.render()


def test_missing_theme():
    with pytest.raises(FileNotFoundError):
        DiagramLoader().load_string("theme: nope\nchildren: []")
