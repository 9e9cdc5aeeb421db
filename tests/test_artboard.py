"""Tests for the root surface and SVG output."""

import xml.etree.ElementTree as ET

import pytest

from svglayout.core.context import current_root
from svglayout.core.geometry import Point
from svglayout.layout import Artboard, Container, Grid, HStack, VStack
from svglayout.shapes import Circle, Line, Rect, Text

SVG = "{http://www.w3.org/2000/svg}"


def test_context_attaches_and_restores():
    with Artboard(width=100, height=100) as outer:
        first = Rect(width=10, height=10)
        with Artboard(width=50, height=50) as inner:
            nested = Rect(width=10, height=10)
        second = Rect(width=10, height=10)
    loose = Rect(width=10, height=10)
    assert first.parent is outer and second.parent is outer
    assert nested.parent is inner
    assert loose.parent is None
    assert current_root() is None


def test_auto_attach_can_be_disabled():
    with Artboard(width=100, height=100):
        rect = Rect(width=10, height=10, auto_attach=False)
    assert rect.parent is None


def test_render_is_idempotent():
    with Artboard(width="auto", height="auto", padding=10) as board:
        stack = HStack(spacing=7, vertical_alignment="center")
        Rect(width=33.3, height=21, parent=stack)
        Circle(radius=12.5, parent=stack)
        Text("label", parent=stack)
    assert board.render() == board.render()


def test_document_shape():
    with Artboard("board", width=300, height=200, background="#fafafa") as board:
        Rect("box", width=10, height=10)
    svg = board.render()
    root = ET.fromstring(svg)
    assert root.tag == f"{SVG}svg"
    assert root.get("width") == "300"
    assert root.get("viewBox") == "0 0 300 200"
    assert "<!-- Rect box -->" in svg
    background = root.find(f"{SVG}rect")
    assert background.get("fill") == "#fafafa"


def test_round_trip_coordinates_are_exact():
    with Artboard(width="auto", height="auto", padding=13.7) as board:
        stack = VStack(spacing=3.3, horizontal_alignment="center")
        circle = Circle(radius=11.1, parent=stack)
        rect = Rect(width=47.9, height=9.7, parent=stack)
        grid = Grid(columns=3, cell_width=31.3, cell_height=17.9, gutter=2.2, parent=stack)
        dot = Circle(radius=3.3)
        grid.add(dot, row=0, column=2)
        moved = Circle(radius=4.4, parent=stack)
        group = VStack(padding=1.5, parent=stack)
        inner = Rect(width=12.5, height=6.1, parent=group)
    board.layout()
    moved.translate(50, 0)
    group.translate(40.5, 40.25)

    root = ET.fromstring(board.render())
    circles = [(float(c.get("cx")), float(c.get("cy"))) for c in root.iter(f"{SVG}circle")]
    assert circles == [circle.center, dot.center, moved.center]
    rects = {r.get("width"): (float(r.get("x")), float(r.get("y"))) for r in root.iter(f"{SVG}rect")}
    assert rects["47.9"] == rect.border_box.top_left
    assert rects["12.5"] == inner.border_box.top_left
    assert all(node.get("transform") is None for node in root.iter())


def test_translated_container_keeps_rotation_local():
    with Artboard(width=300, height=300) as board:
        group = Container(width=40, height=40)
        bar = Rect(width=20, height=10, parent=group)
    board.layout()
    group.rotate(90, pivot=(0, 0))
    group.translate(100, 0)
    root = ET.fromstring(board.render())
    rect_el = root.find(f"{SVG}rect")
    # Drawn at the translated position, turned around the moved pivot
    assert (rect_el.get("x"), rect_el.get("y")) == ("100", "0")
    assert rect_el.get("transform") == "rotate(90 100 0)"
    assert bar.get_point("border", "bottom_right") == pytest.approx(Point(90, 20))


def test_auto_canvas_grows_to_absolute_content():
    with Artboard(width="auto", height="auto", padding=10) as board:
        Rect(width=50, height=50)
        loose = Rect(width=20, height=20)
        loose.position(relative_from=loose.top_left, relative_to=(200, 150))
    root = ET.fromstring(board.render())
    assert root.get("width") == "230"
    assert root.get("height") == "180"


def test_auto_canvas_grows_to_rotated_content():
    with Artboard(width="auto", height="auto") as board:
        bar = Rect(width=100, height=10)
        bar.rotate(90, pivot=(0, 0))
        bar.translate(200, 0)
    board.layout()
    assert board.size() == pytest.approx((200, 100))


def test_fixed_canvas_does_not_grow():
    with Artboard(width=100, height=100) as board:
        Line(start=(0, 0), end=(500, 500))
    board.layout()
    assert board.size() == (100, 100)


def test_rotation_is_emitted_as_transform_attribute():
    with Artboard(width=100, height=100) as board:
        rect = Rect(width=20, height=10)
        rect.position(relative_from=rect.center, relative_to=(50, 50))
        rect.rotate(30)
    root = ET.fromstring(board.render())
    rect_el = root.find(f"{SVG}rect")
    assert rect_el.get("transform") == "rotate(30 50 50)"


def test_text_output():
    with Artboard(width=200, height=100) as board:
        Text("one\ntwo", font_size=10)
        Text("a < b")
    root = ET.fromstring(board.render())
    texts = list(root.iter(f"{SVG}text"))
    assert [t.get("font-size") for t in texts] == ["10", "16"]
    assert [s.text for s in texts[0].iter(f"{SVG}tspan")] == ["one", "two"]
    assert texts[1].text == "a < b"


def test_save(tmp_path):
    with Artboard(width=40, height=40) as board:
        Circle(radius=10)
    path = board.save(tmp_path / "out.svg")
    assert path.read_text(encoding="utf-8") == board.render()


def test_line_endpoints_follow_points_of_other_nodes():
    with Artboard(width="auto", height="auto") as board:
        row = HStack(spacing=50)
        left = Rect(width=20, height=20, parent=row)
        right = Rect(width=20, height=20, parent=row)
    board.layout()
    link = Line(start=left.right_center, end=right.left_center, parent=board)
    assert link.is_absolute
    assert link.start == Point(20, 10)
    assert link.end == Point(70, 10)
