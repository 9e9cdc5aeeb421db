"""Tests for axis stacks."""

import logging

import pytest

from svglayout.core.errors import ConfigurationError
from svglayout.core.geometry import Point, Size
from svglayout.layout import Artboard, HStack, VStack, ZStack
from svglayout.shapes import Circle, Rect


def test_auto_main_axis_is_children_plus_spacing_plus_padding():
    with Artboard(width=600, height=400) as board:
        stack = VStack(width=600, padding=20, spacing=10)
        for _ in range(3):
            Rect(width=200, height=60, parent=stack)
    board.render()
    assert stack.size() == Size(600, 3 * 60 + 2 * 10 + 2 * 20)


def test_children_follow_each_other_with_spacing():
    stack = HStack(spacing=5, padding=[0, 0, 0, 10])
    sizes = [(30, 10), (20, 10), (50, 10)]
    rects = [Rect(width=w, height=h, margin=[0, 1], parent=stack) for w, h in sizes]
    stack.layout()
    lefts = [rect.border_box.top_left.x for rect in rects]
    assert lefts == [11, 11 + 30 + 1 + 5 + 1, 11 + 30 + 2 + 5 + 20 + 2 + 5]
    assert stack.size() == Size(10 + 32 + 22 + 52 + 2 * 5, 10)


@pytest.mark.parametrize("extents,width", [
    ([50, 100, 70], 500),
    ([10, 10], 100),
    ([33, 17, 29, 41], 301),
])
def test_spread_gaps_are_equal(extents, width):
    stack = HStack(width=width, spread=True)
    rects = [Rect(width=e, height=10, parent=stack) for e in extents]
    stack.layout()
    expected_gap = (width - sum(extents)) / (len(extents) - 1)
    for left, right in zip(rects, rects[1:]):
        gap = right.border_box.top_left.x - left.border_box.top_right.x
        assert gap == pytest.approx(expected_gap)
    assert rects[0].border_box.top_left.x == 0
    assert rects[-1].border_box.top_right.x == pytest.approx(width)


def test_spread_counts_margins_as_part_of_the_children():
    stack = VStack(height=200, spread=True)
    top = Rect(width=10, height=40, margin=5, parent=stack)
    bottom = Rect(width=10, height=40, margin=5, parent=stack)
    stack.layout()
    assert top.margin_box.top_left.y == 0
    assert bottom.margin_box.bottom_left.y == 200


def test_spread_falls_back_to_spacing_when_children_overflow(caplog):
    stack = HStack("tight", width=100, spacing=4, spread=True)
    first = Rect(width=80, height=10, parent=stack)
    second = Rect(width=80, height=10, parent=stack)
    with caplog.at_level(logging.WARNING, logger="svglayout"):
        stack.layout()
    assert second.border_box.top_left.x == first.border_box.top_right.x + 4
    assert "tight" in caplog.text


def test_spread_requires_a_fixed_main_axis():
    with pytest.raises(ConfigurationError):
        HStack(spread=True)
    with pytest.raises(ConfigurationError):
        VStack(width=100, spread=True)
    VStack(height="50%", spread=True)


def test_failed_construction_does_not_attach():
    with Artboard(width=100, height=100) as board:
        with pytest.raises(ConfigurationError):
            HStack(spread=True)
    assert board.children == []


@pytest.mark.parametrize("alignment,expected_x", [
    ("left", 0),
    ("center", 230),
    ("right", 460),
])
def test_cross_axis_alignment(alignment, expected_x):
    stack = VStack(width=560, horizontal_alignment=alignment)
    rect = Rect(width=100, height=20, parent=stack)
    stack.layout()
    assert rect.border_box.top_left.x == expected_x


def test_center_alignment_uses_content_center():
    stack = HStack(height=100, vertical_alignment="center")
    padded = Rect(width=20, height=40, padding=[20, 0, 0, 0], parent=stack)
    stack.layout()
    # Content box is the lower 20px of the rect; its center sits on y=50
    assert padded.center.y == 50


def test_end_alignment_respects_margin():
    stack = HStack(height=100, vertical_alignment="bottom")
    rect = Rect(width=20, height=40, margin=[0, 0, 6, 0], parent=stack)
    stack.layout()
    assert rect.border_box.bottom_left.y == 94


def test_mixed_shapes_align_by_alignment_point():
    stack = HStack(height=100, vertical_alignment="center", spacing=10)
    circle = Circle(radius=15, parent=stack)
    rect = Rect(width=40, height=70, parent=stack)
    stack.layout()
    assert circle.center.y == rect.center.y == 50


@pytest.mark.parametrize("alignment,expected_top", [
    ("top", 0),
    ("center", 35),
    ("bottom", 70),
])
def test_main_axis_alignment_distributes_leftover(alignment, expected_top):
    stack = VStack(height=200, spacing=10, vertical_alignment=alignment)
    first = Rect(width=10, height=50, parent=stack)
    Rect(width=10, height=70, parent=stack)
    stack.layout()
    assert first.border_box.top_left.y == expected_top


def test_invalid_alignment_is_rejected():
    with pytest.raises(ConfigurationError):
        VStack(horizontal_alignment="top")
    with pytest.raises(ConfigurationError):
        HStack(vertical_alignment="left")


def test_negative_spacing_is_rejected():
    with pytest.raises(ConfigurationError):
        VStack(spacing=-1)


def test_nested_stacks():
    outer = VStack(spacing=10, padding=5)
    row = HStack(spacing=4, parent=outer)
    Rect(width=20, height=20, parent=row)
    Rect(width=30, height=10, parent=row)
    below = Rect(width=100, height=5, parent=outer)
    assert outer.layout() == Size(110, 20 + 10 + 5 + 10)
    assert below.border_box.top_left == Point(5, 35)


def test_zstack_overlays_children_centered():
    stack = ZStack(padding=10)
    big = Rect(width=100, height=60, parent=stack)
    small = Circle(radius=10, parent=stack)
    assert stack.layout() == Size(120, 80)
    assert small.center == big.center == Point(60, 40)


def test_zstack_alignment():
    stack = ZStack(width=100, height=100, horizontal_alignment="right", vertical_alignment="top")
    rect = Rect(width=30, height=20, parent=stack)
    stack.layout()
    assert rect.border_box.top_right == Point(100, 0)
