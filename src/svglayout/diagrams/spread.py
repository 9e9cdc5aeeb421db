"""Horizontal stack spreading its children over a fixed width."""

from ..layout import Artboard, HStack, VStack
from ..shapes import Circle, Rect


def create_spread_diagram() -> Artboard:
    """Two stacks of the same children: one spread, one packed and centered."""
    with Artboard(width=520, height="auto", padding=20) as board:
        rows = VStack("rows", spacing=24)
        spread = HStack(
            "spread",
            width=480,
            spread=True,
            vertical_alignment="center",
            border=1,
            style={"stroke": "#bdc3c7", "fill": "none"},
            parent=rows,
        )
        packed = HStack(
            "packed",
            width=480,
            spacing=10,
            horizontal_alignment="center",
            vertical_alignment="bottom",
            border=1,
            style={"stroke": "#bdc3c7", "fill": "none"},
            parent=rows,
        )
        for stack in (spread, packed):
            Rect(width=60, height=30, parent=stack)
            Circle(radius=25, parent=stack)
            Rect(width=40, height=70, parent=stack)
            Circle(radius=12, parent=stack)
    return board
