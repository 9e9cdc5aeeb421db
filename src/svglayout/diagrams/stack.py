"""Vertical stack of equal-height boxes on a fixed canvas."""

from ..layout import Artboard, VStack
from ..shapes import Rect, Text


def create_stack_diagram() -> Artboard:
    """Three 60px boxes in an auto-height stack with 20px padding and 10px spacing.

    The stack ends up 3 * 60 + 2 * 10 + 2 * 20 = 240px tall.

    Returns:
        The diagram's Artboard
    """
    with Artboard(width=600, height=400, background="#ffffff") as board:
        stack = VStack(
            "stack",
            width=600,
            padding=20,
            spacing=10,
            horizontal_alignment="center",
            style={"fill": "#f7f9fb", "stroke": "#bdc3c7"},
        )
        for index in range(3):
            Rect(f"box{index}", width=200 + 80 * index, height=60, parent=stack)
        Text("auto height", parent=board, font_size=12).position(
            relative_from=(0, 0), relative_to=(8, 370)
        )
    return board
