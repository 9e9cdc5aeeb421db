"""Absolute positioning, rotation and lines referencing other nodes' points."""

from ..layout import Artboard, HStack
from ..shapes import Circle, Line, Rect, Text


def create_construction_diagram() -> Artboard:
    """Nodes placed by hand relative to a laid-out stack.

    The stack is laid out first so the points read from it are final.
    """
    with Artboard(width="auto", height="auto", padding=30) as board:
        row = HStack("row", spacing=60, vertical_alignment="center")
        left = Rect("left", width=100, height=60, parent=row)
        right = Circle("right", radius=40, parent=row)
        board.layout()

        Line("link", start=left.right_center, end=right.left_center,
             style={"stroke": "#e67e22", "stroke_width": 2})

        tilted = Rect("tilted", width=80, height=30, style={"fill": "#3498db"})
        tilted.position(relative_from=tilted.top_center, relative_to=left.bottom_center, y=40)
        tilted.rotate(30)

        label = Text("45 degrees", font_size=12)
        label.position(relative_from=label.left_center, relative_to=right.right_center, x=12)
        label.rotate(45, pivot=right.center)
    return board
