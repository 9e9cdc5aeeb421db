"""Three-column grid with a circle centered in cell (1, 1)."""

from ..layout import Artboard, Grid
from ..shapes import Circle, Rect, Square


def create_grid_diagram() -> Artboard:
    """A 3-column grid of 110px cells with a 12px gutter.

    Shapes anchored by center (circles) and by corner (rects) are centered
    in their cells alike.

    Returns:
        The diagram's Artboard
    """
    with Artboard(width="auto", height="auto", padding=20) as board:
        grid = Grid(
            "grid",
            columns=3,
            rows=3,
            cell_width=110,
            cell_height=110,
            gutter=12,
            show_cells=True,
        )
        grid.add(Circle("circle", radius=35, style={"fill": "#e67e22"}), row=1, column=1)
        grid.add(Rect(width=80, height=40), row=0, column=0)
        grid.add(Square(size=50), row=2, column=2)
        grid.cell(0, 2, horizontal_alignment="right", vertical_alignment="bottom")
        grid.add(Circle(radius=20), row=0, column=2)
    return board
