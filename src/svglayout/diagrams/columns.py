"""Three columns filled least-filled-first."""

from ..layout import Artboard, Columns
from ..shapes import Rect, Text


def create_columns_diagram() -> Artboard:
    with Artboard(width=640, height="auto", padding=16) as board:
        columns = Columns(
            "columns",
            count=3,
            gutter=16,
            width=608,
            spacing=8,
            horizontal_alignment="center",
            column_style={"fill": "#f7f9fb", "stroke": "#bdc3c7"},
        )
        heights = [40, 70, 30, 50, 60, 20, 80]
        for index, height in enumerate(heights):
            columns.add(Rect(f"item{index}", width="80%", height=height))
        columns.add(Text("pinned to the last column", font_size=11), column=2)
    return board
