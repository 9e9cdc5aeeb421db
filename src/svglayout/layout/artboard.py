"""Artboard: the root container and SVG document output."""

from __future__ import annotations

import logging
from contextlib import ExitStack
from pathlib import Path

from ..core.context import active_root
from ..core.geometry import Size
from ..render.svg import document
from ..styles.style import Style
from ..styles.theme import Theme, ThemeLoader
from .container import Container

logger = logging.getLogger(__name__)


class Artboard(Container):
    """The root of a diagram. Owns the canvas and serializes the tree.

    Used as a context manager, it becomes the root that new elements attach
    to for the duration of the ``with`` block::

        with Artboard(width=600, height=400) as board:
            stack = VStack(padding=20, spacing=10)
            Rect(width=100, height=40, parent=stack)
        svg = board.render()

    An ``auto`` canvas axis grows to contain every node, including
    absolutely positioned and rotated ones.

    Args:
        name: Debug name
        width: Canvas width, or "auto"
        height: Canvas height, or "auto"
        padding: Space kept free around the content
        border: Border insets
        background: Canvas fill color
        theme: A Theme or the name of a theme to load
    """

    def __init__(
        self,
        name: str = "artboard",
        *,
        width=None,
        height=None,
        padding=None,
        border=None,
        background: str | None = None,
        theme: Theme | str | None = None,
        style: Style | dict | None = None,
    ) -> None:
        if isinstance(theme, str):
            theme = ThemeLoader().load(theme)
        self.theme = theme
        if background is None and theme is not None:
            background = theme.background
        style = Style.coerce(style)
        if background is not None:
            style = style.merge(Style(fill=background))
        super().__init__(
            name,
            width=width,
            height=height,
            padding=padding,
            border=border,
            style=style,
            auto_attach=False,
        )
        self._contexts: list[ExitStack] = []

    def __enter__(self) -> Artboard:
        stack = ExitStack()
        stack.enter_context(active_root(self))
        self._contexts.append(stack)
        return self

    def __exit__(self, *exc_info) -> None:
        self._contexts.pop().close()

    def layout(self, available: Size | None = None) -> Size:
        """Measure and place the whole tree, then grow auto canvas axes.

        Returns:
            The canvas size
        """
        width, height = super().layout(available)
        if self.width_spec.is_auto or self.height_spec.is_auto:
            right = bottom = 0.0
            for node in self.iter_nodes(include_self=False):
                box = node.bounding_box()
                right = max(right, box.right)
                bottom = max(bottom, box.bottom)
            origin = self.origin
            if self.width_spec.is_auto:
                needed = right - origin.x + self.padding.right + self.border.right
                width = max(width, needed)
            if self.height_spec.is_auto:
                needed = bottom - origin.y + self.padding.bottom + self.border.bottom
                height = max(height, needed)
            self._width, self._height = width, height
        logger.debug("Laid out '%s' on a %sx%s canvas", self.name, width, height)
        return Size(width, height)

    def render(self) -> str:
        """Lay out the tree and return the SVG document.

        Raises:
            LayoutResolutionError: If a size cannot be resolved
        """
        width, height = self.layout()
        return document(width, height, self.render_nodes())

    def save(self, path: str | Path) -> Path:
        """Render and write the SVG document to ``path``."""
        path = Path(path)
        path.write_text(self.render(), encoding="utf-8")
        logger.info("Wrote %s", path)
        return path
