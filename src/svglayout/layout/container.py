"""Container: a node that owns children and resolves their layout.

Layout runs in two phases over the whole tree:

1. ``measure(available)`` bottom-up: every child is measured before its
   parent derives an auto size from it. ``available`` is the parent's content
   size, or None on an axis the parent is still computing.
2. ``place()`` top-down: every container records the local position of its
   managed children, then recurses. Positions are stored relative to the
   parent's content origin, so a child is placed correctly as soon as its
   parent is.

Absolute children are measured and painted but never positioned by a layout.
"""

from __future__ import annotations

import logging
from xml.etree import ElementTree as ET

from ..core.bounded import Bounded
from ..core.errors import ConfigurationError, LayoutResolutionError
from ..core.geometry import Point, Size
from ..core.sizing import SizeSpec
from ..render.svg import comment, element
from ..styles.style import Style

logger = logging.getLogger(__name__)


class Container(Bounded):
    """A freeform group.

    Managed children are placed at the top-left corner of the content box
    (offset by their own margin) and usually positioned further by hand.
    Subclasses override ``_measure_children`` and ``_arrange`` to implement
    real layouts.

    Args:
        name: Debug name, emitted as a comment in the SVG output
        width: Fixed length, "auto" (default) or a percentage such as "50%"
        height: Same as width
        margin: Margin insets
        border: Border insets
        padding: Padding insets
        style: Background style (a Style or a mapping)
        z_order: Paint order among siblings
        parent: Explicit parent; defaults to the active root
        auto_attach: Attach to the active root when no parent is given
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        width=None,
        height=None,
        margin=None,
        border=None,
        padding=None,
        style: Style | dict | None = None,
        z_order: int = 0,
        parent: Container | None = None,
        auto_attach: bool = True,
    ) -> None:
        self.children: list[Bounded] = []
        self.width_spec = SizeSpec.parse(width, "width")
        self.height_spec = SizeSpec.parse(height, "height")
        self._width = self.width_spec.value if self.width_spec.is_fixed else None
        self._height = self.height_spec.value if self.height_spec.is_fixed else None
        self.style = Style.coerce(style)
        self._measuring = False
        super().__init__(
            name,
            margin=margin,
            border=border,
            padding=padding,
            z_order=z_order,
            parent=parent,
            auto_attach=auto_attach,
        )

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def add(self, child: Bounded) -> Bounded:
        """Add a child, removing it from its previous parent.

        Args:
            child: The element to add

        Returns:
            The added element (for chaining)

        Raises:
            ConfigurationError: If the child is this container or one of its ancestors
            TypeError: If the child is not a box-model element
        """
        if not isinstance(child, Bounded):
            raise TypeError(f"Cannot add {child!r} to '{self.name}': not a Bounded element")
        node: Container | None = self
        while node is not None:
            if node is child:
                raise ConfigurationError(
                    f"Cannot add '{child.name}' to itself or to one of its descendants",
                    node=self.name,
                )
            node = node.parent
        if child.parent is self:
            return child
        if child.parent is not None:
            child.parent.remove(child)

        child.parent = self
        child.clear_local_position()
        self.children.append(child)
        logger.debug("Attached '%s' to '%s'", child.name, self.name)
        return child

    def remove(self, child: Bounded) -> bool:
        """Remove a child.

        Returns:
            True if the child was found and removed
        """
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                child.parent = None
                child.clear_local_position()
                return True
        return False

    @property
    def managed_children(self) -> list[Bounded]:
        return [child for child in self.children if not child.is_absolute]

    @property
    def absolute_children(self) -> list[Bounded]:
        return [child for child in self.children if child.is_absolute]

    # ------------------------------------------------------------------
    # Measure phase
    # ------------------------------------------------------------------

    def size(self) -> Size:
        return Size(self._width, self._height)

    def content_size_for(self, width: float | None, height: float | None) -> Size:
        """Content-box extents for a border-box size; None axes stay None."""
        inner_h = self.border.horizontal + self.padding.horizontal
        inner_v = self.border.vertical + self.padding.vertical
        return Size(
            None if width is None else max(0.0, width - inner_h),
            None if height is None else max(0.0, height - inner_v),
        )

    def measure(self, available: Size) -> Size:
        """Resolve this container's size, measuring every child first.

        Args:
            available: The parent's content size; None on unresolved axes

        Returns:
            The border-box size

        Raises:
            LayoutResolutionError: On a relative size inside an auto parent axis,
                or when the container is re-entered while measuring (a cycle)
        """
        if self._measuring:
            raise LayoutResolutionError(
                "Container re-entered while measuring; the tree contains a cycle",
                node=self.name,
            )
        self._measuring = True
        try:
            width = self.width_spec.resolve(available.width, self.name, "width")
            height = self.height_spec.resolve(available.height, self.name, "height")
            content = self._measure_children(self.content_size_for(width, height))
            if width is None:
                width = content.width + self.border.horizontal + self.padding.horizontal
            if height is None:
                height = content.height + self.border.vertical + self.padding.vertical
            self._width, self._height = width, height
        finally:
            self._measuring = False
        logger.debug("Measured '%s': %sx%s", self.name, width, height)
        return Size(width, height)

    @staticmethod
    def outer_extent(child: Bounded) -> tuple[float, float]:
        """Measured margin-box extents of a child, unresolved axes as 0."""
        width, height = child.outer_size()
        return width or 0.0, height or 0.0

    def _measure_children(self, content: Size) -> Size:
        """Measure every child and return the content extent managed ones need.

        Args:
            content: The content-box size children may use (None if unresolved)
        """
        needed_w = needed_h = 0.0
        for child in self.children:
            child.measure(content)
            if child.is_absolute:
                continue
            width, height = self.outer_extent(child)
            needed_w = max(needed_w, width)
            needed_h = max(needed_h, height)
        return Size(needed_w, needed_h)

    # ------------------------------------------------------------------
    # Place phase
    # ------------------------------------------------------------------

    def provisional_local(self, child: Bounded) -> Point | None:
        """Where a managed child sits before ``place`` has run, if predictable."""
        return Point(child.margin.left, child.margin.top)

    def _arrange(self) -> None:
        """Record the local position of every managed child."""
        for child in self.managed_children:
            child.set_local_position(Point(child.margin.left, child.margin.top))

    def place(self) -> None:
        """Position managed children, then recurse into child containers."""
        self._arrange()
        for child in self.children:
            if isinstance(child, Container):
                child.place()
        logger.debug("Placed children of '%s'", self.name)

    def layout(self, available: Size | None = None) -> Size:
        """Run both phases on this subtree.

        Returns:
            The resolved border-box size
        """
        size = self.measure(available if available is not None else Size(None, None))
        self.place()
        return size

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_background(self) -> ET.Element | None:
        """The border box painted with this container's style, if visible."""
        if not self.style.is_visible:
            return None
        rect = self.drawn_box()
        return element("rect", {
            "x": rect.x,
            "y": rect.y,
            "width": rect.width,
            "height": rect.height,
            **self.style.to_attributes(),
            "transform": self.transform_attribute(),
        })

    def render_nodes(self) -> list[ET.Element]:
        """Background followed by the children in z-order (stable for ties)."""
        nodes = []
        if self.has_explicit_name:
            nodes.append(comment(f"{type(self).__name__} {self.name}"))
        background = self.render_background()
        if background is not None:
            nodes.append(background)
        for child in sorted(self.children, key=lambda c: c.z_order):
            nodes.extend(child.render_nodes())
        return nodes
