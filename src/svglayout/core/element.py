"""Transformable element, the root capability of every node in a diagram."""

from __future__ import annotations

import itertools
import logging
import math
import warnings
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any
from xml.etree import ElementTree as ET

import numpy as np
from numpy.typing import NDArray

from ..render.svg import fragment
from .context import current_root
from .errors import ConfigurationError, MissingGeometryWarning
from .geometry import Point, Size
from .transform import (
    ResolvedStep,
    Rotate,
    Transform,
    Translate,
    apply,
    compose,
    resolve_steps,
    split_translation,
    to_svg_attribute,
)
from .units import Length, parse_unit

if TYPE_CHECKING:
    from ..layout.container import Container

logger = logging.getLogger(__name__)

_ids = itertools.count(1)


class PositionMode(Enum):
    """Who decides where an element goes.

    MANAGED elements are placed by their parent's layout. An explicit
    position, translate or rotate call switches an element to ABSOLUTE for
    good; layouts never move an absolute element again.
    """

    MANAGED = "managed"
    ABSOLUTE = "absolute"


class Element(ABC):
    """A node in the diagram tree.

    An element has an identity, a single position (the top-left corner of its
    border box), an ordered list of transforms and a z-order. Managed elements
    store their position relative to the parent's content box and only get it
    once the parent has run its Place phase; absolute elements and roots store
    an absolute position.

    Construction attaches the element to ``parent`` if given, otherwise to the
    active root (see ``svglayout.core.context``) unless ``auto_attach`` is
    False.

    Example:
        with Artboard(width=400, height=300) as board:
            stack = VStack(spacing=10)          # attached to board
            Rect(width=80, height=40, parent=stack)
            label = Text("free", parent=board)
            label.position(relative_from=label.center, relative_to=board.center)
    """

    children: Sequence[Element] = ()

    def __init__(
        self,
        name: str | None = None,
        *,
        z_order: int = 0,
        parent: Container | None = None,
        auto_attach: bool = True,
    ) -> None:
        self.id = next(_ids)
        self.has_explicit_name = name is not None
        self.name = name if name is not None else f"{type(self).__name__.lower()}{self.id}"
        self.z_order = int(z_order)
        self.transforms: list[Transform] = []
        self.mode = PositionMode.MANAGED
        self.parent: Container | None = None
        self._local: Point | None = None
        self._absolute = Point(0.0, 0.0)

        target = parent if parent is not None else (current_root() if auto_attach else None)
        if target is not None:
            target.add(self)

    # ------------------------------------------------------------------
    # Capability interface
    # ------------------------------------------------------------------

    @abstractmethod
    def size(self) -> Size:
        """Border-box size. Unresolved axes are None."""

    @abstractmethod
    def render_nodes(self) -> list[ET.Element]:
        """SVG nodes for this element and its descendants, in paint order."""

    def render(self) -> str:
        """Serialized markup for this node and its descendants."""
        return fragment(self.render_nodes())

    @abstractmethod
    def untransformed_center(self) -> Point:
        """Center used as the default rotation pivot."""

    # ------------------------------------------------------------------
    # Position
    # ------------------------------------------------------------------

    @property
    def is_absolute(self) -> bool:
        return self.mode is PositionMode.ABSOLUTE

    @property
    def origin(self) -> Point:
        """Absolute, untransformed top-left corner of the border box."""
        if self.parent is None or self.is_absolute:
            return self._absolute
        local = self._local
        if local is None:
            local = self.parent.provisional_local(self)
        if local is None:
            warnings.warn(
                MissingGeometryWarning(
                    f"'{self.name}' has not been placed by '{self.parent.name}' yet; "
                    "using the parent's content origin"
                ),
                stacklevel=3,
            )
            local = Point(0.0, 0.0)
        return self.parent.content_origin + local

    def set_local_position(self, local: Point) -> None:
        """Record where the parent's layout placed this element (Place phase)."""
        self._local = local

    def clear_local_position(self) -> None:
        self._local = None

    def detach(self) -> Point:
        """Switch to absolute positioning, keeping the current position.

        Returns:
            The absolute origin the element was frozen at
        """
        if self.is_absolute:
            return self._absolute
        frozen = self.origin
        self.mode = PositionMode.ABSOLUTE
        self._absolute = frozen
        self._local = None
        logger.debug("Detached '%s' at (%s, %s)", self.name, frozen.x, frozen.y)
        return frozen

    def position(
        self,
        relative_from: tuple[float, float],
        relative_to: tuple[float, float],
        x: Length = 0,
        y: Length = 0,
    ) -> None:
        """Move the element so that one of its points lands on a target point.

        Args:
            relative_from: A point on this element (e.g. ``element.center``)
            relative_to: Where that point should go
            x: Extra horizontal offset
            y: Extra vertical offset
        """
        delta = (
            Point(*relative_to)
            - Point(*relative_from)
            + (parse_unit(x, what="x offset"), parse_unit(y, what="y offset"))
        )
        self._absolute = self.detach() + delta

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def apply_transform(self, kind: str, **params: Any) -> Transform:
        """Append a transform to the list. Detaches the element.

        Args:
            kind: "rotate" (params: degrees, pivot) or "translate" (params: dx, dy)

        Returns:
            The appended transform record
        """
        if kind == "rotate":
            pivot = params.get("pivot")
            transform: Transform = Rotate(
                degrees=float(params["degrees"]),
                pivot=Point(*pivot) if pivot is not None else None,
            )
        elif kind == "translate":
            transform = Translate(
                dx=parse_unit(params.get("dx", 0), what="dx"),
                dy=parse_unit(params.get("dy", 0), what="dy"),
            )
        else:
            raise ConfigurationError(f"Unknown transform kind: {kind!r}", node=self.name)
        self.detach()
        self.transforms.append(transform)
        return transform

    def rotate(self, degrees: float, pivot: tuple[float, float] | None = None) -> None:
        """Rotate clockwise around ``pivot`` (default: the element's own center)."""
        self.apply_transform("rotate", degrees=degrees, pivot=pivot)

    def translate(
        self,
        dx: Length = 0,
        dy: Length = 0,
        *,
        along: tuple[float, float] | None = None,
        distance: Length | None = None,
    ) -> None:
        """Move by an offset, or by ``distance`` along the direction ``along``."""
        if along is not None:
            length = math.hypot(along[0], along[1])
            if length == 0:
                raise ConfigurationError("Cannot translate along a zero vector", node=self.name)
            step = parse_unit(distance if distance is not None else 0, what="distance")
            dx = along[0] * step / length
            dy = along[1] * step / length
        self.apply_transform("translate", dx=dx, dy=dy)

    def transform_steps(self) -> list[ResolvedStep]:
        """This element's transforms followed by its ancestors', in application order."""
        steps = resolve_steps(self.transforms, self.untransformed_center()) if self.transforms else []
        if self.parent is not None:
            steps.extend(self.parent.transform_steps())
        return steps

    def world_matrix(self) -> NDArray[np.float64]:
        return compose(self.transform_steps())

    def resolve_absolute(self, point: tuple[float, float] | None = None) -> Point:
        """Map an untransformed absolute point (default: the origin) to world coordinates."""
        point = self.origin if point is None else Point(*point)
        steps = self.transform_steps()
        if not steps:
            return point
        return apply(compose(steps), point)

    def drawn_offset(self) -> Point:
        """Sum of the translations on this element and its ancestors.

        Drawn coordinates are shifted by it, so the markup carries absolute
        positions and only rotations end up in the transform attribute.
        """
        offset, _ = split_translation(self.transform_steps())
        return offset

    def transform_attribute(self) -> str | None:
        """Value of the SVG transform attribute for this node, if any."""
        return to_svg_attribute(self.transform_steps())

    # ------------------------------------------------------------------
    # Tree
    # ------------------------------------------------------------------

    def iter_nodes(self, include_self: bool = True) -> Iterator[Element]:
        """Iterate over this node and all descendants (depth-first)."""
        if include_self:
            yield self
        for child in self.children:
            yield from child.iter_nodes(include_self=True)

    def find(self, name: str) -> Element | None:
        """Find the first descendant (or self) with the given name."""
        for node in self.iter_nodes():
            if node.name == name:
                return node
        return None

    @property
    def depth(self) -> int:
        """Depth in the tree (root = 0)."""
        if self.parent is None:
            return 0
        return self.parent.depth + 1

    @property
    def root(self) -> Element:
        if self.parent is None:
            return self
        return self.parent.root

    def __repr__(self) -> str:
        mode = ", absolute" if self.is_absolute else ""
        return f"{type(self).__name__}({self.name!r}{mode})"
