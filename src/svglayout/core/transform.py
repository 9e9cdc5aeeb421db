"""Transform records and their composition.

Elements keep an ordered list of transforms instead of a baked matrix, so the
list can be inspected and replayed. Matrices are 3x3 homogeneous matrices in
SVG's coordinate system (y down, positive angles turn clockwise).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from ..render.svg import fmt
from .geometry import Point


@dataclass(frozen=True)
class Rotate:
    """Rotation by an angle in degrees around a pivot.

    Attributes:
        degrees: Rotation angle, clockwise on screen
        pivot: Pivot point in untransformed absolute coordinates. None means the
            element's own center at the time the rotation is applied.
    """

    degrees: float
    pivot: Point | None = None

    kind: ClassVar[str] = "rotate"

    def to_matrix(self, pivot: Point) -> NDArray[np.float64]:
        """Convert to a 3x3 matrix rotating around the resolved pivot."""
        theta = np.deg2rad(self.degrees)
        cos_t, sin_t = np.cos(theta), np.sin(theta)
        px, py = pivot
        # T(p) @ R @ T(-p)
        return np.array([
            [cos_t, -sin_t, px - cos_t * px + sin_t * py],
            [sin_t, cos_t, py - sin_t * px - cos_t * py],
            [0.0, 0.0, 1.0],
        ], dtype=np.float64)

    def to_svg(self, pivot: Point) -> str:
        return f"rotate({fmt(self.degrees)} {fmt(pivot.x)} {fmt(pivot.y)})"


@dataclass(frozen=True)
class Translate:
    """Translation by a fixed offset in pixels."""

    dx: float
    dy: float

    kind: ClassVar[str] = "translate"

    def to_matrix(self, pivot: Point | None = None) -> NDArray[np.float64]:
        t = np.eye(3, dtype=np.float64)
        t[0, 2] = self.dx
        t[1, 2] = self.dy
        return t


Transform = Rotate | Translate

# A transform together with the pivot it resolved to, in application order
ResolvedStep = tuple[Transform, Point]


def identity() -> NDArray[np.float64]:
    return np.eye(3, dtype=np.float64)


def apply(matrix: NDArray[np.float64], point: Point) -> Point:
    """Apply a 3x3 matrix to a point."""
    x, y, _ = matrix @ np.array([point.x, point.y, 1.0], dtype=np.float64)
    return Point(float(x), float(y))


def resolve_steps(
    transforms: Iterable[Transform], own_center: Point
) -> list[ResolvedStep]:
    """Resolve the pivots of one element's transforms.

    A rotation without an explicit pivot turns around the element's center as
    moved by the transforms before it in the list.

    Args:
        transforms: The element's transforms, in the order they were added
        own_center: The element's untransformed center

    Returns:
        (transform, pivot) pairs in application order
    """
    steps: list[ResolvedStep] = []
    matrix = identity()
    for transform in transforms:
        if isinstance(transform, Rotate) and transform.pivot is not None:
            pivot = transform.pivot
        else:
            pivot = apply(matrix, own_center)
        steps.append((transform, pivot))
        matrix = transform.to_matrix(pivot) @ matrix
    return steps


def compose(steps: Iterable[ResolvedStep]) -> NDArray[np.float64]:
    """Compose resolved steps into one matrix; the first step is applied first."""
    matrix = identity()
    for transform, pivot in steps:
        matrix = transform.to_matrix(pivot) @ matrix
    return matrix


def split_translation(steps: list[ResolvedStep]) -> tuple[Point, list[ResolvedStep]]:
    """Separate the translations of a chain from its rotations.

    Translating after a rotation equals rotating around a pivot moved by the
    same offset, so every translation can be pulled to the front of the chain.
    Drawn coordinates absorb the total offset and only rotations remain.

    Returns:
        The total offset, and the rotations (pivots moved by the translations
        applied after them) in application order
    """
    offset = Point(0.0, 0.0)
    rotations: list[ResolvedStep] = []
    for transform, pivot in reversed(steps):
        if isinstance(transform, Translate):
            offset = offset + (transform.dx, transform.dy)
        else:
            rotations.append((transform, pivot + offset))
    rotations.reverse()
    return offset, rotations


def to_svg_attribute(steps: list[ResolvedStep]) -> str | None:
    """Render the rotations of a chain as an SVG transform attribute value.

    Translations are left out; callers draw at coordinates shifted by the
    offset from ``split_translation``. SVG applies the rightmost function
    first, so the rotations are written reversed. Returns None when the chain
    has no rotation.
    """
    _, rotations = split_translation(steps)
    if not rotations:
        return None
    return " ".join(transform.to_svg(pivot) for transform, pivot in reversed(rotations))
