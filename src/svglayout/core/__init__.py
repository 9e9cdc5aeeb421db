"""Element, box model and geometry primitives."""

from .bounded import Bounded, BoxView, Positionable
from .element import Element, PositionMode
from .errors import ConfigurationError, LayoutError, LayoutResolutionError, MissingGeometryWarning
from .geometry import Align, Axis, BoxKind, Edge, Point, PointName, Rect, Size
from .sizing import SizeMode, SizeSpec
from .units import Insets, parse_unit

__all__ = [
    "Element",
    "PositionMode",
    "Bounded",
    "BoxView",
    "Positionable",
    "LayoutError",
    "ConfigurationError",
    "LayoutResolutionError",
    "MissingGeometryWarning",
    "Align",
    "Axis",
    "BoxKind",
    "Edge",
    "Point",
    "PointName",
    "Rect",
    "Size",
    "SizeMode",
    "SizeSpec",
    "Insets",
    "parse_unit",
]
