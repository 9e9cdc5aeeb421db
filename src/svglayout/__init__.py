"""Box-model layout engine for SVG diagrams."""

from .core import (
    Align,
    BoxKind,
    ConfigurationError,
    LayoutError,
    LayoutResolutionError,
    MissingGeometryWarning,
    Point,
    PointName,
    Size,
)
from .layout import Artboard, Columns, Container, DiagramLoader, Grid, HStack, Stack, VStack, ZStack
from .shapes import Circle, Line, Rect, Square, Text
from .styles import Style, Theme, ThemeLoader

__version__ = "0.1.0"

__all__ = [
    "Artboard",
    "Container",
    "Stack",
    "HStack",
    "VStack",
    "ZStack",
    "Grid",
    "Columns",
    "DiagramLoader",
    "Rect",
    "Square",
    "Circle",
    "Line",
    "Text",
    "Style",
    "Theme",
    "ThemeLoader",
    "Align",
    "BoxKind",
    "Point",
    "PointName",
    "Size",
    "LayoutError",
    "ConfigurationError",
    "LayoutResolutionError",
    "MissingGeometryWarning",
]
