"""Leaf shapes that take part in layout."""

from .base import Shape
from .primitives import Circle, Line, Rect, Square
from .text import Text, TextMeasurer

__all__ = ["Shape", "Rect", "Square", "Circle", "Line", "Text", "TextMeasurer"]
