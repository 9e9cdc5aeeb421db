"""Presentation styles and YAML themes."""

from .style import Style
from .theme import Theme, ThemeLoader

__all__ = ["Style", "Theme", "ThemeLoader"]
