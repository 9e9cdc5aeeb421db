"""Base class for leaf shapes."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar
from xml.etree import ElementTree as ET

from ..core.bounded import Bounded
from ..render.svg import comment
from ..styles.style import Style


class Shape(Bounded):
    """A leaf element that draws itself.

    Every shape reports its border-box size through ``size()``; layouts never
    look at shape-specific attributes such as a radius or a font size.
    """

    default_style: ClassVar[Style] = Style(fill="#ecf0f1", stroke="#2c3e50", stroke_width=1.0)

    def __init__(self, name: str | None = None, *, style=None, **kwargs) -> None:
        self.style = self.default_style.merge(Style.coerce(style))
        super().__init__(name, **kwargs)

    def presentation(self, **geometry: Any) -> dict[str, Any]:
        """Geometry attributes followed by style and transform attributes."""
        return {**geometry, **self.style.to_attributes(), "transform": self.transform_attribute()}

    @abstractmethod
    def render_shape(self) -> ET.Element:
        """The SVG element for this shape."""

    def render_nodes(self) -> list[ET.Element]:
        nodes = [self.render_shape()]
        if self.has_explicit_name:
            nodes.insert(0, comment(f"{type(self).__name__} {self.name}"))
        return nodes
