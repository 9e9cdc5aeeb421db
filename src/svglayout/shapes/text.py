"""Text labels measured with Pillow font metrics."""

from __future__ import annotations

import logging
from functools import lru_cache
from xml.etree import ElementTree as ET

from PIL import ImageFont

from ..core.errors import ConfigurationError
from ..core.geometry import BoxKind, Size
from ..core.units import parse_non_negative
from ..render.svg import element, sub_element
from ..styles.style import Style
from .base import Shape

logger = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "DejaVu Sans"

# Font files tried for a family, in order
FONT_FILES: dict[str, list[str]] = {
    "dejavu sans": ["DejaVuSans.ttf"],
    "sans-serif": ["DejaVuSans.ttf", "LiberationSans-Regular.ttf", "Arial.ttf"],
    "serif": ["DejaVuSerif.ttf", "LiberationSerif-Regular.ttf", "Times New Roman.ttf"],
    "monospace": ["DejaVuSansMono.ttf", "LiberationMono-Regular.ttf", "Courier New.ttf"],
}

# Relative advance widths for the width heuristic
_NARROW = set("ilI.,:;!|'`()[]{}")
_WIDE = set("MWmw@%")


def _heuristic_width(text: str, size: float) -> float:
    units = 0.0
    for char in text:
        if char in _NARROW:
            units += 0.3
        elif char in _WIDE:
            units += 0.85
        elif char == " ":
            units += 0.33
        else:
            units += 0.58
    return units * size


class TextMeasurer:
    """Caches Pillow fonts and measures text with them."""

    def font(self, size: float, family: str | None) -> ImageFont.FreeTypeFont | ImageFont.ImageFont | None:
        return _load_font(max(1, round(size)), (family or DEFAULT_FONT_FAMILY).lower())

    def width(self, text: str, size: float, family: str | None) -> float:
        font = self.font(size, family)
        if font is None:
            return _heuristic_width(text, size)
        return float(font.getlength(text))

    def metrics(self, size: float, family: str | None) -> tuple[float, float]:
        """Ascent and descent in pixels."""
        font = self.font(size, family)
        if isinstance(font, ImageFont.FreeTypeFont):
            ascent, descent = font.getmetrics()
            return float(ascent), float(descent)
        return 0.8 * size, 0.2 * size


@lru_cache(maxsize=64)
def _load_font(size: int, family: str) -> ImageFont.FreeTypeFont | ImageFont.ImageFont | None:
    candidates = []
    for name in (part.strip() for part in family.split(",")):
        candidates.extend(FONT_FILES.get(name, [name]))
    candidates.append("DejaVuSans.ttf")
    for candidate in candidates:
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            continue
    try:
        return ImageFont.load_default(size=size)
    except OSError:
        logger.warning("No font available for %r; using a width heuristic", family)
        return None


class Text(Shape):
    """A text label. Its content box is the measured extent of the text.

    Lines are separated by newlines; extra lines are emitted as tspans.

    Args:
        content: The text
        font_size: Font size (a length)
        font_family: Font family, used both for measuring and in the output
        line_spacing: Line height as a multiple of the font size
    """

    default_style = Style(fill="#2c3e50")
    measurer = TextMeasurer()

    def __init__(
        self,
        content: str = "",
        name: str | None = None,
        *,
        font_size=16,
        font_family: str | None = None,
        line_spacing: float = 1.2,
        **kwargs,
    ) -> None:
        if not isinstance(content, str):
            raise ConfigurationError(f"Text content must be a string, got {content!r}", node=name)
        self.content = content
        self.font_size = parse_non_negative(font_size, "font_size")
        self.font_family = font_family
        self.line_spacing = float(line_spacing)
        super().__init__(name, **kwargs)
        if self.font_family is None:
            self.font_family = self.style.font_family

    @property
    def lines(self) -> list[str]:
        return self.content.split("\n")

    def _text_extent(self) -> tuple[float, float]:
        ascent, descent = self.measurer.metrics(self.font_size, self.font_family)
        width = max(self.measurer.width(line, self.font_size, self.font_family) for line in self.lines)
        height = ascent + descent + (len(self.lines) - 1) * self.font_size * self.line_spacing
        return width, height

    def size(self) -> Size:
        width, height = self._text_extent()
        return Size(
            width + self.border.horizontal + self.padding.horizontal,
            height + self.border.vertical + self.padding.vertical,
        )

    def render_shape(self) -> ET.Element:
        content = self.drawn_box(BoxKind.CONTENT)
        ascent, _ = self.measurer.metrics(self.font_size, self.font_family)
        baseline = content.y + ascent
        attrs = self.presentation(x=content.x, y=baseline)
        attrs["font-size"] = self.font_size
        attrs["font-family"] = self.font_family
        lines = self.lines
        if len(lines) == 1:
            return element("text", attrs, lines[0])
        node = element("text", attrs)
        step = self.font_size * self.line_spacing
        for index, line in enumerate(lines):
            sub_element(node, "tspan", {"x": content.x, "y": baseline + index * step}, line)
        return node
