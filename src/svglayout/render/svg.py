"""SVG element helpers on top of ElementTree.

Coordinates are written at full float precision so values read back from the
markup equal the values the layout computed.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any
from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element, SubElement

SVG_NS = "http://www.w3.org/2000/svg"


def fmt(value: float) -> str:
    """Format a number without losing precision: integers without a decimal
    point, everything else as the shortest round-tripping repr."""
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot serialize non-finite coordinate {value!r}")
    if value.is_integer():
        return str(int(value))
    return repr(value)


def attributes(attrs: dict[str, Any]) -> dict[str, str]:
    """Attribute values as strings, skipping None. Numbers go through fmt()."""
    result = {}
    for key, value in attrs.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (int, float)):
            value = fmt(value)
        result[key] = str(value)
    return result


def element(name: str, attrs: dict[str, Any], text: str | None = None) -> Element:
    """Build one SVG element."""
    node = Element(name, attributes(attrs))
    node.text = text
    return node


def sub_element(parent: Element, name: str, attrs: dict[str, Any], text: str | None = None) -> Element:
    node = SubElement(parent, name, attributes(attrs))
    node.text = text
    return node


def comment(text: str) -> Element:
    # "--" is not allowed inside XML comments
    return ET.Comment(f" {text.replace('--', '- -')} ")


def fragment(nodes: Iterable[Element]) -> str:
    """Serialize sibling nodes, one per line."""
    return "\n".join(ET.tostring(node, encoding="unicode") for node in nodes)


def document(width: float, height: float, nodes: list[Element]) -> str:
    """Wrap nodes into a standalone SVG document."""
    svg = Element("svg")
    svg.set("xmlns", SVG_NS)
    svg.set("width", fmt(width))
    svg.set("height", fmt(height))
    svg.set("viewBox", f"0 0 {fmt(width)} {fmt(height)}")
    svg.extend(nodes)
    # One level of indentation; text content stays untouched
    svg.text = "\n  " if nodes else None
    for index, node in enumerate(nodes):
        node.tail = "\n" if index == len(nodes) - 1 else "\n  "
    return ET.tostring(svg, encoding="unicode") + "\n"
