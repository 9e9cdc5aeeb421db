"""Tests for the SVG element helpers."""

import xml.etree.ElementTree as ET

import pytest

from svglayout.render.svg import comment, document, element, fmt, fragment, sub_element


@pytest.mark.parametrize("value, text", [
    (3, "3"),
    (2.0, "2"),
    (0.1 + 0.2, "0.30000000000000004"),
    (-1.5, "-1.5"),
])
def test_fmt_round_trips(value, text):
    assert fmt(value) == text
    assert float(fmt(value)) == value


def test_fmt_rejects_non_finite():
    with pytest.raises(ValueError):
        fmt(float("nan"))


def test_element_skips_none_and_formats_numbers():
    node = element("rect", {"x": 1.0, "y": 2.5, "rx": None, "fill": "red"})
    assert node.attrib == {"x": "1", "y": "2.5", "fill": "red"}


def test_text_is_escaped():
    node = element("text", {"x": 0}, "a < b & c")
    sub_element(node, "tspan", {"x": 0}, "d > e")
    markup = ET.tostring(node, encoding="unicode")
    assert "a &lt; b &amp; c" in markup
    assert ET.fromstring(markup).find("tspan").text == "d > e"


def test_comment_cannot_close_early():
    markup = fragment([comment("a -- b")])
    assert markup == "<!-- a - - b -->"


def test_document_wraps_nodes():
    svg = document(120, 80.5, [comment("box"), element("rect", {"x": 0, "y": 0})])
    root = ET.fromstring(svg)
    assert root.tag == "{http://www.w3.org/2000/svg}svg"
    assert root.get("viewBox") == "0 0 120 80.5"
    assert [child.tag for child in root] == ["{http://www.w3.org/2000/svg}rect"]
    assert svg.splitlines()[1] == "  <!-- box -->"
