"""Tests for unit parsing, insets and sizing modes."""

import pytest

from svglayout.core.errors import ConfigurationError, LayoutResolutionError
from svglayout.core.sizing import SizeMode, SizeSpec
from svglayout.core.units import Insets, parse_unit


@pytest.mark.parametrize("value,expected", [
    (12, 12.0),
    (2.5, 2.5),
    ("12", 12.0),
    ("12px", 12.0),
    ("2rem", 32.0),
    ("1.5em", 24.0),
    ("12pt", 16.0),
    ("1in", 96.0),
    ("2.54cm", 96.0),
    ("-4px", -4.0),
])
def test_parse_unit(value, expected):
    assert parse_unit(value) == pytest.approx(expected)


@pytest.mark.parametrize("value", ["12 furlongs", "px", "", True, None, float("nan"), [1]])
def test_parse_unit_rejects_invalid(value):
    with pytest.raises(ConfigurationError):
        parse_unit(value)


def test_parse_unit_uses_custom_rem_base():
    assert parse_unit("2rem", base=10) == 20.0


@pytest.mark.parametrize("value,expected", [
    (None, Insets(0, 0, 0, 0)),
    (5, Insets(5, 5, 5, 5)),
    ("1rem", Insets(16, 16, 16, 16)),
    ([4, 8], Insets(4, 8, 4, 8)),
    ([1, 2, 3, 4], Insets(1, 2, 3, 4)),
    ({"top": 3, "left": 7}, Insets(3, 0, 0, 7)),
])
def test_insets_parse(value, expected):
    assert Insets.parse(value) == expected


@pytest.mark.parametrize("value", [-1, [1, -2], {"top": -3}, {"middle": 2}, [1, 2, 3]])
def test_insets_reject_invalid(value):
    with pytest.raises(ConfigurationError):
        Insets.parse(value, "padding")


def test_insets_sums():
    insets = Insets(1, 2, 3, 4)
    assert insets.horizontal == 6
    assert insets.vertical == 4
    assert insets + Insets(1, 1, 1, 1) == Insets(2, 3, 4, 5)
    assert Insets().is_zero()


@pytest.mark.parametrize("value,mode,number", [
    (None, SizeMode.AUTO, None),
    ("auto", SizeMode.AUTO, None),
    (120, SizeMode.FIXED, 120.0),
    ("3rem", SizeMode.FIXED, 48.0),
    ("50%", SizeMode.RELATIVE, 0.5),
])
def test_size_spec_parse(value, mode, number):
    spec = SizeSpec.parse(value)
    assert spec.mode is mode
    assert spec.value == number


def test_size_spec_rejects_negative():
    with pytest.raises(ConfigurationError):
        SizeSpec.parse(-10, "width")


def test_size_spec_resolve():
    assert SizeSpec.parse(80).resolve(500, "n", "width") == 80
    assert SizeSpec.parse("auto").resolve(500, "n", "width") is None
    assert SizeSpec.parse("25%").resolve(400, "n", "width") == 100
    assert SizeSpec.fill().resolve(300, "n", "width") == 300
    assert SizeSpec.fill().resolve(None, "n", "width") is None


def test_relative_size_against_unresolved_parent_fails():
    with pytest.raises(LayoutResolutionError, match="node 'box'"):
        SizeSpec.parse("50%").resolve(None, "box", "width")
