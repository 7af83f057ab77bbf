# tests/test_color_invert.py
"""Color inversion: canonical output, currentColor, alpha, double inversion, failures."""

from __future__ import annotations

import importlib

import pytest

inv = importlib.import_module("svg_invert.color.invert")
errors = importlib.import_module("svg_invert.errors")


@pytest.mark.parametrize(
    "literal, expected",
    [
        ("#000000", "#FFFFFFFF"),
        ("#FFFFFF", "#000000FF"),
        ("#FF0000", "#00FFFFFF"),
        ("#00FF00", "#FF00FFFF"),
        ("#0000FF", "#FFFF00FF"),
        ("#FF00FF", "#00FF00FF"),
        ("#00FFFF", "#FF0000FF"),
        ("#FFFF00", "#0000FFFF"),
    ],
)
def test_invert_primary_colors(literal, expected):
    assert inv.invert_color(literal) == expected


def test_current_color_is_returned_unchanged():
    assert inv.invert_color("currentColor") == "currentColor"


def test_current_color_match_is_case_sensitive():
    # only the exact keyword is special; other spellings go through the parser
    with pytest.raises(errors.UnparseableColor):
        inv.invert_color("currentcolor")


def test_alpha_channel_is_kept():
    assert inv.invert_color("#11223380") == "#EEDDCC80"
    assert inv.invert_color("transparent") == "#FFFFFF00"


def test_other_formats_are_normalized_to_rrggbbaa():
    assert inv.invert_color("#f00") == "#00FFFFFF"
    assert inv.invert_color("white") == "#000000FF"
    assert inv.invert_color("rgb(0, 128, 255)") == "#FF7F00FF"


def test_double_inversion_of_canonical_form_is_identity():
    for literal in ("#12345678", "#00000000", "#FFFFFFFF", "#A1B2C3D4"):
        assert inv.invert_color(inv.invert_color(literal)) == literal


def test_unparseable_literal_raises_color_error():
    with pytest.raises(errors.ColorError) as exc:
        inv.invert_color("not-a-color")
    assert exc.value.literal == "not-a-color"
    assert isinstance(exc.value, ValueError)


def test_invert_rgba_and_format_helpers():
    assert inv.invert_rgba((10, 20, 30, 40)) == (245, 235, 225, 40)
    assert inv.format_rgba((0, 10, 171, 255)) == "#000AABFF"
