"""Tests for path-data text helpers."""

import pytest

from svgbuilder.utils.pathdata import canonicalize_path_data, format_number, points_to_path_data


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("10.500000  20,   ,30.00", "10.5 20 30"),
        ("10", "10"),
        ("M10,20 L30.50,40.0", "M10 20 L30.5 40"),
        ("M 10.000,20.500   L 30.250 , 40.00", "M 10 20.5 L 30.25 40"),
        (".50", ".5"),
        ("0.0", "0"),
        ("1.0.5", "1 .5"),
        ("M8 14s1.5 2 4 2 4-2 4-2", "M8 14s1.5 2 4 2 4-2 4-2"),
        ("  M0 0\n\tL1 1  ", "M0 0 L1 1"),
        ("", ""),
    ],
)
def test_canonicalize(raw, expected):
    assert canonicalize_path_data(raw) == expected


def test_canonicalize_is_stable():
    once = canonicalize_path_data("M 1.100 , 2.000 L3.0.50")
    assert canonicalize_path_data(once) == once


def test_format_number():
    assert format_number(10.0) == "10"
    assert format_number(2.5) == "2.5"
    assert format_number(1 / 3) == "0.333"
    assert format_number(-0.0001) == "0"
    assert format_number(-1.25) == "-1.25"


def test_points_to_path_data():
    assert points_to_path_data([]) == ""
    assert points_to_path_data([(0, 0), (10.5, 2), (3, 4.25)]) == "M 0 0 L 10.5 2 L 3 4.25"
