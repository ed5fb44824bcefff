"""Tests for the hue math in :mod:`huecycle.theme.color`."""

from __future__ import annotations

import random

import pytest

from huecycle.theme import FormatError
from huecycle.theme.color import (
    blend_colors,
    hex_to_hsl,
    hex_to_hue,
    hue_difference,
    hue_distance,
    parse_hex_color,
    to_hex,
)


@pytest.mark.parametrize(
    ("color", "expected"),
    [
        ("#FF0000", 0.0),
        ("#00FF00", 120.0),
        ("#0000FF", 240.0),
        ("#FFFF00", 60.0),
        ("#00FFFF", 180.0),
        ("#FF00FF", 300.0),
    ],
)
def test_hex_to_hue_primary_and_secondary_colors(color: str, expected: float) -> None:
    assert hex_to_hue(color) == pytest.approx(expected)


def test_hex_to_hue_accepts_missing_marker_and_lowercase() -> None:
    assert hex_to_hue("ff8000") == pytest.approx(hex_to_hue("#FF8000"))
    assert hex_to_hue("#ff8000") == pytest.approx(30.1, abs=0.1)


def test_hex_to_hue_wraps_magenta_side_into_range() -> None:
    hue = hex_to_hue("#FF0080")
    assert 329.0 < hue < 330.5


def test_hex_to_hue_catalog_purples() -> None:
    assert hex_to_hue("#8B5CF6") == pytest.approx(258.3, abs=0.2)
    assert hex_to_hue("#7C3AED") == pytest.approx(262.1, abs=0.2)
    assert hex_to_hue("#6366F1") == pytest.approx(238.7, abs=0.2)


@pytest.mark.parametrize("color", ["#000000", "#FFFFFF", "#808080"])
def test_hex_to_hue_achromatic_is_zero(color: str) -> None:
    assert hex_to_hue(color) == 0.0


@pytest.mark.parametrize("color", ["#FFF", "#GG0000", "FF00000", "", "#12345", "rgb(1,2,3)"])
def test_hex_to_hue_rejects_malformed_strings(color: str) -> None:
    with pytest.raises(FormatError):
        hex_to_hue(color)


def test_parse_hex_color_rejects_non_strings() -> None:
    with pytest.raises(FormatError):
        parse_hex_color(0xFF0000)


def test_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_hex_color("#nothex")


def test_to_hex_renders_lowercase_with_marker() -> None:
    assert to_hex((139, 92, 246)) == "#8b5cf6"
    assert parse_hex_color(to_hex((6, 182, 212))) == (6, 182, 212)


def test_hex_to_hsl_components() -> None:
    hue, saturation, lightness = hex_to_hsl("#FF0000")
    assert hue == pytest.approx(0.0)
    assert saturation == pytest.approx(1.0)
    assert lightness == pytest.approx(0.5)

    hue, saturation, lightness = hex_to_hsl("#808080")
    assert (hue, saturation) == (0.0, 0.0)
    assert lightness == pytest.approx(128 / 255)


def test_hue_distance_takes_the_short_way_round() -> None:
    assert hue_distance(10.0, 350.0) == pytest.approx(20.0)
    assert hue_distance(0.0, 180.0) == pytest.approx(180.0)
    assert hue_distance(90.0, 450.0) == pytest.approx(0.0)


def test_hue_distance_properties_on_samples() -> None:
    rng = random.Random(1234)
    for _ in range(500):
        a = rng.uniform(0.0, 360.0)
        b = rng.uniform(0.0, 360.0)
        forward = hue_distance(a, b)
        assert forward == pytest.approx(hue_distance(b, a))
        assert 0.0 <= forward <= 180.0
        assert hue_distance(a, a) == 0.0


def test_hue_difference_between_hex_colors() -> None:
    assert hue_difference("#FF0000", "#0000FF") == pytest.approx(120.0)
    assert hue_difference("#FF0000", "#FF0000") == 0.0


def test_blend_colors_interpolates_and_clamps() -> None:
    start, end = (0, 0, 0), (200, 100, 50)
    assert blend_colors(start, end, 0.0) == start
    assert blend_colors(start, end, 1.0) == end
    assert blend_colors(start, end, 0.5) == (100, 50, 25)
    assert blend_colors(start, end, 2.0) == end
    assert blend_colors(start, end, -1.0) == start
