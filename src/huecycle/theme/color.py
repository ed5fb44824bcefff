"""Hue math used to order themes by perceptual similarity."""

from __future__ import annotations

import string
from typing import Any

from .models import ColorTuple, FormatError

_HEX_DIGITS = frozenset(string.hexdigits)
_FULL_TURN = 360.0


def parse_hex_color(color: Any) -> ColorTuple:
    """Parse ``#rrggbb`` (the ``#`` is optional) into 8-bit channels."""

    if not isinstance(color, str):
        raise FormatError(f"Expected a hex color string, received {type(color).__name__}")
    text = color.strip()
    if text.startswith("#"):
        text = text[1:]
    if len(text) != 6 or not _HEX_DIGITS.issuperset(text):
        raise FormatError(f"Invalid hex color: {color!r}")
    return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))


def to_hex(color: ColorTuple) -> str:
    return "#" + "".join(f"{component:02x}" for component in color)


def _hue_from_channels(red: float, green: float, blue: float) -> float:
    high = max(red, green, blue)
    chroma = high - min(red, green, blue)
    if chroma == 0:
        return 0.0
    if high == red:
        sector = ((green - blue) / chroma) % 6
    elif high == green:
        sector = (blue - red) / chroma + 2
    else:
        sector = (red - green) / chroma + 4
    return (60.0 * sector) % _FULL_TURN


def hex_to_hue(color: str) -> float:
    """Return the hue angle of ``color`` in ``[0, 360)``.

    Achromatic colors (zero chroma) report a hue of ``0``.
    """

    red, green, blue = (channel / 255.0 for channel in parse_hex_color(color))
    return _hue_from_channels(red, green, blue)


def hex_to_hsl(color: str) -> tuple[float, float, float]:
    """Return ``(hue, saturation, lightness)``; hue in degrees, the rest in ``[0, 1]``."""

    red, green, blue = (channel / 255.0 for channel in parse_hex_color(color))
    high = max(red, green, blue)
    low = min(red, green, blue)
    lightness = (high + low) / 2
    chroma = high - low
    if chroma == 0:
        return 0.0, 0.0, lightness
    saturation = chroma / (1 - abs(2 * lightness - 1))
    return _hue_from_channels(red, green, blue), min(saturation, 1.0), lightness


def hue_distance(a: float, b: float) -> float:
    """Shortest angular distance between two hues, in ``[0, 180]``."""

    delta = abs(a - b) % _FULL_TURN
    return min(delta, _FULL_TURN - delta)


def hue_difference(color_a: str, color_b: str) -> float:
    return hue_distance(hex_to_hue(color_a), hex_to_hue(color_b))


def blend_colors(start: ColorTuple, end: ColorTuple, t: float) -> ColorTuple:
    """Linearly interpolate between two RGB colors; ``t`` is clamped to ``[0, 1]``."""

    weight = min(max(float(t), 0.0), 1.0)
    return tuple(  # type: ignore[return-value]
        int(round(a + (b - a) * weight)) for a, b in zip(start, end)
    )


__all__ = [
    "blend_colors",
    "hex_to_hsl",
    "hex_to_hue",
    "hue_difference",
    "hue_distance",
    "parse_hex_color",
    "to_hex",
]
