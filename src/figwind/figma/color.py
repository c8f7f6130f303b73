"""
Color conversion helpers.

Figma stores colors as RGBA channels in the 0..1 range; Tailwind output uses
``rgba(r, g, b, a)`` with 0..255 channels and a three-decimal alpha. String
colors (hex, rgb/rgba, hsl/hsla) are normalized to the same shape.
"""

from __future__ import annotations

import math
import re

from figwind.figma.models import Color
from figwind.figma.units import to_fixed

_RGB_RE = re.compile(r"rgba?\((\d+),\s*(\d+),\s*(\d+)(?:,\s*([0-9.]+))?\)")
_HSL_RE = re.compile(r"hsla?\((\d+),\s*(\d+)%,\s*(\d+)%(?:,\s*([0-9.]+))?\)")


def _round_channel(value: float) -> int:
    # Half-up rounding (0.5 -> 1), unlike Python's banker's rounding
    return math.floor(value + 0.5)


def _rgba(r: int, g: int, b: int, a: float) -> str:
    return f"rgba({r}, {g}, {b}, {to_fixed(a)})"


def color_to_rgba(color: Color) -> str:
    """
    Convert a Figma color to an ``rgba()`` string.

    Examples:
        color_to_rgba(Color(r=1, g=0, b=0, a=1))
        # -> "rgba(255, 0, 0, 1.000)"
    """
    return _rgba(
        _round_channel(color.r * 255),
        _round_channel(color.g * 255),
        _round_channel(color.b * 255),
        color.a,
    )


def hex_to_rgba(value: str) -> str:
    """Convert ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA`` to ``rgba()``."""
    digits = value.replace("#", "", 1)
    try:
        if len(digits) in (3, 4):
            r, g, b = (int(ch * 2, 16) for ch in digits[:3])
            a = int(digits[3] * 2, 16) / 255 if len(digits) == 4 else 1.0
        elif len(digits) in (6, 8):
            r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
            a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        else:
            raise ValueError(f"Invalid hex color: {value}")
    except ValueError as e:
        raise ValueError(f"Invalid hex color: {value}") from e
    return _rgba(r, g, b, a)


def normalize_rgba(value: str) -> str:
    """Normalize an ``rgb()``/``rgba()`` string to ``rgba()`` with a fixed alpha."""
    match = _RGB_RE.search(value)
    if not match:
        raise ValueError(f"Invalid rgb/rgba color: {value}")
    r, g, b, a = match.groups()
    return _rgba(int(r), int(g), int(b), float(a) if a is not None else 1.0)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgba(value: str) -> str:
    """Convert an ``hsl()``/``hsla()`` string to ``rgba()``."""
    match = _HSL_RE.search(value)
    if not match:
        raise ValueError(f"Invalid hsl/hsla color: {value}")
    h, s, lightness, a = match.groups()
    alpha = float(a) if a is not None else 1.0

    hue = int(h) / 360
    sat = int(s) / 100
    light = int(lightness) / 100

    if sat == 0:
        r = g = b = light
    else:
        q = light * (1 + sat) if light < 0.5 else light + sat - light * sat
        p = 2 * light - q
        r = _hue_to_rgb(p, q, hue + 1 / 3)
        g = _hue_to_rgb(p, q, hue)
        b = _hue_to_rgb(p, q, hue - 1 / 3)

    return _rgba(_round_channel(r * 255), _round_channel(g * 255), _round_channel(b * 255), alpha)


def css_color_to_rgba(value: str) -> str:
    """
    Normalize a CSS color string to ``rgba()``.

    Raises:
        ValueError: If the string is not a hex, rgb(a) or hsl(a) color
    """
    text = value.strip()
    if text.startswith("#"):
        return hex_to_rgba(text)
    if text.startswith("rgb"):
        return normalize_rgba(text)
    if text.startswith("hsl"):
        return hsl_to_rgba(text)
    raise ValueError(f"Unsupported color format: {value}")
