"""Tonal variants of a base color for drilldown and overlay charts.

Shades keep the hue and saturation of the base color and raise its
lightness in equal steps, up to 50% lighter for the last shade.
"""

from __future__ import annotations

import colorsys
import re
from typing import NamedTuple

MAX_LIGHTNESS_SHIFT = 0.5

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class Hsl(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in [0, 1]."""

    hue: float
    saturation: float
    lightness: float


def hex_to_hsl(color: str) -> Hsl:
    """Convert "#RRGGBB" (or shorthand "#RGB") to HSL.

    Raises:
        ValueError: If ``color`` is not a hexadecimal RGB string
    """
    match = _HEX_RE.match(color)
    if not match:
        raise ValueError(f"Not a hexadecimal RGB color: {color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    r, g, b = (int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return Hsl(h * 360, s, l)


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Convert HSL (hue in degrees) back to lowercase "#rrggbb"."""
    r, g, b = colorsys.hls_to_rgb((hue / 360) % 1.0, lightness, saturation)
    return "#" + "".join(f"{_to_byte(c):02x}" for c in (r, g, b))


def _to_byte(channel: float) -> int:
    # Round half up, clamped to a byte
    return max(0, min(255, int(channel * 255 + 0.5)))


def gradient_shades(color: str, count: int) -> list[str]:
    """Return ``count`` shades of ``color`` from the base to 50% lighter.

    Shade ``i`` has lightness ``l + (i / max(1, count - 1)) * 0.5`` clamped
    to [0, 1], so a single shade is the base color itself.

    Args:
        color: Base color as "#RRGGBB" or "#RGB"
        count: Number of shades (at least 1)

    Raises:
        ValueError: If ``count`` is less than 1 or ``color`` is not hex RGB
    """
    if count < 1:
        raise ValueError(f"Shade count must be at least 1, got: {count}")

    base = hex_to_hsl(color)
    shades = []
    for i in range(count):
        factor = (i / max(1, count - 1)) * MAX_LIGHTNESS_SHIFT
        lightness = min(1.0, max(0.0, base.lightness + factor))
        shades.append(hsl_to_hex(base.hue, base.saturation, lightness))
    return shades
