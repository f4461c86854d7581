"""Procedural colour palettes keyed by lighting preset.

Colours are built in HSL and emitted as ``#rrggbb`` strings. The base hue is
always the first draw, even for presets that ignore it, so the RNG advances
identically whatever preset is chosen.
"""
from __future__ import annotations

import math
import re
from typing import Tuple

from .models import LightingPreset, Palette
from .rng import RNG

RGB = Tuple[int, int, int]

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """h in degrees, s and l in percent."""
    s /= 100.0
    l /= 100.0
    a = s * min(l, 1 - l)

    def channel(n: int) -> int:
        k = (n + h / 30.0) % 12
        return _round_half_up(255 * (l - a * max(-1.0, min(k - 3, 9 - k, 1.0))))

    return channel(0), channel(8), channel(4)


def rgb_to_hex(rgb: RGB) -> str:
    return "#" + "".join(f"{c:02x}" for c in rgb)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return rgb_to_hex(hsl_to_rgb(h, s, l))


def hex_to_rgb(value: str) -> RGB:
    """Parse ``#rrggbb``; anything unparseable maps to black."""
    m = _HEX_RE.match(value)
    if not m:
        return 0, 0, 0
    return int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16)


def generate_palette(rng: RNG, preset: LightingPreset) -> Palette:
    hue = rng.range(0, 360)

    if preset is LightingPreset.NEON:
        sat = rng.range(80, 100)
        return Palette(
            background=hsl_to_hex(hue, 30, 8),
            primary=hsl_to_hex(hue, sat, 50),
            secondary=hsl_to_hex((hue + 60) % 360, sat, 45),
            accent=hsl_to_hex((hue + 180) % 360, sat, 55),
            enemy=hsl_to_hex((hue + 120) % 360, sat, 50),
            hazard=hsl_to_hex(0, 100, 50),
        )
    if preset is LightingPreset.LOWPOLY:
        sat = rng.range(40, 60)
        return Palette(
            background=hsl_to_hex(hue, 20, 15),
            primary=hsl_to_hex(hue, sat, 45),
            secondary=hsl_to_hex((hue + 40) % 360, sat, 40),
            accent=hsl_to_hex((hue + 200) % 360, sat, 50),
            enemy=hsl_to_hex((hue + 150) % 360, sat, 45),
            hazard=hsl_to_hex(30, 80, 50),
        )
    if preset is LightingPreset.PASTEL:
        sat = rng.range(50, 70)
        light = rng.range(70, 85)
        return Palette(
            background=hsl_to_hex(hue, 30, 90),
            primary=hsl_to_hex(hue, sat, light),
            secondary=hsl_to_hex((hue + 30) % 360, sat, light - 5),
            accent=hsl_to_hex((hue + 180) % 360, sat, light),
            enemy=hsl_to_hex((hue + 90) % 360, sat, light - 10),
            hazard=hsl_to_hex(350, 70, 70),
        )
    if preset is LightingPreset.WIREFRAME:
        return Palette(
            background="#0a0a0a",
            primary="#00ff88",
            secondary="#00cc66",
            accent="#ffffff",
            enemy="#ff3366",
            hazard="#ffaa00",
        )
    if preset is LightingPreset.DARK:
        sat = rng.range(20, 40)
        return Palette(
            background=hsl_to_hex(hue, 15, 5),
            primary=hsl_to_hex(hue, sat, 25),
            secondary=hsl_to_hex((hue + 20) % 360, sat, 20),
            accent=hsl_to_hex((hue + 180) % 360, 60, 40),
            enemy=hsl_to_hex(0, 50, 35),
            hazard=hsl_to_hex(30, 70, 35),
        )
    # sunset is fixed
    return Palette(
        background=hsl_to_hex(250, 40, 12),
        primary=hsl_to_hex(30, 80, 50),
        secondary=hsl_to_hex(350, 70, 45),
        accent=hsl_to_hex(45, 90, 55),
        enemy=hsl_to_hex(280, 60, 45),
        hazard=hsl_to_hex(0, 85, 50),
    )
