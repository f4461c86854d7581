from __future__ import annotations

import math
from typing import Union

from .models import Arena, ArenaShape, Vec2, Vec3

Point = Union[Vec2, Vec3]

# cos/sin of 22.5 degrees: an octagon's corner is cut this far along each axis
_OCTAGON_CORNER_CUT = 0.3827

IRREGULAR_INSET = 0.85


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def distance_2d(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def polar_to_vec(angle: float, dist: float) -> Vec3:
    return Vec3(math.cos(angle) * dist, math.sin(angle) * dist, 0.0)


def inside_circle(point: Point, center: Point, radius: float) -> bool:
    return distance_2d(point, center) <= radius


def inside_rect(point: Point, center: Point, half_width: float, half_height: float) -> bool:
    return abs(point.x - center.x) <= half_width and abs(point.y - center.y) <= half_height


def inside_octagon(point: Point, center: Point, radius: float) -> bool:
    dx = abs(point.x - center.x)
    dy = abs(point.y - center.y)
    if dx > radius or dy > radius:
        return False
    return dx + dy <= radius + radius * _OCTAGON_CORNER_CUT


def point_inside_arena(point: Point, arena: Arena) -> bool:
    """Precise containment test for the arena's actual shape.

    Irregular arenas are approximated by a circle shrunk to the innermost
    wobble of their outline.
    """
    shape = arena.shape
    if shape is ArenaShape.RING:
        return inside_circle(point, arena.center, arena.radius) and not inside_circle(
            point, arena.center, arena.inner_radius or 0.0
        )
    if shape is ArenaShape.OCTAGON:
        return inside_octagon(point, arena.center, arena.radius)
    if shape is ArenaShape.SQUARE:
        return inside_rect(point, arena.center, arena.radius, arena.radius)
    if shape is ArenaShape.IRREGULAR:
        return inside_circle(point, arena.center, arena.radius * IRREGULAR_INSET)
    return inside_circle(point, arena.center, arena.radius)
