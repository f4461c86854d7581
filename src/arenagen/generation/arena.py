from __future__ import annotations

import logging
from typing import Sequence

from ..config import DEFAULT_LIMITS, GenerationLimits
from ..geometry import clamp
from ..models import Arena, ArenaShape, Bounds, Vec2
from ..rng import RNG

logger = logging.getLogger(__name__)

# Floors at which the arena stops growing
SIZE_RAMP_FLOORS = 20
RADIUS_JITTER = 2.0
RING_INNER_FRACTION = (0.3, 0.5)

EARLY_SHAPES: Sequence[ArenaShape] = (ArenaShape.CIRCLE, ArenaShape.SQUARE)
MID_SHAPES: Sequence[ArenaShape] = (ArenaShape.CIRCLE, ArenaShape.SQUARE, ArenaShape.OCTAGON)
ALL_SHAPES: Sequence[ArenaShape] = (
    ArenaShape.CIRCLE,
    ArenaShape.RING,
    ArenaShape.OCTAGON,
    ArenaShape.SQUARE,
    ArenaShape.IRREGULAR,
)


def shapes_for_floor(floor_number: int) -> Sequence[ArenaShape]:
    """Shapes unlocked at a floor; early floors stay visually simple."""
    if floor_number <= 2:
        return EARLY_SHAPES
    if floor_number <= 5:
        return MID_SHAPES
    return ALL_SHAPES


def base_radius(floor_number: int, limits: GenerationLimits = DEFAULT_LIMITS) -> float:
    """Radius before jitter: climbs halfway from min to max over the first 20 floors."""
    scale = min(floor_number / SIZE_RAMP_FLOORS, 1.0)
    return limits.min_arena_radius + (limits.max_arena_radius - limits.min_arena_radius) * scale * 0.5


def generate_arena(floor_number: int, rng: RNG, limits: GenerationLimits = DEFAULT_LIMITS) -> Arena:
    jitter = rng.range_float(-RADIUS_JITTER, RADIUS_JITTER)
    radius = clamp(base_radius(floor_number, limits) + jitter, limits.min_arena_radius, limits.max_arena_radius)

    shape = rng.pick(shapes_for_floor(floor_number))

    inner_radius = None
    if shape is ArenaShape.RING:
        inner_radius = radius * rng.range_float(*RING_INNER_FRACTION)

    center = Vec2(0.0, 0.0)
    arena = Arena(
        shape=shape,
        radius=radius,
        bounds=Bounds.around(center, radius),
        center=center,
        inner_radius=inner_radius,
    )
    logger.debug("Floor %d arena: shape=%s radius=%.2f", floor_number, shape.value, radius)
    return arena
