from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from ..config import DEFAULT_LIMITS, GenerationLimits
from ..geometry import distance_2d, polar_to_vec
from ..models import Arena, HazardTiming, HazardType, HazardZone, Obstacle, Vec2
from ..rng import RNG

logger = logging.getLogger(__name__)

# Floors below this never get hazards
HAZARD_MIN_FLOOR = 3
MAX_PLACEMENT_ATTEMPTS = 15
PLACEMENT_BAND = (0.3, 0.8)
HAZARD_RADIUS_RANGE = (1.5, 3.0)
# Extra gap kept between a hazard edge and obstacles/other hazards
CLEARANCE = 1.0

HAZARD_TYPES: Sequence[HazardType] = (HazardType.DAMAGE, HazardType.SLOW, HazardType.KNOCKBACK)


def max_hazards_for_floor(floor_number: int, limits: GenerationLimits = DEFAULT_LIMITS) -> int:
    if floor_number < HAZARD_MIN_FLOOR:
        return 0
    return min(1 + floor_number // 4, limits.max_hazards)


def _blocked(position: Vec2, radius: float, obstacles: Sequence[Obstacle], placed: Sequence[HazardZone]) -> bool:
    for obs in obstacles:
        if distance_2d(position, obs.position) < radius + CLEARANCE:
            return True
    for other in placed:
        if distance_2d(position, other.position) < radius + other.radius + CLEARANCE:
            return True
    return False


def _timing(rng: RNG) -> HazardTiming:
    return HazardTiming(
        active=rng.chance(0.5),
        interval_ms=rng.range(2000, 4000),
        duration_ms=rng.range(1000, 2000),
        offset_ms=rng.range(0, 1000),
    )


def place_hazard(
    arena: Arena,
    obstacles: Sequence[Obstacle],
    placed: Sequence[HazardZone],
    color: str,
    rng: RNG,
) -> Optional[HazardZone]:
    lo, hi = PLACEMENT_BAND
    for _ in range(MAX_PLACEMENT_ATTEMPTS):
        angle = rng.range_float(0, math.pi * 2)
        dist = rng.range_float(arena.radius * lo, arena.radius * hi)
        position = polar_to_vec(angle, dist).xy()
        radius = rng.range_float(*HAZARD_RADIUS_RANGE)
        if _blocked(position, radius, obstacles, placed):
            continue

        hazard_type = rng.pick(HAZARD_TYPES)
        damage = rng.range(1, 2) if hazard_type is HazardType.DAMAGE else 0
        return HazardZone(
            type=hazard_type,
            position=position,
            radius=radius,
            damage=damage,
            timing=_timing(rng),
            visual_hint=color,
        )
    return None


def generate_hazards(
    arena: Arena,
    obstacles: Sequence[Obstacle],
    floor_number: int,
    color: str,
    rng: RNG,
    limits: GenerationLimits = DEFAULT_LIMITS,
) -> List[HazardZone]:
    """Place hazard zones clear of obstacles and of each other.

    Early floors return an empty list without touching the RNG.
    """
    if floor_number < HAZARD_MIN_FLOOR:
        return []

    count = rng.range(0, max_hazards_for_floor(floor_number, limits))
    hazards: List[HazardZone] = []
    for _ in range(count):
        hazard = place_hazard(arena, obstacles, hazards, color, rng)
        if hazard is not None:
            hazards.append(hazard)
    if len(hazards) < count:
        logger.debug("Floor %d: placed %d of %d hazards", floor_number, len(hazards), count)
    return hazards
