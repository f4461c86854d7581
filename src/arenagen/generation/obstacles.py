from __future__ import annotations

import logging
import math
from typing import Callable, Dict, List, Optional, Sequence

from ..config import DEFAULT_LIMITS, GenerationLimits
from ..geometry import distance_2d, polar_to_vec
from ..models import ORIGIN, Arena, Obstacle, ObstacleType, Size3
from ..rng import RNG

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 20
MIN_OBSTACLE_SEPARATION = 2.5
# Kept clear around the arena centre for spawns
CENTER_EXCLUSION_RADIUS = 3.0
PLACEMENT_BAND = (0.2, 0.75)
DESTRUCTIBLE_CHANCE = 0.2
DESTRUCTIBLE_MIN_FLOOR = 5
PILLAR_RADIUS_RANGE = (0.5, 1.2)

OBSTACLE_TYPES: Sequence[ObstacleType] = (
    ObstacleType.COVER,
    ObstacleType.PILLAR,
    ObstacleType.PLATFORM,
    ObstacleType.BLOCKER,
)
COVER_TYPES = frozenset({ObstacleType.COVER, ObstacleType.PILLAR})


def _cover_size(rng: RNG) -> Size3:
    return Size3(
        width=rng.range_float(1.5, 3),
        height=rng.range_float(1, 1.5),
        depth=rng.range_float(0.5, 1),
    )


def _pillar_size(rng: RNG) -> Size3:
    side = rng.range_float(0.8, 1.5)
    return Size3(width=side, height=rng.range_float(2, 4), depth=side)


def _platform_size(rng: RNG) -> Size3:
    return Size3(
        width=rng.range_float(2, 4),
        height=rng.range_float(0.3, 0.6),
        depth=rng.range_float(2, 4),
    )


def _blocker_size(rng: RNG) -> Size3:
    return Size3(
        width=rng.range_float(1, 2),
        height=rng.range_float(1.5, 3),
        depth=rng.range_float(1, 2),
    )


_SIZERS: Dict[ObstacleType, Callable[[RNG], Size3]] = {
    ObstacleType.COVER: _cover_size,
    ObstacleType.PILLAR: _pillar_size,
    ObstacleType.PLATFORM: _platform_size,
    ObstacleType.BLOCKER: _blocker_size,
}


def obstacle_size(obstacle_type: ObstacleType, rng: RNG) -> Size3:
    """Draw a size for the type: pillars tall and narrow, platforms low and wide."""
    return _SIZERS[obstacle_type](rng)


def target_obstacle_count(floor_number: int, rng: RNG, limits: GenerationLimits = DEFAULT_LIMITS) -> int:
    base = min(3 + floor_number // 3, limits.max_obstacles)
    return rng.range(max(1, base - 2), base)


def _too_close(position, existing: List[Obstacle]) -> bool:
    for other in existing:
        if distance_2d(position, other.position) < MIN_OBSTACLE_SEPARATION:
            return True
    return distance_2d(position, ORIGIN) < CENTER_EXCLUSION_RADIUS


def place_obstacle(arena: Arena, existing: List[Obstacle], floor_number: int, rng: RNG) -> Optional[Obstacle]:
    """Rejection-sample one obstacle; None when every attempt collided."""
    lo, hi = PLACEMENT_BAND
    for _ in range(MAX_PLACEMENT_ATTEMPTS):
        angle = rng.range_float(0, math.pi * 2)
        dist = rng.range_float(arena.radius * lo, arena.radius * hi)
        position = polar_to_vec(angle, dist)
        if _too_close(position, existing):
            continue

        obstacle_type = rng.pick(OBSTACLE_TYPES)
        size = obstacle_size(obstacle_type, rng)
        # the coin is drawn on every floor to keep the sequence stable
        destructible = rng.chance(DESTRUCTIBLE_CHANCE) and floor_number > DESTRUCTIBLE_MIN_FLOOR
        radius = rng.range_float(*PILLAR_RADIUS_RANGE) if obstacle_type is ObstacleType.PILLAR else None
        return Obstacle(
            type=obstacle_type,
            position=position,
            size=size,
            provide_cover=obstacle_type in COVER_TYPES,
            destructible=destructible,
            radius=radius,
        )
    return None


def generate_obstacles(
    arena: Arena,
    floor_number: int,
    rng: RNG,
    limits: GenerationLimits = DEFAULT_LIMITS,
) -> List[Obstacle]:
    count = target_obstacle_count(floor_number, rng, limits)
    obstacles: List[Obstacle] = []
    for _ in range(count):
        obstacle = place_obstacle(arena, obstacles, floor_number, rng)
        if obstacle is not None:
            obstacles.append(obstacle)
    if len(obstacles) < count:
        logger.debug("Floor %d: placed %d of %d obstacles", floor_number, len(obstacles), count)
    return obstacles
