"""Player and enemy spawn placement.

The player is sampled in the lower sector of the arena and the enemy in the
upper one, so the two start facing each other across the middle. Both sides
fall back to a fixed point on the vertical axis when sampling runs out of
attempts; that point is always inside the arena but may sit next to an
obstacle, which is why the assembled floor still goes through validation.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

from ..geometry import distance_2d, polar_to_vec
from ..models import Arena, Obstacle, SpawnPoint, Vec3

logger = logging.getLogger(__name__)

MAX_SPAWN_ATTEMPTS = 30
SPAWN_DISTANCE_BAND = (0.4, 0.7)
PLAYER_SECTOR = (-math.pi * 0.8, -math.pi * 0.2)
ENEMY_SECTOR = (math.pi * 0.2, math.pi * 0.8)
# Clearance used for obstacles without an explicit radius
DEFAULT_OBSTACLE_RADIUS = 1.5
SPAWN_CLEARANCE = 1.5
MIN_SPAWN_SEPARATION = 4.0

PLAYER_FACING = math.pi / 2
ENEMY_FACING = -math.pi / 2


def _clear_of_obstacles(position: Vec3, obstacles: Sequence[Obstacle]) -> bool:
    for obs in obstacles:
        if distance_2d(position, obs.position) < (obs.radius or DEFAULT_OBSTACLE_RADIUS) + SPAWN_CLEARANCE:
            return False
    return True


def _sample(arena: Arena, sector: Tuple[float, float], rng) -> Vec3:
    angle = rng.range_float(*sector)
    dist = arena.radius * rng.range_float(*SPAWN_DISTANCE_BAND)
    return polar_to_vec(angle, dist)


def generate_player_spawn(arena: Arena, obstacles: Sequence[Obstacle], rng) -> SpawnPoint:
    for _ in range(MAX_SPAWN_ATTEMPTS):
        position = _sample(arena, PLAYER_SECTOR, rng)
        if _clear_of_obstacles(position, obstacles):
            return SpawnPoint(position=position, facing=PLAYER_FACING)

    logger.debug("Player spawn sampling exhausted; using centre-bottom fallback")
    return SpawnPoint(position=Vec3(0.0, -arena.radius * 0.5, 0.0), facing=PLAYER_FACING)


def generate_enemy_spawn(
    arena: Arena,
    obstacles: Sequence[Obstacle],
    player_spawn: SpawnPoint,
    rng,
) -> SpawnPoint:
    for _ in range(MAX_SPAWN_ATTEMPTS):
        position = _sample(arena, ENEMY_SECTOR, rng)
        if distance_2d(position, player_spawn.position) < MIN_SPAWN_SEPARATION:
            continue
        if _clear_of_obstacles(position, obstacles):
            return SpawnPoint(position=position, facing=ENEMY_FACING)

    logger.debug("Enemy spawn sampling exhausted; using centre-top fallback")
    return SpawnPoint(position=Vec3(0.0, arena.radius * 0.5, 0.0), facing=ENEMY_FACING)
