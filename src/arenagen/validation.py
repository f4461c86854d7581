"""Default floor rule set.

The orchestrator accepts any object with a ``validate(payload)`` method; this
module provides the rules the game ships with. Messages are collected in a
fixed order so a failing floor always reports the same list.
"""
from __future__ import annotations

import logging
from typing import List, Protocol

from .config import DEFAULT_LIMITS, GenerationLimits
from .geometry import distance_2d, point_inside_arena
from .models import FloorPayload, Obstacle, SpawnPoint, ValidationResult

logger = logging.getLogger(__name__)

# Collision radius of the player and the enemy
CHARACTER_RADIUS = 1.0
OVERLAP_BUFFER = 0.5
MIN_SPAWN_DISTANCE = 4.0

PALETTE_KEYS = ("background", "primary", "secondary", "accent", "enemy", "hazard")


class Validator(Protocol):
    def validate(self, payload: FloorPayload) -> ValidationResult: ...


def spawn_overlaps_obstacle(spawn: SpawnPoint, obstacle: Obstacle) -> bool:
    dist = distance_2d(spawn.position, obstacle.position)
    return dist < CHARACTER_RADIUS + obstacle.footprint_radius + OVERLAP_BUFFER


class FloorValidator:
    """Checks a floor against the gameplay-safety rules."""

    def __init__(self, limits: GenerationLimits = DEFAULT_LIMITS) -> None:
        self.limits = limits

    def validate(self, payload: FloorPayload) -> ValidationResult:
        limits = self.limits
        errors: List[str] = []

        if payload.enemy.hp < 1:
            errors.append("Enemy HP must be >= 1")

        missing = [key for key in PALETTE_KEYS if not getattr(payload.palette, key, None)]
        if missing:
            errors.append(f"Palette missing colors: {', '.join(missing)}")

        radius = payload.arena.radius
        if radius < limits.min_arena_radius:
            errors.append(f"Arena radius {radius} is below minimum {limits.min_arena_radius}")
        if radius > limits.max_arena_radius:
            errors.append(f"Arena radius {radius} exceeds maximum {limits.max_arena_radius}")

        if not point_inside_arena(payload.player_spawn.position, payload.arena):
            errors.append("Player spawn is outside arena bounds")
        if not point_inside_arena(payload.enemy_spawn.position, payload.arena):
            errors.append("Enemy spawn is outside arena bounds")

        for obstacle in payload.obstacles:
            if spawn_overlaps_obstacle(payload.player_spawn, obstacle):
                errors.append("Player spawn overlaps with obstacle")
            if spawn_overlaps_obstacle(payload.enemy_spawn, obstacle):
                errors.append("Enemy spawn overlaps with obstacle")

        power = payload.enemy.attack.power
        if power > limits.max_enemy_attack_power:
            errors.append(f"Enemy attack power {power} exceeds max {limits.max_enemy_attack_power}")

        if len(payload.obstacles) > limits.max_obstacles:
            errors.append(f"Too many obstacles: {len(payload.obstacles)} > {limits.max_obstacles}")
        if len(payload.hazards) > limits.max_hazards:
            errors.append(f"Too many hazards: {len(payload.hazards)} > {limits.max_hazards}")

        if distance_2d(payload.player_spawn.position, payload.enemy_spawn.position) < MIN_SPAWN_DISTANCE:
            errors.append("Spawns are too close together")

        if errors:
            logger.debug("Floor %d failed %d rule(s)", payload.floor_number, len(errors))
        return ValidationResult.from_errors(errors)


def quick_validate(payload: FloorPayload, limits: GenerationLimits = DEFAULT_LIMITS) -> bool:
    """Critical checks only: enemy alive, radius in range, obstacle ceiling."""
    return (
        payload.enemy.hp >= 1
        and limits.min_arena_radius <= payload.arena.radius <= limits.max_arena_radius
        and len(payload.obstacles) <= limits.max_obstacles
    )

