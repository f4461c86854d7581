from __future__ import annotations

import math
from typing import Sequence

from ..config import DEFAULT_LIMITS, GenerationLimits
from ..models import Enemy, EnemyAttack, EnemyBehavior, EnemyVisual
from ..rng import RNG

ENEMY_NAMES: Sequence[str] = (
    "Shadow Lurker",
    "Void Walker",
    "Crystal Golem",
    "Flame Wraith",
    "Thunder Beast",
    "Frost Sentinel",
    "Dark Knight",
    "Chaos Imp",
    "Doom Bringer",
    "Soul Reaver",
    "Blade Dancer",
    "Storm Herald",
    "Death Weaver",
    "Iron Colossus",
    "Phantom Stalker",
)

# (minimum floor, prefix), highest first
NAME_PREFIXES = ((15, "Legendary"), (10, "Elite"), (5, "Greater"))

ALL_VISUALS: Sequence[EnemyVisual] = (
    EnemyVisual.SPHERE,
    EnemyVisual.CUBE,
    EnemyVisual.PYRAMID,
    EnemyVisual.COMPLEX,
)
ALL_BEHAVIORS: Sequence[EnemyBehavior] = (
    EnemyBehavior.AGGRESSIVE,
    EnemyBehavior.DEFENSIVE,
    EnemyBehavior.RANDOM,
)

MAX_ACCURACY = 0.95


def scaled_hp(floor_number: int, jitter: int) -> int:
    return max(1, 3 + math.floor(floor_number * 1.5) + jitter)


def scaled_attack_power(floor_number: int, jitter: int, limits: GenerationLimits = DEFAULT_LIMITS) -> int:
    return min(limits.max_enemy_attack_power, max(1, 1 + math.floor(floor_number * 0.4) + jitter))


def scaled_accuracy(floor_number: int) -> float:
    return min(MAX_ACCURACY, 0.7 + floor_number * 0.02)


def _visual_type(floor_number: int, rng: RNG) -> EnemyVisual:
    if floor_number <= 3:
        return rng.pick(ALL_VISUALS[:2])
    if floor_number <= 7:
        return rng.pick(ALL_VISUALS[:3])
    return rng.pick(ALL_VISUALS)


def _behavior(floor_number: int, rng: RNG) -> EnemyBehavior:
    # first floors always wander; no draw is made
    if floor_number <= 2:
        return EnemyBehavior.RANDOM
    return rng.pick(ALL_BEHAVIORS)


def _name(floor_number: int, rng: RNG) -> str:
    base = rng.pick(ENEMY_NAMES)
    for min_floor, prefix in NAME_PREFIXES:
        if floor_number >= min_floor:
            return f"{prefix} {base}"
    return base


def generate_enemy(
    floor_number: int,
    rng: RNG,
    color: str,
    limits: GenerationLimits = DEFAULT_LIMITS,
) -> Enemy:
    """Build the floor's enemy. Position stays at the origin; the caller places it."""
    hp = scaled_hp(floor_number, rng.range(-1, 2))
    power = scaled_attack_power(floor_number, rng.range(-1, 1), limits)
    visual = _visual_type(floor_number, rng)
    behavior = _behavior(floor_number, rng)
    name = _name(floor_number, rng)
    return Enemy(
        id=f"enemy-floor-{floor_number}",
        name=name,
        hp=hp,
        max_hp=hp,
        attack=EnemyAttack(power=power, accuracy=scaled_accuracy(floor_number)),
        behavior=behavior,
        visual_type=visual,
        color=color,
    )


def enemy_difficulty(enemy: Enemy) -> int:
    """0-10 rating for display and telemetry; never stored on the enemy."""
    hp_score = min(5.0, enemy.hp / 5)
    attack_score = min(3.0, enemy.attack.power / 3)
    accuracy_score = enemy.attack.accuracy * 2
    return min(10, int(math.floor(hp_score + attack_score + accuracy_score + 0.5)))
