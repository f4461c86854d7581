from __future__ import annotations

import math

from .models import (
    Arena,
    ArenaShape,
    Bounds,
    Enemy,
    EnemyAttack,
    EnemyBehavior,
    EnemyVisual,
    FloorPayload,
    LightingPreset,
    Obstacle,
    ObstacleType,
    Palette,
    Size3,
    SpawnPoint,
    Vec2,
    Vec3,
)

SAFE_ARENA_RADIUS = 10.0
SAFE_ENEMY_NAME = "Training Dummy"

SAFE_PALETTE = Palette(
    background="#1a1a2e",
    primary="#4a4a8a",
    secondary="#6a6aaa",
    accent="#8888ff",
    enemy="#ff4444",
    hazard="#ff8800",
)

_COVER_SIZE = Size3(width=2.0, height=1.2, depth=0.8)


def _cover(x: float) -> Obstacle:
    return Obstacle(
        type=ObstacleType.COVER,
        position=Vec3(x, 0.0, 0.0),
        size=_COVER_SIZE,
        provide_cover=True,
        destructible=False,
    )


def create_safe_floor(floor_number: int, seed: int) -> FloorPayload:
    """Fixed floor used when generation keeps failing validation.

    Two cover blocks flank the centre line, spawns face each other 8 units
    apart and the dummy's stats grow slowly with the floor. It is valid by
    construction and must not be sent back through validation.
    """
    center = Vec2(0.0, 0.0)
    enemy_spawn = SpawnPoint(position=Vec3(0.0, 4.0, 0.0), facing=-math.pi / 2)
    hp = max(1, 3 + floor_number)
    enemy = Enemy(
        id=f"safe-enemy-{floor_number}",
        name=SAFE_ENEMY_NAME,
        hp=hp,
        max_hp=hp,
        attack=EnemyAttack(power=min(3, 1 + floor_number // 3), accuracy=0.7),
        behavior=EnemyBehavior.DEFENSIVE,
        visual_type=EnemyVisual.SPHERE,
        color=SAFE_PALETTE.enemy,
        position=enemy_spawn.position,
    )
    return FloorPayload(
        floor_number=floor_number,
        seed=seed,
        arena=Arena(
            shape=ArenaShape.CIRCLE,
            radius=SAFE_ARENA_RADIUS,
            bounds=Bounds.around(center, SAFE_ARENA_RADIUS),
            center=center,
        ),
        enemy=enemy,
        obstacles=(_cover(-3.0), _cover(3.0)),
        hazards=(),
        player_spawn=SpawnPoint(position=Vec3(0.0, -4.0, 0.0), facing=math.pi / 2),
        enemy_spawn=enemy_spawn,
        palette=SAFE_PALETTE,
        lighting_preset=LightingPreset.DARK,
    )
