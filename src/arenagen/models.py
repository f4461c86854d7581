from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ArenaShape(str, Enum):
    CIRCLE = "circle"
    RING = "ring"
    OCTAGON = "octagon"
    SQUARE = "square"
    IRREGULAR = "irregular"


class ObstacleType(str, Enum):
    COVER = "cover"
    PILLAR = "pillar"
    PLATFORM = "platform"
    BLOCKER = "blocker"


class HazardType(str, Enum):
    DAMAGE = "damage"
    SLOW = "slow"
    KNOCKBACK = "knockback"


class EnemyVisual(str, Enum):
    SPHERE = "sphere"
    CUBE = "cube"
    PYRAMID = "pyramid"
    COMPLEX = "complex"


class EnemyBehavior(str, Enum):
    AGGRESSIVE = "aggressive"
    DEFENSIVE = "defensive"
    RANDOM = "random"


class LightingPreset(str, Enum):
    NEON = "neon"
    LOWPOLY = "lowpoly"
    PASTEL = "pastel"
    WIREFRAME = "wireframe"
    DARK = "dark"
    SUNSET = "sunset"


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float


@dataclass(frozen=True)
class Vec3:
    x: float
    y: float
    z: float = 0.0

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)


ORIGIN = Vec3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Size3:
    width: float
    height: float
    depth: float


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned box used for coarse containment checks."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def around(cls, center: Vec2, radius: float) -> "Bounds":
        return cls(center.x - radius, center.x + radius, center.y - radius, center.y + radius)

    def contains(self, point: Vec2) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y


@dataclass(frozen=True)
class Arena:
    shape: ArenaShape
    radius: float
    bounds: Bounds
    center: Vec2 = Vec2(0.0, 0.0)
    inner_radius: Optional[float] = None


@dataclass(frozen=True)
class Obstacle:
    type: ObstacleType
    position: Vec3
    size: Size3
    provide_cover: bool
    destructible: bool
    radius: Optional[float] = None

    @property
    def footprint_radius(self) -> float:
        """Radius used for spawn overlap checks: the pillar radius or half the wider side."""
        if self.radius:
            return self.radius
        return max(self.size.width, self.size.depth) / 2


@dataclass(frozen=True)
class HazardTiming:
    """Runtime activation schedule; the simulation reads it, placement ignores it."""

    active: bool
    interval_ms: int
    duration_ms: int
    offset_ms: int


@dataclass(frozen=True)
class HazardZone:
    type: HazardType
    position: Vec2
    radius: float
    damage: int
    timing: HazardTiming
    visual_hint: str


@dataclass(frozen=True)
class SpawnPoint:
    position: Vec3
    facing: float


@dataclass(frozen=True)
class EnemyAttack:
    power: int
    accuracy: float


@dataclass(frozen=True)
class Enemy:
    id: str
    name: str
    hp: int
    max_hp: int
    attack: EnemyAttack
    behavior: EnemyBehavior
    visual_type: EnemyVisual
    color: str
    position: Vec3 = ORIGIN

    def at(self, position: Vec3) -> "Enemy":
        """Return a copy of this enemy standing at ``position``."""
        return dataclasses.replace(self, position=position)


@dataclass(frozen=True)
class Palette:
    background: str
    primary: str
    secondary: str
    accent: str
    enemy: str
    hazard: str


@dataclass(frozen=True)
class FloorPayload:
    """One complete floor: the unit handed to rendering and gameplay."""

    floor_number: int
    seed: int
    arena: Arena
    enemy: Enemy
    obstacles: Tuple[Obstacle, ...]
    hazards: Tuple[HazardZone, ...]
    player_spawn: SpawnPoint
    enemy_spawn: SpawnPoint
    palette: Palette
    lighting_preset: LightingPreset


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: Tuple[str, ...] = ()

    @classmethod
    def from_errors(cls, errors) -> "ValidationResult":
        errors = tuple(errors)
        return cls(valid=not errors, errors=errors)


__all__ = [
    "Arena",
    "ArenaShape",
    "Bounds",
    "Enemy",
    "EnemyAttack",
    "EnemyBehavior",
    "EnemyVisual",
    "FloorPayload",
    "HazardTiming",
    "HazardType",
    "HazardZone",
    "LightingPreset",
    "Obstacle",
    "ObstacleType",
    "ORIGIN",
    "Palette",
    "Size3",
    "SpawnPoint",
    "ValidationResult",
    "Vec2",
    "Vec3",
]
