from .arena import generate_arena, shapes_for_floor
from .enemy import enemy_difficulty, generate_enemy
from .hazards import generate_hazards
from .obstacles import generate_obstacles
from .spawns import generate_enemy_spawn, generate_player_spawn

__all__ = [
    "enemy_difficulty",
    "generate_arena",
    "generate_enemy",
    "generate_enemy_spawn",
    "generate_hazards",
    "generate_obstacles",
    "generate_player_spawn",
    "shapes_for_floor",
]
