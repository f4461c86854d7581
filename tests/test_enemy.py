from statistics import mean

import pytest

from arenagen.config import GenerationLimits
from arenagen.generation.enemy import (
    ALL_VISUALS,
    ENEMY_NAMES,
    enemy_difficulty,
    generate_enemy,
    scaled_accuracy,
    scaled_attack_power,
    scaled_hp,
)
from arenagen.models import ORIGIN, Enemy, EnemyAttack, EnemyBehavior, EnemyVisual
from arenagen.rng import RandomSource

COLOR = "#aa00ff"


def _enemy(hp, power, accuracy):
    return Enemy(
        id="e",
        name="Test",
        hp=hp,
        max_hp=hp,
        attack=EnemyAttack(power=power, accuracy=accuracy),
        behavior=EnemyBehavior.AGGRESSIVE,
        visual_type=EnemyVisual.CUBE,
        color=COLOR,
    )


def test_exact_stats_from_scripted_draws(scripted_rng):
    # hp jitter, power jitter, visual, name; no behaviour draw on floor 1
    rng = scripted_rng([0.5, 0.5, 0.0, 0.0])
    enemy = generate_enemy(1, rng, COLOR)
    assert rng.calls == 4
    assert enemy.hp == enemy.max_hp == 5
    assert enemy.attack.power == 1
    assert enemy.attack.accuracy == pytest.approx(0.72)
    assert enemy.visual_type is EnemyVisual.SPHERE
    assert enemy.behavior is EnemyBehavior.RANDOM
    assert enemy.name == "Shadow Lurker"
    assert enemy.id == "enemy-floor-1"
    assert enemy.color == COLOR
    assert enemy.position == ORIGIN


def test_behaviour_drawn_from_floor_three(scripted_rng):
    rng = scripted_rng([0.5, 0.5, 0.0, 0.99, 0.0])
    enemy = generate_enemy(3, rng, COLOR)
    assert rng.calls == 5
    assert enemy.behavior is EnemyBehavior.RANDOM

    rng = scripted_rng([0.5, 0.5, 0.0, 0.0, 0.0])
    assert generate_enemy(3, rng, COLOR).behavior is EnemyBehavior.AGGRESSIVE


@pytest.mark.parametrize(
    "floor, prefix",
    [(1, None), (4, None), (5, "Greater"), (9, "Greater"), (10, "Elite"), (14, "Elite"), (15, "Legendary"), (40, "Legendary")],
)
def test_name_prefix_by_floor(floor, prefix):
    enemy = generate_enemy(floor, RandomSource(floor), COLOR)
    if prefix is None:
        assert enemy.name in ENEMY_NAMES
    else:
        head, _, base = enemy.name.partition(" ")
        assert head == prefix
        assert base in ENEMY_NAMES


def test_hp_never_below_one():
    assert scaled_hp(0, -1) == 2
    assert scaled_hp(0, -10) == 1


def test_attack_power_bounds():
    assert scaled_attack_power(0, -1) == 1
    assert scaled_attack_power(100, 1) == 8
    assert scaled_attack_power(100, 1, GenerationLimits(max_enemy_attack_power=4)) == 4


def test_accuracy_scales_and_caps():
    assert scaled_accuracy(0) == pytest.approx(0.7)
    assert scaled_accuracy(10) == pytest.approx(0.9)
    assert scaled_accuracy(20) == pytest.approx(0.95)
    assert scaled_accuracy(50) == pytest.approx(0.95)


def test_visual_tiers():
    for seed in range(60):
        assert generate_enemy(2, RandomSource(seed), COLOR).visual_type in ALL_VISUALS[:2]
        assert generate_enemy(6, RandomSource(seed), COLOR).visual_type in ALL_VISUALS[:3]
    late = {generate_enemy(12, RandomSource(seed), COLOR).visual_type for seed in range(200)}
    assert late == set(ALL_VISUALS)


def test_stats_within_limits_everywhere():
    for floor in range(0, 40):
        for seed in range(20):
            enemy = generate_enemy(floor, RandomSource(seed * 31 + floor), COLOR)
            assert enemy.hp >= 1
            assert 1 <= enemy.attack.power <= 8
            assert enemy.attack.accuracy <= 0.95


def test_mean_hp_increases_with_floor():
    seeds = range(300)
    means = [mean(generate_enemy(f, RandomSource(s), COLOR).max_hp for s in seeds) for f in range(1, 21)]
    assert all(b > a for a, b in zip(means, means[1:]))


def test_mean_attack_power_increases_with_floor():
    seeds = range(300)
    means = [mean(generate_enemy(f, RandomSource(s), COLOR).attack.power for s in seeds) for f in (1, 6, 11, 16)]
    assert all(b > a for a, b in zip(means, means[1:]))


def test_difficulty_rating():
    assert enemy_difficulty(_enemy(25, 9, 0.95)) == 10
    assert enemy_difficulty(_enemy(100, 99, 0.95)) == 10
    # 1 + 1 + 1.5 rounds half up
    assert enemy_difficulty(_enemy(5, 3, 0.75)) == 4
    assert enemy_difficulty(_enemy(1, 1, 0.0)) == 1
