"""Floor orchestration: generate, validate, retry, fall back.

Each attempt derives a fresh seed from (base seed, floor, retry), runs the
generators against one RandomSource in a fixed order, and submits the result
to the validator. A failed attempt is discarded entirely; the next retry
starts from a new seed. When the retry budget is spent the safe floor is
returned without being validated. The caller always gets a floor back.

Draw order within an attempt:
    arena -> lighting preset -> palette -> obstacles -> hazards
    -> player spawn -> enemy spawn -> enemy stats
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .config import DEFAULT_LIMITS, GenerationLimits, GeneratorSettings, Seed
from .generation import (
    enemy_difficulty,
    generate_arena,
    generate_enemy,
    generate_enemy_spawn,
    generate_hazards,
    generate_obstacles,
    generate_player_spawn,
)
from .models import FloorPayload, LightingPreset, Palette
from .palette import generate_palette
from .rng import RNG, RandomSource
from .safe_floor import create_safe_floor
from .seed import derive_floor_seed
from .validation import FloorValidator, Validator

logger = logging.getLogger(__name__)

MAX_GENERATION_RETRIES = 3

PaletteProvider = Callable[[RNG, LightingPreset], Palette]
FallbackProvider = Callable[[int, int], FloorPayload]

EARLY_PRESETS: Sequence[LightingPreset] = (LightingPreset.LOWPOLY, LightingPreset.PASTEL)
MID_PRESETS: Sequence[LightingPreset] = (LightingPreset.LOWPOLY, LightingPreset.PASTEL, LightingPreset.NEON)
ALL_PRESETS: Sequence[LightingPreset] = (
    LightingPreset.NEON,
    LightingPreset.LOWPOLY,
    LightingPreset.PASTEL,
    LightingPreset.WIREFRAME,
    LightingPreset.DARK,
    LightingPreset.SUNSET,
)


def select_lighting_preset(floor_number: int, rng: RNG) -> LightingPreset:
    if floor_number <= 2:
        return rng.pick(EARLY_PRESETS)
    if floor_number <= 5:
        return rng.pick(MID_PRESETS)
    return rng.pick(ALL_PRESETS)


def build_floor(
    floor_number: int,
    seed: int,
    limits: GenerationLimits = DEFAULT_LIMITS,
    palette_provider: PaletteProvider = generate_palette,
) -> FloorPayload:
    """Run one unchecked generation attempt from an already-derived seed."""
    rng = RandomSource(seed)

    arena = generate_arena(floor_number, rng, limits)
    lighting = select_lighting_preset(floor_number, rng)
    palette = palette_provider(rng, lighting)
    obstacles = generate_obstacles(arena, floor_number, rng, limits)
    hazards = generate_hazards(arena, obstacles, floor_number, palette.hazard, rng, limits)
    player_spawn = generate_player_spawn(arena, obstacles, rng)
    enemy_spawn = generate_enemy_spawn(arena, obstacles, player_spawn, rng)
    enemy = generate_enemy(floor_number, rng, palette.enemy, limits)

    return FloorPayload(
        floor_number=floor_number,
        seed=seed,
        arena=arena,
        enemy=enemy.at(enemy_spawn.position),
        obstacles=tuple(obstacles),
        hazards=tuple(hazards),
        player_spawn=player_spawn,
        enemy_spawn=enemy_spawn,
        palette=palette,
        lighting_preset=lighting,
    )


class GenerationState(Enum):
    GENERATING = "generating"
    VALIDATING = "validating"
    DONE = "done"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class AttemptRecord:
    retry: int
    seed: int
    valid: bool
    errors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GenerationReport:
    payload: FloorPayload
    attempts: Tuple[AttemptRecord, ...]
    used_fallback: bool

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)


class FloorOrchestrator:
    """Produces validated floors with a bounded retry budget.

    Usage:
      orchestrator = FloorOrchestrator.from_settings(GeneratorSettings.load())
      floor = orchestrator.generate(7, "my-run")
    """

    def __init__(
        self,
        validator: Optional[Validator] = None,
        limits: GenerationLimits = DEFAULT_LIMITS,
        max_retries: int = MAX_GENERATION_RETRIES,
        palette_provider: PaletteProvider = generate_palette,
        fallback: FallbackProvider = create_safe_floor,
    ) -> None:
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self.limits = limits
        self.validator: Validator = validator if validator is not None else FloorValidator(limits)
        self.max_retries = max_retries
        self.palette_provider = palette_provider
        self.fallback = fallback

    @classmethod
    def from_settings(cls, settings: GeneratorSettings, validator: Optional[Validator] = None) -> "FloorOrchestrator":
        return cls(
            validator=validator,
            limits=settings.limits,
            max_retries=settings.max_generation_retries,
        )

    def generate(self, floor_number: int, base_seed: Seed) -> FloorPayload:
        return self.generate_with_report(floor_number, base_seed).payload

    def generate_with_report(self, floor_number: int, base_seed: Seed) -> GenerationReport:
        state = GenerationState.GENERATING
        retry = 0
        seed = 0
        payload: Optional[FloorPayload] = None
        attempts: List[AttemptRecord] = []

        while True:
            if state is GenerationState.GENERATING:
                seed = derive_floor_seed(base_seed, floor_number, retry)
                payload = build_floor(floor_number, seed, self.limits, self.palette_provider)
                state = GenerationState.VALIDATING

            elif state is GenerationState.VALIDATING:
                result = self.validator.validate(payload)
                attempts.append(AttemptRecord(retry=retry, seed=seed, valid=result.valid, errors=tuple(result.errors)))
                if result.valid:
                    state = GenerationState.DONE
                    continue
                logger.warning(
                    "Floor %d validation failed (attempt %d): %s",
                    floor_number,
                    retry + 1,
                    "; ".join(result.errors) or "no reason given",
                )
                if retry < self.max_retries:
                    retry += 1
                    state = GenerationState.GENERATING
                else:
                    state = GenerationState.FALLBACK

            elif state is GenerationState.DONE:
                logger.debug(
                    "Floor %d generated with seed %d after %d attempt(s); enemy difficulty %d",
                    floor_number,
                    seed,
                    len(attempts),
                    enemy_difficulty(payload.enemy),
                )
                return GenerationReport(payload=payload, attempts=tuple(attempts), used_fallback=False)

            else:
                logger.warning("Using safe floor for floor %d", floor_number)
                safe = self.fallback(floor_number, seed)
                return GenerationReport(payload=safe, attempts=tuple(attempts), used_fallback=True)

    def quick_generate(self, floor_number: int, base_seed: Seed) -> FloorPayload:
        """First attempt only, never validated. For previews and tooling."""
        seed = derive_floor_seed(base_seed, floor_number, 0)
        return build_floor(floor_number, seed, self.limits, self.palette_provider)

    def generate_many(self, floor_numbers: Iterable[int], base_seed: Seed) -> List[FloorPayload]:
        return [self.generate(n, base_seed) for n in floor_numbers]


def generate_floor(floor_number: int, base_seed: Seed, validator: Optional[Validator] = None) -> FloorPayload:
    """Convenience wrapper using default limits and retry budget."""
    return FloorOrchestrator(validator=validator).generate(floor_number, base_seed)


def quick_generate_floor(floor_number: int, seed: Seed) -> FloorPayload:
    return FloorOrchestrator().quick_generate(floor_number, seed)
