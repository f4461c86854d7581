from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..errors import ConfigError

logger = logging.getLogger(__name__)

Seed = Union[int, str]


@dataclass(frozen=True)
class GenerationLimits:
    """Hard ceilings shared by the generators and the default validator.

    Passed explicitly through every generation call so a test can shrink or
    widen them without touching module globals.
    """

    min_arena_radius: float = 8.0
    max_arena_radius: float = 20.0
    max_obstacles: int = 12
    max_hazards: int = 5
    max_enemy_attack_power: int = 8

    def __post_init__(self) -> None:
        if self.min_arena_radius <= 0:
            raise ConfigError("min_arena_radius must be > 0")
        if self.max_arena_radius < self.min_arena_radius:
            raise ConfigError(
                f"max_arena_radius ({self.max_arena_radius}) is below min_arena_radius ({self.min_arena_radius})"
            )
        if self.max_obstacles < 1:
            raise ConfigError("max_obstacles must be >= 1")
        if self.max_hazards < 0:
            raise ConfigError("max_hazards must be >= 0")
        if self.max_enemy_attack_power < 1:
            raise ConfigError("max_enemy_attack_power must be >= 1")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationLimits":
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown limit keys: {', '.join(sorted(unknown))}")
        try:
            return cls(
                min_arena_radius=float(data.get("min_arena_radius", cls.min_arena_radius)),
                max_arena_radius=float(data.get("max_arena_radius", cls.max_arena_radius)),
                max_obstacles=int(data.get("max_obstacles", cls.max_obstacles)),
                max_hazards=int(data.get("max_hazards", cls.max_hazards)),
                max_enemy_attack_power=int(data.get("max_enemy_attack_power", cls.max_enemy_attack_power)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid limit value: {e}") from e


DEFAULT_LIMITS = GenerationLimits()


@dataclass
class GeneratorSettings:
    limits: GenerationLimits = field(default_factory=GenerationLimits)
    max_generation_retries: int = 3
    base_seed: Seed = "arena"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.max_generation_retries < 0:
            raise ConfigError("max_generation_retries must be >= 0")

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Could not parse settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratorSettings":
        limits = GenerationLimits.from_dict(data.get("limits") or {})
        try:
            retries = int(data.get("max_generation_retries", 3))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid max_generation_retries: {e}") from e
        seed = data.get("base_seed", "arena")
        if not isinstance(seed, (int, str)) or isinstance(seed, bool):
            raise ConfigError(f"base_seed must be an int or a string, got {type(seed).__name__}")
        return cls(
            limits=limits,
            max_generation_retries=retries,
            base_seed=seed,
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    def to_dict(self) -> dict:
        return {
            "base_seed": self.base_seed,
            "max_generation_retries": self.max_generation_retries,
            "log_level": self.log_level,
            "limits": dataclasses.asdict(self.limits),
        }

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "GeneratorSettings":
        """Load settings from the packaged defaults and an optional user override file.

        A user path that does not exist is a ConfigError: the caller asked for it
        explicitly.
        """
        try:
            with resources.files("arenagen.config").joinpath("default_settings.yaml").open(
                "r", encoding="utf-8"
            ) as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = cls().to_dict()

        user_data: dict = {}
        if user_path is not None:
            user_path = Path(user_path)
            if not user_path.exists():
                raise ConfigError(f"Settings file not found: {user_path}")
            user_data = cls._load_yaml(user_path)
            logger.info("Loaded user settings from %s", user_path)

        settings = cls.from_dict(cls._deep_merge(default_data, user_data))
        logger.debug("Settings merged: %s", settings)
        return settings

    @classmethod
    def from_env(cls, base: Optional["GeneratorSettings"] = None) -> "GeneratorSettings":
        """Apply ARENAGEN_* environment overrides on top of ``base`` (or the defaults)."""
        settings = base if base is not None else cls.load()
        seed = os.getenv("ARENAGEN_SEED")
        retries = os.getenv("ARENAGEN_MAX_RETRIES")
        level = os.getenv("ARENAGEN_LOG_LEVEL")
        changes: Dict[str, Any] = {}
        if seed:
            changes["base_seed"] = parse_seed(seed)
        if retries:
            try:
                changes["max_generation_retries"] = int(retries)
            except ValueError as e:
                raise ConfigError(f"ARENAGEN_MAX_RETRIES must be an integer, got {retries!r}") from e
        if level:
            changes["log_level"] = level.upper()
        return dataclasses.replace(settings, **changes) if changes else settings

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False)
        logger.info("Saved settings to %s", path)


def parse_seed(raw: str) -> Seed:
    """Interpret a command-line/env seed: all-digit strings become ints."""
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    return raw


__all__ = ["DEFAULT_LIMITS", "GenerationLimits", "GeneratorSettings", "Seed", "parse_seed"]
