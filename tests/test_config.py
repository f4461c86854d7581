import logging

import pytest

from arenagen.config import DEFAULT_LIMITS, GenerationLimits, GeneratorSettings, parse_seed
from arenagen.errors import ConfigError
from arenagen.logging_config import configure_logging, resolve_level


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("ARENAGEN_SEED", "ARENAGEN_MAX_RETRIES", "ARENAGEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_packaged_defaults_match_dataclass_defaults():
    settings = GeneratorSettings.load()
    assert settings == GeneratorSettings()
    assert settings.limits == DEFAULT_LIMITS
    assert settings.base_seed == "arena"


def test_user_file_overlays_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("base_seed: 99\nlimits:\n  max_obstacles: 6\n", encoding="utf-8")
    settings = GeneratorSettings.load(path)
    assert settings.base_seed == 99
    assert settings.limits.max_obstacles == 6
    # untouched keys keep their defaults
    assert settings.limits.min_arena_radius == 8.0
    assert settings.max_generation_retries == 3


def test_missing_user_file_is_an_error(tmp_path):
    with pytest.raises(ConfigError):
        GeneratorSettings.load(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "limits: [unclosed\n",
        "- just\n- a list\n",
        "limits:\n  max_arena_radius: 4\n",
        "limits:\n  max_walls: 3\n",
        "limits:\n  max_obstacles: lots\n",
        "max_generation_retries: -1\n",
        "base_seed: [1, 2]\n",
    ],
)
def test_bad_settings_files_raise_config_error(tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        GeneratorSettings.load(path)


def test_limits_validate_themselves():
    with pytest.raises(ConfigError):
        GenerationLimits(min_arena_radius=0)
    with pytest.raises(ConfigError):
        GenerationLimits(max_obstacles=0)
    with pytest.raises(ConfigError):
        GenerationLimits(max_enemy_attack_power=0)
    assert GenerationLimits(max_hazards=0).max_hazards == 0


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ARENAGEN_SEED", "777")
    monkeypatch.setenv("ARENAGEN_MAX_RETRIES", "5")
    monkeypatch.setenv("ARENAGEN_LOG_LEVEL", "debug")
    settings = GeneratorSettings.from_env(GeneratorSettings())
    assert settings.base_seed == 777
    assert settings.max_generation_retries == 5
    assert settings.log_level == "DEBUG"


def test_env_without_overrides_returns_base():
    base = GeneratorSettings(base_seed="x")
    assert GeneratorSettings.from_env(base) is base


@pytest.mark.parametrize("value", ["many", "-2"])
def test_bad_env_retries(monkeypatch, value):
    monkeypatch.setenv("ARENAGEN_MAX_RETRIES", value)
    with pytest.raises(ConfigError):
        GeneratorSettings.from_env(GeneratorSettings())


def test_save_then_load(tmp_path):
    settings = GeneratorSettings(
        limits=GenerationLimits(max_hazards=2, max_arena_radius=15.0),
        max_generation_retries=1,
        base_seed="saved-run",
        log_level="WARNING",
    )
    path = tmp_path / "nested" / "settings.yaml"
    settings.save(path)
    assert GeneratorSettings.load(path) == settings


def test_parse_seed():
    assert parse_seed("123") == 123
    assert parse_seed(" 42 ") == 42
    assert parse_seed("dungeon-7") == "dungeon-7"
    assert parse_seed("-5") == "-5"


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level(None) == logging.INFO
    assert resolve_level("nonsense", logging.WARNING) == logging.WARNING


def test_configure_logging_explicit_level_beats_env(monkeypatch):
    logger = logging.getLogger("arenagen")
    original = logger.level
    try:
        monkeypatch.setenv("ARENAGEN_LOG_LEVEL", "warning")
        assert configure_logging("DEBUG") == logging.DEBUG
        assert logger.level == logging.DEBUG
        # env only fills in when no level is given
        assert configure_logging() == logging.WARNING
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(original)
