import json
import logging

import pytest

from arenagen.cli import main
from arenagen.orchestrator import quick_generate_floor
from arenagen.validation import FloorValidator


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    for name in ("ARENAGEN_SEED", "ARENAGEN_MAX_RETRIES", "ARENAGEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    logger = logging.getLogger("arenagen")
    original = logger.level
    yield
    logger.setLevel(original)


def test_generate_prints_json(capsys):
    assert main(["--seed", "123", "generate", "--floor", "3"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["floor_number"] == 3
    assert data["lighting_preset"]


def test_generate_quick_uses_first_seed(capsys):
    assert main(["--seed", "123", "generate", "--floor", "3", "--quick"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["seed"] == 123 + 3 * 1000


def test_seed_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("ARENAGEN_SEED", "50")
    assert main(["generate", "--floor", "2", "--quick"]) == 0
    assert json.loads(capsys.readouterr().out)["seed"] == 2050


def test_validate_reports_first_attempt(capsys):
    rc = main(["--seed", "abc", "validate", "--floor", "6"])
    out = capsys.readouterr().out
    expected = FloorValidator().validate(quick_generate_floor(6, "abc"))
    if expected.valid:
        assert rc == 0
        assert out.startswith("OK: floor 6")
    else:
        assert rc == 1
        assert out.startswith("INVALID: floor 6")
        for err in expected.errors:
            assert f" - {err}" in out


def test_difficulty_line(capsys):
    assert main(["--seed", "9", "difficulty", "--floor", "12"]) == 0
    out = capsys.readouterr().out.strip()
    assert "hp=" in out and "power=" in out
    assert out.endswith("/10")


def test_config_file_applies(tmp_path, capsys):
    path = tmp_path / "settings.yaml"
    path.write_text("base_seed: 7\nlimits:\n  max_obstacles: 1\n", encoding="utf-8")
    assert main(["--config", str(path), "generate", "--floor", "30", "--quick"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["seed"] == 30007
    assert len(data["obstacles"]) <= 1


def test_missing_config_exits_with_two(tmp_path, capsys):
    rc = main(["--config", str(tmp_path / "missing.yaml"), "generate", "--floor", "1"])
    assert rc == 2
    assert capsys.readouterr().err.startswith("ERROR:")


def test_subcommand_required():
    with pytest.raises(SystemExit):
        main([])


def test_debug_flag_wins_over_env_level(monkeypatch, capsys):
    monkeypatch.setenv("ARENAGEN_LOG_LEVEL", "WARNING")
    assert main(["--debug", "--seed", "1", "generate", "--floor", "1", "--quick"]) == 0
    capsys.readouterr()
    assert logging.getLogger("arenagen").level == logging.DEBUG


def test_env_level_applies_without_debug(monkeypatch, capsys):
    monkeypatch.setenv("ARENAGEN_LOG_LEVEL", "ERROR")
    assert main(["--seed", "1", "generate", "--floor", "1", "--quick"]) == 0
    capsys.readouterr()
    assert logging.getLogger("arenagen").level == logging.ERROR
