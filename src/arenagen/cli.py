from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import GeneratorSettings, parse_seed
from .errors import ConfigError, PayloadSchemaError
from .generation import enemy_difficulty
from .logging_config import configure_logging
from .orchestrator import FloorOrchestrator
from .serialization import check_payload_document, payload_to_dict

logger = logging.getLogger(__name__)


def _settings(args: argparse.Namespace) -> GeneratorSettings:
    settings = GeneratorSettings.from_env(GeneratorSettings.load(args.config))
    if args.seed is not None:
        settings.base_seed = parse_seed(args.seed)
    return settings


def _cmd_generate(args: argparse.Namespace, settings: GeneratorSettings) -> int:
    orchestrator = FloorOrchestrator.from_settings(settings)
    if args.quick:
        payload = orchestrator.quick_generate(args.floor, settings.base_seed)
    else:
        report = orchestrator.generate_with_report(args.floor, settings.base_seed)
        payload = report.payload
        if report.used_fallback:
            logger.info("Floor %d fell back to the safe floor after %d attempts", args.floor, report.attempt_count)

    data = payload_to_dict(payload)
    try:
        check_payload_document(data)
    except PayloadSchemaError as e:
        print(e.to_human(), file=sys.stderr)
        return 1
    # Sorted keys so output can be diffed across runs
    print(json.dumps(data, indent=2, sort_keys=True))
    return 0


def _cmd_validate(args: argparse.Namespace, settings: GeneratorSettings) -> int:
    orchestrator = FloorOrchestrator.from_settings(settings)
    payload = orchestrator.quick_generate(args.floor, settings.base_seed)
    result = orchestrator.validator.validate(payload)
    if result.valid:
        print(f"OK: floor {args.floor} (seed {payload.seed})")
        return 0
    print(f"INVALID: floor {args.floor} (seed {payload.seed})")
    for err in result.errors:
        print(f" - {err}")
    return 1


def _cmd_difficulty(args: argparse.Namespace, settings: GeneratorSettings) -> int:
    payload = FloorOrchestrator.from_settings(settings).generate(args.floor, settings.base_seed)
    enemy = payload.enemy
    print(
        f"{enemy.name}: hp={enemy.max_hp} power={enemy.attack.power} "
        f"accuracy={enemy.attack.accuracy:.2f} difficulty={enemy_difficulty(enemy)}/10"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="arenagen", description="Procedural arena floor generator")
    p.add_argument("--config", type=Path, default=None, help="YAML settings file overlaid on the defaults")
    p.add_argument("--seed", default=None, help="Base seed; digits are read as an integer")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate a floor and print it as JSON")
    g.add_argument("--floor", type=int, required=True)
    g.add_argument("--quick", action="store_true", help="Skip validation and retries")
    g.set_defaults(func=_cmd_generate)

    v = sub.add_parser("validate", help="Validate the first generation attempt for a floor")
    v.add_argument("--floor", type=int, required=True)
    v.set_defaults(func=_cmd_validate)

    d = sub.add_parser("difficulty", help="Show the enemy and its difficulty rating")
    d.add_argument("--floor", type=int, required=True)
    d.set_defaults(func=_cmd_difficulty)

    return p


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = _settings(args)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    configure_logging("DEBUG" if args.debug else settings.log_level)
    return args.func(args, settings)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
