from __future__ import annotations

import logging
import os
from typing import Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    """Turn a level name ("debug", "WARNING") or number into a logging level."""
    if level is None:
        return default
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), default)


def configure_logging(level: Union[int, str, None] = None) -> int:
    """Configure the root logger for CLI use and return the effective level.

    An explicit level wins. ARENAGEN_LOG_LEVEL is only consulted when none is
    given; settings loaded through GeneratorSettings.from_env already carry it.
    """
    if level is None:
        level = os.getenv("ARENAGEN_LOG_LEVEL") or None
    effective = resolve_level(level)
    logging.basicConfig(level=effective, format=LOG_FORMAT)
    logging.getLogger("arenagen").setLevel(effective)
    return effective
