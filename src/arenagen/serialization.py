from __future__ import annotations

import dataclasses
import json
import logging
from enum import Enum
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Iterable, Tuple

from jsonschema import Draft7Validator

from .errors import PayloadSchemaError
from .models import FloorPayload

logger = logging.getLogger(__name__)

_SCHEMA_PKG = "arenagen.schemas"
_SCHEMA_FILE = "floor_payload.schema.json"


def _plain(pairs: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in pairs:
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, tuple):
            value = list(value)
        out[key] = value
    return out


def payload_to_dict(payload: FloorPayload) -> Dict[str, Any]:
    """JSON-friendly dict: enums become their string values, tuples become lists."""
    return dataclasses.asdict(payload, dict_factory=_plain)


def payload_to_json(payload: FloorPayload, indent: int | None = 2) -> str:
    """Deterministic JSON text; keys are sorted so equal payloads give equal text."""
    return json.dumps(payload_to_dict(payload), indent=indent, sort_keys=True)


@lru_cache(maxsize=1)
def payload_schema() -> Dict[str, Any]:
    with resources.files(_SCHEMA_PKG).joinpath(_SCHEMA_FILE).open("r", encoding="utf-8") as fh:
        return json.load(fh)


def check_payload_document(data: Dict[str, Any]) -> None:
    """Validate a serialized payload against the bundled JSON Schema.

    Raises:
        PayloadSchemaError: listing every violation, sorted by path.
    """
    validator = Draft7Validator(payload_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        logger.debug("Payload document failed schema check with %d error(s)", len(errors))
        raise PayloadSchemaError("Floor payload does not match floor_payload.schema.json", errors)
