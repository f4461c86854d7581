from __future__ import annotations

from typing import Optional


class ArenagenError(Exception):
    """Base class for arenagen errors."""


class ConfigError(ArenagenError):
    """Raised when generator settings are missing, malformed or out of range."""


class PayloadSchemaError(ArenagenError):
    """Raised when a serialized floor payload does not match the bundled schema."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_human(self) -> str:
        parts = [str(self)]
        for e in self.errors:
            path = "/".join(str(p) for p in e.path) or "<root>"
            parts.append(f" - at {path}: {e.message}")
        return "\n".join(parts)
