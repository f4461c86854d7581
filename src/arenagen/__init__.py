"""Deterministic procedural arena floors with validation and a safe fallback."""
from .config import DEFAULT_LIMITS, GenerationLimits, GeneratorSettings
from .generation import enemy_difficulty
from .models import FloorPayload, ValidationResult
from .orchestrator import FloorOrchestrator, GenerationReport, generate_floor, quick_generate_floor
from .safe_floor import create_safe_floor
from .seed import derive_floor_seed
from .validation import FloorValidator

__all__ = [
    "DEFAULT_LIMITS",
    "FloorOrchestrator",
    "FloorPayload",
    "FloorValidator",
    "GenerationLimits",
    "GenerationReport",
    "GeneratorSettings",
    "ValidationResult",
    "create_safe_floor",
    "derive_floor_seed",
    "enemy_difficulty",
    "generate_floor",
    "quick_generate_floor",
]

__version__ = "0.1.0"
