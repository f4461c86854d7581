from __future__ import annotations

import logging
import random
from typing import Protocol, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RNG(Protocol):
    """Random source consumed by every generation step.

    Each call advances shared state, so the order of calls is part of the
    reproducibility contract.
    """

    def next(self) -> float: ...

    def range(self, lo: int, hi: int) -> int: ...

    def range_float(self, lo: float, hi: float) -> float: ...

    def pick(self, seq: Sequence[T]) -> T: ...

    def chance(self, probability: float) -> bool: ...


class RandomSource:
    """
    Deterministic RNG built on a private random.Random instance.

    - never touches the global ``random`` state
    - every helper consumes exactly one underlying draw, so callers can reason
      about draw order
    """

    def __init__(self, seed: int) -> None:
        self._seed = int(seed)
        self._rng = random.Random(self._seed)
        logger.debug("Initialized RandomSource with seed=%s", self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    def next(self) -> float:
        return self._rng.random()

    def range(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi] inclusive."""
        return int(self.next() * (hi - lo + 1)) + lo

    def range_float(self, lo: float, hi: float) -> float:
        """Float in [lo, hi)."""
        return self.next() * (hi - lo) + lo

    def chance(self, probability: float) -> bool:
        return self.next() < probability

    def pick(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("RandomSource.pick() received an empty sequence")
        return seq[int(self.next() * len(seq))]


__all__ = ["RNG", "RandomSource"]
