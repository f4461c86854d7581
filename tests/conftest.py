import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from arenagen.rng import RandomSource  # noqa: E402


class ScriptedRNG(RandomSource):
    """RandomSource whose raw draws come from a fixed list.

    Running out of values raises IndexError, which makes unexpected extra draws
    fail loudly.
    """

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)
        self.calls = 0

    def next(self) -> float:
        self.calls += 1
        return self.values.pop(0)


@pytest.fixture
def scripted_rng():
    return ScriptedRNG
