from __future__ import annotations

import logging
from typing import Union

logger = logging.getLogger(__name__)

FLOOR_SEED_STRIDE = 1000
RETRY_SEED_STRIDE = 100

_INT32_WRAP = 1 << 32
_INT32_MAX = (1 << 31) - 1


def _to_int32(value: int) -> int:
    value &= _INT32_WRAP - 1
    return value - _INT32_WRAP if value > _INT32_MAX else value


def _utf16_units(text: str):
    # lone surrogates are hashed as the code units they are
    raw = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(raw), 2):
        yield raw[i] | (raw[i + 1] << 8)


def hash_string(text: str) -> int:
    """Reduce a string to a non-negative integer with a 31-multiplier rolling hash.

    Runs over UTF-16 code units with signed 32-bit wraparound after each step,
    so seeds shared with other clients of the same floor format agree.
    """
    h = 0
    for unit in _utf16_units(text):
        h = _to_int32((h << 5) - h + unit)
    return abs(h)


def derive_floor_seed(base_seed: Union[int, str], floor_number: int, retry: int = 0) -> int:
    """Derive the seed for one generation attempt of one floor.

    Integer base seeds are offset linearly (floors and retries sit in separate
    bands); string base seeds are hashed together with the floor and retry.
    Either way the result is non-negative.
    """
    if isinstance(base_seed, str):
        seed = hash_string(f"{base_seed}-floor{floor_number}-retry{retry}")
    else:
        seed = abs(int(base_seed) + floor_number * FLOOR_SEED_STRIDE + retry * RETRY_SEED_STRIDE)
    logger.debug("Derived seed for base=%r floor=%d retry=%d -> %d", base_seed, floor_number, retry, seed)
    return seed


__all__ = ["hash_string", "derive_floor_seed", "FLOOR_SEED_STRIDE", "RETRY_SEED_STRIDE"]
