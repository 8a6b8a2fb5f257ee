from __future__ import annotations
import math
import numpy as np

from imagine_gen.core.errors import InvalidArgument

MASK32 = 0xFFFFFFFF
FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a over the UTF-16 code units of `text`."""
    # surrogatepass keeps lone surrogates hashable instead of raising
    units = np.frombuffer(text.encode("utf-16-le", "surrogatepass"), dtype="<u2")
    h = FNV_OFFSET_BASIS
    for unit in units.tolist():
        h ^= unit
        h = (h * FNV_PRIME) & MASK32
    return h


def to_seed(value) -> int:
    """Fold an int, float or str seed into an unsigned 32-bit state.

    Integers wrap modulo 2**32. Floats are truncated toward zero first, which
    is how derived child seeds (``rng.next() * 2**32``) come through here;
    non-finite floats fold to 0. Text goes through FNV-1a.
    """
    if isinstance(value, (int, np.integer)):
        return int(value) & MASK32
    if isinstance(value, (float, np.floating)):
        if not math.isfinite(value):
            return 0
        return math.trunc(float(value)) & MASK32
    if isinstance(value, str):
        return fnv1a_32(value)
    raise InvalidArgument(f"seed must be int, float or str, got {type(value).__name__}")
