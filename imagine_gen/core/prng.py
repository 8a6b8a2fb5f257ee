from __future__ import annotations
import numpy as np

from imagine_gen.core.hashing import MASK32

INCREMENT = 0x6D2B79F5
TWO_32 = 4294967296.0


def _mix(a: int) -> int:
    t = ((a ^ (a >> 15)) * (a | 1)) & MASK32
    t = ((t + (((t ^ (t >> 7)) * (t | 61)) & MASK32)) & MASK32) ^ t
    return (t ^ (t >> 14)) & MASK32


class Mulberry32:
    """Counter-based mulberry32 generator over a single 32-bit state.

    Each step adds a fixed odd increment to the state and scrambles the
    result, so the k-th output only depends on ``state + k * INCREMENT``.
    That lets `batch` compute many outputs at once with numpy while staying
    bit-identical to repeated `step` calls.
    """

    __slots__ = ("_state",)

    def __init__(self, state: int):
        self._state = int(state) & MASK32

    @property
    def state(self) -> int:
        return self._state

    def next_uint32(self) -> int:
        self._state = (self._state + INCREMENT) & MASK32
        return _mix(self._state)

    def step(self) -> float:
        return self.next_uint32() / TWO_32

    __call__ = step

    def batch(self, size: int) -> np.ndarray:
        n = max(0, int(size))
        mask = np.uint64(MASK32)
        k = np.arange(1, n + 1, dtype=np.uint64)
        # every intermediate stays below 2**64, so uint64 arithmetic is exact
        a = (np.uint64(self._state) + k * np.uint64(INCREMENT)) & mask
        t = ((a ^ (a >> np.uint64(15))) * (a | np.uint64(1))) & mask
        t = (((t + (((t ^ (t >> np.uint64(7))) * (t | np.uint64(61))) & mask)) & mask) ^ t)
        t = (t ^ (t >> np.uint64(14))) & mask
        self._state = (self._state + n * INCREMENT) & MASK32
        return t.astype(np.float64) / TWO_32
