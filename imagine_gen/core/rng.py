from __future__ import annotations
import math
import numbers
from typing import Optional, Sequence, TypeVar, Union

import numpy as np

from imagine_gen.core.errors import EmptyDomain, InvalidArgument
from imagine_gen.core.hashing import to_seed
from imagine_gen.core.prng import TWO_32, Mulberry32

T = TypeVar("T")
Seed = Union[int, float, str]

# stream handed out by rng_from when neither a seed nor a fallback is given
DEFAULT_LOCAL_SEED = 0xDECAFBAD


def _require_finite(op: str, *values) -> None:
    for v in values:
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise InvalidArgument(f"{op}: min/max must be finite numbers")
        if isinstance(v, numbers.Integral):
            continue
        if not math.isfinite(v):
            raise InvalidArgument(f"{op}: min/max must be finite numbers")


class RNG:
    """Reproducible stream of uniform values seeded from an int, float or str."""

    __slots__ = ("_gen",)

    def __init__(self, seed: Seed):
        self._gen = Mulberry32(to_seed(seed))

    @property
    def state(self) -> int:
        return self._gen.state

    def next(self) -> float:
        return self._gen.step()

    def int(self, min, max) -> int:
        _require_finite("int", min, max)
        if min > max:
            min, max = max, min
        lo = math.ceil(min)
        hi = math.floor(max)
        return math.floor(self._gen.step() * (hi - lo + 1)) + lo

    def float(self, min, max) -> float:
        _require_finite("float", min, max)
        if min > max:
            min, max = max, min
        return self._gen.step() * (max - min) + min

    def pick(self, seq: Sequence[T]) -> T:
        if len(seq) == 0:
            raise EmptyDomain("pick: sequence is empty")
        return seq[math.floor(self._gen.step() * len(seq))]

    def random(self, size: int) -> np.ndarray:
        return self._gen.batch(size)

    def child_seed(self) -> float:
        # one draw per nested call; the float is truncated back to 32 bits by to_seed
        return self._gen.step() * TWO_32

    def child(self) -> "RNG":
        return RNG(self.child_seed())

    def __repr__(self) -> str:
        return f"RNG(state=0x{self.state:08x})"


def rng_from(seed: Optional[Seed] = None, fallback: Optional[RNG] = None) -> RNG:
    """Pick the stream for one generator call.

    A provided seed (0 and "" included) always gets a fresh, isolated stream.
    Without one the fallback is returned as is, so the call shares and
    advances it.
    """
    if seed is not None:
        return RNG(seed)
    if fallback is not None:
        return fallback
    return RNG(DEFAULT_LOCAL_SEED)
