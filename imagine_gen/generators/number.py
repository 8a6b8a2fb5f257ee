from __future__ import annotations
import math
from dataclasses import dataclass, replace
from typing import Callable, Optional

from imagine_gen.core.rng import Seed, rng_from
from imagine_gen.core.seed import get_global_rng
from imagine_gen.core.utils import round_half_up


def integer(min, max, *, seed: Optional[Seed] = None) -> int:
    """Uniform integer in [min, max]; bounds are swapped when reversed.

    Fractional bounds are pulled inward (ceil for min, floor for max).
    Raises InvalidArgument if either bound is not finite.
    """
    rng = rng_from(seed, get_global_rng())
    return rng.int(min, max)


def floating(min, max, precision: int = 2, *, seed: Optional[Seed] = None) -> float:
    """Uniform float in [min, max), rounded to `precision` decimal places."""
    rng = rng_from(seed, get_global_rng())
    n = rng.float(min, max)
    p = math.floor(precision)
    if p < 0:
        p = 0
    factor = 10 ** p
    return round_half_up(n * factor) / factor


@dataclass(frozen=True)
class SequenceOptions:
    start: float = 1
    end: Optional[float] = None  # None -> infinite
    step: float = 1
    loop: bool = False
    map: Optional[Callable[[float, int], float]] = None
    seed: Optional[Seed] = None


class Sequence:
    """Iterator over start, start+step, ... optionally capped or looped at `end`."""

    def __init__(self, options: SequenceOptions):
        self.options = options
        # resolved for parity with the other generators; values are not random
        self.rng = rng_from(options.seed, get_global_rng())
        self._current = options.start
        self._index = 0

    def __iter__(self):
        return self

    def __next__(self):
        o = self.options
        value = self._current
        if o.map is not None:
            value = o.map(value, self._index)
        self._index += 1
        self._current += o.step
        if o.end is not None:
            if o.step > 0 and self._current > o.end:
                self._current = o.start if o.loop else o.end
            if o.step < 0 and self._current < min(o.start, o.end):
                self._current = o.start if o.loop else o.end
        return value

    next = __next__


def sequence(options: Optional[SequenceOptions] = None, **overrides) -> Sequence:
    opts = replace(options or SequenceOptions(), **overrides)
    return Sequence(opts)
