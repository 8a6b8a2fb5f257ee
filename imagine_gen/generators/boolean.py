from __future__ import annotations
from typing import Optional

from imagine_gen.core.rng import Seed, rng_from
from imagine_gen.core.seed import get_global_rng
from imagine_gen.core.utils import clamp


def boolean(probability: float = 0.5, *, seed: Optional[Seed] = None) -> bool:
    """True with the given probability, clamped to [0, 1]."""
    rng = rng_from(seed, get_global_rng())
    p = clamp(probability, 0, 1)
    return rng.next() < p
