from __future__ import annotations
import math
import uuid as _uuid
from typing import Optional

from imagine_gen.core.rng import Seed, rng_from
from imagine_gen.core.seed import get_global_rng

HEX = "0123456789abcdef"
WORDS = [
    "alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel", "india", "juliet",
    "kilo", "lima", "mike", "november", "oscar", "papa", "quebec", "romeo", "sierra", "tango",
    "uniform", "victor", "whiskey", "xray", "yankee", "zulu",
]


def uuid(*, seed: Optional[Seed] = None) -> str:
    """UUID v4-shaped string built from 16 drawn bytes."""
    rng = rng_from(seed, get_global_rng())
    raw = bytearray(math.floor(rng.next() * 256) for _ in range(16))
    raw[6] = (raw[6] & 0x0F) | 0x40
    raw[8] = (raw[8] & 0x3F) | 0x80
    return str(_uuid.UUID(bytes=bytes(raw)))


def hash(length: int = 16, *, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    n = max(1, math.floor(length))
    return "".join(rng.pick(HEX) for _ in range(n))


def slug(words_count: int = 2, *, seed: Optional[Seed] = None) -> str:
    """Kebab-case slug of NATO alphabet words, e.g. 'alpha-bravo'."""
    rng = rng_from(seed, get_global_rng())
    n = max(1, math.floor(words_count))
    return "-".join(rng.pick(WORDS) for _ in range(n))
