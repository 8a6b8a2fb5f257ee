from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

from imagine_gen.core.rng import RNG, Seed, rng_from
from imagine_gen.core.seed import get_global_rng
from imagine_gen.core.utils import round_half_up


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class RGBA:
    r: int
    g: int
    b: int
    a: float


@dataclass(frozen=True)
class HSL:
    h: int
    s: int
    l: int


@dataclass(frozen=True)
class HSLA:
    h: int
    s: int
    l: int
    a: float


@dataclass(frozen=True)
class HSV:
    h: int
    s: int
    v: int


@dataclass(frozen=True)
class CMYK:
    c: int
    m: int
    y: int
    k: int


def _channel(rng: RNG) -> int:
    return math.floor(rng.next() * 256)


def _scaled(rng: RNG, top: int) -> int:
    return round_half_up(rng.next() * top)


def _alpha(rng: RNG) -> float:
    return round_half_up(rng.next() * 100) / 100


def hex(*, seed: Optional[Seed] = None) -> str:
    """'#rrggbb'."""
    c = rgb(seed=seed)
    return f"#{c.r:02x}{c.g:02x}{c.b:02x}"


def hexa(*, seed: Optional[Seed] = None) -> str:
    """'#rrggbbaa' with alpha scaled to 00..ff."""
    c = rgba(seed=seed)
    return f"#{c.r:02x}{c.g:02x}{c.b:02x}{round_half_up(c.a * 255):02x}"


def rgb(*, seed: Optional[Seed] = None) -> RGB:
    rng = rng_from(seed, get_global_rng())
    return RGB(_channel(rng), _channel(rng), _channel(rng))


def rgba(*, seed: Optional[Seed] = None) -> RGBA:
    rng = rng_from(seed, get_global_rng())
    return RGBA(_channel(rng), _channel(rng), _channel(rng), _alpha(rng))


def hsl(*, seed: Optional[Seed] = None) -> HSL:
    rng = rng_from(seed, get_global_rng())
    return HSL(_scaled(rng, 360), _scaled(rng, 100), _scaled(rng, 100))


def hsla(*, seed: Optional[Seed] = None) -> HSLA:
    rng = rng_from(seed, get_global_rng())
    return HSLA(_scaled(rng, 360), _scaled(rng, 100), _scaled(rng, 100), _alpha(rng))


def hsv(*, seed: Optional[Seed] = None) -> HSV:
    rng = rng_from(seed, get_global_rng())
    return HSV(_scaled(rng, 360), _scaled(rng, 100), _scaled(rng, 100))


def cmyk(*, seed: Optional[Seed] = None) -> CMYK:
    rng = rng_from(seed, get_global_rng())
    return CMYK(_scaled(rng, 100), _scaled(rng, 100), _scaled(rng, 100), _scaled(rng, 100))
