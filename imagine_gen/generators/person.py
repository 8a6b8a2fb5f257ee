from __future__ import annotations
import math
from typing import Optional

from imagine_gen.core.errors import EmptyDomain, InvalidArgument
from imagine_gen.core.rng import Seed, rng_from
from imagine_gen.core.seed import get_global_rng
from imagine_gen.generators.text import DIGIT, LOWER, UPPER, DEFAULT_SYMBOLS, pattern
from imagine_gen.images.svg import ImageOut, initials as svg_initials

MALE_FIRST = ["James", "John", "Robert", "Michael", "William", "David", "Richard", "Joseph", "Thomas", "Charles"]
FEMALE_FIRST = ["Mary", "Patricia", "Jennifer", "Linda", "Elizabeth", "Barbara", "Susan", "Jessica", "Sarah", "Karen"]
LAST = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez"]


def first_name(gender: Optional[str] = None, *, seed: Optional[Seed] = None) -> str:
    """First name for 'male', 'female', or either when gender is None."""
    rng = rng_from(seed, get_global_rng())
    if gender == "male":
        return rng.pick(MALE_FIRST)
    if gender == "female":
        return rng.pick(FEMALE_FIRST)
    if gender is not None:
        raise InvalidArgument(f"gender must be 'male', 'female' or None; got {gender!r}")
    return rng.pick(MALE_FIRST) if rng.next() < 0.5 else rng.pick(FEMALE_FIRST)


def last_name(*, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    return rng.pick(LAST)


def full_name(gender: Optional[str] = None, *, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    first = first_name(gender, seed=rng.child_seed())
    last = last_name(seed=rng.child_seed())
    return f"{first} {last}"


def username(*, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    first = first_name(seed=rng.child_seed()).lower()
    last = last_name(seed=rng.child_seed()).lower()
    n = math.floor(rng.next() * 1000)
    return f"{first[0]}{last}{n}"


def email(domain: Optional[str] = None, *, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    user = username(seed=rng.child_seed())
    host = (domain or "").strip() or "example.com"
    return f"{user}@{host}"


def password(length: int = 12, *, symbols: bool = True, digits: bool = True, upper: bool = True,
             lower: bool = True, seed: Optional[Seed] = None) -> str:
    """Password with at least one character from every enabled set.

    The result is never shorter than the number of enabled sets.
    """
    rng = rng_from(seed, get_global_rng())
    sets = []
    if symbols:
        sets.append(DEFAULT_SYMBOLS)
    if digits:
        sets.append(DIGIT)
    if upper:
        sets.append(UPPER)
    if lower:
        sets.append(LOWER)
    if not sets:
        raise EmptyDomain("password: at least one character set must be enabled")
    n = max(1, math.floor(length))
    out = [rng.pick(charset) for charset in sets]
    while len(out) < n:
        out.append(rng.pick(rng.pick(sets)))
    return "".join(out)


def avatar(size: int = 96, *, seed: Optional[Seed] = None) -> str:
    """Data URL of an initials avatar for a generated full name."""
    rng = rng_from(seed, get_global_rng())
    name = full_name(seed=rng.child_seed())
    letters = "".join(part[0] for part in name.split(" "))[:2].upper()
    return svg_initials(letters, size=size, as_=ImageOut.DATA_URL)


def phone(template: str = "+1-###-###-####", *, seed: Optional[Seed] = None) -> str:
    return pattern(template, seed=seed)
