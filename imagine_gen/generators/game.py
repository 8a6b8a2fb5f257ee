from __future__ import annotations
import math
from typing import Optional

from imagine_gen.core.errors import InvalidArgument
from imagine_gen.core.rng import Seed, rng_from
from imagine_gen.core.seed import get_global_rng

TAROT_MAJORS = [
    "The Fool", "The Magician", "The High Priestess", "The Empress", "The Emperor", "The Hierophant",
    "The Lovers", "The Chariot", "Strength", "The Hermit", "Wheel of Fortune", "Justice",
    "The Hanged Man", "Death", "Temperance", "The Devil", "The Tower", "The Star", "The Moon",
    "The Sun", "Judgement", "The World",
]
TAROT_SUITS = ["Wands", "Cups", "Swords", "Pentacles"]
TAROT_RANKS = ["Ace", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine", "Ten",
               "Page", "Knight", "Queen", "King"]
POKER_SUITS = ["♠", "♥", "♦", "♣"]
POKER_RANKS = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]


def dice(sides: int = 6, *, seed: Optional[Seed] = None) -> int:
    rng = rng_from(seed, get_global_rng())
    n = max(2, math.floor(sides))
    return 1 + math.floor(rng.next() * n)


def card(deck: str = "poker", *, seed: Optional[Seed] = None) -> str:
    """'Q♠'-style poker card, or a tarot card (major arcana one time in five)."""
    rng = rng_from(seed, get_global_rng())
    if deck == "tarot":
        if rng.next() < 0.2:
            return rng.pick(TAROT_MAJORS)
        return f"{rng.pick(TAROT_RANKS)} of {rng.pick(TAROT_SUITS)}"
    if deck != "poker":
        raise InvalidArgument(f"deck must be 'poker' or 'tarot'; got {deck!r}")
    return f"{rng.pick(POKER_RANKS)}{rng.pick(POKER_SUITS)}"


def coin(*, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    return "heads" if rng.next() < 0.5 else "tails"
