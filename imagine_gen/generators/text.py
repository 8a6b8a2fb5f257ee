from __future__ import annotations
import math
from typing import List, Optional, Tuple

from imagine_gen.core.errors import DanglingEscape, EmptyDomain
from imagine_gen.core.rng import Seed, rng_from
from imagine_gen.core.seed import get_global_rng

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER = "abcdefghijklmnopqrstuvwxyz"
DIGIT = "0123456789"
LETTERS = UPPER + LOWER
ALNUM = LETTERS + DIGIT
DEFAULT_SYMBOLS = "!@#$%^&*_-"

WORDS = [
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing", "elit", "sed", "do",
    "eiusmod", "tempor", "incididunt", "ut", "labore", "et", "dolore", "magna", "aliqua",
]

# pattern token -> charset; "!" uses the caller's symbols, "." is printable ASCII 33..126
TOKEN_CHARSETS = {"A": UPPER, "a": LOWER, "#": DIGIT, "@": ALNUM}


def char(charset: str = ALNUM, *, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    if not charset:
        raise EmptyDomain("char: charset is empty")
    return rng.pick(charset)


def string(length: int, charset: str = ALNUM, *, seed: Optional[Seed] = None) -> str:
    """Random string of `length` characters (floored, minimum 0) from `charset`."""
    rng = rng_from(seed, get_global_rng())
    n = max(0, math.floor(length))
    if not charset:
        raise EmptyDomain("string: charset is empty")
    return "".join(char(charset, seed=rng.child_seed()) for _ in range(n))


def word(*, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    return rng.pick(WORDS)


def sentence(words_count: int = 6, *, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    n = max(1, math.floor(words_count))
    s = " ".join(word(seed=rng.child_seed()) for _ in range(n))
    return s[0].upper() + s[1:] + "."


def paragraph(sentences_count: int = 3, *, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    n = max(1, math.floor(sentences_count))
    sentences = []
    for _ in range(n):
        count = 6 + math.floor(rng.next() * 6)
        sentences.append(sentence(count, seed=rng.child_seed()))
    return " ".join(sentences)


def _tokenize(template: str) -> List[Tuple[bool, str]]:
    # (is_literal, ch); the whole template is checked before anything is drawn
    tokens = []
    escaping = False
    for i, ch in enumerate(template):
        if escaping:
            tokens.append((True, ch))
            escaping = False
        elif ch == "\\":
            if i == len(template) - 1:
                raise DanglingEscape("pattern: dangling \\ at end")
            escaping = True
        else:
            tokens.append((False, ch))
    return tokens


def pattern(template: str, *, symbols: str = DEFAULT_SYMBOLS, seed: Optional[Seed] = None) -> str:
    """Expand a template.

    Tokens: ``A`` upper, ``a`` lower, ``#`` digit, ``@`` alphanumeric,
    ``!`` one of `symbols`, ``.`` printable ASCII without space. A backslash
    makes the next character literal; a trailing lone backslash raises
    DanglingEscape.
    """
    rng = rng_from(seed, get_global_rng())
    tokens = _tokenize(template)
    if not symbols and any(not lit and ch == "!" for lit, ch in tokens):
        raise EmptyDomain("pattern: symbols is empty")
    out = []
    for literal, ch in tokens:
        if literal:
            out.append(ch)
        elif ch in TOKEN_CHARSETS:
            out.append(char(TOKEN_CHARSETS[ch], seed=rng.child_seed()))
        elif ch == "!":
            out.append(char(symbols, seed=rng.child_seed()))
        elif ch == ".":
            out.append(chr(33 + math.floor(rng.next() * 94)))
        else:
            out.append(ch)
    return "".join(out)
