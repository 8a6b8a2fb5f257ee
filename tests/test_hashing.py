import math

import numpy as np
import pytest

from imagine_gen.core.errors import InvalidArgument
from imagine_gen.core.hashing import FNV_OFFSET_BASIS, FNV_PRIME, fnv1a_32, to_seed


@pytest.mark.parametrize("text,expected", [
    ("", 0x811C9DC5),
    ("test", 2949673445),
    ("a", 0xE40C292C),
    ("foobar", 0xBF9CF968),
])
def test_fnv1a_reference_values(text, expected):
    assert fnv1a_32(text) == expected
    assert to_seed(text) == expected


def test_text_hash_is_stable():
    assert to_seed("test") == to_seed("test")
    assert to_seed("test") != to_seed("Test")


def test_non_bmp_text_hashes_surrogate_pair():
    h = FNV_OFFSET_BASIS
    for unit in (0xD83D, 0xDE00):
        h = ((h ^ unit) * FNV_PRIME) & 0xFFFFFFFF
    assert to_seed("\U0001F600") == h


@pytest.mark.parametrize("value,expected", [
    (0, 0),
    (42, 42),
    (-1, 0xFFFFFFFF),
    (2**32 + 5, 5),
    (True, 1),
    (np.int64(-2), 0xFFFFFFFE),
])
def test_integers_wrap_mod_2_32(value, expected):
    assert to_seed(value) == expected


def test_floats_truncate_toward_zero():
    assert to_seed(3.9) == 3
    assert to_seed(-3.9) == 2**32 - 3
    assert to_seed(0.5 * 2**32) == 2**31
    assert to_seed(np.float32(7.5)) == 7


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_floats_fold_to_zero(value):
    assert to_seed(value) == 0


@pytest.mark.parametrize("value", [None, b"bytes", [1], {"a": 1}])
def test_unsupported_seed_types(value):
    with pytest.raises(InvalidArgument):
        to_seed(value)
