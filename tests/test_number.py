import math

import pytest

from imagine_gen.core.errors import InvalidArgument
from imagine_gen.core.seed import seed
from imagine_gen.generators import number


def test_integer_deterministic_with_global_seed():
    seed(123)
    a = number.integer(10, 20)
    seed(123)
    assert number.integer(10, 20) == a
    assert 10 <= a <= 20


def test_integer_local_seed():
    assert number.integer(1, 100, seed="k") == number.integer(1, 100, seed="k")


def test_integer_rejects_nan():
    with pytest.raises(InvalidArgument):
        number.integer(math.nan, 5)


def test_floating_precision_and_range():
    seed(1)
    for _ in range(200):
        v = number.floating(0, 1, 3)
        assert 0 <= v <= 1
        assert round(v, 3) == v


def test_floating_negative_precision_is_zero():
    v = number.floating(0, 10, -4, seed=5)
    assert v == int(v)


def test_sequence_loops_and_maps():
    seq = number.sequence(start=5, end=7, step=1, loop=True, map=lambda x, i: x * 2)
    assert [next(seq) for _ in range(4)] == [10, 12, 14, 10]


def test_sequence_caps_at_end_without_loop():
    seq = number.sequence(number.SequenceOptions(start=1, end=3))
    assert [seq.next() for _ in range(5)] == [1, 2, 3, 3, 3]


def test_sequence_infinite_by_default():
    seq = number.sequence()
    assert [next(seq) for _ in range(100)][-1] == 100


def test_sequence_negative_step_loops():
    seq = number.sequence(start=3, end=1, step=-1, loop=True)
    assert [next(seq) for _ in range(4)] == [3, 2, 1, 3]


def test_sequence_map_gets_index():
    seq = number.sequence(start=0, step=10, map=lambda v, i: (v, i))
    assert [next(seq) for _ in range(3)] == [(0, 0), (10, 1), (20, 2)]
