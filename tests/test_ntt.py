import random

import pytest

from teamnote.modint import MOD, ModInt
from teamnote.ntt import dft, multiply


def test_forward_transform():
    assert dft([1, 2, 3, 4]) == [10, 173167434, 998244351, 825076915]


def test_inverse_transform():
    assert dft([10, 173167434, 998244351, 825076915], inverse=True) == [1, 2, 3, 4]


def test_multiply():
    assert multiply([1, 2, 3], [4, 5, 6, 7, 8]) == [4, 13, 28, 34, 40, 37, 24]


def test_multiply_accepts_modint():
    result = multiply([ModInt(1), ModInt(2), ModInt(3)], [4, 5, 6, 7, 8])
    assert result == [4, 13, 28, 34, 40, 37, 24]


def test_round_trip_random():
    rng = random.Random(1)
    values = [rng.randrange(MOD) for _ in range(64)]
    assert dft(dft(values), inverse=True) == values


def test_transform_is_linear():
    rng = random.Random(2)
    a = [rng.randrange(MOD) for _ in range(8)]
    b = [rng.randrange(MOD) for _ in range(8)]
    summed = dft([(x + y) % MOD for x, y in zip(a, b)])
    assert summed == [x + y for x, y in zip(dft(a), dft(b))]


def test_multiply_commutes():
    rng = random.Random(4)
    f = [rng.randrange(MOD) for _ in range(13)]
    g = [rng.randrange(MOD) for _ in range(29)]
    assert multiply(f, g) == multiply(g, f)
    assert len(multiply(f, g)) == len(f) + len(g) - 1


def test_multiply_by_one_is_identity():
    f = [5, 0, MOD - 1, 12]
    assert multiply(f, [1]) == f


def test_bad_length_raises():
    with pytest.raises(ValueError):
        dft([1, 2, 3])


def test_empty_raises():
    with pytest.raises(ValueError):
        multiply([], [1, 2])