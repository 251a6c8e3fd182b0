import random

import pytest

from teamnote.fft import dft, multiply, multiply_split
from teamnote.ntt import multiply as ntt_multiply

EXPECTED = [4, 13, 28, 34, 40, 37, 24]


def test_multiply_small():
    assert multiply([1, 2, 3], [4, 5, 6, 7, 8]) == EXPECTED


def test_multiply_split_small():
    assert multiply_split([1, 2, 3], [4, 5, 6, 7, 8]) == EXPECTED


def test_multiply_split_large_coefficients():
    d = 10**8
    d2 = d * d
    result = multiply_split([1 * d, 2 * d, 3 * d], [4 * d, 5 * d, 6 * d, 7 * d, 8 * d])
    assert result == [c * d2 for c in EXPECTED]


def test_single_coefficients():
    assert multiply([6], [7]) == [42]
    assert multiply_split([6], [7]) == [42]


def test_dft_round_trip():
    rng = random.Random(5)
    values = [complex(rng.uniform(-10, 10), rng.uniform(-10, 10)) for _ in range(16)]
    back = dft(dft(values), inverse=True)
    assert all(abs(a - b) < 1e-9 for a, b in zip(values, back))


def test_dft_of_impulse_is_flat():
    spectrum = dft([1, 0, 0, 0, 0, 0, 0, 0])
    assert all(abs(x - 1) < 1e-12 for x in spectrum)


def test_dft_zero_frequency_is_sum():
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    assert abs(dft(values)[0] - sum(values)) < 1e-9


def test_methods_agree_on_random_input():
    rng = random.Random(9)
    f = [rng.randrange(1000) for _ in range(37)]
    g = [rng.randrange(1000) for _ in range(23)]
    small = multiply(f, g)
    assert small == multiply_split(f, g)
    assert small == [int(x) for x in ntt_multiply(f, g)]


def test_bad_length_raises():
    with pytest.raises(ValueError):
        dft([1, 2, 3])


def test_empty_polynomial_raises():
    with pytest.raises(ValueError):
        multiply([], [1])
    with pytest.raises(ValueError):
        multiply_split([1], [])