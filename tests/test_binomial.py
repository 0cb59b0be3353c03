import math

import pytest

from algokit.binomial import DEFAULT_MODULUS, Binomial, pascal_table


def test_comb_matches_math_comb():
    binom = Binomial(200)
    for n in range(0, 201, 7):
        for k in range(n + 1):
            assert binom.comb(n, k) == math.comb(n, k) % DEFAULT_MODULUS


def test_comb_small_prime_modulus():
    binom = Binomial(12, 13)
    for n in range(13):
        for k in range(n + 1):
            assert binom.comb(n, k) == math.comb(n, k) % 13


def test_comb_out_of_range_is_zero():
    binom = Binomial(10)
    assert binom.comb(3, 5) == 0
    assert binom.comb(-1, 0) == 0
    assert binom.comb(5, -1) == 0


def test_comb_symmetry():
    binom = Binomial(50)
    for k in range(51):
        assert binom.comb(50, k) == binom.comb(50, 50 - k)


def test_comb_above_limit_raises():
    with pytest.raises(ValueError):
        Binomial(10).comb(11, 2)


def test_modulus_must_exceed_limit():
    with pytest.raises(ValueError):
        Binomial(13, 13)


def test_pascal_table_matches_math_comb():
    size = 30
    table = pascal_table(size, 10)
    assert len(table) == size and all(len(row) == size for row in table)
    for i in range(size):
        for j in range(size):
            assert table[i][j] == math.comb(i, j) % 10


def test_pascal_table_default_modulus():
    table = pascal_table(60)
    assert table[59][29] == math.comb(59, 29) % DEFAULT_MODULUS


def test_pascal_table_empty_and_invalid():
    assert pascal_table(0) == []
    with pytest.raises(ValueError):
        pascal_table(-1)