import math

import pytest

from algokit.number_theory import (
    Sieve,
    euler_phi,
    extgcd,
    invmod,
    is_prime,
    power,
    prime_factorization,
)


@pytest.mark.parametrize(
    "base,exp,mod", [(2, 10, 1000), (3, 0, 7), (123456, 789, 1_000_000_007), (5, 117, 19)]
)
def test_power_matches_builtin(base, exp, mod):
    assert power(base, exp, mod) == pow(base, exp, mod)


def test_power_zero_exponent_is_one():
    assert power(5, 0, 1) == 1


def test_power_negative_exponent_raises():
    with pytest.raises(ValueError):
        power(2, -1, 7)


@pytest.mark.parametrize("a,b", [(12, 18), (240, 46), (17, 5), (0, 9), (9, 0), (1, 1)])
def test_extgcd_bezout(a, b):
    g, x, y = extgcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a,m", [(3, 11), (10, 17), (7, 1_000_000_007), (5, 12)])
def test_invmod(a, m):
    inv = invmod(a, m)
    assert 0 <= inv < m
    assert a * inv % m == 1


def test_invmod_not_coprime():
    with pytest.raises(ValueError):
        invmod(4, 10)


def test_is_prime_agrees_with_sieve():
    sieve = Sieve(500)
    for n in range(501):
        assert is_prime(n) == sieve.is_prime(n)


def test_is_prime_negative_and_small():
    assert not is_prime(-7)
    assert not is_prime(0)
    assert not is_prime(1)


@pytest.mark.parametrize("n", [1, 2, 12, 97, 360, 1024, 999_983, 600_851_475_143])
def test_prime_factorization_reconstructs(n):
    factors = prime_factorization(n)
    assert math.prod(p**e for p, e in factors) == n
    assert all(is_prime(p) and e >= 1 for p, e in factors)
    primes = [p for p, _ in factors]
    assert primes == sorted(set(primes))


def test_prime_factorization_of_one_is_empty():
    assert prime_factorization(1) == []


def test_prime_factorization_rejects_non_positive():
    with pytest.raises(ValueError):
        prime_factorization(0)


@pytest.mark.parametrize("n", [1, 6, 12, 36, 97, 100, 210])
def test_euler_phi_divisor_sum(n):
    assert sum(euler_phi(d) for d in range(1, n + 1) if n % d == 0) == n


def test_euler_phi_counts_coprimes():
    for n in range(1, 80):
        assert euler_phi(n) == sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


def test_euler_phi_rejects_zero():
    with pytest.raises(ValueError):
        euler_phi(0)


def test_sieve_count_matches_flags():
    sieve = Sieve(300)
    for limit in range(301):
        assert sieve.count(limit) == sum(sieve.is_prime(k) for k in range(limit + 1))


def test_sieve_small_limits():
    assert Sieve(0).count(0) == 0
    assert Sieve(1).count(1) == 0
    assert not Sieve(1).is_prime(1)


def test_sieve_out_of_range():
    sieve = Sieve(10)
    with pytest.raises(ValueError):
        sieve.count(11)
    with pytest.raises(ValueError):
        sieve.is_prime(-1)
    with pytest.raises(ValueError):
        Sieve(-1)