import pytest

from algokit.rolling_hash import DEFAULT_BASE, MODULUS, RollingHash


def test_hashes_stay_below_mersenne_61_modulus():
    text = "z" * 200
    rh = RollingHash(text)
    assert MODULUS == (1 << 61) - 1
    for l in range(0, len(text), 7):
        for r in range(l, len(text) + 1, 11):
            assert 0 <= rh.get(l, r) < MODULUS


def test_single_character_hash_is_its_code():
    rh = RollingHash("a")
    assert rh.get(0, 1) == ord("a")


def test_two_character_hash_uses_base():
    rh = RollingHash("ab")
    assert rh.get(0, 2) == ord("a") * DEFAULT_BASE + ord("b")


def test_empty_range_hashes_to_zero():
    rh = RollingHash("abc")
    assert rh.get(1, 1) == 0


def test_equal_substrings_hash_equal():
    text = "abracadabra"
    rh = RollingHash(text)
    n = len(text)
    for l1 in range(n):
        for r1 in range(l1, n + 1):
            for l2 in range(n):
                r2 = l2 + (r1 - l1)
                if r2 > n:
                    continue
                if text[l1:r1] == text[l2:r2]:
                    assert rh.get(l1, r1) == rh.get(l2, r2)


def test_distinct_substrings_differ():
    text = "mississippi"
    rh = RollingHash(text)
    seen = {}
    for l in range(len(text)):
        for r in range(l + 1, len(text) + 1):
            seen.setdefault(rh.get(l, r), set()).add(text[l:r])
    assert all(len(group) == 1 for group in seen.values())


def test_concatenation_law():
    text = "hello world"
    rh = RollingHash(text)
    for m in range(len(text) + 1):
        left = rh.get(0, m)
        right = rh.get(m, len(text))
        combined = (left * pow(DEFAULT_BASE, len(text) - m, MODULUS) + right) % MODULUS
        assert combined == rh.get(0, len(text))


def test_bytes_and_str_agree():
    assert RollingHash(b"abc").get(0, 3) == RollingHash("abc").get(0, 3)


def test_invalid_range_raises():
    rh = RollingHash("abc")
    with pytest.raises(IndexError):
        rh.get(2, 1)
    with pytest.raises(IndexError):
        rh.get(0, 4)