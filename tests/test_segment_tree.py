import math
import random

import pytest

from algokit.segment_tree import AFFINE_MODULUS, LazySegmentTree, SegmentTree


def test_min_tree_tracks_list():
    rng = random.Random(4)
    n = 21
    values = [math.inf] * n
    tree = SegmentTree(n)
    for _ in range(200):
        i = rng.randrange(n)
        a = rng.randint(-100, 100)
        values[i] = a
        tree.update(i, a)
        l = rng.randrange(n)
        r = rng.randint(l + 1, n)
        assert tree.query(l, r) == min(values[l:r])


def test_empty_range_gives_identity():
    tree = SegmentTree(5)
    tree.update(2, 7)
    assert tree.query(3, 3) == math.inf


def test_custom_op_keeps_order():
    words = ["a", "b", "c", "d", "e"]
    tree = SegmentTree(len(words), op=lambda x, y: x + y, identity="")
    for i, w in enumerate(words):
        tree.update(i, w)
    for l in range(len(words)):
        for r in range(l, len(words) + 1):
            assert tree.query(l, r) == "".join(words[l:r])


def test_segment_tree_range_errors():
    tree = SegmentTree(3)
    with pytest.raises(IndexError):
        tree.update(3, 1)
    with pytest.raises(IndexError):
        tree.query(2, 1)


def test_lazy_tree_matches_naive_affine():
    rng = random.Random(8)
    n = 17
    mod = AFFINE_MODULUS
    values = [0] * n
    tree = LazySegmentTree(n)
    for _ in range(300):
        l = rng.randrange(n)
        r = rng.randint(l, n)
        if rng.random() < 0.5:
            b = rng.randrange(mod)
            c = rng.randrange(mod)
            tree.effect(l, r, (b, c))
            for i in range(l, r):
                values[i] = (b * values[i] + c) % mod
        else:
            assert tree.query(l, r) == sum(values[l:r]) % mod


def test_lazy_tree_point_set_then_sum():
    tree = LazySegmentTree(4, mod=1000)
    for i, x in enumerate([5, 6, 7, 8]):
        tree.effect(i, i + 1, (0, x))
    assert tree.query(0, 4) == 5 + 6 + 7 + 8
    tree.effect(1, 3, (2, 1))
    assert tree.query(0, 4) == 5 + (2 * 6 + 1) + (2 * 7 + 1) + 8


def test_lazy_tree_range_errors():
    tree = LazySegmentTree(3)
    with pytest.raises(IndexError):
        tree.query(0, 4)
    with pytest.raises(IndexError):
        tree.effect(-1, 2, (1, 0))