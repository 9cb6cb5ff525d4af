import numpy as np
from numpy.random import default_rng
import pytest

from balanced_tree import AVLTree


def avl_height_bound(n: int) -> float:
    return 1.44 * np.log2(n + 2) - 0.328


def workload(kind: str, n: int, seed: int = 0) -> np.ndarray:
    if kind == "ascending":
        return np.arange(n)
    elif kind == "descending":
        return np.arange(n)[::-1]
    elif kind == "zigzag":
        # alternate between the two ends of the range
        idx = np.arange(n)
        return np.where(idx % 2 == 0, idx // 2, n - 1 - idx // 2)
    else:
        return default_rng(seed).permutation(n)


@pytest.mark.parametrize("kind", ["ascending", "descending", "zigzag", "random"])
@pytest.mark.parametrize("n", [1, 2, 3, 10, 100, 1000, 4096])
def test_insert_height_bound(kind, n):
    tree = AVLTree()
    for v in workload(kind, n, seed=n):
        tree.add(int(v))

    assert len(tree) == n
    assert tree.height() <= avl_height_bound(n)
    assert tree.inorder() == list(range(n))


@pytest.mark.parametrize("seed", range(5))
def test_height_bound_after_removals(seed):
    rng = default_rng(seed)
    values = rng.integers(-10000, 10000, size=2000)

    tree = AVLTree()
    for v in values:
        tree.add(int(v))
    expected = set(int(v) for v in values)

    for v in rng.choice(values, size=1500):
        v = int(v)
        removed = tree.remove(v)
        if v in expected:
            assert removed == v
            expected.remove(v)
        else:
            assert removed is None
        assert tree.height() <= avl_height_bound(len(tree))

    assert tree.inorder() == sorted(expected)


def test_ascending_insert_builds_perfect_tree():
    tree = AVLTree()
    for v in range(2 ** 10 - 1):
        tree.add(v)

    assert tree.height() == 9
