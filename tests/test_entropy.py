from __future__ import annotations

import numpy as np
import pytest

from histogram_mi import conditional_entropy, entropy, joint_entropy


def _random_pair(seed: int, n: int = 250) -> tuple[np.ndarray, np.ndarray]:
    rng = np.random.default_rng(seed)
    x = rng.integers(0, 5, size=n)
    # y depends partly on x so the conditional terms are non-trivial
    y = (x + rng.integers(0, 3, size=n)) % 4
    return x.astype(float), y.astype(float)


def test_uniform_binary_vector_has_one_bit():
    assert entropy([0, 0, 1, 1]) == pytest.approx(1.0)


def test_constant_vector_has_zero_entropy():
    assert entropy([3.0, 3.2, 3.9]) == 0.0


def test_entropy_of_uniform_k_states_is_log_k():
    x = np.repeat(np.arange(8), 5)
    assert entropy(x) == pytest.approx(3.0)


def test_independent_pair_joint_entropy():
    x = [0, 0, 1, 1]
    y = [0, 1, 0, 1]
    assert entropy(x) == pytest.approx(1.0)
    assert entropy(y) == pytest.approx(1.0)
    assert joint_entropy(x, y) == pytest.approx(2.0)
    assert conditional_entropy(x, y) == pytest.approx(1.0)


def test_identical_pair_joint_entropy():
    x = [0, 0, 1, 1]
    assert joint_entropy(x, x) == pytest.approx(1.0)
    assert conditional_entropy(x, x) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_entropy_bounds(seed):
    x, y = _random_pair(seed)
    n_x = len(np.unique(np.floor(x)))
    n_y = len(np.unique(np.floor(y)))

    h_x = entropy(x)
    assert 0.0 <= h_x <= np.log2(n_x) + 1e-12
    assert -1e-12 <= conditional_entropy(x, y) <= h_x + 1e-12
    assert 0.0 <= joint_entropy(x, y) <= np.log2(n_x * n_y) + 1e-12


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_chain_rule(seed):
    x, y = _random_pair(seed)
    assert joint_entropy(x, y) == pytest.approx(entropy(x) + conditional_entropy(y, x), abs=1e-9)
    assert joint_entropy(x, y) == pytest.approx(entropy(y) + conditional_entropy(x, y), abs=1e-9)


def test_joint_entropy_is_order_independent():
    x, y = _random_pair(8)
    assert joint_entropy(x, y) == pytest.approx(joint_entropy(y, x), abs=1e-12)


def test_entropy_accepts_lists_tuples_and_arrays():
    values = [0, 1, 1, 2]
    expected = entropy(np.array(values, dtype=float))
    assert entropy(values) == pytest.approx(expected)
    assert entropy(tuple(values)) == pytest.approx(expected)


def test_formulas_do_not_mutate_inputs():
    x, y = _random_pair(4)
    x_copy, y_copy = x.copy(), y.copy()
    entropy(x)
    joint_entropy(x, y)
    conditional_entropy(x, y)
    np.testing.assert_array_equal(x, x_copy)
    np.testing.assert_array_equal(y, y_copy)


def test_entropy_of_huge_distinct_values():
    assert entropy([1e19, 2e19, 3e19, 4e19]) == pytest.approx(2.0)
