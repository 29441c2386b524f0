import numpy as np
import pytest

from histogram_mi import conditional_entropy, conditional_mutual_information, mutual_information
from histogram_mi.core_utils import LengthMismatchError
from histogram_mi.information_metrics.mutual_information import (
    conditional_entropy_vec,
    conditional_mutual_information_vec,
    mutual_information_vec,
)
from histogram_mi.information_metrics.mutual_information.mi_numpy import _observed_cells


def _data(seed: int = 42, n_samples: int = 120, n_vectors: int = 15):
    rng = np.random.default_rng(seed)
    x = rng.integers(0, 4, n_samples)
    z = rng.integers(0, 3, n_samples)
    Y = rng.integers(0, 5, (n_vectors, n_samples))
    # Rows with fewer states than the widest row, a copy of x and a constant
    Y[0] = rng.integers(0, 2, n_samples)
    Y[1] = x
    Y[2] = 7
    return x, Y, z


def test_mi_vec_matches_scalar_rows():
    x, Y, _ = _data()
    mi_vec = mutual_information_vec(x, Y)
    mi_rows = np.array([mutual_information(x, row) for row in Y])
    np.testing.assert_allclose(mi_vec, mi_rows, rtol=1e-10, atol=1e-10)


def test_conditional_entropy_vec_matches_scalar_rows():
    _, Y, z = _data(seed=3)
    ce_vec = conditional_entropy_vec(Y, z)
    ce_rows = np.array([conditional_entropy(row, z) for row in Y])
    np.testing.assert_allclose(ce_vec, ce_rows, rtol=1e-10, atol=1e-10)


def test_cmi_vec_matches_scalar_rows():
    x, Y, z = _data(seed=8)
    cmi_vec = conditional_mutual_information_vec(x, Y, z)
    cmi_rows = np.array([conditional_mutual_information(x, row, z) for row in Y])
    np.testing.assert_allclose(cmi_vec, cmi_rows, rtol=1e-10, atol=1e-10)


def test_mi_vec_respects_log_base():
    x, Y, _ = _data(seed=1)
    bits = mutual_information_vec(x, Y, base=2.0)
    nats = mutual_information_vec(x, Y, base=np.e)
    np.testing.assert_allclose(nats, bits * np.log(2.0), rtol=1e-12, atol=1e-14)


def test_mi_vec_accepts_single_row():
    x = np.array([0, 0, 1, 1])
    result = mutual_information_vec(x, np.array([0, 0, 1, 1]))
    assert result.shape == (1,)
    assert result[0] == pytest.approx(1.0)


def test_mi_vec_empty_matrix_returns_empty():
    x = np.array([0, 1, 0, 1])
    result = mutual_information_vec(x, np.empty((0, 4)))
    assert result.shape == (0,)


def test_mi_vec_row_length_mismatch_raises():
    with pytest.raises(LengthMismatchError):
        mutual_information_vec(np.zeros(4), np.zeros((3, 5)))


def test_vec_kernels_match_scalar_rows_with_many_states():
    rng = np.random.default_rng(11)
    n_samples = 600
    x = rng.permutation(n_samples)
    z = rng.integers(0, 300, n_samples)
    Y = np.array([rng.permutation(n_samples) for _ in range(50)])
    Y[0] = x // 3

    mi_rows = np.array([mutual_information(x, row) for row in Y])
    np.testing.assert_allclose(mutual_information_vec(x, Y), mi_rows, rtol=1e-10, atol=1e-10)

    ce_rows = np.array([conditional_entropy(row, z) for row in Y])
    np.testing.assert_allclose(conditional_entropy_vec(Y, z), ce_rows, rtol=1e-10, atol=1e-10)


def test_observed_cells_stay_linear_in_samples():
    rng = np.random.default_rng(2)
    rows = np.array([rng.permutation(1000) for _ in range(8)])
    fixed = rng.permutation(1000)
    row_index, row_state, fixed_state, counts = _observed_cells(rows, fixed, 1000)

    assert counts.size == rows.size
    assert counts.sum() == rows.size
    np.testing.assert_array_equal(np.bincount(row_index), [1000] * 8)
    assert row_state.max() < 1000 and fixed_state.max() < 1000
