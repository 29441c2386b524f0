import numpy as np
import pytest

from histogram_mi.information_metrics.mutual_information import (
    conditional_mutual_information,
    permutation_test_cmi,
    permutation_test_mi,
)


def _conditionally_independent(n_repeats: int = 4):
    """X and Y exactly independent inside each Z stratum."""
    x_block = np.tile([0, 0, 1, 1], n_repeats)
    y_block = np.tile([0, 1, 0, 1], n_repeats)
    x = np.concatenate([x_block, 1 - x_block])
    y = np.concatenate([y_block, y_block])
    z = np.repeat([0, 1], x_block.size)
    return x, y, z


def test_discrete_cmi_identical_variables_is_high():
    rng = np.random.default_rng(0)
    N = 150
    x = rng.integers(0, 5, N)  # 5 categories
    z = rng.integers(0, 3, N)  # 3 categories

    cmi_val = conditional_mutual_information(x, x.copy(), z)
    assert cmi_val > 1.0, "CMI should be high for identical X,Y"


def test_cmi_permutation_independent_gives_p_one():
    x, y, z = _conditionally_independent()
    obs, p_val = permutation_test_cmi(x, y, z, permutations=50, random_state=42)
    assert obs == pytest.approx(0.0, abs=1e-12)
    assert p_val == 1.0


def test_cmi_permutation_dependent_rejects():
    rng = np.random.default_rng(1)
    N = 150
    x = rng.integers(0, 4, N)
    z = rng.integers(0, 3, N)
    obs_dep, p_val_dep = permutation_test_cmi(x, x.copy(), z, permutations=100, random_state=42)
    assert obs_dep > 1.0
    assert p_val_dep < 0.05, "Should reject null hypothesis for dependent data"
    assert p_val_dep == pytest.approx(1.0 / 101.0)


def test_mi_permutation_independent_and_dependent():
    x = np.tile([0, 0, 1, 1], 20)
    y = np.tile([0, 1, 0, 1], 20)
    _, p_indep = permutation_test_mi(x, y, permutations=60, random_state=3)
    assert p_indep == 1.0

    rng = np.random.default_rng(2)
    w = rng.integers(0, 3, 90)
    obs, p_dep = permutation_test_mi(w, w.copy(), permutations=99, random_state=3)
    assert obs > 1.0
    assert p_dep == pytest.approx(0.01)


def test_permutation_results_do_not_depend_on_batching_or_jobs():
    rng = np.random.default_rng(4)
    N = 80
    z = rng.integers(0, 2, N)
    x = rng.integers(0, 3, N)
    y = (x + rng.integers(0, 3, N)) % 3

    serial = permutation_test_cmi(x, y, z, permutations=40, random_state=7, batch_size=16)
    parallel = permutation_test_cmi(
        x, y, z, permutations=40, random_state=7, batch_size=16, n_jobs=2
    )
    assert serial == parallel


def test_permutation_edge_cases_return_p_one():
    x = np.array([0, 1, 0, 1, 1])
    y = np.array([0, 1, 1, 1, 0])

    assert permutation_test_mi(x, y, permutations=0)[1] == 1.0
    assert permutation_test_cmi(x, y, np.zeros(5), permutations=0)[1] == 1.0
    # Every Z stratum holds a single sample: nothing can be shuffled
    assert permutation_test_cmi(x, y, np.arange(5), permutations=20)[1] == 1.0


def test_permutation_tests_handle_many_states():
    rng = np.random.default_rng(21)
    n_samples = 2000
    x = rng.integers(0, 1000, n_samples)
    z = rng.integers(0, 5, n_samples)

    observed_mi, p_mi = permutation_test_mi(x, x.copy(), permutations=20, random_state=0)
    assert observed_mi > 8.0
    assert p_mi == pytest.approx(1.0 / 21.0)

    observed_cmi, p_cmi = permutation_test_cmi(
        x, x.copy(), z, permutations=20, random_state=0
    )
    assert observed_cmi > 6.0
    assert p_cmi == pytest.approx(1.0 / 21.0)
