import numpy as np
import pytest

from histogram_mi import mutual_information
from histogram_mi.information_metrics.mutual_information import mutual_information_sklearn


@pytest.mark.parametrize("n_states", [2, 3, 6])
def test_sklearn_vs_histogram(n_states):
    """
    Both estimators compute the exact plug-in MI of the same contingency table.
    """
    rng = np.random.default_rng(42 + n_states)
    n_samples = 200

    x = rng.integers(0, n_states, n_samples).astype(float)
    y = ((x + rng.integers(0, 2, n_samples)) % n_states) + 0.25

    np.testing.assert_allclose(
        mutual_information_sklearn(x, y), mutual_information(x, y), rtol=1e-10, atol=1e-10
    )


def test_sklearn_reference_in_nats():
    x = np.array([0, 0, 1, 1])
    assert mutual_information_sklearn(x, x, base=np.e) == pytest.approx(np.log(2.0))
