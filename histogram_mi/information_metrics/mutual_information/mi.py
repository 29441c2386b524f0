"""Mutual Information (MI) between two discrete variables.

Provides the histogram estimate of I(X;Y), plus dispatch to the batch
NumPy implementation for one-against-many scoring.
"""

from __future__ import annotations

import numpy as np

from histogram_mi.core_utils import check_log_base, check_vectors
from histogram_mi.information_metrics.probability import estimate_joint

from .mi_numpy import _safe_mi_contrib, mutual_information_vec
from .mi_sklearn import mutual_information_sklearn


def mutual_information(
    first_vector: np.ndarray, second_vector: np.ndarray, base: float | None = None
) -> float:
    """
    Mutual information I(X;Y) between two vectors.

    Computes
    $$ I(X;Y) = \\sum_{x,y} p(x,y) \\log \\frac{p(x,y)}{p(x)\\,p(y)} $$
    over observed pairs whose joint and marginal probabilities are all
    positive. Symmetric in its arguments and bounded by
    0 <= I(X;Y) <= min(H(X), H(Y)).

    Parameters
    ----------
    first_vector, second_vector : np.ndarray
        Shape (n_samples,), equal length. Discretized to the floor of each value.
    base : float | None, default=None
        Logarithm base of the reported unit; None uses config.LOG_BASE.

    Returns
    -------
    float
        I(X;Y).
    """
    base = check_log_base(base)
    first_vector, second_vector = check_vectors(
        first_vector, second_vector, names=("first_vector", "second_vector")
    )

    state = estimate_joint(first_vector, second_vector)
    p_joint, p_first, p_second = state.aligned_arrays()
    return float(_safe_mi_contrib(p_joint, p_first, p_second).sum() / np.log(base))


__all__ = [
    "mutual_information",
    "mutual_information_vec",
    "mutual_information_sklearn",
]
