"""Discrete Shannon entropy from histogram probability estimates.

Provides the univariate entropy H(X), the conditional entropy H(X|Y) and
the joint entropy H(X,Y). Terms are accumulated in nats and rescaled once by
1 / log(base), so base 2 reports bits.

Bounds:
    0 <= H(X) <= log |X|
    0 <= H(X|Y) <= H(X)
    0 <= H(X,Y) <= log(|X| * |Y|)
"""

from __future__ import annotations

import numpy as np
from scipy.special import entr, rel_entr

from histogram_mi.core_utils import as_vector, check_log_base, check_vectors
from histogram_mi.information_metrics.probability import estimate_joint, estimate_marginal


def _entropy_from_probabilities(probabilities: np.ndarray, base: float) -> float:
    """Sum -p log p over strictly positive p, rescaled to ``base``."""
    p = np.asarray(probabilities, dtype=np.float64)
    positive = p > 0.0
    return float(entr(p[positive]).sum() / np.log(base))


def entropy(vector: np.ndarray, base: float | None = None) -> float:
    """
    Univariate entropy H(X) of a vector.

    Parameters
    ----------
    vector : np.ndarray
        Shape (n_samples,). Discretized to the floor of each value.
    base : float | None, default=None
        Logarithm base of the reported unit; None uses config.LOG_BASE.

    Returns
    -------
    float
        H(X).
    """
    base = check_log_base(base)
    vector = as_vector(vector, "vector")

    state = estimate_marginal(vector)
    return _entropy_from_probabilities(state.as_array(), base)


def joint_entropy(
    first_vector: np.ndarray, second_vector: np.ndarray, base: float | None = None
) -> float:
    """
    Joint entropy H(X,Y) of two vectors. Argument order is irrelevant.

    Parameters
    ----------
    first_vector, second_vector : np.ndarray
        Shape (n_samples,), equal length. Discretized to the floor of each value.
    base : float | None, default=None
        Logarithm base of the reported unit; None uses config.LOG_BASE.

    Returns
    -------
    float
        H(X,Y).
    """
    base = check_log_base(base)
    first_vector, second_vector = check_vectors(
        first_vector, second_vector, names=("first_vector", "second_vector")
    )

    state = estimate_joint(first_vector, second_vector)
    p_joint, _, _ = state.aligned_arrays()
    return _entropy_from_probabilities(p_joint, base)


def conditional_entropy(
    data_vector: np.ndarray, condition_vector: np.ndarray, base: float | None = None
) -> float:
    """
    Conditional entropy H(X|Y), with X = data_vector and Y = condition_vector.

    Computes
    $$ H(X|Y) = -\\sum_{x,y} p(x,y) \\log \\frac{p(x,y)}{p(y)} $$
    over observed pairs where both p(x,y) and p(y) are positive.

    Parameters
    ----------
    data_vector, condition_vector : np.ndarray
        Shape (n_samples,), equal length. Discretized to the floor of each value.
    base : float | None, default=None
        Logarithm base of the reported unit; None uses config.LOG_BASE.

    Returns
    -------
    float
        H(X|Y).
    """
    base = check_log_base(base)
    data_vector, condition_vector = check_vectors(
        data_vector, condition_vector, names=("data_vector", "condition_vector")
    )

    state = estimate_joint(data_vector, condition_vector)
    p_joint, _, p_condition = state.aligned_arrays()

    valid = (p_joint > 0.0) & (p_condition > 0.0)
    cond_entropy = -rel_entr(p_joint[valid], p_condition[valid]).sum()
    return float(cond_entropy / np.log(base))


__all__ = ["entropy", "joint_entropy", "conditional_entropy"]
