"""Conditional Mutual Information (CMI) calculations.

I(X;Y|Z) is computed without a three-way joint table, using

    I(X;Y|Z) = H(Y|Z) - H(Y|X,Z)

where the pair (X,Z) is first merged into one joint-state vector. The
probability estimators therefore only ever handle two variables.
"""

from __future__ import annotations

import numpy as np

from histogram_mi.core_utils import check_log_base, check_vectors
from histogram_mi.information_metrics.entropy import conditional_entropy
from histogram_mi.information_metrics.probability import merge_labels

from .mi_numpy import _as_row_matrix, conditional_entropy_vec


def conditional_mutual_information(
    first_vector: np.ndarray,
    second_vector: np.ndarray,
    condition_vector: np.ndarray,
    base: float | None = None,
) -> float:
    """
    Conditional mutual information I(X;Y|Z).

    Symmetric in X and Y and bounded by
    0 <= I(X;Y|Z) <= min(H(X|Z), H(Y|Z)).

    Parameters
    ----------
    first_vector : np.ndarray
        X, shape (n_samples,).
    second_vector : np.ndarray
        Y, shape (n_samples,).
    condition_vector : np.ndarray
        Z, shape (n_samples,).
    base : float | None, default=None
        Logarithm base of the reported unit; None uses config.LOG_BASE.

    Returns
    -------
    float
        I(X;Y|Z).
    """
    base = check_log_base(base)
    first_vector, second_vector, condition_vector = check_vectors(
        first_vector,
        second_vector,
        condition_vector,
        names=("first_vector", "second_vector", "condition_vector"),
    )

    merged_vector, _ = merge_labels(first_vector, condition_vector)

    first_cond_entropy = conditional_entropy(second_vector, condition_vector, base=base)
    second_cond_entropy = conditional_entropy(second_vector, merged_vector, base=base)
    return first_cond_entropy - second_cond_entropy


def conditional_mutual_information_vec(
    x_vector: np.ndarray,
    y_matrix: np.ndarray,
    z_condition: np.ndarray,
    base: float | None = None,
) -> np.ndarray:
    """
    Vectorized I(X;Y|Z) for one X, many Y rows and a shared Z.

    Uses the same decomposition as :func:`conditional_mutual_information`,
    with the batch conditional-entropy kernel.

    Parameters
    ----------
    x_vector : np.ndarray
        Shape (n_samples,).
    y_matrix : np.ndarray
        Shape (n_vectors, n_samples).
    z_condition : np.ndarray
        Shape (n_samples,), conditioning variable.
    base : float | None, default=None
        Logarithm base of the reported unit; None uses config.LOG_BASE.

    Returns
    -------
    np.ndarray
        Shape (n_vectors,), CMI values for each Y row.
    """
    base = check_log_base(base)
    x, z = check_vectors(x_vector, z_condition, names=("x_vector", "z_condition"))
    Y = _as_row_matrix(y_matrix, x.size)
    if Y.shape[0] == 0:
        return np.array([], dtype=float)

    merged, _ = merge_labels(x, z)
    return conditional_entropy_vec(Y, z, base=base) - conditional_entropy_vec(
        Y, merged, base=base
    )


__all__ = [
    "conditional_mutual_information",
    "conditional_mutual_information_vec",
]
