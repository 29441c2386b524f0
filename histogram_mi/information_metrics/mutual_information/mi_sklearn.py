"""Scikit-learn based Mutual Information, used as an independent reference."""

from __future__ import annotations

import numpy as np
from sklearn.metrics import mutual_info_score

from histogram_mi.core_utils import check_log_base, check_vectors
from histogram_mi.information_metrics.probability import discretize


def mutual_information_sklearn(
    first_vector: np.ndarray, second_vector: np.ndarray, base: float | None = None
) -> float:
    """
    Calculate I(X;Y) with scikit-learn's contingency-table estimator.

    Both vectors go through the same discretizer as the histogram
    estimator, so the two results agree up to floating-point error.

    Parameters
    ----------
    first_vector, second_vector : np.ndarray
        Shape (n_samples,), equal length.
    base : float | None, default=None
        Logarithm base of the reported unit; None uses config.LOG_BASE.

    Returns
    -------
    float
        I(X;Y). mutual_info_score reports nats; the value is rescaled to ``base``.
    """
    base = check_log_base(base)
    first_vector, second_vector = check_vectors(
        first_vector, second_vector, names=("first_vector", "second_vector")
    )

    first_labels, _ = discretize(first_vector)
    second_labels, _ = discretize(second_vector)
    return float(mutual_info_score(first_labels, second_labels) / np.log(base))


__all__ = ["mutual_information_sklearn"]
