"""Discretization of observation vectors into contiguous integer states.

Values are floored and the distinct floored values are re-indexed densely,
so labels always run from 0 to K-1. This is a categorical discretizer for
integer or near-integer data: 0.2 and 0.9 share a state. It does not bin
continuous features.
"""

from __future__ import annotations

import numpy as np

from histogram_mi.core_utils import as_vector, check_vectors


def discretize(vector: np.ndarray) -> tuple[np.ndarray, int]:
    """
    Map a real-valued vector to contiguous state labels.

    Parameters
    ----------
    vector : np.ndarray
        Shape (n_samples,), real values.

    Returns
    -------
    labels : np.ndarray
        Shape (n_samples,), int64 labels in [0, n_states).
    n_states : int
        Number of distinct floored values.

    Raises
    ------
    ValueError
        If the vector contains NaN or infinite values.
    """
    values = as_vector(vector)
    if not np.all(np.isfinite(values)):
        raise ValueError("Cannot discretize non-finite values (NaN or inf).")

    # Floored values stay float64 so magnitudes beyond the int64 range keep
    # distinct states
    states, labels = np.unique(np.floor(values), return_inverse=True)
    return labels.astype(np.int64, copy=False).reshape(-1), int(states.size)


def merge_labels(first: np.ndarray, second: np.ndarray) -> tuple[np.ndarray, int]:
    """
    Encode two equal-length vectors as one joint-state vector.

    Each position receives ``first + n_first * second`` on the discretized
    labels, then the result is re-indexed so merged labels stay contiguous.
    Distinct (first, second) pairs never share a merged label.

    Parameters
    ----------
    first, second : np.ndarray
        Shape (n_samples,), real values.

    Returns
    -------
    merged : np.ndarray
        Shape (n_samples,), int64 joint-state labels.
    n_states : int
        Number of distinct pairs observed.
    """
    first, second = check_vectors(first, second, names=("first", "second"))
    first_labels, first_n_states = discretize(first)
    second_labels, _ = discretize(second)
    encoded = first_labels + first_n_states * second_labels
    return discretize(encoded)


__all__ = ["discretize", "merge_labels"]
