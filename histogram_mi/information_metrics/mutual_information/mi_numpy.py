"""NumPy-based batch estimators: one reference vector against many rows."""

from __future__ import annotations

import numpy as np
from scipy.special import rel_entr

from histogram_mi.core_utils import LengthMismatchError, as_vector, check_log_base
from histogram_mi.information_metrics.probability import discretize


def _as_row_matrix(y_matrix: np.ndarray, n_samples: int) -> np.ndarray:
    """Return ``y_matrix`` as float64 of shape (n_vectors, n_samples)."""
    Y = np.asarray(y_matrix, dtype=np.float64)
    if Y.ndim == 1:
        Y = Y.reshape(1, -1)
    if Y.ndim != 2:
        raise ValueError(f"y_matrix must be two-dimensional, got shape {Y.shape}.")
    if Y.shape[0] > 0 and Y.shape[1] != n_samples:
        raise LengthMismatchError(
            f"Rows of y_matrix have length {Y.shape[1]}, expected {n_samples}."
        )
    return Y


def _discretize_rows(matrix: np.ndarray) -> tuple[np.ndarray, int]:
    """
    Discretize each row independently.

    Returns
    -------
    labels : np.ndarray
        Shape (n_vectors, n_samples), int64 labels per row.
    max_states : int
        Largest state count of any row; rows with fewer states simply leave
        the upper labels unobserved.
    """
    labels = np.empty(matrix.shape, dtype=np.int64)
    max_states = 1
    for i, row in enumerate(matrix):
        labels[i], n_states = discretize(row)
        max_states = max(max_states, n_states)
    return labels, max_states


def _observed_cells(
    row_labels: np.ndarray,
    fixed_labels: np.ndarray,
    n_fixed_states: int,
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Sparse contingency tables of every row against one fixed label vector.

    Only cells that occur in the data are returned, so memory stays
    O(n_vectors * n_samples) whatever the state counts are.

    Parameters
    ----------
    row_labels : np.ndarray
        Shape (n_vectors, n_samples).
    fixed_labels : np.ndarray
        Shape (n_samples,).

    Returns
    -------
    row_index, row_state, fixed_state, counts : np.ndarray
        One entry per observed (row, row_state, fixed_state) cell.
    """
    n_vectors, n_samples = row_labels.shape

    # Sorting each row groups equal cells; every row opens a new run
    code = row_labels * n_fixed_states + fixed_labels[None, :]
    code.sort(axis=1)

    starts = np.ones(code.shape, dtype=bool)
    starts[:, 1:] = code[:, 1:] != code[:, :-1]
    flat_starts = np.flatnonzero(starts.ravel())
    counts = np.diff(np.append(flat_starts, n_vectors * n_samples))

    row_index = flat_starts // n_samples
    row_state, fixed_state = np.divmod(code.ravel()[flat_starts], n_fixed_states)
    return row_index, row_state, fixed_state, counts


def _row_marginal(
    row_index: np.ndarray,
    row_state: np.ndarray,
    counts: np.ndarray,
    n_vectors: int,
    n_row_states: int,
) -> np.ndarray:
    """Per-cell count of the cell's row state within its own row."""
    flat = row_index * n_row_states + row_state
    totals = np.bincount(flat, weights=counts, minlength=n_vectors * n_row_states)
    return totals[flat]


def _safe_mi_contrib(p_xy: np.ndarray, p_x: np.ndarray, p_y: np.ndarray) -> np.ndarray:
    """
    Element-wise contribution p(x,y) log(p(x,y) / (p(x) p(y))).

    Zero wherever the joint or either marginal probability is not positive.
    """
    p_xy, p_x, p_y = np.broadcast_arrays(p_xy, p_x, p_y)
    contribution = np.zeros(p_xy.shape, dtype=float)

    valid_mask = (p_xy > 0.0) & (p_x > 0.0) & (p_y > 0.0)
    if np.any(valid_mask):
        contribution[valid_mask] = rel_entr(
            p_xy[valid_mask], p_x[valid_mask] * p_y[valid_mask]
        )
    return contribution


def mutual_information_vec(
    x_vector: np.ndarray, y_matrix: np.ndarray, base: float | None = None
) -> np.ndarray:
    """
    Vectorized I(X;Y) for one vector X against many Y vectors.

    Parameters
    ----------
    x_vector : np.ndarray
        Shape (n_samples,).
    y_matrix : np.ndarray
        Shape (n_vectors, n_samples). Each row is a different variable Y and
        is discretized independently.
    base : float | None, default=None
        Logarithm base of the reported unit; None uses config.LOG_BASE.

    Returns
    -------
    np.ndarray
        Shape (n_vectors,), MI between X and each row.
    """
    base = check_log_base(base)
    x = as_vector(x_vector, "x_vector")
    Y = _as_row_matrix(y_matrix, x.size)
    if Y.shape[0] == 0:
        return np.array([], dtype=float)

    x_labels, n_x_states = discretize(x)
    y_labels, n_y_states = _discretize_rows(Y)
    n_samples_float = float(x.size)

    row_index, y_state, x_state, counts = _observed_cells(y_labels, x_labels, n_x_states)
    p_xy = counts / n_samples_float
    p_y = _row_marginal(row_index, y_state, counts, Y.shape[0], n_y_states) / n_samples_float
    p_x = np.bincount(x_labels, minlength=n_x_states)[x_state] / n_samples_float

    mi = np.bincount(
        row_index, weights=_safe_mi_contrib(p_xy, p_x, p_y), minlength=Y.shape[0]
    )
    return mi / np.log(base)


def conditional_entropy_vec(
    y_matrix: np.ndarray, condition: np.ndarray, base: float | None = None
) -> np.ndarray:
    """
    Vectorized H(Y|Z) for many Y vectors sharing one conditioning vector Z.

    Parameters
    ----------
    y_matrix : np.ndarray
        Shape (n_vectors, n_samples).
    condition : np.ndarray
        Shape (n_samples,).
    base : float | None, default=None
        Logarithm base of the reported unit; None uses config.LOG_BASE.

    Returns
    -------
    np.ndarray
        Shape (n_vectors,), H(Y_i | Z).
    """
    base = check_log_base(base)
    z = as_vector(condition, "condition")
    Y = _as_row_matrix(y_matrix, z.size)
    if Y.shape[0] == 0:
        return np.array([], dtype=float)

    z_labels, n_z_states = discretize(z)
    y_labels, _ = _discretize_rows(Y)
    n_samples_float = float(z.size)

    row_index, _, z_state, counts = _observed_cells(y_labels, z_labels, n_z_states)
    p_yz = counts / n_samples_float
    p_z = np.bincount(z_labels, minlength=n_z_states)[z_state] / n_samples_float

    terms = rel_entr(p_yz, p_z)
    return -np.bincount(row_index, weights=terms, minlength=Y.shape[0]) / np.log(base)


__all__ = [
    "mutual_information_vec",
    "conditional_entropy_vec",
]
