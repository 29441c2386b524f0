from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from histogram_mi import config


class EmptyInputError(ValueError):
    """Raised when a formula receives a zero-length vector."""


class LengthMismatchError(ValueError):
    """Raised when vectors used together have different lengths."""


def as_vector(vector: Sequence[float] | np.ndarray, name: str = "vector") -> np.ndarray:
    """Convert an observation vector to a 1-D float64 array.

    Parameters
    ----------
    vector
        Sequence of real numbers (list, tuple, ndarray, pandas Series).
    name
        Argument name used in error messages.

    Returns
    -------
    np.ndarray
        Read-only view or copy of the data as float64, shape (N,).

    Raises
    ------
    ValueError
        If the input is not one-dimensional.
    EmptyInputError
        If the input has no elements.
    """
    arr = np.asarray(vector, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}.")
    if arr.size == 0:
        raise EmptyInputError(f"{name} is empty; at least one observation is required.")
    return arr


def check_vectors(*vectors: Sequence[float] | np.ndarray, names: Sequence[str] | None = None) -> list[np.ndarray]:
    """Validate vectors that are used together in one formula.

    Every vector is converted with :func:`as_vector` and all lengths must
    agree. Nothing is truncated or padded.

    Raises
    ------
    EmptyInputError
        If any vector is empty.
    LengthMismatchError
        If the vectors do not all have the same length.
    """
    if names is None:
        names = [f"vector {i}" for i in range(len(vectors))]
    arrays = [as_vector(v, name) for v, name in zip(vectors, names)]

    lengths = {arr.size for arr in arrays}
    if len(lengths) > 1:
        described = ", ".join(f"{name}={arr.size}" for name, arr in zip(names, arrays))
        raise LengthMismatchError(f"Input vectors must have equal length, got {described}.")
    return arrays


def check_log_base(base: float | None = None) -> float:
    """Return the logarithm base as a float after checking it defines a unit.

    ``None`` reads ``config.LOG_BASE`` at call time, so changing the module
    constant affects every later call that does not pass a base.
    """
    base = float(config.LOG_BASE if base is None else base)
    if not math.isfinite(base) or base <= 0.0 or base == 1.0:
        raise ValueError(f"Logarithm base must be finite, positive and != 1, got {base!r}.")
    return base
