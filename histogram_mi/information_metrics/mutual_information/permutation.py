"""Permutation tests for independence using MI and CMI.

Provides hypothesis tests for
- H0: X ⟂ Y (shuffle Y globally)
- H0: X ⟂ Y | Z (shuffle Y within each Z stratum)
"""

from __future__ import annotations

import logging

import numpy as np
from joblib import Parallel, delayed

from histogram_mi import config
from histogram_mi.core_utils import check_log_base, check_vectors
from histogram_mi.information_metrics.probability import discretize

from .cmi import conditional_mutual_information, conditional_mutual_information_vec
from .mi import mutual_information
from .mi_numpy import mutual_information_vec

logger = logging.getLogger(__name__)


def _permuted_copies(
    y: np.ndarray,
    strata: np.ndarray | None,
    *,
    K: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Produce K shuffled copies of y, shape (K, F).

    With ``strata`` given, values only move between positions sharing a
    stratum label, which preserves P(Y|Z) while breaking the X-Y dependence.
    """
    Yp = np.repeat(y[None, :], K, axis=0)
    if strata is None:
        return rng.permuted(Yp, axis=1)

    for z_val in np.unique(strata):
        idx = np.flatnonzero(strata == z_val)
        if idx.size > 1:
            Yp[:, idx] = rng.permuted(Yp[:, idx], axis=1)
    return Yp


def _process_batch(
    k: int,
    seed: np.random.SeedSequence,
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray | None,
    observed: float,
    base: float,
) -> int:
    """Count permuted statistics at least as large as the observed one."""
    local_rng = np.random.default_rng(seed)
    Yp = _permuted_copies(y, z, K=k, rng=local_rng)
    if z is None:
        permuted = mutual_information_vec(x, Yp, base=base)
    else:
        permuted = conditional_mutual_information_vec(x, Yp, z, base=base)
    return int(np.sum(permuted >= observed - config.PERMUTATION_TOLERANCE))


def _run_batches(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray | None,
    observed: float,
    permutations: int,
    random_state: int | None,
    batch_size: int,
    n_jobs: int | None,
    base: float,
) -> float:
    """Split the permutations into seeded batches and return the p-value."""
    seed_seq = np.random.SeedSequence(random_state)

    effective_batch_size = max(1, int(batch_size))
    n_full_batches = permutations // effective_batch_size
    remainder = permutations % effective_batch_size

    batch_sizes = [effective_batch_size] * n_full_batches
    if remainder > 0:
        batch_sizes.append(remainder)
    batch_seeds = seed_seq.spawn(len(batch_sizes))

    results = Parallel(n_jobs=n_jobs)(
        delayed(_process_batch)(k, seed, x, y, z, observed, base)
        for k, seed in zip(batch_sizes, batch_seeds)
    )
    count_greater_equal = sum(results)

    # Add-one correction keeps p strictly positive
    return float((1.0 + count_greater_equal) / (permutations + 1.0))


def permutation_test_mi(
    first_vector: np.ndarray,
    second_vector: np.ndarray,
    permutations: int = config.N_PERMUTATIONS,
    random_state: int | None = None,
    batch_size: int = config.PERMUTATION_BATCH_SIZE,
    n_jobs: int | None = None,
    base: float | None = None,
) -> tuple[float, float]:
    """
    Batched permutation test for I(X;Y).

    Tests the null hypothesis H0: X ⟂ Y by shuffling the second vector.

    Parameters
    ----------
    first_vector, second_vector : np.ndarray
        Shape (n_samples,), equal length.
    permutations : int, default=config.N_PERMUTATIONS
        Number of shuffles.
    random_state : int | None, default=None
        Seed; results are reproducible for a fixed seed regardless of n_jobs.
    batch_size : int, default=config.PERMUTATION_BATCH_SIZE
        Permutations scored together per batch.
    n_jobs : int | None, default=None
        Passed to joblib.Parallel. None means 1, -1 means all processors.
    base : float | None, default=None
        Logarithm base of the reported unit; None uses config.LOG_BASE.

    Returns
    -------
    observed_mi : float
        I(X;Y) on the unshuffled data.
    p_value : float
        Permutation p-value.
    """
    base = check_log_base(base)
    x, y = check_vectors(first_vector, second_vector, names=("first_vector", "second_vector"))
    observed = mutual_information(x, y, base=base)

    if permutations <= 0:
        return observed, 1.0

    y_labels, _ = discretize(y)
    p_value = _run_batches(
        x, y_labels, None, observed, int(permutations), random_state, batch_size, n_jobs, base
    )
    logger.info(
        "MI permutation test: observed=%.6f, p=%.4f (%d permutations).",
        observed,
        p_value,
        permutations,
    )
    return observed, p_value


def permutation_test_cmi(
    first_vector: np.ndarray,
    second_vector: np.ndarray,
    condition_vector: np.ndarray,
    permutations: int = config.N_PERMUTATIONS,
    random_state: int | None = None,
    batch_size: int = config.PERMUTATION_BATCH_SIZE,
    n_jobs: int | None = None,
    base: float | None = None,
) -> tuple[float, float]:
    """
    Batched, stratified permutation test for I(X;Y|Z).

    Tests the null hypothesis H0: X ⟂ Y | Z (conditional independence).

    Parameters
    ----------
    first_vector, second_vector, condition_vector : np.ndarray
        X, Y and Z, shape (n_samples,), equal length.
    permutations, random_state, batch_size, n_jobs, base
        As in :func:`permutation_test_mi`.

    Returns
    -------
    observed_cmi : float
        I(X;Y|Z) on the unshuffled data.
    p_value : float
        Permutation p-value.

    Notes
    -----
    Returns p=1.0 when no stratum of Z holds more than one sample, since no
    within-stratum shuffle is possible and there is no evidence against H0.
    """
    base = check_log_base(base)
    x, y, z = check_vectors(
        first_vector,
        second_vector,
        condition_vector,
        names=("first_vector", "second_vector", "condition_vector"),
    )
    observed = conditional_mutual_information(x, y, z, base=base)

    if permutations <= 0:
        return observed, 1.0

    z_labels, _ = discretize(z)
    counts = np.bincount(z_labels)
    if np.all(counts <= 1):
        logger.warning(
            "CMI permutation test: every condition stratum has a single sample; "
            "returning p=1.0."
        )
        return observed, 1.0

    y_labels, _ = discretize(y)
    p_value = _run_batches(
        x, y_labels, z_labels, observed, int(permutations), random_state, batch_size, n_jobs, base
    )
    logger.info(
        "CMI permutation test: observed=%.6f, p=%.4f (%d permutations).",
        observed,
        p_value,
        permutations,
    )
    return observed, p_value


__all__ = [
    "permutation_test_mi",
    "permutation_test_cmi",
]
