"""Mutual Information-based feature ranking and selection.

Scores every candidate column of a table against a target column with the
histogram MI estimator (or CMI when a conditioning column is given), then
optionally attaches permutation p-values with Benjamini-Hochberg correction.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import pandas as pd

from histogram_mi import config
from histogram_mi.core_utils import check_log_base
from histogram_mi.information_metrics.mutual_information import (
    conditional_mutual_information_vec,
    mutual_information_vec,
    permutation_test_cmi,
    permutation_test_mi,
)

from .multiple_testing import benjamini_hochberg_correction

logger = logging.getLogger(__name__)


def _require_columns(data: pd.DataFrame, columns: Sequence[str]) -> None:
    missing = [c for c in columns if c not in data.columns]
    if missing:
        preview = ", ".join(map(repr, missing[:5]))
        raise KeyError(f"Missing required columns in data: {preview}.")


def rank_features_by_mi(
    data: pd.DataFrame,
    target: str,
    feature_names: Sequence[str] | None = None,
    condition: str | None = None,
    base: float | None = None,
    permutations: int = 0,
    alpha: float = config.SIGNIFICANCE_ALPHA,
    random_state: int | None = None,
    n_jobs: int | None = None,
    min_fraction: float = config.MI_FILTER_MIN_FRACTION,
    quantile_threshold: float = config.MI_FILTER_QUANTILE,
) -> pd.DataFrame:
    """Rank features by their information about a target column.

    Parameters
    ----------
    data : pd.DataFrame
        One row per observation.
    target : str
        Target column.
    feature_names : Sequence[str] | None
        Candidate columns. Defaults to every column except target and condition.
    condition : str | None
        If given, features are scored by I(feature; target | condition).
    base : float | None
        Logarithm base of the reported unit; None uses config.LOG_BASE.
    permutations : int
        Permutations per feature for p-values; 0 skips testing.
    alpha : float
        FDR level for the Benjamini-Hochberg correction.
    random_state : int | None
        Seed for the permutation tests.
    n_jobs : int | None
        Passed to joblib in each permutation test.
    min_fraction, quantile_threshold : float
        Passed to :func:`select_informative_features` to fill ``selected``.

    Returns
    -------
    pd.DataFrame
        Columns ``feature``, ``mi`` and ``selected`` sorted by descending
        score, plus ``p_value``, ``p_value_corrected`` and ``significant``
        when ``permutations > 0``.

    Raises
    ------
    KeyError
        If target, condition or any feature column is missing.
    """
    base = check_log_base(base)
    excluded = {target} if condition is None else {target, condition}
    if feature_names is None:
        feature_names = [c for c in data.columns if c not in excluded]
    feature_names = list(feature_names)

    used_cols = [target] + feature_names + ([condition] if condition is not None else [])
    _require_columns(data, used_cols)

    # Remove rows with any NaNs across used columns
    clean = data.dropna(subset=used_cols)
    if len(clean) < len(data):
        logger.info("Dropped %d rows with missing values.", len(data) - len(clean))

    y = clean[target].to_numpy(dtype=float)
    X = clean[feature_names].to_numpy(dtype=float).T

    if condition is None:
        scores = mutual_information_vec(y, X, base=base)
    else:
        z = clean[condition].to_numpy(dtype=float)
        scores = conditional_mutual_information_vec(y, X, z, base=base)

    selected, n_selected = select_informative_features(
        scores, min_fraction=min_fraction, quantile_threshold=quantile_threshold
    )
    result = pd.DataFrame({"feature": feature_names, "mi": scores, "selected": selected})

    if permutations > 0:
        p_values = np.empty(len(feature_names), dtype=float)
        for i, feature in enumerate(feature_names):
            x = clean[feature].to_numpy(dtype=float)
            if condition is None:
                _, p_values[i] = permutation_test_mi(
                    x, y, permutations, random_state, n_jobs=n_jobs, base=base
                )
            else:
                _, p_values[i] = permutation_test_cmi(
                    x, y, z, permutations, random_state, n_jobs=n_jobs, base=base
                )
        rejected, adjusted = benjamini_hochberg_correction(p_values, alpha=alpha)
        result["p_value"] = p_values
        result["p_value_corrected"] = adjusted
        result["significant"] = rejected

    result = result.sort_values("mi", ascending=False, kind="stable", ignore_index=True)
    logger.info(
        "Ranked %d features against %r, %d selected (top: %s).",
        len(result),
        target,
        n_selected,
        result["feature"].iloc[0] if len(result) else None,
    )
    return result


def select_informative_features(
    mi_values: np.ndarray,
    min_fraction: float = config.MI_FILTER_MIN_FRACTION,
    quantile_threshold: float = config.MI_FILTER_QUANTILE,
) -> tuple[np.ndarray, int]:
    """Flag the features whose score clears a quantile cut.

    A feature is kept when its score exceeds the ``quantile_threshold``
    quantile of the scores above ``config.MI_ZERO_THRESHOLD``. If that keeps
    fewer than ``max(1, int(min_fraction * d))`` features, the top-scoring
    ones are kept instead, ties broken by position.

    Returns
    -------
    tuple[np.ndarray, int]
        Boolean mask of shape (d,) and its number of True entries.
    """
    scores = np.asarray(mi_values, dtype=float)
    if scores.size == 0:
        return np.zeros(0, dtype=bool), 0

    positive = scores[scores > config.MI_ZERO_THRESHOLD]
    cut = float(np.quantile(positive, quantile_threshold)) if positive.size else 0.0
    keep = scores > cut

    floor_count = max(1, int(min_fraction * scores.size))
    if np.count_nonzero(keep) < floor_count:
        order = np.argsort(-scores, kind="stable")
        keep = np.zeros(scores.size, dtype=bool)
        keep[order[:floor_count]] = True

    return keep, int(np.count_nonzero(keep))


__all__ = ["rank_features_by_mi", "select_informative_features"]
