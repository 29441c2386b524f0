"""Benjamini-Hochberg FDR correction for feature p-values.

References
----------
Benjamini, Y., and Hochberg, Y. (1995). Controlling the false discovery
rate: a practical and powerful approach to multiple testing. Journal of
the Royal Statistical Society Series B, 57, 289-300.
"""

from __future__ import annotations

import numpy as np
from statsmodels.stats.multitest import multipletests

from histogram_mi import config


def benjamini_hochberg_correction(
    p_values: np.ndarray, alpha: float = config.SIGNIFICANCE_ALPHA
) -> tuple[np.ndarray, np.ndarray]:
    """Apply Benjamini-Hochberg FDR correction to p-values.

    Parameters
    ----------
    p_values : np.ndarray
        Array of p-values to correct
    alpha : float, default=config.SIGNIFICANCE_ALPHA
        Significance level for FDR control

    Returns
    -------
    rejected : np.ndarray (bool)
        Which null hypotheses are rejected
    adjusted : np.ndarray (float)
        FDR-adjusted p-values

    Examples
    --------
    >>> import numpy as np
    >>> p_values = np.array([0.001, 0.01, 0.03, 0.05, 0.1])
    >>> rejected, adjusted = benjamini_hochberg_correction(p_values)
    >>> rejected
    array([ True,  True,  True, False, False])
    """
    p_values_array = np.asarray(p_values, dtype=float)
    if p_values_array.size == 0:
        return np.array([], dtype=bool), np.array([], dtype=float)

    rejected, adjusted, _, _ = multipletests(
        p_values_array,
        alpha=alpha,
        method="fdr_bh",
        is_sorted=False,
        returnsorted=False,
    )
    return rejected.astype(bool), adjusted.astype(float)


__all__ = ["benjamini_hochberg_correction"]
