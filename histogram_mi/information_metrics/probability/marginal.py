"""Histogram estimate of the marginal distribution of one variable."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

import numpy as np

from .discretize import discretize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarginalProbabilityState:
    """Empirical probabilities of the states of one discretized vector.

    Keys of ``probabilities`` are exactly the observed states; an
    unobserved state is absent rather than mapped to zero.
    """

    probabilities: Mapping[int, float]
    n_states: int
    n_samples: int

    def probability(self, label: int) -> float | None:
        """Return p(label), or None if the label was never observed."""
        return self.probabilities.get(label)

    def as_array(self) -> np.ndarray:
        """Probabilities in label order, shape (n_states,)."""
        return np.fromiter(
            (self.probabilities[k] for k in sorted(self.probabilities)),
            dtype=np.float64,
            count=len(self.probabilities),
        )


def _normalise_counts(keys: np.ndarray, counts: np.ndarray, n_samples: int) -> Mapping[int, float]:
    """Divide integer counts by the sample size and freeze them into a mapping."""
    probs = counts / float(n_samples)
    return MappingProxyType(dict(zip(keys.tolist(), probs.tolist())))


def estimate_marginal(vector: np.ndarray) -> MarginalProbabilityState:
    """
    Estimate p(X = s) for every observed state s of a vector.

    The vector is discretized first, so integer state vectors and raw
    real-valued vectors are both accepted.

    Parameters
    ----------
    vector : np.ndarray
        Shape (n_samples,).

    Returns
    -------
    MarginalProbabilityState
        Frozen table of observed-state probabilities.
    """
    labels, n_states = discretize(vector)
    n_samples = labels.size

    counts = np.bincount(labels, minlength=n_states)
    observed = np.flatnonzero(counts)

    logger.debug("Marginal estimate: %d samples, %d states.", n_samples, n_states)
    return MarginalProbabilityState(
        probabilities=_normalise_counts(observed, counts[observed], n_samples),
        n_states=n_states,
        n_samples=n_samples,
    )


__all__ = ["MarginalProbabilityState", "estimate_marginal"]
