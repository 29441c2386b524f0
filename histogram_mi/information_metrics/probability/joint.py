"""Histogram estimate of the joint distribution of two variables.

The joint table is keyed by one integer per state pair:

    key = first + first_n_states * second

and ``divmod(key, first_n_states)`` recovers ``(second, first)``. This is
the only joint-key encoding used in the package.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Mapping

import numpy as np

from histogram_mi.core_utils import check_vectors

from .discretize import discretize
from .marginal import _normalise_counts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JointProbabilityState:
    """Joint and marginal probability tables for one pair of vectors.

    Built once per formula call and never shared. The joint table is sparse
    over the ``first_n_states * second_n_states`` state space: only observed
    pairs appear as keys.
    """

    joint_probabilities: Mapping[int, float]
    first_probabilities: Mapping[int, float]
    second_probabilities: Mapping[int, float]
    first_n_states: int
    second_n_states: int
    n_samples: int

    @property
    def joint_n_states(self) -> int:
        return self.first_n_states * self.second_n_states

    def encode_key(self, first: int, second: int) -> int:
        return first + self.first_n_states * second

    def decode_key(self, key: int) -> tuple[int, int]:
        """Return the ``(first, second)`` labels of a joint key."""
        second, first = divmod(key, self.first_n_states)
        return first, second

    def joint_items(self) -> Iterator[tuple[tuple[int, int], float]]:
        """Yield ``((first, second), p)`` for every observed pair."""
        for key, prob in self.joint_probabilities.items():
            yield self.decode_key(key), prob

    def aligned_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Joint probabilities with their two marginals, one entry per observed pair.

        Returns
        -------
        p_joint, p_first, p_second : np.ndarray
            Shape (n_observed_pairs,). A marginal missing from its table is
            reported as 0.0 so callers can mask it out.
        """
        n_pairs = len(self.joint_probabilities)
        keys = np.fromiter(self.joint_probabilities.keys(), dtype=np.int64, count=n_pairs)
        p_joint = np.fromiter(self.joint_probabilities.values(), dtype=np.float64, count=n_pairs)

        second_labels, first_labels = np.divmod(keys, self.first_n_states)
        p_first = np.fromiter(
            (self.first_probabilities.get(k, 0.0) for k in first_labels.tolist()),
            dtype=np.float64,
            count=n_pairs,
        )
        p_second = np.fromiter(
            (self.second_probabilities.get(k, 0.0) for k in second_labels.tolist()),
            dtype=np.float64,
            count=n_pairs,
        )
        return p_joint, p_first, p_second


def estimate_joint(first_vector: np.ndarray, second_vector: np.ndarray) -> JointProbabilityState:
    """
    Estimate joint and marginal probabilities of two vectors.

    Both vectors are discretized independently. The marginals are counted
    directly from each label vector rather than summed out of the joint
    table, so they match :func:`estimate_marginal` on the same vector.

    Parameters
    ----------
    first_vector, second_vector : np.ndarray
        Shape (n_samples,), equal length.

    Returns
    -------
    JointProbabilityState

    Raises
    ------
    EmptyInputError
        If the vectors are empty.
    LengthMismatchError
        If the vectors differ in length.
    """
    first_vector, second_vector = check_vectors(
        first_vector, second_vector, names=("first_vector", "second_vector")
    )
    first_labels, first_n_states = discretize(first_vector)
    second_labels, second_n_states = discretize(second_vector)
    n_samples = first_labels.size

    joint_keys = first_labels + first_n_states * second_labels
    observed_keys, joint_counts = np.unique(joint_keys, return_counts=True)

    first_counts = np.bincount(first_labels, minlength=first_n_states)
    second_counts = np.bincount(second_labels, minlength=second_n_states)
    first_observed = np.flatnonzero(first_counts)
    second_observed = np.flatnonzero(second_counts)

    logger.debug(
        "Joint estimate: %d samples, %d x %d states, %d observed pairs.",
        n_samples,
        first_n_states,
        second_n_states,
        observed_keys.size,
    )
    return JointProbabilityState(
        joint_probabilities=_normalise_counts(observed_keys, joint_counts, n_samples),
        first_probabilities=_normalise_counts(
            first_observed, first_counts[first_observed], n_samples
        ),
        second_probabilities=_normalise_counts(
            second_observed, second_counts[second_observed], n_samples
        ),
        first_n_states=first_n_states,
        second_n_states=second_n_states,
        n_samples=n_samples,
    )


__all__ = ["JointProbabilityState", "estimate_joint"]
