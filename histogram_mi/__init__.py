"""Histogram-based estimators of discrete information-theoretic quantities.

Every formula discretizes its inputs to the floor of each value, estimates
probabilities by frequency counting and reports results in the unit given
by ``base`` (bits by default, see :mod:`histogram_mi.config`).
"""

from .core_utils import EmptyInputError, LengthMismatchError
from .information_metrics import (
    InformationCalculator,
    JointProbabilityState,
    MarginalProbabilityState,
    conditional_entropy,
    conditional_mutual_information,
    discretize,
    entropy,
    estimate_joint,
    estimate_marginal,
    joint_entropy,
    merge_labels,
    mutual_information,
)

__all__ = [
    "entropy",
    "conditional_entropy",
    "joint_entropy",
    "mutual_information",
    "conditional_mutual_information",
    "InformationCalculator",
    "discretize",
    "merge_labels",
    "estimate_marginal",
    "estimate_joint",
    "MarginalProbabilityState",
    "JointProbabilityState",
    "EmptyInputError",
    "LengthMismatchError",
]
