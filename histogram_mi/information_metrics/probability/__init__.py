"""Histogram probability estimation.

This subpackage provides:
- Discretization of vectors into contiguous integer states
- Marginal probability tables for one variable
- Joint probability tables for two variables
"""

from .discretize import discretize, merge_labels
from .joint import JointProbabilityState, estimate_joint
from .marginal import MarginalProbabilityState, estimate_marginal

__all__ = [
    "discretize",
    "merge_labels",
    "MarginalProbabilityState",
    "estimate_marginal",
    "JointProbabilityState",
    "estimate_joint",
]
