"""Information-theoretic metrics and utilities.

This package provides histogram-based estimates of:
- Entropy, conditional entropy and joint entropy
- Mutual Information (MI) and Conditional Mutual Information (CMI)
- The marginal and joint probability tables they are built on
"""

from .calculator import InformationCalculator
from .entropy import conditional_entropy, entropy, joint_entropy
from .mutual_information import (
    conditional_entropy_vec,
    conditional_mutual_information,
    conditional_mutual_information_vec,
    mutual_information,
    mutual_information_sklearn,
    mutual_information_vec,
    permutation_test_cmi,
    permutation_test_mi,
)
from .probability import (
    JointProbabilityState,
    MarginalProbabilityState,
    discretize,
    estimate_joint,
    estimate_marginal,
    merge_labels,
)

__all__ = [
    # Probability estimation
    "discretize",
    "merge_labels",
    "MarginalProbabilityState",
    "estimate_marginal",
    "JointProbabilityState",
    "estimate_joint",
    # Entropy functions
    "entropy",
    "conditional_entropy",
    "joint_entropy",
    # MI functions
    "mutual_information",
    "mutual_information_vec",
    "mutual_information_sklearn",
    "conditional_mutual_information",
    "conditional_mutual_information_vec",
    "conditional_entropy_vec",
    "permutation_test_mi",
    "permutation_test_cmi",
    # Calculator
    "InformationCalculator",
]
