"""Mutual Information calculations.

This subpackage provides:
- Mutual Information I(X;Y) for discrete data
- Conditional Mutual Information I(X;Y|Z)
- Batch (one-against-many) variants and permutation tests
"""

from .cmi import conditional_mutual_information, conditional_mutual_information_vec
from .mi import mutual_information, mutual_information_sklearn, mutual_information_vec
from .mi_numpy import conditional_entropy_vec
from .permutation import permutation_test_cmi, permutation_test_mi

__all__ = [
    # MI functions
    "mutual_information",
    "mutual_information_vec",
    "mutual_information_sklearn",
    # CMI functions
    "conditional_mutual_information",
    "conditional_mutual_information_vec",
    "conditional_entropy_vec",
    # Permutation tests
    "permutation_test_mi",
    "permutation_test_cmi",
]
