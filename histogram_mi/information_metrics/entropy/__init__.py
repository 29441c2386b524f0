"""Entropy calculations.

This subpackage provides:
- Univariate entropy H(X)
- Conditional entropy H(X|Y)
- Joint entropy H(X,Y)
"""

from .entropy import conditional_entropy, entropy, joint_entropy

__all__ = [
    "entropy",
    "conditional_entropy",
    "joint_entropy",
]
