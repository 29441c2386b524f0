"""Stateless calculator bound to one logarithm base."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from histogram_mi.core_utils import check_log_base

from .entropy import conditional_entropy, entropy, joint_entropy
from .mutual_information import conditional_mutual_information, mutual_information

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InformationCalculator:
    """Entropy and information formulas reported in one fixed unit.

    The base is fixed at construction and applies to every call made
    through the instance. Leaving it unset takes the current
    ``config.LOG_BASE``. Instances hold no other state, so one calculator
    can be shared freely between callers.

    Examples
    --------
    >>> bits = InformationCalculator()
    >>> bits.entropy([0, 0, 1, 1])
    1.0
    >>> nats = InformationCalculator(base=np.e)
    """

    base: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", check_log_base(self.base))
        logger.debug("InformationCalculator using log base %g.", self.base)

    def entropy(self, vector: np.ndarray) -> float:
        return entropy(vector, base=self.base)

    def conditional_entropy(self, vector: np.ndarray, condition: np.ndarray) -> float:
        return conditional_entropy(vector, condition, base=self.base)

    def joint_entropy(self, first: np.ndarray, second: np.ndarray) -> float:
        return joint_entropy(first, second, base=self.base)

    def mutual_information(self, first: np.ndarray, second: np.ndarray) -> float:
        return mutual_information(first, second, base=self.base)

    def conditional_mutual_information(
        self, first: np.ndarray, second: np.ndarray, condition: np.ndarray
    ) -> float:
        return conditional_mutual_information(first, second, condition, base=self.base)


__all__ = ["InformationCalculator"]
