"""Feature ranking built on the information metrics."""

from .mi_feature_selection import rank_features_by_mi, select_informative_features
from .multiple_testing import benjamini_hochberg_correction

__all__ = [
    "rank_features_by_mi",
    "select_informative_features",
    "benjamini_hochberg_correction",
]
