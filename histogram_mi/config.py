"""
Central configuration for the histogram_mi library.
"""

# --- Units ---

# Default logarithm base for every entropy and information formula.
# 2.0 reports bits, math.e reports nats. Formulas accumulate natural logs
# and divide once by log(LOG_BASE) at the end.
LOG_BASE: float = 2.0

# --- Permutation Test Parameters ---

# Default number of permutations for permutation tests.
N_PERMUTATIONS: int = 100

# Number of permuted copies scored together in one vectorized batch.
PERMUTATION_BATCH_SIZE: int = 256

# Permuted statistics within this distance below the observed value still
# count as "at least as extreme" (absorbs summation-order noise).
PERMUTATION_TOLERANCE: float = 1e-12

# Default significance level (alpha) for permutation p-values after
# Benjamini-Hochberg correction.
SIGNIFICANCE_ALPHA: float = 0.05

# --- MI Feature Filter Parameters ---

# Quantile threshold for MI filtering (keep features above this quantile)
MI_FILTER_QUANTILE: float = 0.5

# Minimum fraction of features to retain
MI_FILTER_MIN_FRACTION: float = 0.1

# Scores at or below this value are treated as zero when computing the
# filter quantile.
MI_ZERO_THRESHOLD: float = 1e-10
