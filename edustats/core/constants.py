"""
Fixed design constants for edustats.

This module is the SINGLE SOURCE OF TRUTH for thresholds used by the
engines. Import from here, never repeat the literals.

Usage:
    from edustats.core.constants import SAMPLE_VARIANCE_MAX_N, TUKEY_FENCE_K
"""

# Variance uses the n-1 denominator when 1 < n < SAMPLE_VARIANCE_MAX_N and
# n otherwise.
SAMPLE_VARIANCE_MAX_N = 30

# Sturges' rule: k = round(1 + STURGES_COEFFICIENT * log10(n))
STURGES_COEFFICIENT = 3.322

# Tukey fences at Q1 - k*IQR and Q3 + k*IQR
TUKEY_FENCE_K = 1.5

# Largest item count for exhaustive permutation/combination enumeration
MAX_ENUMERATION_ITEMS = 5

# Histogram point labels: midpoint formatted to this many decimals
HISTOGRAM_LABEL_DECIMALS = 1

# Normal-curve overlay values at or below this are reported as None
NORMAL_OVERLAY_MIN = 0.01

# Pearson skewness label thresholds (|value| > strong, |value| > mild)
SKEWNESS_STRONG = 0.5
SKEWNESS_MILD = 0.1

# Coefficient of variation bands, in percent
CV_HIGH = 30.0
CV_MODERATE = 15.0

# Running-frequency series are thinned to at most this many points
MAX_CONVERGENCE_POINTS = 200

DICE_FACES = (1, 2, 3, 4, 5, 6)

__all__ = [
    'SAMPLE_VARIANCE_MAX_N',
    'STURGES_COEFFICIENT',
    'TUKEY_FENCE_K',
    'MAX_ENUMERATION_ITEMS',
    'HISTOGRAM_LABEL_DECIMALS',
    'NORMAL_OVERLAY_MIN',
    'SKEWNESS_STRONG',
    'SKEWNESS_MILD',
    'CV_HIGH',
    'CV_MODERATE',
    'MAX_CONVERGENCE_POINTS',
    'DICE_FACES',
]
