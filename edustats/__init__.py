"""
edustats: the computation engine of an educational statistics dashboard.

Turns raw or grouped numeric data into descriptive statistics, frequency
tables, percentiles, outliers and counting results, with the formulas
needed to show students how each number was derived.

Submodules:
    data: Text parsing, simulated samples, presets, transformations
    descriptive: Mean, median, mode, dispersion and shape
    frequency: Class tables and histograms
    quantiles: Quartiles, percentiles, outliers
    probability: Factorials, permutations, combinations, dice experiment
    engine: One-call analysis for the dashboard
"""

__version__ = "0.1.0"

from edustats import data
from edustats import descriptive
from edustats import frequency
from edustats import quantiles
from edustats import probability
from edustats import engine

from edustats.data import parse_numbers, generate_gaussian_sample
from edustats.descriptive import compute_descriptive_stats
from edustats.frequency import build_frequency_distribution
from edustats.quantiles import compute_quartiles, detect_outliers, percentile, percentile_rank
from edustats.probability import factorial, permutation, combination
from edustats.engine import analyze

__all__ = [
    "__version__",
    "data",
    "descriptive",
    "frequency",
    "quantiles",
    "probability",
    "engine",
    "parse_numbers",
    "generate_gaussian_sample",
    "compute_descriptive_stats",
    "build_frequency_distribution",
    "compute_quartiles",
    "detect_outliers",
    "percentile",
    "percentile_rank",
    "factorial",
    "permutation",
    "combination",
    "analyze",
]
