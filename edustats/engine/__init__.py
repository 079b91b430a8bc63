"""
Dashboard engine: every statistic for one sample in a single call.

Public API:
    analyze(data)  - Statistics, quartiles, outliers and frequency table
"""

from edustats.engine.solution import EngineSolution
from edustats.engine.solvers import analyze

__all__ = [
    "analyze",
    "EngineSolution",
]
