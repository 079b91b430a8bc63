"""
Compute utilities shared by all backends.
"""

from edustats.core.compute.timing import Timer

__all__ = ["Timer"]
