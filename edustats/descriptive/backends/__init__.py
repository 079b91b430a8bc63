"""
Descriptive statistics backends.

Available backends:
    CPUDescriptiveBackend: reference implementation for raw and grouped data
"""

from edustats.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = [
    "CPUDescriptiveBackend",
]
