"""
Core infrastructure for edustats.

This module provides shared abstractions and utilities used by all
engine subpackages (descriptive, frequency, quantiles, probability).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy with stable error codes
    validation: Input validators
    constants: Fixed design constants
    compute: Section timing
"""

from edustats.core.result import Result
from edustats.core.exceptions import (
    EduStatsError,
    ValidationError,
    EmptyDataError,
    InsufficientDataError,
    ConstantDataError,
    InvalidArgumentError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "EduStatsError",
    "ValidationError",
    "EmptyDataError",
    "InsufficientDataError",
    "ConstantDataError",
    "InvalidArgumentError",
]
