"""
Input validation utilities for edustats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from edustats.core.exceptions import (
    ValidationError,
    EmptyDataError,
    InsufficientDataError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object or non-numeric dtype (indicating mixed types or
    text), and complex input, whose imaginary part would be discarded.
    The returned array is always a fresh copy, so callers may sort or
    transform it without touching the caller's data.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array, or is complex
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Empty lists come through as float64 already; bools are rejected
    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        ValidationError: If array is not 1D
    """
    if array.ndim != 1:
        raise ValidationError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one observation.

    Raises:
        EmptyDataError: If array is empty
    """
    if array.shape[0] == 0:
        raise EmptyDataError(f"{name}: no numeric observations to analyse")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        InsufficientDataError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            required=min_samples,
            actual=n,
        )


def as_sample(array: ArrayLike, name: str = "sample") -> NDArray[np.floating[Any]]:
    """
    Convert and validate a Sample: 1D, finite, float64, fresh copy.

    Empty samples pass; emptiness is checked by the engine that cares.
    """
    result = check_array(array, name)
    if result.ndim == 0:
        result = result.reshape(1)
    check_1d(result, name)
    check_finite(result, name)
    return result


def is_integral(value: object) -> bool:
    """True for ints and integral floats, False for bools and everything else."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, numbers.Real):
        return float(value).is_integer()
    return False


def check_non_negative_int(
    value: object,
    name: str,
    error: type[ValidationError] = ValidationError,
) -> int:
    """
    Verify value is a non-negative integer and return it as int.

    Integral floats (e.g. 3.0) are accepted.

    Raises:
        error: ValidationError (or the given subclass) otherwise
    """
    if not is_integral(value):
        raise error(f"{name}: expected a non-negative integer, got {value!r}")
    result = int(value)
    if result < 0:
        raise error(f"{name}: expected a non-negative integer, got {result}")
    return result
