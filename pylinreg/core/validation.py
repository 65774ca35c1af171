"""
Input validation utilities for pylinreg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinreg.core.exceptions import (
    ValidationError,
    DimensionError,
    LengthMismatchError,
    EmptyInputError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    # Sums are always accumulated in double precision
    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

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

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        LengthMismatchError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = tuple(arr.shape[0] for arr in arrays)
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise LengthMismatchError(
            f"Inconsistent lengths: {details}",
            names=names,
            lengths=lengths,
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        EmptyInputError: If array has zero elements
    """
    if array.shape[0] == 0:
        raise EmptyInputError(f"{name}: empty input, need at least 1 value", name=name)


def check_horizon(k: Any, name: str) -> int:
    """
    Verify a step count is a non-negative integer.

    Accepts Python ints and numpy integers. Booleans and floats are
    rejected even when integral-valued.

    Args:
        k: Value to check
        name: Parameter name for error messages

    Returns:
        k as a Python int

    Raises:
        ValidationError: If k is not a non-negative integer
    """
    if isinstance(k, (bool, np.bool_)) or not isinstance(k, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(k).__name__}"
        )
    if k < 0:
        raise ValidationError(f"{name}: must be non-negative, got {k}")
    return int(k)


def check_tolerance(tol: float, name: str) -> float:
    """
    Verify a threshold is a positive finite number.

    A zero threshold would let an exactly-zero denominator through to
    the division.

    Raises:
        ValidationError: If tol is not positive and finite
    """
    if isinstance(tol, bool) or not isinstance(tol, numbers.Real):
        raise ValidationError(f"{name}: expected a real number, got {type(tol).__name__}")
    if not (np.isfinite(tol) and tol > 0):
        raise ValidationError(f"{name}: must be positive and finite, got {tol}")
    return float(tol)


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Verify a value is a finite real number.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        value as a Python float

    Raises:
        ValidationError: If value is not a real number, or is NaN or Inf
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected a real number, got {type(value).__name__}")
    if not np.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")
    return float(value)
