"""
Input validation utilities for pyinference.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyinference.core.exceptions import ValidationError, DimensionError


def is_numeric_value(value: Any) -> bool:
    """
    True for real numbers (Python or numpy), False for everything else.

    Booleans are rejected: True/False are not measurements.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Validate a real, finite scalar and return it as float.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        value as a Python float

    Raises:
        ValidationError: If value is not a real number or is NaN/Inf
    """
    if not is_numeric_value(value):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    result = float(value)
    if not math.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_label(label: Any, name: str) -> str:
    """
    Validate a non-empty string label (group id, category label).

    Raises:
        ValidationError: If label is not a non-empty str
    """
    if not isinstance(label, str):
        raise ValidationError(
            f"{name}: expected str, got {type(label).__name__}"
        )
    if not label:
        raise ValidationError(f"{name}: must not be empty")
    return label


def check_non_negative(value: float, name: str) -> None:
    """
    Verify a scalar is >= 0.

    Raises:
        ValidationError: If value is negative
    """
    if value < 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")


def check_probability(value: float, name: str) -> None:
    """
    Verify a scalar lies in [0, 1].

    Raises:
        ValidationError: If value is outside [0, 1]
    """
    if not (0.0 <= value <= 1.0):
        raise ValidationError(f"{name}: must be in [0, 1], got {value}")


def check_size(size: Any, minimum: int, name: str) -> int:
    """
    Validate an integral count with a lower bound.

    Raises:
        ValidationError: If size is not an integer or is below minimum
    """
    if isinstance(size, (bool, np.bool_)) or not isinstance(size, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(size).__name__}"
        )
    size = int(size)
    if size < minimum:
        raise ValidationError(
            f"{name}: requires at least {minimum}, got {size}"
        )
    return size


def check_significance_level(level: Any) -> float:
    """
    Validate a significance level.

    Any finite value <= 0 means "no decision". Any positive value is the
    rejection threshold, compared as p < level; the caller picks a
    sensible one.

    Raises:
        ValidationError: If level is not a finite real number
    """
    return check_finite_scalar(level, "significance_level")


def check_consistent_length(
    *sequences: Sequence[Any],
    names: tuple[str, ...]
) -> None:
    """
    Verify all sequences have the same length.

    Args:
        *sequences: Sequences to check
        names: Parameter names for error messages (must match number of sequences)

    Raises:
        ValueError: If number of names doesn't match number of sequences
        DimensionError: If sequences have inconsistent lengths
    """
    if len(sequences) != len(names):
        raise ValueError(
            f"Number of sequences ({len(sequences)}) must match number of names ({len(names)})"
        )

    if len(sequences) < 2:
        return

    lengths = [len(seq) for seq in sequences]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_count_matrix(counts: ArrayLike, name: str) -> NDArray[np.int64]:
    """
    Validate a 2D matrix of non-negative integral counts.

    Accepts any array-like of numbers whose entries are whole numbers
    (3.0 is fine, 3.5 is not).

    Returns:
        int64 numpy array

    Raises:
        DimensionError: If the input is not 2D
        ValidationError: If entries are non-numeric, non-finite,
            fractional or negative
    """
    try:
        arr = np.asarray(counts)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if arr.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {arr.ndim}D with shape {arr.shape}"
        )
    if arr.dtype == object or not np.issubdtype(arr.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {arr.dtype}, expected counts"
        )
    if np.issubdtype(arr.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex counts are not allowed")
    if not np.all(np.isfinite(arr)):
        raise ValidationError(f"{name}: contains non-finite values")
    if np.any(arr < 0):
        raise ValidationError(
            f"{name}: counts must be >= 0, got minimum {arr.min()}"
        )
    if not np.all(np.equal(np.mod(arr, 1), 0)):
        raise ValidationError(f"{name}: counts must be whole numbers")

    return arr.astype(np.int64)
