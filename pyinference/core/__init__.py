"""
Core infrastructure for pyinference.

This module provides shared abstractions and utilities used by the
statistics data model and by every test (anova, hypothesis).

Key components:
    protocols: ReferenceDistribution protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    defaults: Default significance levels and thresholds
    compute: Timing and reference-distribution evaluation
"""

from pyinference.core.protocols import ReferenceDistribution
from pyinference.core.result import Result
from pyinference.core.exceptions import (
    PyInferenceError,
    ValidationError,
    DimensionError,
    MixedValueTypeError,
    WrongValueTypeError,
    NoObservationFoundError,
    InsufficientDataError,
    NotApplicableError,
    NumericalError,
)

__all__ = [
    # Protocols
    "ReferenceDistribution",
    # Result
    "Result",
    # Exceptions
    "PyInferenceError",
    "ValidationError",
    "DimensionError",
    "MixedValueTypeError",
    "WrongValueTypeError",
    "NoObservationFoundError",
    "InsufficientDataError",
    "NotApplicableError",
    "NumericalError",
]
