"""
Exception hierarchy for pyinference.

All exceptions inherit from PyInferenceError to allow catching any
library-specific error. Every class carries a stable ``kind`` string so
callers can branch on the failure kind without matching on class names.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyInferenceError(Exception):
    """Base exception for all pyinference errors."""
    kind = 'error'


class ValidationError(PyInferenceError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    kind = 'validation'


class DimensionError(ValidationError):
    """
    Parallel inputs have inconsistent lengths or shapes.
    """
    kind = 'dimension'


class MixedValueTypeError(ValidationError):
    """
    Observation kind disagrees with the sample's established kind.

    Raised by Sample.add() when a numeric observation is inserted into a
    categorical sample or vice versa.

    Attributes:
        expected: Value kind already held by the sample
        actual: Value kind of the rejected observation
    """
    kind = 'mixed_value_type'

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: str | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class WrongValueTypeError(PyInferenceError):
    """
    Operation requires the other value kind.

    Raised when a numeric-only operation is invoked on categorical data
    (or the reverse), e.g. proportion() on a numeric sample.

    Attributes:
        expected: Value kind the operation needs
        actual: Value kind it was given
    """
    kind = 'wrong_value_type'

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: str | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NoObservationFoundError(PyInferenceError):
    """
    Sample has no observations.

    Raised when the value kind or any statistic of an empty sample is
    requested.
    """
    kind = 'no_observation'


class InsufficientDataError(PyInferenceError):
    """
    Not enough data for the requested computation.

    Raised when a denominator would be zero: variance of fewer than two
    observations, ANOVA with fewer than two groups or no error degrees of
    freedom, a contingency table with an empty margin.

    Attributes:
        quantity: What was counted (e.g. 'df_group', 'observations')
        required: Minimum acceptable value
        actual: Value found
    """
    kind = 'insufficient_data'

    def __init__(
        self,
        message: str,
        quantity: str | None = None,
        required: float | None = None,
        actual: float | None = None,
    ):
        super().__init__(message)
        self.quantity = quantity
        self.required = required
        self.actual = actual


class NotApplicableError(PyInferenceError):
    """
    Field does not exist for this kind of distribution.

    Raised when sum_of_squares is read from a categorical distribution, or
    proportion / success_label from a numeric one.

    Attributes:
        attribute: Name of the field that was accessed
        distribution_kind: Kind of the distribution it was accessed on
    """
    kind = 'not_applicable'

    def __init__(
        self,
        message: str,
        attribute: str | None = None,
        distribution_kind: str | None = None,
    ):
        super().__init__(message)
        self.attribute = attribute
        self.distribution_kind = distribution_kind


class NumericalError(PyInferenceError):
    """
    Numerical computation failed.

    Raised when the reference-distribution evaluator returns something
    that is not a probability.
    """
    kind = 'numerical'
