"""
Sample distributions: summary statistics of a sample or of one group.

A sample distribution is the observed distribution of the values a
variable takes over a sample of individuals. Numeric and categorical
variables are summarised differently, so there are two variants:

    NumericDistribution:      mean, sd, variance, sum of squares, size
    CategoricalDistribution:  proportion of a success label, with the
                              Binomial mean n*p and variance n*p*(1-p)

Both can be computed from a Sample or reconstructed from published
summary numbers when the raw observations are unavailable (meta-analysis).

group_id None marks the distribution of the whole sample.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union, TYPE_CHECKING

import numpy as np

from pyinference.core.exceptions import (
    InsufficientDataError,
    NotApplicableError,
    ValidationError,
    WrongValueTypeError,
)
from pyinference.core.validation import (
    check_finite_scalar,
    check_label,
    check_non_negative,
    check_probability,
    check_size,
)
from pyinference.statistics.observation import ValueKind

if TYPE_CHECKING:
    from pyinference.statistics.sample import Sample


def _check_group_id(group_id: str | None) -> str | None:
    if group_id is not None:
        check_label(group_id, "group_id")
    return group_id


@dataclass(frozen=True)
class NumericDistribution:
    """
    Summary of a numeric variable.

    Attributes:
        sample_mean: Arithmetic mean
        sample_sd: Square root of sample_variance
        sample_variance: Unbiased variance, sum_of_squares / (n - 1)
        sample_size: Number of observations n
        sum_of_squares: Sum of squared deviations from the mean
        group_id: Group summarised, None for the whole sample
    """
    sample_mean: float
    sample_sd: float
    sample_variance: float
    sample_size: int
    sum_of_squares: float
    group_id: str | None = None

    @classmethod
    def from_sample(cls, sample: Sample, group_id: str | None = None) -> NumericDistribution:
        """
        Summarise the numeric values of one group (or all, if group_id is None).

        Raises:
            NoObservationFoundError: If the sample is empty
            WrongValueTypeError: If the sample is categorical
            InsufficientDataError: If the group has fewer than 2 observations
        """
        if not sample.is_numeric():
            raise WrongValueTypeError(
                "numeric distributions can only be computed from numeric samples",
                expected=ValueKind.NUMERIC.value,
                actual=ValueKind.CATEGORICAL.value,
            )

        x = sample.values(group_id)
        n = len(x)
        if n < 2:
            raise InsufficientDataError(
                f"group {group_id!r}: variance needs at least 2 observations, got {n}",
                quantity='observations',
                required=2,
                actual=n,
            )

        mean = float(np.mean(x))
        ss = float(np.sum((x - mean) ** 2))
        variance = ss / (n - 1)

        return cls(
            sample_mean=mean,
            sample_sd=math.sqrt(variance),
            sample_variance=variance,
            sample_size=n,
            sum_of_squares=ss,
            group_id=group_id,
        )

    @classmethod
    def from_summary(
        cls,
        mean: float,
        sd: float,
        size: int,
        group_id: str | None = None,
    ) -> NumericDistribution:
        """
        Reconstruct from published mean, standard deviation and size.

        The sum of squares is recovered as sd^2 * (n - 1), so ANOVA treats
        reconstructed and computed distributions the same way.

        Raises:
            ValidationError: On non-finite values, negative sd or size < 1
        """
        mean = check_finite_scalar(mean, "mean")
        sd = check_finite_scalar(sd, "sd")
        check_non_negative(sd, "sd")
        size = check_size(size, 1, "size")

        variance = sd * sd
        return cls(
            sample_mean=mean,
            sample_sd=sd,
            sample_variance=variance,
            sample_size=size,
            sum_of_squares=variance * (size - 1),
            group_id=_check_group_id(group_id),
        )

    @property
    def kind(self) -> ValueKind:
        return ValueKind.NUMERIC

    @property
    def is_total(self) -> bool:
        return self.group_id is None

    def is_numeric(self) -> bool:
        return True

    def is_categorical(self) -> bool:
        return False

    @property
    def proportion(self) -> float:
        raise NotApplicableError(
            "proportion is only defined for categorical distributions",
            attribute='proportion',
            distribution_kind=ValueKind.NUMERIC.value,
        )

    @property
    def success_label(self) -> str:
        raise NotApplicableError(
            "success_label is only defined for categorical distributions",
            attribute='success_label',
            distribution_kind=ValueKind.NUMERIC.value,
        )


@dataclass(frozen=True)
class CategoricalDistribution:
    """
    Summary of a categorical variable against one success label.

    The proportion p of successes is treated as the mean of n Bernoulli
    trials, so the reported mean and variance are the Binomial ones.

    Attributes:
        sample_mean: n * p (expected number of successes)
        sample_sd: Square root of sample_variance
        sample_variance: n * p * (1 - p)
        sample_size: Number of observations n
        proportion: Fraction of observations equal to success_label
        success_label: Label counted as a success
        group_id: Group summarised, None for the whole sample
    """
    sample_mean: float
    sample_sd: float
    sample_variance: float
    sample_size: int
    proportion: float
    success_label: str
    group_id: str | None = None

    @classmethod
    def from_sample(
        cls,
        sample: Sample,
        success_label: str,
        group_id: str | None = None,
    ) -> CategoricalDistribution:
        """
        Summarise the proportion of success_label in one group.

        Raises:
            NoObservationFoundError: If the sample is empty
            WrongValueTypeError: If the sample is numeric
            InsufficientDataError: If the group has no observations
        """
        if sample.is_numeric():
            raise WrongValueTypeError(
                "categorical distributions can only be computed from categorical samples",
                expected=ValueKind.CATEGORICAL.value,
                actual=ValueKind.NUMERIC.value,
            )
        check_label(success_label, "success_label")

        p = sample.proportion(success_label, group_id)
        n = sample.count_by_group_id(group_id)
        return cls._build(success_label, p, n, group_id)

    @classmethod
    def from_summary(
        cls,
        success_label: str,
        proportion: float,
        size: int,
        group_id: str | None = None,
    ) -> CategoricalDistribution:
        """
        Reconstruct from a published proportion and sample size.

        Raises:
            ValidationError: If proportion is outside [0, 1] or size < 1
        """
        check_label(success_label, "success_label")
        proportion = check_finite_scalar(proportion, "proportion")
        check_probability(proportion, "proportion")
        size = check_size(size, 1, "size")
        return cls._build(success_label, proportion, size, _check_group_id(group_id))

    @classmethod
    def _build(
        cls,
        success_label: str,
        p: float,
        n: int,
        group_id: str | None,
    ) -> CategoricalDistribution:
        variance = n * p * (1.0 - p)
        return cls(
            sample_mean=n * p,
            sample_sd=math.sqrt(variance),
            sample_variance=variance,
            sample_size=n,
            proportion=p,
            success_label=success_label,
            group_id=group_id,
        )

    @property
    def kind(self) -> ValueKind:
        return ValueKind.CATEGORICAL

    @property
    def is_total(self) -> bool:
        return self.group_id is None

    def is_numeric(self) -> bool:
        return False

    def is_categorical(self) -> bool:
        return True

    @property
    def sum_of_squares(self) -> float:
        raise NotApplicableError(
            "sum_of_squares is only defined for numeric distributions",
            attribute='sum_of_squares',
            distribution_kind=ValueKind.CATEGORICAL.value,
        )


SampleDistribution = Union[NumericDistribution, CategoricalDistribution]


def sample_distribution(
    sample: Sample,
    group_id: str | None = None,
    *,
    success_label: str | None = None,
) -> SampleDistribution:
    """
    Distribution of one group, picking the variant from the sample's kind.

    Args:
        sample: Non-empty sample
        group_id: Group to summarise, None for the whole sample
        success_label: Required for categorical samples, ignored otherwise

    Raises:
        ValidationError: If the sample is categorical and success_label is None
    """
    if sample.is_numeric():
        return NumericDistribution.from_sample(sample, group_id)
    if success_label is None:
        raise ValidationError(
            "success_label: required to summarise a categorical sample"
        )
    return CategoricalDistribution.from_sample(sample, success_label, group_id)
