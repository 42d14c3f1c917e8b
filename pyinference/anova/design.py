"""
ANOVA design object.

Wraps validated sample distributions for one-way ANOVA.
Factory methods handle the two origins: raw observations in a Sample, or
summary statistics supplied directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from pyinference.core.exceptions import (
    InsufficientDataError,
    ValidationError,
    WrongValueTypeError,
)
from pyinference.core.validation import check_label
from pyinference.statistics.distribution import NumericDistribution
from pyinference.statistics.observation import ValueKind
from pyinference.statistics.sample import Sample


def _check_numeric(distribution: Any, name: str) -> NumericDistribution:
    if not isinstance(distribution, NumericDistribution):
        actual = getattr(distribution, 'kind', None)
        raise WrongValueTypeError(
            f"{name}: ANOVA needs a numeric distribution, "
            f"got {type(distribution).__name__}",
            expected=ValueKind.NUMERIC.value,
            actual=actual.value if actual is not None else None,
        )
    return distribution


@dataclass(frozen=True)
class AnovaDesign:
    """
    Validated inputs for one-way ANOVA.

    Guarantees at least two groups and at least one error degree of
    freedom, so every denominator in the F statistic is non-zero.

    Created via factory methods, not directly.
    """
    total: NumericDistribution
    groups: dict[str, NumericDistribution]
    n: int
    k: int
    source: str   # 'sample' or 'distributions'

    @staticmethod
    def for_sample(sample: Sample) -> AnovaDesign:
        """
        Create design from a numeric sample; groups are its group ids.

        Raises:
            NoObservationFoundError: If the sample is empty
            WrongValueTypeError: If the sample is categorical
            InsufficientDataError: If a group has fewer than 2 observations,
                or there are too few groups or observations
        """
        if not sample.is_numeric():
            raise WrongValueTypeError(
                "ANOVA can only be applied to a sample of a numerical variable "
                "grouped by a categorical variable",
                expected=ValueKind.NUMERIC.value,
                actual=ValueKind.CATEGORICAL.value,
            )

        total = NumericDistribution.from_sample(sample)
        groups = sample.sample_distributions_by_group_id()
        return AnovaDesign._build(total, groups, source='sample')

    @staticmethod
    def for_distributions(
        total: NumericDistribution,
        groups: Mapping[str, NumericDistribution],
    ) -> AnovaDesign:
        """
        Create design from precomputed (or published) distributions.

        Args:
            total: Distribution of the whole sample (group_id None)
            groups: {group_id: distribution of that group}

        Raises:
            WrongValueTypeError: If any distribution is categorical
            ValidationError: If total carries a group id, or a key is not a
                non-empty string
            InsufficientDataError: If there are too few groups or observations
        """
        total = _check_numeric(total, "total")
        if total.group_id is not None:
            raise ValidationError(
                f"total: expected the whole-sample distribution (group_id None), "
                f"got group_id {total.group_id!r}"
            )

        validated: dict[str, NumericDistribution] = {}
        for group_id, dist in groups.items():
            check_label(group_id, "groups")
            validated[group_id] = _check_numeric(dist, f"groups[{group_id!r}]")

        return AnovaDesign._build(total, validated, source='distributions')

    @staticmethod
    def _build(
        total: NumericDistribution,
        groups: dict[str, NumericDistribution],
        source: str,
    ) -> AnovaDesign:
        n = total.sample_size
        k = len(groups)

        if k < 2:
            raise InsufficientDataError(
                f"groups: need at least 2 groups, got {k} (df_group = {k - 1})",
                quantity='df_group',
                required=1,
                actual=k - 1,
            )

        df_error = (n - 1) - (k - 1)
        if df_error < 1:
            raise InsufficientDataError(
                f"total: {n} observations in {k} groups leaves "
                f"df_error = {df_error}; need more observations than groups",
                quantity='df_error',
                required=1,
                actual=df_error,
            )

        return AnovaDesign(
            total=total,
            groups=dict(groups),
            n=n,
            k=k,
            source=source,
        )
