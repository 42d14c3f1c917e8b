"""
ANOVA solver dispatch.

Public API:
    anova_oneway(sample, ...) -> AnovaSolution
    anova_from_distributions(total, groups, ...) -> AnovaSolution
    Anova(reference).run(total, groups, ...) -> AnovaSolution

One-way ANOVA tests whether a numerical (response) variable depends on a
categorical (explanatory) variable with two or more levels. With group
means x_bar_1, ..., x_bar_k:

    H0: mu_1 = mu_2 = ... = mu_k (the response is independent of the groups)
    H1: mu_j != mu_l for some pair of levels j, l

The total variability SST splits into the part explained by the groups
(SSG) and the unexplained part within groups (SSE = SST - SSG). The F
statistic compares their mean squares and is referred to F(k - 1, n - k).
"""

from __future__ import annotations

import logging
from typing import Mapping

from pyinference.core.compute.reference import get_reference, upper_tail
from pyinference.core.compute.timing import Timer
from pyinference.core.defaults import (
    DEFAULT_ANOVA_SIGNIFICANCE,
    NARRATIVE_DISABLED,
    SSE_RTOL,
)
from pyinference.core.exceptions import InsufficientDataError
from pyinference.core.protocols import ReferenceDistribution
from pyinference.core.result import Result
from pyinference.core.validation import check_significance_level
from pyinference.anova._common import AnovaParams
from pyinference.anova.design import AnovaDesign
from pyinference.anova.solution import AnovaSolution
from pyinference.statistics.distribution import NumericDistribution
from pyinference.statistics.sample import Sample

logger = logging.getLogger(__name__)


def anova_oneway(
    sample: Sample | AnovaDesign,
    *,
    significance_level: float = DEFAULT_ANOVA_SIGNIFICANCE,
    reference: ReferenceDistribution | None = None,
) -> AnovaSolution:
    """
    One-way Analysis of Variance on a numeric sample.

    The sample's group ids are the levels of the categorical variable.

    Args:
        sample: Numeric Sample, or a pre-built AnovaDesign
        significance_level: Threshold for rejecting H0. Values <= 0 disable
            the decision. Default DEFAULT_ANOVA_SIGNIFICANCE (0.001).
        reference: F-distribution evaluator. Default scipy.

    Returns:
        AnovaSolution with sums of squares, df, F, p-value and decision

    Raises:
        NoObservationFoundError: If the sample is empty
        WrongValueTypeError: If the sample is categorical
        InsufficientDataError: Fewer than 2 groups, a group with fewer than
            2 observations, no error degrees of freedom, or no within-group
            variability

    Examples:
        >>> result = anova_oneway(sample, significance_level=0.05)
        >>> result.f_value, result.p_value
        >>> result.rejects_h0
        >>> print(result.summary())
    """
    if isinstance(sample, AnovaDesign):
        design = sample
    else:
        design = AnovaDesign.for_sample(sample)

    return _solve(design, significance_level, get_reference(reference))


def anova_from_distributions(
    total: NumericDistribution,
    groups: Mapping[str, NumericDistribution],
    *,
    significance_level: float = NARRATIVE_DISABLED,
    reference: ReferenceDistribution | None = None,
) -> AnovaSolution:
    """
    One-way ANOVA from sample distributions instead of raw observations.

    Meant for meta-analysis, where only published means, standard
    deviations and sizes are available (see NumericDistribution.from_summary).

    Args:
        total: Distribution of the whole sample (group_id None)
        groups: {group_id: distribution of that group}
        significance_level: Threshold for rejecting H0. Default disables
            the decision; only the statistic, df and p-value are reported.
        reference: F-distribution evaluator. Default scipy.

    Raises:
        WrongValueTypeError: If any distribution is categorical
        InsufficientDataError: As for anova_oneway()
    """
    design = AnovaDesign.for_distributions(total, groups)
    return _solve(design, significance_level, get_reference(reference))


class Anova:
    """
    Reusable ANOVA runner bound to one reference-distribution evaluator.

    Every run() returns a new AnovaSolution; the runner keeps no results,
    so one instance can serve any number of tests.

    Examples:
        >>> runner = Anova()
        >>> first = runner.run(total, groups, significance_level=0.05)
        >>> second = runner.run(total, groups, significance_level=0.01)
    """

    def __init__(self, reference: ReferenceDistribution | None = None):
        self._reference = get_reference(reference)

    @property
    def reference(self) -> ReferenceDistribution:
        return self._reference

    def run(
        self,
        total: NumericDistribution,
        groups: Mapping[str, NumericDistribution],
        significance_level: float = NARRATIVE_DISABLED,
    ) -> AnovaSolution:
        """Run ANOVA on distributions; see anova_from_distributions()."""
        design = AnovaDesign.for_distributions(total, groups)
        return _solve(design, significance_level, self._reference)

    def run_sample(
        self,
        sample: Sample,
        significance_level: float = DEFAULT_ANOVA_SIGNIFICANCE,
    ) -> AnovaSolution:
        """Run ANOVA on a numeric sample; see anova_oneway()."""
        return _solve(AnovaDesign.for_sample(sample), significance_level, self._reference)


# =====================================================================
# Internal helpers
# =====================================================================


def _solve(
    design: AnovaDesign,
    significance_level: float,
    reference: ReferenceDistribution,
) -> AnovaSolution:
    """Decompose variance, form F and look up its upper-tail probability."""
    significance_level = check_significance_level(significance_level)

    warnings_list: list[str] = []

    with Timer() as timer:
        with timer.section('sums_of_squares'):
            sst = design.total.sum_of_squares
            grand_mean = design.total.sample_mean

            ssg = 0.0
            for dist in design.groups.values():
                ssg += (dist.sample_mean - grand_mean) ** 2 * dist.sample_size

            sse = sst - ssg

        # SSE within rounding of zero relative to SST is treated as exactly 0
        sse_floor = SSE_RTOL * max(sst, 1.0)
        if sse <= sse_floor:
            raise InsufficientDataError(
                f"no within-group variability (SSE = {sse:.6g}, below {sse_floor:.3g}); "
                "the F statistic is undefined",
                quantity='sum_of_squares_error',
                required=sse_floor,
                actual=0.0,
            )

        df_total = design.n - 1
        df_group = design.k - 1
        df_error = df_total - df_group

        msg = ssg / df_group
        mse = sse / df_error
        f_value = msg / mse

        with timer.section('p_value'):
            p_value = upper_tail(
                reference.f_cdf(float(df_group), float(df_error), f_value), 'F'
            )

        group_sizes = {g: d.sample_size for g, d in design.groups.items()}
        for group_id, size in group_sizes.items():
            if size == 1:
                warnings_list.append(f"group {group_id!r} has a single observation")
        n_grouped = sum(group_sizes.values())
        if n_grouped != design.n:
            warnings_list.append(
                f"group sizes sum to {n_grouped} but the total distribution has "
                f"{design.n} observations"
            )

    logger.debug(
        "ANOVA: F(%d, %d) = %.6g, p = %.6g", df_group, df_error, f_value, p_value
    )

    params = AnovaParams(
        sum_of_squares_total=sst,
        sum_of_squares_group=ssg,
        sum_of_squares_error=sse,
        grand_mean=grand_mean,
        df_total=df_total,
        df_group=df_group,
        df_error=df_error,
        mean_squares_group=msg,
        mean_squares_error=mse,
        f_value=f_value,
        p_value=p_value,
        significance_level=significance_level,
        group_means={g: d.sample_mean for g, d in design.groups.items()},
        group_sizes=group_sizes,
    )

    result = Result(
        params=params,
        info={
            'test_type': 'anova_oneway',
            'source': design.source,
            'n_groups': design.k,
            'n_obs': design.n,
        },
        timing=timer.result(),
        backend_name=reference.name,
        warnings=tuple(warnings_list),
    )

    return AnovaSolution(_result=result)
