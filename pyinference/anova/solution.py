"""
User-facing ANOVA solution type.

Wraps a Result[AnovaParams] and provides convenient accessors, the
reject/accept decision and a formatted summary.
"""

import math
from dataclasses import dataclass
from typing import Any

from pyinference.core.result import Result
from pyinference.anova._common import AnovaParams


@dataclass(frozen=True)
class AnovaSolution:
    """
    User-facing result for one-way ANOVA.

    Produced by anova_oneway(), anova_from_distributions() and Anova.run().
    Immutable: running the test again produces a new solution.

    H0: the mean of the numerical (response) variable is the same in every
        level of the categorical (explanatory) variable.
    H1: at least two levels have different means.
    """
    _result: Result[AnovaParams]

    @property
    def sum_of_squares_total(self) -> float:
        """SST: squared deviations of every observation from the grand mean."""
        return self._result.params.sum_of_squares_total

    @property
    def sum_of_squares_group(self) -> float:
        """SSG: variability explained by the categorical variable."""
        return self._result.params.sum_of_squares_group

    @property
    def sum_of_squares_error(self) -> float:
        """SSE: variability left unexplained within groups."""
        return self._result.params.sum_of_squares_error

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def df_total(self) -> int:
        return self._result.params.df_total

    @property
    def df_group(self) -> int:
        return self._result.params.df_group

    @property
    def df_error(self) -> int:
        return self._result.params.df_error

    @property
    def mean_squares_group(self) -> float:
        return self._result.params.mean_squares_group

    @property
    def mean_squares_error(self) -> float:
        return self._result.params.mean_squares_error

    @property
    def f_value(self) -> float:
        return self._result.params.f_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def significance_level(self) -> float:
        return self._result.params.significance_level

    @property
    def group_means(self) -> dict[str, float]:
        return self._result.params.group_means

    @property
    def group_sizes(self) -> dict[str, int]:
        return self._result.params.group_sizes

    @property
    def eta_squared(self) -> float:
        """Share of total variability explained by the groups, SSG / SST."""
        sst = self.sum_of_squares_total
        return self.sum_of_squares_group / sst if sst > 0 else 0.0

    @property
    def rejects_h0(self) -> bool | None:
        """Decision at the configured level; None if the level is <= 0."""
        if self.significance_level <= 0:
            return None
        return self.will_reject_h0(self.significance_level)

    def will_reject_h0(self, significance_level: float) -> bool:
        """True if the p-value is below significance_level."""
        return self.p_value < significance_level

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate ANOVA summary table with the hypothesis decision."""
        lines = [
            "One-way Analysis of Variance",
            "=" * 72,
            "null hypothesis: the numerical variable (response) is independent "
            "of the categorical variable (explanatory)",
            "alternative hypothesis: the numerical variable is correlated "
            "with the categorical variable",
            f"Observations: {self.df_total + 1}, groups: {self.df_group + 1}, "
            f"grand mean: {self.grand_mean:.4f}",
            "",
            f"{'Source':<20} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} {'F value':>10} {'Pr(>F)':>12}",
            "-" * 72,
            f"{'Group':<20} {self.df_group:>6} {self.sum_of_squares_group:>14.4f} "
            f"{self.mean_squares_group:>14.4f} {self.f_value:>10.4f} "
            f"{self.p_value:>12.4e} {_significance_stars(self.p_value)}",
            f"{'Residuals':<20} {self.df_error:>6} {self.sum_of_squares_error:>14.4f} "
            f"{self.mean_squares_error:>14.4f}",
            f"{'Total':<20} {self.df_total:>6} {self.sum_of_squares_total:>14.4f}",
            "-" * 72,
            "Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1",
        ]

        if self.rejects_h0 is not None:
            lines.append("")
            lines.append(f"At significance level {self.significance_level:g}:")
            if self.rejects_h0:
                lines.append(
                    "  the null hypothesis is rejected as the p-value is smaller "
                    "than the significance level;"
                )
                lines.append(
                    "  the categorical variable has an effect on the mean of "
                    "the numerical variable"
                )
            else:
                lines.append("  the null hypothesis fails to be rejected;")
                lines.append(
                    "  there is no evidence that the categorical variable "
                    "affects the mean of the numerical variable"
                )

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaSolution(F={self.f_value:.4g}, df=({self.df_group}, {self.df_error}), "
            f"p_value={self.p_value:.4g})"
        )


def _significance_stars(p: float | None) -> str:
    """Return significance stars for a p-value."""
    if p is None or math.isnan(p):
        return ""
    if p < 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    if p < 0.1:
        return "."
    return ""
