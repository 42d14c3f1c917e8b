"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and provides the reject/accept
decision and a formatted summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from numpy.typing import NDArray

from pyinference.core.result import Result
from pyinference.hypothesis._common import HTestParams


@dataclass(frozen=True)
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams]. All fields are available as properties;
    summary() renders them as text. Immutable: running the test again
    produces a new solution.
    """
    _result: Result[HTestParams]

    # --- Standard fields ---

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        """Name of the test statistic (e.g. 'X-squared')."""
        return self._result.params.statistic_name

    @property
    def parameter(self) -> dict[str, float]:
        """Distribution parameters (e.g. {'df': 1})."""
        return self._result.params.parameter

    @property
    def df(self) -> float:
        """Degrees of freedom of the reference distribution."""
        return self._result.params.parameter['df']

    @property
    def p_value(self) -> float:
        """p-value of the test."""
        return self._result.params.p_value

    @property
    def significance_level(self) -> float:
        return self._result.params.significance_level

    @property
    def method(self) -> str:
        """Human-readable method name."""
        return self._result.params.method

    @property
    def data_name(self) -> str:
        """Description of the data."""
        return self._result.params.data_name

    # --- Decision ---

    @property
    def rejects_h0(self) -> bool | None:
        """Decision at the configured level; None if the level is <= 0."""
        if self.significance_level <= 0:
            return None
        return self.will_reject_h0(self.significance_level)

    def will_reject_h0(self, significance_level: float) -> bool:
        """True if the p-value is below significance_level."""
        return self.p_value < significance_level

    # --- Test-specific extras ---

    @property
    def extras(self) -> dict[str, Any] | None:
        """Test-specific additional outputs."""
        return self._result.params.extras

    @property
    def observed(self) -> NDArray | None:
        """Observed counts."""
        e = self._result.params.extras
        return e.get('observed') if e else None

    @property
    def expected(self) -> NDArray | None:
        """Expected counts under H0."""
        e = self._result.params.extras
        return e.get('expected') if e else None

    @property
    def residuals(self) -> NDArray | None:
        """Pearson residuals, (observed - expected) / sqrt(expected)."""
        e = self._result.params.extras
        return e.get('residuals') if e else None

    @property
    def rows(self) -> list[str] | None:
        e = self._result.params.extras
        return e.get('rows') if e else None

    @property
    def columns(self) -> list[str] | None:
        e = self._result.params.extras
        return e.get('columns') if e else None

    # --- Metadata ---

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

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format the result as text.

        Produces output like:
            Pearson's Chi-squared test

        data:  smoker by gender
        X-squared = 6.25, df = 2, p-value = 0.04394
        null hypothesis: the two categorical variables are independent
        at significance level 0.05 the null hypothesis is rejected:
        the two categorical variables are dependent
        """
        p = self._result.params
        lines = []

        lines.append(f"\t{p.method}")
        lines.append("")
        lines.append(f"data:  {p.data_name}")

        parts = [f"{p.statistic_name} = {p.statistic:.5g}"]
        for name, val in p.parameter.items():
            parts.append(f"{name} = {val:.5g}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        lines.append("null hypothesis: the two categorical variables are independent")

        decision = self.rejects_h0
        if decision is not None:
            if decision:
                lines.append(
                    f"at significance level {p.significance_level:g} the null "
                    "hypothesis is rejected:"
                )
                lines.append("the two categorical variables are dependent")
            else:
                lines.append(
                    f"at significance level {p.significance_level:g} the null "
                    "hypothesis fails to be rejected:"
                )
                lines.append(
                    "there is no evidence of an association between the two "
                    "categorical variables"
                )

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
