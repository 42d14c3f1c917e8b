"""
Core protocols for pyinference.

These define structural interfaces that collaborators must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so any
object with the right methods can be plugged in.

Design Principles:
    - Minimal contracts: prescribe only what the tests consume
    - Stateless: evaluators hold no per-test state
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ReferenceDistribution(Protocol):
    """
    Protocol for the continuous reference distributions behind p-values.

    The tests compute their statistic and degrees of freedom themselves and
    only need the cumulative distribution function to turn the statistic
    into an upper-tail probability.

    Implementations must return a probability in [0, 1]. Anything else is
    reported as NumericalError by the caller.
    """

    @property
    def name(self) -> str:
        """
        Evaluator identifier, recorded as Result.backend_name.

        Examples: 'scipy'
        """
        ...

    def f_cdf(self, df1: float, df2: float, x: float) -> float:
        """
        CDF of the F distribution with (df1, df2) degrees of freedom at x.
        """
        ...

    def chi2_cdf(self, df: float, x: float) -> float:
        """
        CDF of the Chi-squared distribution with df degrees of freedom at x.
        """
        ...
