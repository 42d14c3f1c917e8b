"""
Reference distributions for p-value evaluation.

The default evaluator wraps scipy.stats. Tests accept any object that
satisfies the ReferenceDistribution protocol, which is how alternative
CDF implementations are plugged in.
"""

import math

from scipy import stats as sp_stats

from pyinference.core.defaults import PROBABILITY_ATOL
from pyinference.core.exceptions import NumericalError, ValidationError
from pyinference.core.protocols import ReferenceDistribution


class ScipyReferenceDistribution:
    """CDFs of the F and Chi-squared distributions via scipy.stats."""

    @property
    def name(self) -> str:
        return 'scipy'

    def f_cdf(self, df1: float, df2: float, x: float) -> float:
        return float(sp_stats.f.cdf(x, df1, df2))

    def chi2_cdf(self, df: float, x: float) -> float:
        return float(sp_stats.chi2.cdf(x, df))


def get_reference(reference: ReferenceDistribution | None = None) -> ReferenceDistribution:
    """
    Select the reference-distribution evaluator.

    None gives the scipy evaluator. Anything else must satisfy the
    ReferenceDistribution protocol.
    """
    if reference is None:
        return ScipyReferenceDistribution()
    if not isinstance(reference, ReferenceDistribution):
        raise ValidationError(
            f"reference: {type(reference).__name__} does not provide "
            "name, f_cdf() and chi2_cdf()"
        )
    return reference


def upper_tail(cdf_value: float, distribution: str) -> float:
    """
    Convert a CDF value into an upper-tail p-value, 1 - CDF.

    Rounding noise up to PROBABILITY_ATOL outside [0, 1] is clipped;
    anything further out (or NaN) means the evaluator is broken.

    Raises:
        NumericalError: If cdf_value is not a probability
    """
    cdf_value = float(cdf_value)
    if math.isnan(cdf_value) or not (
        -PROBABILITY_ATOL <= cdf_value <= 1.0 + PROBABILITY_ATOL
    ):
        raise NumericalError(
            f"{distribution} CDF returned {cdf_value}, expected a probability in [0, 1]"
        )
    return min(1.0, max(0.0, 1.0 - cdf_value))
