"""
Fixtures for ANOVA tests.
"""

import math

import pytest

from pyinference.statistics import NumericDistribution


@pytest.fixture
def two_group_distributions():
    """Summary-statistics version of the two_group_sample fixture."""
    total = NumericDistribution.from_summary(17.0, math.sqrt(166.0 / 5), 6)
    groups = {
        'A': NumericDistribution.from_summary(12.0, 2.0, 3, 'A'),
        'B': NumericDistribution.from_summary(22.0, 2.0, 3, 'B'),
    }
    return total, groups


class BrokenReference:
    """Evaluator whose F CDF is not a probability."""

    name = 'broken'

    def f_cdf(self, df1, df2, x):
        return 1.5

    def chi2_cdf(self, df, x):
        return float('nan')


@pytest.fixture
def broken_reference():
    return BrokenReference()
