"""
pyinference: classical significance testing on labeled observations.

Observations are grouped into samples, summarised as sample distributions
and tested with one-way ANOVA (numeric response vs. categorical factor) or
the Chi-square test of independence (two categorical variables).

Submodules:
    statistics: Observation, Sample, sample distributions, contingency tables
    anova: One-way analysis of variance
    hypothesis: Chi-square test of independence
"""

__version__ = "0.1.0"

from pyinference import statistics
from pyinference import anova
from pyinference import hypothesis
from pyinference.statistics import (
    Observation,
    Sample,
    NumericDistribution,
    CategoricalDistribution,
    ContingencyTable,
)
from pyinference.anova import Anova, anova_oneway, anova_from_distributions
from pyinference.hypothesis import ChiSquareTest, chisq_test

__all__ = [
    "__version__",
    "statistics",
    "anova",
    "hypothesis",
    "Observation",
    "Sample",
    "NumericDistribution",
    "CategoricalDistribution",
    "ContingencyTable",
    "Anova",
    "anova_oneway",
    "anova_from_distributions",
    "ChiSquareTest",
    "chisq_test",
]
