"""
Statistics data model.

Observations are collected into a Sample, which yields per-group sample
distributions (for ANOVA) and contingency tables (for the Chi-square test).

Public API:
    Observation(value, group_id)                 - one labeled data point
    Sample(observations)                         - single-kind collection
    NumericDistribution / CategoricalDistribution
    sample_distribution(sample, group_id)        - variant picked from kind
    ContingencyTable.from_sample(sample)         - cross-tabulation
"""

from pyinference.statistics.observation import Observation, ValueKind
from pyinference.statistics.sample import Sample
from pyinference.statistics.distribution import (
    CategoricalDistribution,
    NumericDistribution,
    SampleDistribution,
    sample_distribution,
)
from pyinference.statistics.contingency import ContingencyTable

__all__ = [
    "Observation",
    "ValueKind",
    "Sample",
    "NumericDistribution",
    "CategoricalDistribution",
    "SampleDistribution",
    "sample_distribution",
    "ContingencyTable",
]
