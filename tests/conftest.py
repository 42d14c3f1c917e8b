"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pyinference.statistics import Observation, Sample


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def two_group_sample():
    """Group A = {10, 12, 14}, group B = {20, 22, 24}; grand mean 17."""
    sample = Sample()
    for x in (10, 12, 14):
        sample.add(Observation(x, 'A'))
    for x in (20, 22, 24):
        sample.add(Observation(x, 'B'))
    return sample


@pytest.fixture
def smoker_sample():
    """Categorical sample: smoking status by gender."""
    values = (
        ['smoker'] * 6 + ['non-smoker'] * 14
        + ['smoker'] * 3 + ['non-smoker'] * 17
    )
    groups = ['male'] * 20 + ['female'] * 20
    return Sample.from_arrays(values, groups)
