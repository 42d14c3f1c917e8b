"""
Shared compute infrastructure for pyinference.

Submodules:
    timing: Execution timing utilities
    reference: Reference distributions (F, Chi-squared) for p-values
"""

from pyinference.core.compute.timing import Timer
from pyinference.core.compute.reference import (
    ScipyReferenceDistribution,
    get_reference,
    upper_tail,
)

__all__ = [
    # Timing
    "Timer",
    # Reference distributions
    "ScipyReferenceDistribution",
    "get_reference",
    "upper_tail",
]
