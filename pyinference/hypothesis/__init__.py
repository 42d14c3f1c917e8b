"""
Hypothesis testing module.

Public API:
    chisq_test(x)                  - Pearson's Chi-squared test of independence
    ChiSquareTest(reference).run() - same, as a reusable runner
"""

from pyinference.hypothesis.solvers import chisq_test, ChiSquareTest
from pyinference.hypothesis.design import ChisqDesign
from pyinference.hypothesis._common import HTestParams
from pyinference.hypothesis.solution import HTestSolution

__all__ = [
    "chisq_test",
    "ChiSquareTest",
    "ChisqDesign",
    "HTestParams",
    "HTestSolution",
]
