"""
Analysis of Variance (ANOVA).

Public API:
    anova_oneway(sample, ...) -> AnovaSolution
    anova_from_distributions(total, groups, ...) -> AnovaSolution   # meta-analysis
    Anova(reference).run(total, groups, ...) -> AnovaSolution
"""

from pyinference.anova.solvers import (
    Anova,
    anova_from_distributions,
    anova_oneway,
)
from pyinference.anova.design import AnovaDesign
from pyinference.anova._common import AnovaParams
from pyinference.anova.solution import AnovaSolution

__all__ = [
    "Anova",
    "anova_from_distributions",
    "anova_oneway",
    "AnovaDesign",
    "AnovaParams",
    "AnovaSolution",
]
