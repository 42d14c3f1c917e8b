"""
Common types for hypothesis testing.

Defines HTestParams, the payload every significance test returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Attributes
    ----------
    statistic : float
        Test statistic value.
    statistic_name : str
        Name of the test statistic ("X-squared").
    parameter : dict
        Distribution parameters, e.g. {"df": 2}.
    p_value : float
        Upper-tail probability of the statistic under H0.
    significance_level : float
        Threshold for rejecting H0; <= 0 means no decision was requested.
    method : str
        Human-readable method name, e.g. "Pearson's Chi-squared test".
    data_name : str
        Description of the data, e.g. "smoker by gender".
    extras : dict or None
        Test-specific additional outputs (observed/expected/residuals for
        the chi-squared test).
    """
    statistic: float
    statistic_name: str
    parameter: dict[str, float]
    p_value: float
    significance_level: float
    method: str
    data_name: str
    extras: dict[str, Any] | None = None
