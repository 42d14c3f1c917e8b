"""
Common data types for ANOVA.

Contains the frozen parameter payload that goes inside Result[P] envelopes.
The payload is a pure data container: no methods, no computation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnovaParams:
    """
    Parameter payload for one-way ANOVA.

    SST = SSG + SSE and df_total = df_group + df_error hold by construction.
    """
    sum_of_squares_total: float                  # SST
    sum_of_squares_group: float                  # SSG, between groups
    sum_of_squares_error: float                  # SSE, within groups
    grand_mean: float
    df_total: int
    df_group: int
    df_error: int
    mean_squares_group: float                    # MSG = SSG / df_group
    mean_squares_error: float                    # MSE = SSE / df_error
    f_value: float                               # MSG / MSE
    p_value: float                               # upper tail of F(df_group, df_error)
    significance_level: float                    # <= 0 means no decision
    group_means: dict[str, float]
    group_sizes: dict[str, int]
