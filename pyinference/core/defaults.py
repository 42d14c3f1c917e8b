"""
Configuration constants for pyinference.

This module is the SINGLE SOURCE OF TRUTH for default significance levels
and numeric thresholds. Import from here, never use raw numbers.

Usage:
    from pyinference.core.defaults import DEFAULT_ANOVA_SIGNIFICANCE

    result = anova_oneway(sample, significance_level=DEFAULT_ANOVA_SIGNIFICANCE)
"""

# Significance level used by anova_oneway() when none is given
DEFAULT_ANOVA_SIGNIFICANCE = 0.001

# Significance level used by chisq_test() when none is given
DEFAULT_CHISQ_SIGNIFICANCE = 0.0001

# Any level <= 0 turns the accept/reject decision off; this is the value
# the distribution-based entry points use by default
NARRATIVE_DISABLED = -1.0

# Expected cell counts below this trigger the chi-squared approximation warning
SMALL_EXPECTED_COUNT = 5.0

# Slack allowed when checking that an evaluator returned a probability
PROBABILITY_ATOL = 1e-12

# SSE at or below this fraction of max(SST, 1) is rounding noise: no
# within-group variability
SSE_RTOL = 1e-12

__all__ = [
    'DEFAULT_ANOVA_SIGNIFICANCE',
    'DEFAULT_CHISQ_SIGNIFICANCE',
    'NARRATIVE_DISABLED',
    'SMALL_EXPECTED_COUNT',
    'PROBABILITY_ATOL',
    'SSE_RTOL',
]
