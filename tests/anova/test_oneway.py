"""
Tests for one-way ANOVA on samples.

Validates:
    - Sums of squares, df, mean squares and F on a hand-computed example
    - Agreement with scipy.stats.f_oneway on random data
    - SST = SSG + SSE and df_total = df_group + df_error
    - Decision at the default and at explicit significance levels
    - Error kinds for bad input
    - Summary output and metadata
"""

import numpy as np
import pytest
from scipy import stats

from pyinference import anova_oneway
from pyinference.anova import AnovaDesign, AnovaSolution
from pyinference.core.defaults import DEFAULT_ANOVA_SIGNIFICANCE
from pyinference.core.exceptions import (
    InsufficientDataError,
    NoObservationFoundError,
    NumericalError,
    ValidationError,
    WrongValueTypeError,
)
from pyinference.statistics import Observation, Sample


class TestHandComputed:
    """Groups A = {10, 12, 14}, B = {20, 22, 24}."""

    def test_sums_of_squares(self, two_group_sample):
        result = anova_oneway(two_group_sample)
        assert result.sum_of_squares_total == pytest.approx(166.0)
        assert result.sum_of_squares_group == pytest.approx(150.0)
        assert result.sum_of_squares_error == pytest.approx(16.0)
        assert result.grand_mean == pytest.approx(17.0)

    def test_degrees_of_freedom(self, two_group_sample):
        result = anova_oneway(two_group_sample)
        assert result.df_total == 5
        assert result.df_group == 1
        assert result.df_error == 4

    def test_f_statistic(self, two_group_sample):
        result = anova_oneway(two_group_sample)
        assert result.mean_squares_group == pytest.approx(150.0)
        assert result.mean_squares_error == pytest.approx(4.0)
        assert result.f_value == pytest.approx(37.5)

    def test_p_value(self, two_group_sample):
        result = anova_oneway(two_group_sample)
        assert result.p_value == pytest.approx(stats.f.sf(37.5, 1, 4), rel=1e-9)
        assert 0.003 < result.p_value < 0.004

    def test_group_breakdown(self, two_group_sample):
        result = anova_oneway(two_group_sample)
        assert result.group_means == pytest.approx({'A': 12.0, 'B': 22.0})
        assert result.group_sizes == {'A': 3, 'B': 3}
        assert result.eta_squared == pytest.approx(150.0 / 166.0)


class TestAgainstScipy:

    def test_three_groups(self, rng):
        a = rng.normal(0.0, 1.0, 12)
        b = rng.normal(0.5, 1.0, 15)
        c = rng.normal(1.0, 1.0, 9)
        sample = Sample.from_arrays(
            np.concatenate([a, b, c]), ['a'] * 12 + ['b'] * 15 + ['c'] * 9
        )
        result = anova_oneway(sample)
        expected = stats.f_oneway(a, b, c)
        np.testing.assert_allclose(result.f_value, expected.statistic, rtol=1e-10)
        np.testing.assert_allclose(result.p_value, expected.pvalue, rtol=1e-6, atol=1e-12)

    def test_identities(self, rng):
        groups = [rng.normal(m, 2.0, 8) for m in (1.0, 2.0, 3.0, 4.0)]
        labels = [g for g in 'wxyz' for _ in range(8)]
        result = anova_oneway(Sample.from_arrays(np.concatenate(groups), labels))
        assert result.sum_of_squares_total == pytest.approx(
            result.sum_of_squares_group + result.sum_of_squares_error
        )
        assert result.df_total == result.df_group + result.df_error
        assert result.df_group == 3
        assert result.df_error == 28
        assert 0.0 <= result.p_value <= 1.0


class TestDecision:

    def test_default_level(self, two_group_sample):
        result = anova_oneway(two_group_sample)
        assert result.significance_level == DEFAULT_ANOVA_SIGNIFICANCE
        assert result.rejects_h0 is False

    def test_rejects_at_five_percent(self, two_group_sample):
        result = anova_oneway(two_group_sample, significance_level=0.05)
        assert result.rejects_h0 is True
        assert result.will_reject_h0(0.05)
        assert not result.will_reject_h0(0.001)

    def test_disabled_decision(self, two_group_sample):
        result = anova_oneway(two_group_sample, significance_level=-1)
        assert result.rejects_h0 is None
        assert "At significance level" not in result.summary()

    def test_level_of_one_rejects_when_p_below_one(self, two_group_sample):
        result = anova_oneway(two_group_sample, significance_level=1.0)
        assert result.p_value < 1.0
        assert result.rejects_h0 is True

    def test_non_finite_level_refused(self, two_group_sample):
        with pytest.raises(ValidationError, match="significance_level"):
            anova_oneway(two_group_sample, significance_level=float("inf"))

    def test_identical_groups_do_not_reject(self):
        sample = Sample.from_arrays([1, 2, 3, 1, 2, 3], ['A'] * 3 + ['B'] * 3)
        result = anova_oneway(sample, significance_level=0.05)
        assert result.f_value == pytest.approx(0.0)
        assert result.p_value == pytest.approx(1.0)
        assert result.rejects_h0 is False


class TestErrors:

    def test_categorical_sample(self, smoker_sample):
        with pytest.raises(WrongValueTypeError):
            anova_oneway(smoker_sample)

    def test_empty_sample(self):
        with pytest.raises(NoObservationFoundError):
            anova_oneway(Sample())

    def test_single_group(self):
        sample = Sample.from_arrays([1.0, 2.0, 3.0], ['A', 'A', 'A'])
        with pytest.raises(InsufficientDataError) as exc_info:
            anova_oneway(sample)
        assert exc_info.value.quantity == 'df_group'
        assert exc_info.value.actual == 0

    def test_group_with_one_observation(self):
        sample = Sample([Observation(1.0, 'A'), Observation(2.0, 'B'), Observation(3.0, 'B')])
        with pytest.raises(InsufficientDataError) as exc_info:
            anova_oneway(sample)
        assert exc_info.value.quantity == 'observations'

    def test_no_within_group_variability(self):
        sample = Sample.from_arrays([5, 5, 9, 9], ['A', 'A', 'B', 'B'])
        with pytest.raises(InsufficientDataError) as exc_info:
            anova_oneway(sample)
        assert exc_info.value.quantity == 'sum_of_squares_error'

    @pytest.mark.parametrize("low, high", [(0.1, 0.3), (0.1, 0.7)])
    def test_constant_groups_with_rounding_residue(self, low, high):
        """SSE left over from floating-point cancellation is not variability."""
        sample = Sample.from_arrays([low] * 3 + [high] * 3, ['A'] * 3 + ['B'] * 3)
        with pytest.raises(InsufficientDataError) as exc_info:
            anova_oneway(sample)
        assert exc_info.value.quantity == 'sum_of_squares_error'
        assert exc_info.value.actual == 0.0

    def test_small_but_real_variability_accepted(self):
        sample = Sample.from_arrays([1.0, 1.0001, 2.0, 2.0001], ['A', 'A', 'B', 'B'])
        result = anova_oneway(sample)
        assert result.sum_of_squares_error == pytest.approx(1e-8, rel=1e-4)
        assert result.f_value > 1e6
        assert 0.0 <= result.p_value < 1e-3

    def test_broken_reference(self, two_group_sample, broken_reference):
        with pytest.raises(NumericalError):
            anova_oneway(two_group_sample, reference=broken_reference)

    def test_non_conforming_reference(self, two_group_sample):
        with pytest.raises(ValidationError, match="reference"):
            anova_oneway(two_group_sample, reference="scipy")


class TestOutput:

    def test_returns_solution(self, two_group_sample):
        assert isinstance(anova_oneway(two_group_sample), AnovaSolution)

    def test_accepts_design(self, two_group_sample):
        design = AnovaDesign.for_sample(two_group_sample)
        assert design.k == 2 and design.n == 6
        assert anova_oneway(design).f_value == pytest.approx(37.5)

    def test_metadata(self, two_group_sample):
        result = anova_oneway(two_group_sample)
        assert result.info == {
            'test_type': 'anova_oneway',
            'source': 'sample',
            'n_groups': 2,
            'n_obs': 6,
        }
        assert result.backend_name == 'scipy'
        assert result.warnings == ()
        assert 'total_seconds' in result.timing
        assert 'sums_of_squares' in result.timing

    def test_summary_rejected(self, two_group_sample):
        text = anova_oneway(two_group_sample, significance_level=0.05).summary()
        assert "One-way Analysis of Variance" in text
        assert "Residuals" in text
        assert "null hypothesis is rejected" in text
        assert "**" in text

    def test_summary_not_rejected(self, two_group_sample):
        text = anova_oneway(two_group_sample).summary()
        assert "fails to be rejected" in text

    def test_repr(self, two_group_sample):
        assert "F=37.5" in repr(anova_oneway(two_group_sample))

    def test_debug_logging(self, two_group_sample, caplog):
        with caplog.at_level('DEBUG', logger='pyinference.anova.solvers'):
            anova_oneway(two_group_sample)
        assert "F(1, 4)" in caplog.text
