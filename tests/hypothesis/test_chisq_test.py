"""
Tests for the Chi-square test of independence.

Validates:
    - Statistic, df and p-value against scipy.stats.chi2_contingency
      (no continuity correction)
    - Expected counts and Pearson residuals
    - Small expected count warning
    - Decision at default and explicit levels
    - Error kinds for degenerate tables and wrong inputs
    - Reusable runner and summary output
"""

import numpy as np
import pytest
from scipy import stats

from pyinference import ChiSquareTest, chisq_test
from pyinference.core.defaults import DEFAULT_CHISQ_SIGNIFICANCE
from pyinference.core.exceptions import (
    InsufficientDataError,
    NumericalError,
    ValidationError,
    WrongValueTypeError,
)
from pyinference.hypothesis import ChisqDesign, HTestSolution
from pyinference.statistics import ContingencyTable


class BrokenReference:
    name = 'broken'

    def f_cdf(self, df1, df2, x):
        return float('nan')

    def chi2_cdf(self, df, x):
        return float('nan')


@pytest.fixture
def uniform_table():
    return ContingencyTable.from_counts(
        [[10, 10], [10, 10]], rows=['yes', 'no'], columns=['g1', 'g2']
    )


@pytest.fixture
def dependent_table():
    return ContingencyTable.from_counts([[50, 0], [0, 50]])


class TestStatistic:

    def test_uniform_table(self, uniform_table):
        result = chisq_test(uniform_table, significance_level=0.05)
        assert result.statistic == pytest.approx(0.0)
        assert result.df == 1
        assert result.p_value == pytest.approx(1.0)
        assert result.rejects_h0 is False

    def test_smoker_sample(self, smoker_sample):
        result = chisq_test(smoker_sample)
        expected = stats.chi2_contingency([[6, 3], [14, 17]], correction=False)
        assert result.statistic == pytest.approx(expected[0])
        assert result.p_value == pytest.approx(expected[1])
        assert result.df == 1
        np.testing.assert_allclose(result.expected, expected[3])

    def test_hand_computed(self, smoker_sample):
        result = chisq_test(smoker_sample)
        np.testing.assert_allclose(result.expected, [[4.5, 4.5], [15.5, 15.5]])
        assert result.statistic == pytest.approx(1.0 + 2 * 2.25 / 15.5)

    def test_three_by_three(self, rng):
        counts = rng.integers(5, 40, size=(3, 3))
        result = chisq_test(ContingencyTable.from_counts(counts))
        expected = stats.chi2_contingency(counts, correction=False)
        assert result.df == 4
        np.testing.assert_allclose(result.statistic, expected[0], rtol=1e-10)
        np.testing.assert_allclose(result.p_value, expected[1], rtol=1e-6, atol=1e-12)

    def test_rectangular_df(self):
        table = ContingencyTable.from_counts([[10, 12, 9], [8, 15, 11]])
        assert chisq_test(table).df == 2

    def test_residuals(self, smoker_sample):
        result = chisq_test(smoker_sample)
        obs = result.observed
        exp = result.expected
        np.testing.assert_allclose(result.residuals, (obs - exp) / np.sqrt(exp))
        assert np.sum(result.residuals ** 2) == pytest.approx(result.statistic)

    def test_p_value_in_unit_interval(self, rng):
        for _ in range(5):
            counts = rng.integers(1, 30, size=(2, 4))
            p = chisq_test(ContingencyTable.from_counts(counts)).p_value
            assert 0.0 <= p <= 1.0


class TestDecision:

    def test_default_level(self, uniform_table):
        result = chisq_test(uniform_table)
        assert result.significance_level == DEFAULT_CHISQ_SIGNIFICANCE

    def test_dependent_rejected(self, dependent_table):
        result = chisq_test(dependent_table)
        assert result.statistic == pytest.approx(100.0)
        assert result.rejects_h0 is True

    def test_disabled(self, dependent_table):
        result = chisq_test(dependent_table, significance_level=0)
        assert result.rejects_h0 is None
        assert result.will_reject_h0(0.05)

    def test_level_of_one_accepted(self, uniform_table, dependent_table):
        assert chisq_test(uniform_table, significance_level=1.0).rejects_h0 is False
        assert chisq_test(dependent_table, significance_level=1.0).rejects_h0 is True
        assert chisq_test(uniform_table, significance_level=1.5).rejects_h0 is True

    def test_invalid_level(self, uniform_table):
        with pytest.raises(ValidationError):
            chisq_test(uniform_table, significance_level=float("nan"))


class TestWarnings:

    def test_small_expected_counts(self, smoker_sample):
        result = chisq_test(smoker_sample)
        assert "Chi-squared approximation may be incorrect" in result.warnings

    def test_no_warning_for_large_counts(self, uniform_table):
        assert chisq_test(uniform_table).warnings == ()


class TestErrors:

    def test_single_row(self):
        table = ContingencyTable.from_counts([[1, 2, 3]])
        with pytest.raises(InsufficientDataError) as exc_info:
            chisq_test(table)
        assert exc_info.value.quantity == 'df'
        assert exc_info.value.actual == 0

    def test_zero_column_total(self):
        table = ContingencyTable.from_counts([[0, 3], [0, 5]], columns=['a', 'b'])
        with pytest.raises(InsufficientDataError) as exc_info:
            chisq_test(table)
        assert exc_info.value.quantity == 'margin_total'
        assert "'a'" in str(exc_info.value)

    def test_numeric_sample(self, two_group_sample):
        with pytest.raises(WrongValueTypeError):
            chisq_test(two_group_sample)

    def test_unsupported_input(self):
        with pytest.raises(ValidationError, match="x: expected"):
            chisq_test([[1, 2], [3, 4]])

    def test_broken_reference(self, uniform_table):
        with pytest.raises(NumericalError, match="Chi-squared CDF"):
            chisq_test(uniform_table, reference=BrokenReference())


class TestRunner:

    def test_run(self, smoker_sample):
        table = ContingencyTable.from_sample(smoker_sample)
        via_runner = ChiSquareTest().run(table)
        via_function = chisq_test(table)
        assert via_runner.statistic == pytest.approx(via_function.statistic)
        assert via_runner.p_value == pytest.approx(via_function.p_value)

    def test_repeated_runs_independent(self, dependent_table):
        runner = ChiSquareTest()
        first = runner.run(dependent_table, significance_level=0.05)
        second = runner.run(dependent_table, significance_level=-1)
        assert first.rejects_h0 is True
        assert second.rejects_h0 is None
        assert first.statistic == second.statistic

    def test_design_input(self, uniform_table):
        design = ChisqDesign.for_table(uniform_table, data_name="answer by group")
        result = chisq_test(design)
        assert result.data_name == "answer by group"
        assert design.df == 1

    def test_designs_compare_by_identity(self, uniform_table):
        first = ChisqDesign.for_table(uniform_table)
        second = ChisqDesign.for_table(uniform_table)
        assert first == first
        assert first != second
        assert len({first, second}) == 2


class TestOutput:

    def test_solution_fields(self, uniform_table):
        result = chisq_test(uniform_table)
        assert isinstance(result, HTestSolution)
        assert result.method == "Pearson's Chi-squared test"
        assert result.statistic_name == "X-squared"
        assert result.parameter == {'df': 1.0}
        assert result.rows == ['yes', 'no']
        assert result.columns == ['g1', 'g2']
        assert result.backend_name == 'scipy'

    def test_metadata(self, smoker_sample):
        result = chisq_test(smoker_sample)
        assert result.info['test_type'] == 'chisq_independence'
        assert result.info['shape'] == (2, 2)
        assert result.info['total'] == 40
        assert result.data_name == "value by group"
        assert 'statistic' in result.timing

    def test_summary(self, uniform_table):
        text = chisq_test(uniform_table, significance_level=0.05).summary()
        assert "Pearson's Chi-squared test" in text
        assert "data:  table" in text
        assert "X-squared = 0, df = 1, p-value = 1" in text
        assert "fails to be rejected" in text

    def test_summary_rejected(self, dependent_table):
        text = chisq_test(dependent_table).summary()
        assert "p-value = < 2.2e-16" in text
        assert "the two categorical variables are dependent" in text

    def test_summary_without_decision(self, dependent_table):
        text = chisq_test(dependent_table, significance_level=-1).summary()
        assert "significance level" not in text

    def test_repr(self, uniform_table):
        assert "X-squared=0" in repr(chisq_test(uniform_table))
