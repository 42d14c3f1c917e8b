"""
Solver dispatch for the Chi-square test of independence.

Public API:
    chisq_test(table_or_sample, ...) -> HTestSolution
    ChiSquareTest(reference).run(table, ...) -> HTestSolution

Conducted between two categorical variables:

    H0: the variables are independent; the value of one does not depend
        on the value of the other
    H1: they are dependent
"""

from __future__ import annotations

import logging

import numpy as np

from pyinference.core.compute.reference import get_reference, upper_tail
from pyinference.core.compute.timing import Timer
from pyinference.core.defaults import DEFAULT_CHISQ_SIGNIFICANCE, SMALL_EXPECTED_COUNT
from pyinference.core.exceptions import ValidationError
from pyinference.core.protocols import ReferenceDistribution
from pyinference.core.result import Result
from pyinference.core.validation import check_significance_level
from pyinference.hypothesis._common import HTestParams
from pyinference.hypothesis.design import ChisqDesign
from pyinference.hypothesis.solution import HTestSolution
from pyinference.statistics.contingency import ContingencyTable
from pyinference.statistics.sample import Sample

logger = logging.getLogger(__name__)


def chisq_test(
    x: ContingencyTable | Sample | ChisqDesign,
    *,
    significance_level: float = DEFAULT_CHISQ_SIGNIFICANCE,
    reference: ReferenceDistribution | None = None,
) -> HTestSolution:
    """
    Pearson's Chi-squared test of independence.

    Parameters
    ----------
    x : ContingencyTable, Sample or ChisqDesign
        Counts to test. A categorical Sample is cross-tabulated first
        (observed labels by group id).
    significance_level : float
        Threshold for rejecting H0. Values <= 0 disable the decision.
        Default DEFAULT_CHISQ_SIGNIFICANCE (0.0001).
    reference : ReferenceDistribution or None
        Chi-squared evaluator. Default scipy.

    Returns
    -------
    HTestSolution
        Statistic, df, p_value, decision, and extras (observed, expected,
        residuals).

    Raises
    ------
    InsufficientDataError
        Fewer than 2 rows or columns, or a row/column total of 0.
    WrongValueTypeError
        A numeric Sample was given.
    """
    if isinstance(x, ChisqDesign):
        design = x
    elif isinstance(x, ContingencyTable):
        design = ChisqDesign.for_table(x)
    elif isinstance(x, Sample):
        design = ChisqDesign.for_sample(x)
    else:
        raise ValidationError(
            f"x: expected ContingencyTable, Sample or ChisqDesign, "
            f"got {type(x).__name__}"
        )

    return _solve(design, significance_level, get_reference(reference))


class ChiSquareTest:
    """
    Reusable Chi-square test runner bound to one reference evaluator.

    Every run() returns a new HTestSolution; nothing is stored between runs.

    Examples:
        >>> test = ChiSquareTest()
        >>> result = test.run(table, significance_level=0.05)
        >>> result.rejects_h0
    """

    def __init__(self, reference: ReferenceDistribution | None = None):
        self._reference = get_reference(reference)

    @property
    def reference(self) -> ReferenceDistribution:
        return self._reference

    def run(
        self,
        table: ContingencyTable,
        significance_level: float = DEFAULT_CHISQ_SIGNIFICANCE,
    ) -> HTestSolution:
        """Run the test on a contingency table; see chisq_test()."""
        return _solve(ChisqDesign.for_table(table), significance_level, self._reference)


def _solve(
    design: ChisqDesign,
    significance_level: float,
    reference: ReferenceDistribution,
) -> HTestSolution:
    """Chi-squared statistic over every cell, then its upper-tail probability."""
    significance_level = check_significance_level(significance_level)

    warnings_list: list[str] = []

    with Timer() as timer:
        with timer.section('statistic'):
            observed = design.observed
            # Expected counts: E[i,j] = row_total[i] * column_total[j] / total
            expected = np.outer(design.row_totals, design.column_totals) / design.total
            chisq = float(np.sum((observed - expected) ** 2 / expected))
            residuals = (observed - expected) / np.sqrt(expected)

        df = float(design.df)

        if np.any(expected < SMALL_EXPECTED_COUNT):
            warnings_list.append("Chi-squared approximation may be incorrect")

        with timer.section('p_value'):
            p_value = upper_tail(reference.chi2_cdf(df, chisq), 'Chi-squared')

    logger.debug("Chi-square: X-squared = %.6g, df = %g, p = %.6g", chisq, df, p_value)

    params = HTestParams(
        statistic=chisq,
        statistic_name="X-squared",
        parameter={"df": df},
        p_value=p_value,
        significance_level=significance_level,
        method="Pearson's Chi-squared test",
        data_name=design.data_name,
        extras={
            "observed": observed,
            "expected": expected,
            "residuals": residuals,
            "rows": design.table.rows(),
            "columns": design.table.columns(),
        },
    )

    result = Result(
        params=params,
        info={
            'test_type': 'chisq_independence',
            'shape': design.table.shape,
            'total': design.total,
        },
        timing=timer.result(),
        backend_name=reference.name,
        warnings=tuple(warnings_list),
    )

    return HTestSolution(_result=result)
