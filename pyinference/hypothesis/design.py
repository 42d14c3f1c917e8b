"""
ChisqDesign: validated input for the Chi-square test of independence.

Immutable after construction; build it with the factory classmethods.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pyinference.core.exceptions import InsufficientDataError
from pyinference.statistics.contingency import ContingencyTable
from pyinference.statistics.sample import Sample


@dataclass(frozen=True, eq=False)
class ChisqDesign:
    """
    Design for the Chi-square test of independence.

    Guarantees at least a 2 x 2 table with no empty row or column, so every
    expected count is positive and df >= 1.

    Do not construct directly; use factory classmethods.
    """
    table: ContingencyTable
    observed: NDArray[np.floating]
    row_totals: NDArray[np.floating]
    column_totals: NDArray[np.floating]
    total: float
    data_name: str

    @classmethod
    def for_table(cls, table: ContingencyTable, *, data_name: str = "table") -> ChisqDesign:
        """
        Validate a contingency table for the test.

        Raises:
            InsufficientDataError: If the table has fewer than 2 rows or
                columns, or a row or column total of 0
        """
        n_rows, n_cols = table.shape
        if n_rows < 2 or n_cols < 2:
            raise InsufficientDataError(
                f"table: need at least 2 rows and 2 columns, got {n_rows} x {n_cols} "
                f"(df = {max(n_rows - 1, 0) * max(n_cols - 1, 0)})",
                quantity='df',
                required=1,
                actual=max(n_rows - 1, 0) * max(n_cols - 1, 0),
            )

        observed = table.to_array().astype(np.float64)
        row_totals = observed.sum(axis=1)
        column_totals = observed.sum(axis=0)

        empty_rows = [r for r, t in zip(table.rows(), row_totals) if t == 0]
        empty_cols = [c for c, t in zip(table.columns(), column_totals) if t == 0]
        if empty_rows or empty_cols:
            raise InsufficientDataError(
                f"table: rows {empty_rows} and columns {empty_cols} have zero "
                "totals; their expected counts would be 0",
                quantity='margin_total',
                required=1,
                actual=0,
            )

        return cls(
            table=table,
            observed=observed,
            row_totals=row_totals,
            column_totals=column_totals,
            total=float(observed.sum()),
            data_name=data_name,
        )

    @classmethod
    def for_sample(cls, sample: Sample) -> ChisqDesign:
        """
        Cross-tabulate a categorical sample (values by group) and validate it.

        Raises:
            NoObservationFoundError: If the sample is empty
            WrongValueTypeError: If the sample is numeric
            InsufficientDataError: As for for_table()
        """
        return cls.for_table(
            ContingencyTable.from_sample(sample), data_name="value by group"
        )

    @property
    def df(self) -> int:
        n_rows, n_cols = self.table.shape
        return (n_rows - 1) * (n_cols - 1)
