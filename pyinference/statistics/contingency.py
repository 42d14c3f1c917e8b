"""
ContingencyTable: cross-tabulated counts of two categorical variables.

Pure read-side aggregation. The Chi-square test consumes it; no test logic
lives here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyinference.core.exceptions import DimensionError, ValidationError, WrongValueTypeError
from pyinference.core.validation import (
    check_count_matrix,
    check_consistent_length,
    check_label,
)
from pyinference.statistics.observation import ValueKind
from pyinference.statistics.sample import Sample


def _unique_in_order(labels: Sequence[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(labels))


@dataclass(frozen=True, eq=False)
class ContingencyTable:
    """
    Counts for every (row label, column label) pair.

    Rows and columns keep the order in which labels were first seen (or
    the order given). Pairs that never occur count as 0.
    Two tables are equal when their labels and counts match; equal tables
    hash alike.

    Construct via factory classmethods, not directly:
        ContingencyTable.from_sample(sample)
        ContingencyTable.from_labels(row_labels, column_labels)
        ContingencyTable.from_counts(counts, rows=..., columns=...)
    """
    _rows: tuple[str, ...]
    _columns: tuple[str, ...]
    _counts: NDArray[np.int64]

    # === Construction ===

    @classmethod
    def from_sample(cls, sample: Sample) -> ContingencyTable:
        """
        Cross-tabulate a categorical sample: observed labels by group id.

        Rows are the categorical values, columns the group ids.

        Raises:
            NoObservationFoundError: If the sample is empty
            WrongValueTypeError: If the sample is numeric
        """
        if not sample.is_categorical():
            raise WrongValueTypeError(
                "contingency tables can only be built from categorical samples",
                expected=ValueKind.CATEGORICAL.value,
                actual=ValueKind.NUMERIC.value,
            )
        return cls.from_labels(
            [o.categorical_value for o in sample],
            [o.group_id for o in sample],
        )

    @classmethod
    def from_labels(
        cls,
        row_labels: Sequence[str],
        column_labels: Sequence[str],
    ) -> ContingencyTable:
        """
        Cross-tabulate two parallel categorical variables.

        Args:
            row_labels: Value of the row variable for each individual
            column_labels: Value of the column variable for each individual

        Raises:
            DimensionError: If the sequences differ in length
            ValidationError: If a label is not a non-empty string
        """
        row_labels = [check_label(r, "row_labels") for r in row_labels]
        column_labels = [check_label(c, "column_labels") for c in column_labels]
        check_consistent_length(
            row_labels, column_labels, names=("row_labels", "column_labels")
        )

        rows = _unique_in_order(row_labels)
        columns = _unique_in_order(column_labels)
        row_index = {r: i for i, r in enumerate(rows)}
        col_index = {c: j for j, c in enumerate(columns)}

        counts = np.zeros((len(rows), len(columns)), dtype=np.int64)
        for r, c in zip(row_labels, column_labels):
            counts[row_index[r], col_index[c]] += 1

        return cls(_rows=rows, _columns=columns, _counts=counts)

    @classmethod
    def from_counts(
        cls,
        counts: ArrayLike | Mapping[str, Mapping[str, Any]],
        *,
        rows: Sequence[str] | None = None,
        columns: Sequence[str] | None = None,
    ) -> ContingencyTable:
        """
        Build from counts already tabulated.

        Args:
            counts: 2D array-like (rows x columns), or a nested mapping
                {row: {column: count}}. Pairs absent from a mapping count 0.
            rows: Row labels. Defaults to '0', '1', ... for arrays and to
                the mapping's keys (in order) for mappings.
            columns: Column labels, defaulted the same way.

        Raises:
            DimensionError: If labels don't match the count matrix shape
            ValidationError: If counts are negative, fractional or non-finite,
                or labels are duplicated
        """
        if isinstance(counts, Mapping):
            if rows is None:
                rows = list(counts.keys())
            if columns is None:
                columns = list(_unique_in_order(
                    [c for row in counts.values() for c in row.keys()]
                ))
            matrix = [
                [counts.get(r, {}).get(c, 0) for c in columns] for r in rows
            ]
        else:
            matrix = counts

        arr = check_count_matrix(matrix, "counts")
        n_rows, n_cols = arr.shape

        rows = tuple(str(i) for i in range(n_rows)) if rows is None else tuple(rows)
        columns = tuple(str(j) for j in range(n_cols)) if columns is None else tuple(columns)
        for label in rows:
            check_label(label, "rows")
        for label in columns:
            check_label(label, "columns")

        if len(rows) != n_rows or len(columns) != n_cols:
            raise DimensionError(
                f"counts: shape {arr.shape} doesn't match "
                f"{len(rows)} rows x {len(columns)} columns"
            )
        if len(set(rows)) != len(rows):
            raise ValidationError(f"rows: duplicated labels in {list(rows)}")
        if len(set(columns)) != len(columns):
            raise ValidationError(f"columns: duplicated labels in {list(columns)}")

        return cls(_rows=rows, _columns=columns, _counts=arr)

    # === Access ===

    def rows(self) -> list[str]:
        return list(self._rows)

    def columns(self) -> list[str]:
        return list(self._columns)

    @property
    def shape(self) -> tuple[int, int]:
        return (len(self._rows), len(self._columns))

    def _row_index(self, row: str) -> int:
        try:
            return self._rows.index(row)
        except ValueError:
            raise ValidationError(
                f"row: {row!r} not in table rows {list(self._rows)}"
            ) from None

    def _column_index(self, column: str) -> int:
        try:
            return self._columns.index(column)
        except ValueError:
            raise ValidationError(
                f"column: {column!r} not in table columns {list(self._columns)}"
            ) from None

    def get(self, row: str, column: str) -> int:
        """Count for (row, column)."""
        return int(self._counts[self._row_index(row), self._column_index(column)])

    def row_total(self, row: str) -> int:
        return int(self._counts[self._row_index(row)].sum())

    def column_total(self, column: str) -> int:
        return int(self._counts[:, self._column_index(column)].sum())

    def total(self) -> int:
        return int(self._counts.sum())

    def to_array(self) -> NDArray[np.int64]:
        """Copy of the count matrix, rows x columns."""
        return self._counts.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContingencyTable):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._columns == other._columns
            and np.array_equal(self._counts, other._counts)
        )

    def __hash__(self) -> int:
        return hash((self._rows, self._columns, self._counts.tobytes()))

    def __repr__(self) -> str:
        return (
            f"ContingencyTable(rows={list(self._rows)}, "
            f"columns={list(self._columns)}, total={self.total()})"
        )
