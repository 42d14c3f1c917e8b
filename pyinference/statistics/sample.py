"""
Sample: an ordered collection of observations of one value kind.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pyinference.core.exceptions import (
    InsufficientDataError,
    MixedValueTypeError,
    NoObservationFoundError,
    WrongValueTypeError,
)
from pyinference.core.validation import check_consistent_length
from pyinference.statistics.observation import Observation, ValueKind

if TYPE_CHECKING:
    from pyinference.statistics.distribution import SampleDistribution


class Sample:
    """
    Ordered, single-kind collection of observations.

    The first observation added fixes the sample's value kind; every later
    observation must agree with it. Group ids are collected as observations
    arrive.

    A group_id of None in the query methods means "all observations", i.e.
    the total group.

    Samples are mutable while being filled. Once distributions or
    contingency tables have been derived from a sample, treat it as frozen:
    derived objects do not track later additions.

    Construction:
        Sample()                                  # then add()
        Sample(observations)
        Sample.from_arrays(values, groups)
    """

    def __init__(self, observations: Iterable[Observation] | None = None):
        self._observations: list[Observation] = []
        self._kind: ValueKind | None = None
        self._groups: dict[str, None] = {}
        if observations is not None:
            self.extend(observations)

    @classmethod
    def from_arrays(cls, values: Sequence[Any], groups: Sequence[str]) -> Sample:
        """
        Build a sample from parallel sequences of values and group ids.

        Args:
            values: Numeric values or categorical labels
            groups: Group id for each value

        Raises:
            DimensionError: If the sequences differ in length
            MixedValueTypeError: If values mix numbers and labels
        """
        values = list(values)
        groups = list(groups)
        check_consistent_length(values, groups, names=("values", "groups"))
        return cls(Observation(v, g) for v, g in zip(values, groups))

    # === Mutation ===

    def add(self, observation: Observation) -> None:
        """
        Append an observation.

        Raises:
            MixedValueTypeError: If its kind differs from the sample's kind.
                The sample is left unchanged.
        """
        kind = observation.kind
        if self._kind is None:
            self._kind = kind
        elif kind is not self._kind:
            raise MixedValueTypeError(
                f"sample should only contain {self._kind.value} values, "
                f"got {kind.value} value {observation.value!r}",
                expected=self._kind.value,
                actual=kind.value,
            )

        self._groups[observation.group_id] = None
        self._observations.append(observation)

    def extend(self, observations: Iterable[Observation]) -> None:
        """Add each observation in turn."""
        for obs in observations:
            self.add(obs)

    # === Kind ===

    @property
    def value_kind(self) -> ValueKind | None:
        """Value kind, or None if the sample is empty."""
        return self._kind

    def _require_kind(self) -> ValueKind:
        if self._kind is None:
            raise NoObservationFoundError("No observation is found in the sample")
        return self._kind

    def is_numeric(self) -> bool:
        """
        Raises:
            NoObservationFoundError: If the sample is empty
        """
        return self._require_kind() is ValueKind.NUMERIC

    def is_categorical(self) -> bool:
        """
        Raises:
            NoObservationFoundError: If the sample is empty
        """
        return self._require_kind() is ValueKind.CATEGORICAL

    # === Access ===

    @property
    def observations(self) -> tuple[Observation, ...]:
        return tuple(self._observations)

    def __len__(self) -> int:
        return len(self._observations)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self._observations)

    def __getitem__(self, index: int) -> Observation:
        return self._observations[index]

    def groups(self) -> list[str]:
        """Distinct group ids, sorted."""
        return sorted(self._groups)

    def in_group(self, group_id: str | None = None) -> list[Observation]:
        """Observations belonging to group_id (all of them if None)."""
        if group_id is None:
            return list(self._observations)
        return [o for o in self._observations if o.group_id == group_id]

    def count_by_group_id(self, group_id: str | None = None) -> int:
        """Number of observations in group_id (all of them if None)."""
        if group_id is None:
            return len(self._observations)
        return sum(1 for o in self._observations if o.group_id == group_id)

    def values(self, group_id: str | None = None) -> NDArray[np.floating[Any]]:
        """
        Numeric values in group_id as a float64 array.

        Raises:
            NoObservationFoundError: If the sample is empty
            WrongValueTypeError: If the sample is categorical
        """
        if not self.is_numeric():
            raise WrongValueTypeError(
                "values() can only be read from numeric samples",
                expected=ValueKind.NUMERIC.value,
                actual=ValueKind.CATEGORICAL.value,
            )
        return np.array(
            [o.numeric_value for o in self.in_group(group_id)], dtype=np.float64
        )

    def labels(self, group_id: str | None = None) -> list[str]:
        """
        Categorical labels in group_id.

        Raises:
            NoObservationFoundError: If the sample is empty
            WrongValueTypeError: If the sample is numeric
        """
        if not self.is_categorical():
            raise WrongValueTypeError(
                "labels() can only be read from categorical samples",
                expected=ValueKind.CATEGORICAL.value,
                actual=ValueKind.NUMERIC.value,
            )
        return [o.categorical_value for o in self.in_group(group_id)]

    # === Statistics ===

    def proportion(self, success_label: str, group_id: str | None = None) -> float:
        """
        Fraction of group_id whose label equals success_label.

        Raises:
            NoObservationFoundError: If the sample is empty
            WrongValueTypeError: If the sample is numeric
            InsufficientDataError: If group_id has no observations
        """
        if self.is_numeric():
            raise WrongValueTypeError(
                "proportion can only be calculated on categorical variables",
                expected=ValueKind.CATEGORICAL.value,
                actual=ValueKind.NUMERIC.value,
            )

        labels = self.labels(group_id)
        if not labels:
            raise InsufficientDataError(
                f"group {group_id!r} has no observations; proportion is undefined",
                quantity='observations',
                required=1,
                actual=0,
            )
        successes = sum(1 for label in labels if label == success_label)
        return successes / len(labels)

    def sample_distributions_by_group_id(
        self,
        success_label: str | None = None,
    ) -> dict[str, SampleDistribution]:
        """
        One distribution per group id, keyed by group id (sorted).

        Numeric samples give NumericDistribution values. Categorical samples
        give CategoricalDistribution values and need success_label.
        """
        from pyinference.statistics.distribution import sample_distribution

        return {
            group_id: sample_distribution(self, group_id, success_label=success_label)
            for group_id in self.groups()
        }

    def total_distribution(self, success_label: str | None = None) -> SampleDistribution:
        """Distribution over the whole sample (group_id None)."""
        from pyinference.statistics.distribution import sample_distribution

        return sample_distribution(self, None, success_label=success_label)

    def __repr__(self) -> str:
        kind = self._kind.value if self._kind is not None else 'empty'
        return f"Sample(n={len(self)}, kind={kind}, groups={self.groups()})"
