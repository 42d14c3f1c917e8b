"""
Observation: one labeled data point.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from pyinference.core.exceptions import ValidationError, WrongValueTypeError
from pyinference.core.validation import check_label, is_numeric_value


class ValueKind(str, Enum):
    """Kind of value an observation (and therefore a sample) holds."""
    NUMERIC = 'numeric'
    CATEGORICAL = 'categorical'


@dataclass(frozen=True)
class Observation:
    """
    A single data point: a numeric or categorical value tagged with the
    group (level of the explanatory variable) it belongs to.

    Attributes:
        value: float for numeric observations, str label for categorical
        group_id: Group label

    Examples:
        >>> Observation(12.5, 'control').is_numeric()
        True
        >>> Observation('smoker', 'male').categorical_value
        'smoker'
    """
    value: float | str
    group_id: str

    def __post_init__(self) -> None:
        check_label(self.group_id, "group_id")
        if is_numeric_value(self.value):
            value = float(self.value)
            if not math.isfinite(value):
                raise ValidationError(f"value: must be finite, got {value}")
            object.__setattr__(self, 'value', value)
        elif isinstance(self.value, str):
            check_label(self.value, "value")
        else:
            raise ValidationError(
                f"value: expected a real number or a str label, "
                f"got {type(self.value).__name__}"
            )

    @property
    def kind(self) -> ValueKind:
        return ValueKind.CATEGORICAL if isinstance(self.value, str) else ValueKind.NUMERIC

    def is_numeric(self) -> bool:
        return self.kind is ValueKind.NUMERIC

    def is_categorical(self) -> bool:
        return self.kind is ValueKind.CATEGORICAL

    @property
    def numeric_value(self) -> float:
        if not self.is_numeric():
            raise WrongValueTypeError(
                f"observation in group {self.group_id!r} is categorical "
                f"({self.value!r}), not numeric",
                expected=ValueKind.NUMERIC.value,
                actual=ValueKind.CATEGORICAL.value,
            )
        return self.value

    @property
    def categorical_value(self) -> str:
        if not self.is_categorical():
            raise WrongValueTypeError(
                f"observation in group {self.group_id!r} is numeric "
                f"({self.value!r}), not categorical",
                expected=ValueKind.CATEGORICAL.value,
                actual=ValueKind.NUMERIC.value,
            )
        return self.value
