"""
Result envelope shared by every test in pyinference.

Each test defines its own parameter payload (AnovaParams, HTestParams);
Result wraps it with what every run reports: what was tested, which
reference evaluator produced the p-value, how long it took and what went
wrong without being fatal.
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterable, TypeVar

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable outcome of one test run.

    Attributes:
        params: Test-specific payload (statistic, df, p-value, ...)
        info: Run metadata; always carries 'test_type'
        timing: Seconds per stage plus 'total_seconds', or None if not timed
        backend_name: Name of the ReferenceDistribution that gave the p-value
        warnings: Non-fatal issues, e.g. small expected counts. Any iterable
            of strings is accepted and stored as a tuple.

    Examples:
        >>> result = Result(
        ...     params=AnovaParams(...),
        ...     info={'test_type': 'anova_oneway', 'n_groups': 3},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='scipy',
        ...     warnings=["group 'c' has a single observation"],
        ... )
        >>> result.test_type
        'anova_oneway'
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: Iterable[str] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'warnings', tuple(self.warnings))

    @property
    def test_type(self) -> str | None:
        return self.info.get('test_type')

    @property
    def total_seconds(self) -> float | None:
        return None if self.timing is None else self.timing.get('total_seconds')

    def has_warning(self, substring: str) -> bool:
        """True if any warning mentions substring."""
        return any(substring in w for w in self.warnings)
