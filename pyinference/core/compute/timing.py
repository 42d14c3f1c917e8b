"""
Execution timing for test runs.

A solver wraps one run in a Timer and marks its stages as sections; the
breakdown ends up in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Times one test run and its named stages.

    Usage:
        with Timer() as timer:
            with timer.section('statistic'):
                chisq = ...
            with timer.section('p_value'):
                p = ...
        timing = timer.result()
        # {'total_seconds': 0.0004, 'statistic': 0.0001, 'p_value': 0.0003}

    A run that raises leaves the timer unfinished; result() then refuses.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._started: float | None = None
        self._total: float | None = None

    def __enter__(self) -> 'Timer':
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self._total = time.perf_counter() - self._started

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time a named stage. Repeated names accumulate."""
        if self._started is None:
            raise RuntimeError(f"Timer.section({name!r}) used outside 'with Timer()'")
        start = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - start
            )

    def result(self) -> dict[str, float]:
        """
        Seconds for the whole run ('total_seconds') and for each section.

        Raises:
            RuntimeError: If the run has not completed
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before the timed run completed")
        return {'total_seconds': self._total, **self._sections}
