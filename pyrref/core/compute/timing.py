"""
Wall-clock timing for backend runs.

Backends start a Timer before the column sweep, wrap each phase in a
named section and attach timer.result() to the Result they return.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Stopwatch with named, accumulating sections.

    Usage:
        timer = Timer()
        timer.start()
        for col in range(m):
            with timer.section('pivot_search'):
                row = find_pivot_row(A, col, start, eps)
            with timer.section('elimination'):
                eliminate_column(A, col, row)
        timer.stop()
        timer.result()
        # {'total_seconds': 0.05, 'pivot_search': 0.01, 'elimination': 0.04}

    A section entered once per column reports the sum over all columns.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section name, even if it raises."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - start
            )

    def result(self) -> dict[str, float]:
        """
        Seconds per section plus 'total_seconds' for the whole run.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
