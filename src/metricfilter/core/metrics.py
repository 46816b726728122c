"""Metric kinds held by a registry.

Only Gauge computes its value on demand; the other kinds accumulate state
as the host application updates them.
"""

import threading
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import Any


class Metric:
    """Base class for everything a registry can hold."""


class Gauge(Metric):
    """A metric whose value is computed by a callback on every read.

    Example:
        ```python
        queue_size = Gauge(lambda: len(queue))
        queue_size.value()
        ```
    """

    def __init__(self, callback: Callable[[], Any]) -> None:
        self._callback = callback

    def value(self) -> Any:
        """Invoke the callback and return whatever it produces.

        Exceptions raised by the callback propagate unchanged.
        """
        return self._callback()


class Counter(Metric):
    """A value that is incremented and decremented."""

    def __init__(self) -> None:
        self._count = 0
        self._lock = threading.Lock()

    def inc(self, n: int = 1) -> None:
        with self._lock:
            self._count += n

    def dec(self, n: int = 1) -> None:
        with self._lock:
            self._count -= n

    @property
    def count(self) -> int:
        return self._count


class Meter(Metric):
    """Counts events and the mean rate at which they occur."""

    def __init__(self) -> None:
        self._count = 0
        self._start = time.monotonic()
        self._lock = threading.Lock()

    def mark(self, n: int = 1) -> None:
        """Record n events."""
        with self._lock:
            self._count += n

    @property
    def count(self) -> int:
        return self._count

    @property
    def mean_rate(self) -> float:
        """Events per second since the meter was created."""
        elapsed = time.monotonic() - self._start
        if self._count == 0 or elapsed <= 0:
            return 0.0
        return self._count / elapsed


class Histogram(Metric):
    """Tracks count, min, max, mean and sum of observed values.

    Statistics are 0.0 while nothing has been observed.
    """

    def __init__(self) -> None:
        self._count = 0
        self._sum = 0.0
        self._min: float | None = None
        self._max: float | None = None
        self._lock = threading.Lock()

    def update(self, value: float) -> None:
        """Record an observation."""
        with self._lock:
            self._count += 1
            self._sum += value
            self._min = value if self._min is None else min(self._min, value)
            self._max = value if self._max is None else max(self._max, value)

    @property
    def count(self) -> int:
        return self._count

    @property
    def sum(self) -> float:
        return self._sum

    @property
    def min(self) -> float:
        return self._min if self._min is not None else 0.0

    @property
    def max(self) -> float:
        return self._max if self._max is not None else 0.0

    @property
    def mean(self) -> float:
        if self._count == 0:
            return 0.0
        return self._sum / self._count


class Timer(Histogram):
    """A histogram of durations in seconds."""

    @contextmanager
    def time(self) -> Generator[None]:
        """Context manager that records the elapsed time of its block."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.update(time.perf_counter() - start)
