"""In-memory metrics registry."""

import threading
from collections.abc import Callable
from typing import Any, TypeVar

from metricfilter.core.metrics import Counter, Gauge, Histogram, Meter, Metric, Timer
from metricfilter.core.models import MetricName

M = TypeVar("M", bound=Metric)


class InMemoryMetricsRegistry:
    """In-memory implementation of MetricsRegistryPort.

    Holds metrics in a dict guarded by a lock, so the host application can
    register metrics while a reporter iterates and evicts them.
    """

    def __init__(self) -> None:
        self._metrics: dict[MetricName, Metric] = {}
        self._lock = threading.Lock()

    def add(self, name: MetricName, metric: M) -> M:
        """Register a metric under name.

        Returns:
            The metric already registered under name if there is one,
            otherwise the metric passed in.
        """
        with self._lock:
            existing = self._metrics.setdefault(name, metric)
        return existing  # type: ignore[return-value]

    def new_gauge(self, name: MetricName, callback: Callable[[], Any]) -> Gauge:
        return self.add(name, Gauge(callback))

    def new_counter(self, name: MetricName) -> Counter:
        return self.add(name, Counter())

    def new_meter(self, name: MetricName) -> Meter:
        return self.add(name, Meter())

    def new_histogram(self, name: MetricName) -> Histogram:
        return self.add(name, Histogram())

    def new_timer(self, name: MetricName) -> Timer:
        return self.add(name, Timer())

    def get(self, name: MetricName) -> Metric | None:
        with self._lock:
            return self._metrics.get(name)

    def remove_metric(self, name: MetricName) -> None:
        """Remove the metric registered under name. Unknown names are ignored."""
        with self._lock:
            self._metrics.pop(name, None)

    def all_metrics(self) -> dict[MetricName, Metric]:
        """Return a snapshot of all registered metrics."""
        with self._lock:
            return dict(self._metrics)

    def clear(self) -> None:
        with self._lock:
            self._metrics.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._metrics

    def __len__(self) -> int:
        with self._lock:
            return len(self._metrics)


_default_registry = InMemoryMetricsRegistry()


def default_registry() -> InMemoryMetricsRegistry:
    """Return the process-wide registry."""
    return _default_registry
