"""Port interfaces for registry and sink adapters.

These protocols define the contracts that adapters must implement.
The core domain depends only on these interfaces, not concrete implementations.
"""

from collections.abc import AsyncIterable, Mapping
from typing import Protocol, runtime_checkable

from metricfilter.core.metrics import Metric
from metricfilter.core.models import MetricName, MetricSample


@runtime_checkable
class MetricsRegistryPort(Protocol):
    """Port for the registry the reported metrics live in.

    Adapters implementing this protocol hold metrics by name and allow
    removal. Example: InMemoryMetricsRegistry.
    """

    def remove_metric(self, name: MetricName) -> None:
        """Remove the metric registered under name, if any."""
        ...

    def all_metrics(self) -> Mapping[MetricName, Metric]:
        """Return a snapshot of all registered metrics."""
        ...


@runtime_checkable
class MetricsSinkPort(Protocol):
    """Port for the destination of accepted metric samples.

    Example: InMemoryMetricsSink.
    """

    async def write(self, sample: MetricSample) -> None:
        """Write a metric sample to the sink."""
        ...

    def scrape(self) -> AsyncIterable[MetricSample]:
        """Scrape all samples currently held by the sink."""
        ...
