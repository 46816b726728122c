"""Reporting cycle that filters registered metrics into a sink.

Each cycle snapshots the registry, asks MetricFilter which metrics to keep,
converts the kept ones into MetricSample objects and writes them to a
MetricsSinkPort. A failing metric or sink write never aborts the cycle.
"""

import asyncio
import logging
import time
from decimal import Decimal

from metricfilter.config import ReporterConfig
from metricfilter.core.errors import InvalidGaugeValueError
from metricfilter.core.filter import MetricFilter
from metricfilter.core.metrics import Counter, Gauge, Histogram, Meter, Metric
from metricfilter.core.models import MetricName, MetricSample
from metricfilter.core.ports import MetricsRegistryPort, MetricsSinkPort
from metricfilter.core.values import is_numeric

logger = logging.getLogger(__name__)


def _gauge_value(name: MetricName, gauge: Gauge) -> float | int | Decimal:
    value = gauge.value()
    if not is_numeric(value):
        raise InvalidGaugeValueError(name.dotted_name, value)
    return value


def metric_samples(
    prefix: str,
    name: MetricName,
    metric: Metric,
    timestamp: float,
) -> list[MetricSample]:
    """Convert one metric into the samples reported for it.

    Args:
        prefix: Path prefix prepended to every sample name (may be empty).
        name: Identifier the metric is registered under.
        metric: The metric to convert.
        timestamp: Timestamp given to every sample.

    Returns:
        List of MetricSample named "<prefix>.<dotted name>.<field>".

    Raises:
        InvalidGaugeValueError: If a gauge no longer returns a number.
    """
    base = f"{prefix}.{name.dotted_name}" if prefix else name.dotted_name
    fields: list[tuple[str, float | int | Decimal]]

    if isinstance(metric, Gauge):
        fields = [("value", _gauge_value(name, metric))]
    elif isinstance(metric, Counter):
        fields = [("count", metric.count)]
    elif isinstance(metric, Meter):
        fields = [("count", metric.count), ("mean_rate", metric.mean_rate)]
    elif isinstance(metric, Histogram):
        # Timer is a Histogram of seconds
        fields = [
            ("count", metric.count),
            ("min", metric.min),
            ("max", metric.max),
            ("mean", metric.mean),
            ("sum", metric.sum),
        ]
    else:
        fields = []

    return [
        MetricSample(name=f"{base}.{field}", timestamp=timestamp, value=value)
        for field, value in fields
    ]


class FilteredMetricsReporter:
    """Periodically reports the metrics a MetricFilter accepts.

    Example:
        ```python
        config = ReporterConfig.from_properties(props)
        reporter = FilteredMetricsReporter.from_config(config, registry, sink)
        await reporter.run(config.polling_interval, stop_event)
        ```
    """

    def __init__(
        self,
        registry: MetricsRegistryPort,
        sink: MetricsSinkPort,
        metric_filter: MetricFilter,
        prefix: str = "kafka",
    ) -> None:
        """Initialize the reporter.

        Args:
            registry: Registry whose metrics are reported.
            sink: Destination for accepted samples.
            metric_filter: Predicate deciding which metrics are reported.
            prefix: Path prefix for every sample name.
        """
        self.registry = registry
        self.sink = sink
        self.metric_filter = metric_filter
        self.prefix = prefix

    @classmethod
    def from_config(
        cls,
        config: ReporterConfig,
        registry: MetricsRegistryPort,
        sink: MetricsSinkPort,
    ) -> "FilteredMetricsReporter":
        return cls(
            registry=registry,
            sink=sink,
            metric_filter=config.build_filter(registry),
            prefix=config.prefix,
        )

    async def report_once(self, timestamp: float | None = None) -> int:
        """Run one reporting cycle.

        Args:
            timestamp: Timestamp for the samples. Defaults to now.

        Returns:
            Number of samples written to the sink.
        """
        now = time.time() if timestamp is None else timestamp
        written = 0
        skipped = 0

        for name, metric in self.registry.all_metrics().items():
            if not self.metric_filter.matches(name, metric):
                skipped += 1
                continue
            try:
                samples = metric_samples(self.prefix, name, metric, now)
            except InvalidGaugeValueError as e:
                logger.warning("Skipping %s: %s", name.dotted_name, e)
                skipped += 1
                continue
            except Exception:
                logger.exception("Failed to read metric %s", name.dotted_name)
                skipped += 1
                continue

            for sample in samples:
                try:
                    await self.sink.write(sample)
                except Exception:
                    logger.exception("Failed to write sample %s", sample.name)
                    continue
                written += 1

        logger.debug("Reported %d samples, skipped %d metrics", written, skipped)
        return written

    async def run(self, interval: float, stop_event: asyncio.Event) -> None:
        """Report every interval seconds until stop_event is set."""
        while not stop_event.is_set():
            await self.report_once()
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=interval)
            except asyncio.TimeoutError:
                continue
