"""metricfilter - decide which registered metrics get reported.

Example:
    ```python
    from metricfilter import MetricFilter, MetricName, default_registry

    registry = default_registry()
    name = MetricName("kafka.log", "Log", "Size", "topic.0")
    gauge = registry.new_gauge(name, lambda: log.size)

    MetricFilter(r"kafka\\.network\\..*").matches(name, gauge)
    ```
"""

from metricfilter.adapters.registry import InMemoryMetricsRegistry, default_registry
from metricfilter.adapters.reporter import FilteredMetricsReporter, metric_samples
from metricfilter.config import ReporterConfig
from metricfilter.core.encoding.graphite import encode_graphite
from metricfilter.core.errors import InvalidGaugeValueError, NoSuchElementError
from metricfilter.core.filter import MetricFilter, read_gauge
from metricfilter.core.metrics import Counter, Gauge, Histogram, Meter, Metric, Timer
from metricfilter.core.models import (
    FilterOutcome,
    GaugeReading,
    MetricName,
    MetricSample,
    ReadStatus,
    ValueKind,
)
from metricfilter.core.ports import MetricsRegistryPort, MetricsSinkPort
from metricfilter.core.values import classify_value, is_numeric

__all__ = [
    "Counter",
    "FilterOutcome",
    "FilteredMetricsReporter",
    "Gauge",
    "GaugeReading",
    "Histogram",
    "InMemoryMetricsRegistry",
    "InMemoryMetricsSink",
    "InvalidGaugeValueError",
    "Meter",
    "Metric",
    "MetricFilter",
    "MetricName",
    "MetricSample",
    "MetricsRegistryPort",
    "MetricsSinkPort",
    "NoSuchElementError",
    "ReadStatus",
    "ReporterConfig",
    "Timer",
    "ValueKind",
    "classify_value",
    "default_registry",
    "encode_graphite",
    "is_numeric",
    "metric_samples",
    "read_gauge",
]
