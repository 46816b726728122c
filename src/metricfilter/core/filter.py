"""Predicate deciding which metrics are reported.

MetricFilter drops the broker's own version gauge, metrics whose dotted name
fully matches an optional exclusion pattern, and gauges that cannot produce
a numeric value. Gauges whose data source has disappeared are evicted from
the registry so later cycles no longer probe them.
"""

import logging
import re
from typing import Any

from metricfilter.core.metrics import Gauge, Metric
from metricfilter.core.models import FilterOutcome, GaugeReading, MetricName, ReadStatus
from metricfilter.core.ports import MetricsRegistryPort
from metricfilter.core.values import is_numeric

logger = logging.getLogger(__name__)

# The broker registers its version string as a gauge under this name.
APP_INFO_GROUP = "kafka.common"
VERSION_NAME = "Version"

_UNSET: Any = object()


def read_gauge(gauge: Gauge) -> GaugeReading:
    """Read a gauge without letting its callback raise.

    LookupError (KeyError, IndexError, NoSuchElementError) and StopIteration
    mean the gauge's source is gone. Any other exception is a fault.

    Args:
        gauge: The gauge to probe.

    Returns:
        GaugeReading tagged OK, NOT_FOUND or FAULT.
    """
    try:
        return GaugeReading.ok(gauge.value())
    except (LookupError, StopIteration) as e:
        return GaugeReading.not_found(e)
    except Exception as e:
        return GaugeReading.fault(e)


class MetricFilter:
    """Decides whether a metric is included in the outgoing report.

    Example:
        ```python
        metric_filter = MetricFilter(r"kafka\\.log\\..*", registry=registry)
        accepted = {
            name: metric
            for name, metric in registry.all_metrics().items()
            if metric_filter.matches(name, metric)
        }
        ```
    """

    def __init__(
        self,
        pattern: str = _UNSET,
        registry: MetricsRegistryPort | None = None,
    ) -> None:
        """Initialize the filter.

        Args:
            pattern: Regular expression matched against the whole dotted
                name of a metric; matching metrics are excluded. Omit it to
                disable pattern exclusion.
            registry: Registry stale gauges are evicted from. Defaults to
                the process-wide default registry.

        Raises:
            TypeError: If pattern is passed explicitly as None.
            re.error: If pattern is not a valid regular expression.
        """
        if pattern is None:
            raise TypeError(
                "pattern must be a string; omit it to disable pattern exclusion"
            )
        self._pattern: re.Pattern[str] | None = (
            None if pattern is _UNSET else re.compile(pattern)
        )
        if registry is None:
            from metricfilter.adapters.registry.in_memory import default_registry

            registry = default_registry()
        self._registry = registry

    @property
    def pattern(self) -> re.Pattern[str] | None:
        return self._pattern

    def evaluate(self, name: MetricName, metric: Metric) -> FilterOutcome:
        """Decide what to do with a metric this cycle.

        Evaluation has no side effects apart from invoking a gauge's
        callback; eviction is left to the caller.

        Args:
            name: Identifier the metric is registered under.
            metric: The metric itself.

        Returns:
            FilterOutcome for the metric.
        """
        if name.group == APP_INFO_GROUP and name.name == VERSION_NAME:
            return FilterOutcome.EXCLUDE

        if self._pattern is not None and self._pattern.fullmatch(name.dotted_name):
            return FilterOutcome.EXCLUDE

        if isinstance(metric, Gauge):
            return self._evaluate_gauge(name, metric)

        return FilterOutcome.INCLUDE

    def _evaluate_gauge(self, name: MetricName, gauge: Gauge) -> FilterOutcome:
        reading = read_gauge(gauge)
        if reading.status is ReadStatus.NOT_FOUND:
            return FilterOutcome.EXCLUDE_AND_EVICT
        if reading.status is ReadStatus.FAULT:
            # Reported anyway; the reporter copes with a failing read.
            logger.debug(
                "Gauge %s raised %r, keeping it", name.dotted_name, reading.error
            )
            return FilterOutcome.INCLUDE
        if not is_numeric(reading.value):
            logger.debug(
                "Gauge %s has non-numeric value %r, skipping",
                name.dotted_name,
                reading.value,
            )
            return FilterOutcome.EXCLUDE
        return FilterOutcome.INCLUDE

    def matches(self, name: MetricName, metric: Metric) -> bool:
        """Return True if the metric should be reported.

        Gauges whose source is gone are removed from the registry before
        False is returned.
        """
        outcome = self.evaluate(name, metric)
        if outcome is FilterOutcome.EXCLUDE_AND_EVICT:
            logger.info("Removing gauge %s, its source is gone", name.dotted_name)
            self._registry.remove_metric(name)
        return outcome.included
