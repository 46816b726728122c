"""Report a broker's metrics every few seconds, dropping stale partition gauges.

Run with:
    python examples/broker_reporter.py
"""

import asyncio
import logging
import random

from metricfilter import (
    FilteredMetricsReporter,
    InMemoryMetricsSink,
    MetricName,
    NoSuchElementError,
    ReporterConfig,
    default_registry,
    encode_graphite,
)

logger = logging.getLogger(__name__)

PROPERTIES = {
    "kafka.graphite.metrics.reporter.enabled": "true",
    "kafka.metrics.polling.interval.secs": "2",
    "kafka.graphite.metrics.group": "broker1",
    "kafka.graphite.metrics.exclude.regex": r"kafka\.network\..*",
}

# Partitions hosted by this broker; partition 1 moves away after a while.
log_end_offsets = {0: 0, 1: 0}


def _offset_gauge(partition: int):
    def read() -> int:
        if partition not in log_end_offsets:
            raise NoSuchElementError(f"partition {partition} is no longer hosted")
        return log_end_offsets[partition]

    return read


def register_metrics() -> None:
    registry = default_registry()
    registry.new_gauge(
        MetricName("kafka.common", "AppInfo", "Version"), lambda: "0.8.2.2"
    )
    for partition in log_end_offsets:
        registry.new_gauge(
            MetricName("kafka.log", "Log", "LogEndOffset", f"events.{partition}"),
            _offset_gauge(partition),
        )
    registry.new_meter(MetricName("kafka.network", "RequestMetrics", "RequestsPerSec"))
    registry.new_meter(
        MetricName("kafka.server", "BrokerTopicMetrics", "MessagesInPerSec")
    )


async def produce(stop: asyncio.Event) -> None:
    """Simulate traffic; drop partition 1 after three seconds."""
    registry = default_registry()
    messages_in = registry.new_meter(
        MetricName("kafka.server", "BrokerTopicMetrics", "MessagesInPerSec")
    )
    loop = asyncio.get_running_loop()
    started = loop.time()
    while not stop.is_set():
        for partition in list(log_end_offsets):
            batch = random.randint(1, 50)
            log_end_offsets[partition] += batch
            messages_in.mark(batch)
        if loop.time() - started > 3:
            log_end_offsets.pop(1, None)
        await asyncio.sleep(0.5)


async def main() -> None:
    logging.basicConfig(level=logging.INFO)
    config = ReporterConfig.from_properties(PROPERTIES)
    if not config.enabled:
        logger.info("Reporter disabled")
        return

    register_metrics()
    sink = InMemoryMetricsSink(max_samples=1000)
    reporter = FilteredMetricsReporter.from_config(config, default_registry(), sink)

    stop = asyncio.Event()
    tasks = [
        asyncio.create_task(produce(stop)),
        asyncio.create_task(reporter.run(config.polling_interval, stop)),
    ]
    await asyncio.sleep(7)
    stop.set()
    await asyncio.gather(*tasks)

    print(encode_graphite(sink.drain()), end="")


if __name__ == "__main__":
    asyncio.run(main())
