"""Tests for sink adapters."""

import pytest

from metricfilter.adapters.sinks import InMemoryMetricsSink
from metricfilter.core.models import MetricSample
from metricfilter.core.ports import MetricsSinkPort

pytestmark = [pytest.mark.sink, pytest.mark.tier(1)]


async def _scrape(sink: MetricsSinkPort) -> list[MetricSample]:
    return [sample async for sample in sink.scrape()]


def _samples(count: int) -> list[MetricSample]:
    return [
        MetricSample(name=f"kafka.m{i}.value", timestamp=1000.0 + i, value=i)
        for i in range(count)
    ]


class TestInMemoryMetricsSink:
    """Tests for InMemoryMetricsSink adapter."""

    def test_implements_sink_port(self) -> None:
        """InMemoryMetricsSink must satisfy MetricsSinkPort protocol."""
        assert isinstance(InMemoryMetricsSink(), MetricsSinkPort)

    async def test_write_and_scrape(self) -> None:
        sink = InMemoryMetricsSink()
        sample = MetricSample(name="kafka.a.b.count", timestamp=1000.0, value=1)

        await sink.write(sample)

        assert await _scrape(sink) == [sample]

    async def test_scrape_empty(self) -> None:
        assert await _scrape(InMemoryMetricsSink()) == []

    async def test_scrape_keeps_write_order_and_samples(self) -> None:
        """Scraping does not consume the held samples."""
        sink = InMemoryMetricsSink()
        samples = _samples(3)
        for sample in samples:
            await sink.write(sample)

        assert await _scrape(sink) == samples
        assert len(sink) == 3


class TestDrain:
    """Tests for InMemoryMetricsSink.drain()."""

    async def test_drain_returns_and_empties(self) -> None:
        sink = InMemoryMetricsSink()
        samples = _samples(2)
        for sample in samples:
            await sink.write(sample)

        assert sink.drain() == samples
        assert len(sink) == 0
        assert sink.drain() == []

    async def test_writes_after_drain_start_fresh(self) -> None:
        sink = InMemoryMetricsSink()
        first, second = _samples(2)
        await sink.write(first)
        sink.drain()
        await sink.write(second)

        assert await _scrape(sink) == [second]


class TestMaxSamples:
    """Tests for the max_samples bound."""

    async def test_drops_oldest_when_full(self) -> None:
        sink = InMemoryMetricsSink(max_samples=2)
        samples = _samples(3)
        for sample in samples:
            await sink.write(sample)

        assert await _scrape(sink) == samples[1:]

    async def test_within_bound_keeps_everything(self) -> None:
        sink = InMemoryMetricsSink(max_samples=10)
        samples = _samples(3)
        for sample in samples:
            await sink.write(sample)

        assert sink.drain() == samples

    @pytest.mark.parametrize("max_samples", [0, -1])
    def test_non_positive_bound_raises(self, max_samples: int) -> None:
        with pytest.raises(ValueError, match="max_samples must be positive"):
            InMemoryMetricsSink(max_samples=max_samples)
