"""In-memory sink for reported samples."""

from collections.abc import AsyncIterable

from metricfilter.core.models import MetricSample


class InMemoryMetricsSink:
    """In-memory implementation of MetricsSinkPort.

    Collects the samples of each reporting cycle until the host ships them.
    Hosts that send samples themselves call drain() after every cycle;
    scrape() leaves the collected samples in place.

    Args:
        max_samples: Upper bound on held samples. When reached, the oldest
            samples are dropped. None keeps everything.
    """

    def __init__(self, max_samples: int | None = None) -> None:
        if max_samples is not None and max_samples <= 0:
            raise ValueError(f"max_samples must be positive, got {max_samples}")
        self._samples: list[MetricSample] = []
        self._max_samples = max_samples

    async def write(self, sample: MetricSample) -> None:
        """Write a metric sample to the sink."""
        self._samples.append(sample)
        if self._max_samples is not None and len(self._samples) > self._max_samples:
            del self._samples[: len(self._samples) - self._max_samples]

    async def scrape(self) -> AsyncIterable[MetricSample]:
        """Scrape the samples currently held, oldest first."""
        for sample in list(self._samples):
            yield sample

    def drain(self) -> list[MetricSample]:
        """Return the samples currently held and empty the sink."""
        samples, self._samples = self._samples, []
        return samples

    def __len__(self) -> int:
        return len(self._samples)
