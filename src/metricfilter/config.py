"""Reporter settings read from the host plugin's properties."""

from collections.abc import Mapping
from dataclasses import dataclass

from metricfilter.core.filter import MetricFilter
from metricfilter.core.ports import MetricsRegistryPort

ENABLED_KEY = "kafka.graphite.metrics.reporter.enabled"
POLLING_INTERVAL_KEY = "kafka.metrics.polling.interval.secs"
PREFIX_KEY = "kafka.graphite.metrics.group"
EXCLUDE_REGEX_KEY = "kafka.graphite.metrics.exclude.regex"

_TRUE_VALUES = {"true", "yes", "1"}
_FALSE_VALUES = {"false", "no", "0"}


def _parse_bool(props: Mapping[str, str], key: str, default: bool) -> bool:
    raw = props.get(key)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{key} must be a boolean, got {raw!r}")


def _parse_positive_int(props: Mapping[str, str], key: str, default: int) -> int:
    raw = props.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class ReporterConfig:
    """Settings for the filtered metrics reporter.

    Attributes:
        enabled: Whether the reporter should run at all.
        polling_interval: Seconds between reporting cycles.
        prefix: Path prefix for every reported sample.
        exclude_regex: Pattern of dotted metric names to exclude, if any.
    """

    enabled: bool = False
    polling_interval: int = 10
    prefix: str = "kafka"
    exclude_regex: str | None = None

    @classmethod
    def from_properties(cls, props: Mapping[str, str]) -> "ReporterConfig":
        """Build a config from flat key/value properties.

        Missing or blank keys fall back to defaults.

        Raises:
            ValueError: If a value cannot be parsed; the message names the key.
        """
        exclude_regex = props.get(EXCLUDE_REGEX_KEY)
        if exclude_regex is not None and not exclude_regex.strip():
            exclude_regex = None
        return cls(
            enabled=_parse_bool(props, ENABLED_KEY, cls.enabled),
            polling_interval=_parse_positive_int(
                props, POLLING_INTERVAL_KEY, cls.polling_interval
            ),
            prefix=props.get(PREFIX_KEY, cls.prefix).strip(),
            exclude_regex=exclude_regex,
        )

    def build_filter(self, registry: MetricsRegistryPort) -> MetricFilter:
        """Create the MetricFilter these settings describe."""
        if self.exclude_regex is None:
            return MetricFilter(registry=registry)
        return MetricFilter(self.exclude_regex, registry=registry)
