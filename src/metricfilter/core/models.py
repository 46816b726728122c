"""Core domain models for metric filtering."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class MetricName:
    """Structured identifier of a registered metric.

    Attributes:
        group: Metric group (e.g., kafka.server).
        type: Metric type within the group (e.g., BrokerTopicMetrics).
        name: Short metric name (e.g., MessagesInPerSec).
        scope: Optional scope (e.g., a topic or partition).
        mbean_name: Fully-qualified management identifier. Derived as
            "<group>:type=<type>[,scope=<scope>],name=<name>" when omitted.
    """

    group: str
    type: str
    name: str
    scope: str | None = None
    mbean_name: str | None = None

    def __post_init__(self) -> None:
        if self.mbean_name is None:
            object.__setattr__(self, "mbean_name", self._default_mbean_name())

    def _default_mbean_name(self) -> str:
        parts = [f"{self.group}:type={self.type}"]
        if self.scope is not None:
            parts.append(f"scope={self.scope}")
        parts.append(f"name={self.name}")
        return ",".join(parts)

    @property
    def dotted_name(self) -> str:
        """Return "<group>.<type>.<scope>.<name>", omitting an absent scope."""
        parts = [self.group, self.type]
        if self.scope is not None:
            parts.append(self.scope)
        parts.append(self.name)
        return ".".join(parts)


@dataclass(frozen=True)
class MetricSample:
    """A single reported measurement.

    Attributes:
        name: Dotted sample path (e.g., kafka.server.Broker.count).
        timestamp: Unix timestamp in seconds.
        value: The sample value. Integers and decimals are kept exact.
    """

    name: str
    timestamp: float
    value: float | int | Decimal


class ReadStatus(Enum):
    """How probing a gauge ended."""

    OK = "ok"
    NOT_FOUND = "not_found"
    FAULT = "fault"


@dataclass(frozen=True)
class GaugeReading:
    """Result of reading a gauge's current value.

    Attributes:
        status: Whether the read succeeded, found its source gone, or failed.
        value: The value returned by the gauge (only meaningful for OK).
        error: The exception raised by the gauge (NOT_FOUND and FAULT).
    """

    status: ReadStatus
    value: Any = None
    error: BaseException | None = None

    @classmethod
    def ok(cls, value: Any) -> "GaugeReading":
        return cls(ReadStatus.OK, value=value)

    @classmethod
    def not_found(cls, error: BaseException) -> "GaugeReading":
        return cls(ReadStatus.NOT_FOUND, error=error)

    @classmethod
    def fault(cls, error: BaseException) -> "GaugeReading":
        return cls(ReadStatus.FAULT, error=error)


class ValueKind(Enum):
    """Classification of a value returned by a gauge."""

    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    TEXT = "text"
    NONE = "none"
    OTHER = "other"


class FilterOutcome(Enum):
    """Decision taken for a metric in one reporting cycle.

    INCLUDE: report the metric.
    EXCLUDE: skip it this cycle and leave it registered.
    EXCLUDE_AND_EVICT: skip it and remove it from the registry.
    """

    INCLUDE = "include"
    EXCLUDE = "exclude"
    EXCLUDE_AND_EVICT = "exclude_and_evict"

    @property
    def included(self) -> bool:
        return self is FilterOutcome.INCLUDE
