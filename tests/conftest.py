"""Shared test fixtures for all test modules."""

from collections.abc import Callable, Iterator

import pytest

from metricfilter.adapters.registry.in_memory import (
    InMemoryMetricsRegistry,
    default_registry,
)
from metricfilter.adapters.sinks.in_memory import InMemoryMetricsSink
from metricfilter.core.models import MetricName


@pytest.fixture
def registry() -> Iterator[InMemoryMetricsRegistry]:
    """Provide the process default registry, emptied before and after the test."""
    reg = default_registry()
    reg.clear()
    yield reg
    reg.clear()


@pytest.fixture
def isolated_registry() -> InMemoryMetricsRegistry:
    """Provide a fresh registry that is not the process default."""
    return InMemoryMetricsRegistry()


@pytest.fixture
def sink() -> InMemoryMetricsSink:
    """Provide an empty in-memory sink."""
    return InMemoryMetricsSink()


@pytest.fixture
def metric_name() -> Callable[..., MetricName]:
    """Factory fixture for MetricName with group/type/scope defaults.

    Usage:
        def test_something(metric_name):
            name = metric_name("foobar.count")
    """

    def _name(
        name: str,
        group: str = "group",
        type: str = "type",
        scope: str | None = "scope",
    ) -> MetricName:
        return MetricName(group, type, name, scope, "mBeanName")

    return _name
