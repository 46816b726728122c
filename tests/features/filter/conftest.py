"""BDD step definitions for metric filtering features."""

from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from metricfilter.adapters.registry.in_memory import InMemoryMetricsRegistry
from metricfilter.core.errors import NoSuchElementError
from metricfilter.core.filter import MetricFilter
from metricfilter.core.metrics import Metric
from metricfilter.core.models import MetricName

_ERRORS: dict[str, type[Exception]] = {
    "NoSuchElementError": NoSuchElementError,
    "RuntimeError": RuntimeError,
}


@dataclass
class FilterScenarioContext:
    """Shared state between steps in a filter scenario."""

    registry: InMemoryMetricsRegistry = field(default_factory=InMemoryMetricsRegistry)
    metric_filter: MetricFilter | None = None
    name: MetricName | None = None
    metric: Metric | None = None
    result: bool | None = None


@pytest.fixture
def ctx() -> FilterScenarioContext:
    """Fresh scenario context for each test."""
    return FilterScenarioContext()


def _register_gauge(
    ctx: FilterScenarioContext, group: str, type: str, name: str, callback: Any
) -> None:
    ctx.name = MetricName(group, type, name, None, f"{group}:type={type},name={name}")
    ctx.metric = ctx.registry.new_gauge(ctx.name, callback)


# === Filter Steps ===
@given("a filter without pattern")
def step_filter_without_pattern(ctx: FilterScenarioContext) -> None:
    ctx.metric_filter = MetricFilter(registry=ctx.registry)


@given(parsers.parse('a filter with pattern "{pattern}"'))
def step_filter_with_pattern(ctx: FilterScenarioContext, pattern: str) -> None:
    ctx.metric_filter = MetricFilter(pattern, registry=ctx.registry)


# === Metric Steps ===
@given(parsers.parse('a counter named "{name}" in scope "{scope}"'))
def step_counter(ctx: FilterScenarioContext, name: str, scope: str) -> None:
    ctx.name = MetricName("group", "type", name, scope, "mBeanName")
    ctx.metric = ctx.registry.new_counter(ctx.name)


@given(parsers.parse('a gauge "{group}"/"{type}"/"{name}" returning text "{text}"'))
def step_gauge_text(
    ctx: FilterScenarioContext, group: str, type: str, name: str, text: str
) -> None:
    _register_gauge(ctx, group, type, name, lambda: text)


@given(parsers.parse('a gauge "{group}"/"{type}"/"{name}" returning integer {value:d}'))
def step_gauge_integer(
    ctx: FilterScenarioContext, group: str, type: str, name: str, value: int
) -> None:
    _register_gauge(ctx, group, type, name, lambda: value)


@given(parsers.parse('a gauge "{group}"/"{type}"/"{name}" returning float {value:g}'))
def step_gauge_float(
    ctx: FilterScenarioContext, group: str, type: str, name: str, value: float
) -> None:
    _register_gauge(ctx, group, type, name, lambda: value)


@given(parsers.parse('a gauge "{group}"/"{type}"/"{name}" returning nothing'))
def step_gauge_none(
    ctx: FilterScenarioContext, group: str, type: str, name: str
) -> None:
    _register_gauge(ctx, group, type, name, lambda: None)


@given(parsers.parse('a gauge "{group}"/"{type}"/"{name}" raising "{error}"'))
def step_gauge_raising(
    ctx: FilterScenarioContext, group: str, type: str, name: str, error: str
) -> None:
    def callback() -> Any:
        raise _ERRORS[error](f"{name} failed")

    _register_gauge(ctx, group, type, name, callback)


# === Evaluation Steps ===
@when("the filter evaluates the metric")
def step_evaluate(ctx: FilterScenarioContext) -> None:
    assert ctx.metric_filter is not None
    assert ctx.name is not None
    ctx.result = ctx.metric_filter.matches(ctx.name, ctx.metric)


@then("the metric is excluded")
def step_excluded(ctx: FilterScenarioContext) -> None:
    assert ctx.result is False


@then("the metric is included")
def step_included(ctx: FilterScenarioContext) -> None:
    assert ctx.result is True


@then("the metric is still registered")
def step_still_registered(ctx: FilterScenarioContext) -> None:
    assert ctx.name in ctx.registry


@then("the metric is no longer registered")
def step_not_registered(ctx: FilterScenarioContext) -> None:
    assert ctx.name not in ctx.registry
