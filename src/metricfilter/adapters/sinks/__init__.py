"""Sink adapters implementing MetricsSinkPort."""

from metricfilter.adapters.sinks.in_memory import InMemoryMetricsSink

__all__ = ["InMemoryMetricsSink"]
