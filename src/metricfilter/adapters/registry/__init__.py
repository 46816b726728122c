"""Registry adapters implementing MetricsRegistryPort."""

from metricfilter.adapters.registry.in_memory import (
    InMemoryMetricsRegistry,
    default_registry,
)

__all__ = ["InMemoryMetricsRegistry", "default_registry"]
