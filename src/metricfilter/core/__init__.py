"""Core domain: models, metric kinds, the filter predicate and ports."""
