"""Classification of gauge values."""

import numbers
from decimal import Decimal
from typing import Any

from metricfilter.core.models import ValueKind

_NUMERIC_KINDS = frozenset({ValueKind.INTEGER, ValueKind.FLOAT, ValueKind.DECIMAL})


def classify_value(value: Any) -> ValueKind:
    """Classify a gauge value.

    Args:
        value: Whatever the gauge callback returned.

    Returns:
        ValueKind for the value. Booleans are OTHER even though bool
        subclasses int; a flag is not a measurement.
    """
    if value is None:
        return ValueKind.NONE
    if isinstance(value, bool):
        return ValueKind.OTHER
    if isinstance(value, numbers.Integral):
        return ValueKind.INTEGER
    if isinstance(value, numbers.Real):
        return ValueKind.FLOAT
    if isinstance(value, Decimal):
        return ValueKind.DECIMAL
    if isinstance(value, (str, bytes)):
        return ValueKind.TEXT
    return ValueKind.OTHER


def is_numeric(value: Any) -> bool:
    """Return True if the value can be reported as a number."""
    return classify_value(value) in _NUMERIC_KINDS
