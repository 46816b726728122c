"""Graphite plaintext encoder for metric samples."""

import numbers
from collections.abc import Iterable
from decimal import Decimal

from metricfilter.core.models import MetricSample


def _format_value(value: float | int | Decimal) -> str:
    # Integers and decimals are written exactly, whatever their size
    if isinstance(value, (numbers.Integral, Decimal)):
        return str(value)
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def encode_graphite(samples: Iterable[MetricSample]) -> str:
    """Encode samples to the Graphite plaintext protocol.

    Args:
        samples: An iterable of MetricSample objects.

    Returns:
        One "<name> <value> <timestamp>" line per sample, timestamps
        truncated to whole seconds. Empty string if no samples.
    """
    lines = [
        f"{sample.name} {_format_value(sample.value)} {int(sample.timestamp)}"
        for sample in samples
    ]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
