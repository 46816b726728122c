"""Exceptions used across metricfilter."""


class NoSuchElementError(LookupError):
    """Raised by a gauge whose underlying data source no longer exists.

    Gauges raising this (or any other LookupError) are evicted from the
    registry by MetricFilter.
    """


class InvalidGaugeValueError(Exception):
    """Raised when a gauge value cannot be reported.

    An invalid value is e.g. None or a non-numeric value.
    """

    def __init__(self, dotted_name: str, value: object) -> None:
        super().__init__(f"Gauge {dotted_name} has invalid value {value!r}")
        self.dotted_name = dotted_name
        self.value = value
