"""Exceptions raised by the reconstruction engine."""


class ParseError(ValueError):
    """A store value could not be parsed as a decimal number."""

    pass


class SeriesParseError(ParseError):
    """
    A timestamped entry of a series holds a non-numeric value.

    Under the strict parse policy this rejects the reconstruction of the
    whole series for that metric.
    """

    def __init__(self, metric: str, key: str, value: str):
        self.metric = metric
        self.key = key
        self.value = value
        super().__init__(f"Non-numeric {metric} value {value!r} under key {key!r}")


class InvalidSeriesKeyError(ValueError):
    """The requested series key cannot address a series in the store."""

    pass


class UnknownSeriesKeyError(InvalidSeriesKeyError):
    """The series key is well formed but names no known country."""

    pass
