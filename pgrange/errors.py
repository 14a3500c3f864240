"""Exceptions raised while parsing and serializing ranges.

Everything derives from ValueError so callers catching the builtin keep
working.
"""


class RangeError(ValueError):
    """Base class for range parse and serialize failures."""


class InvalidRangeFormat(RangeError):
    """Text does not match ``empty`` or ``<bracket>value,value<bracket>``."""

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text: str = text


class InvalidRangeElement(RangeError):
    """A single bound's raw text could not be decoded."""

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text: str = text


class MissingBoundsError(RangeError):
    """A codec was asked to render a range lacking one or both bounds."""


class PostgresRangeParseError(RangeError):
    """A PostgreSQL range literal could not be parsed.

    The underlying failure is kept on ``cause`` (and as ``__cause__``).
    """

    def __init__(self, message: str, cause: RangeError):
        super().__init__(message)
        self.cause: RangeError = cause


class DateRangeParseError(PostgresRangeParseError):
    pass


class NumRangeParseError(PostgresRangeParseError):
    pass
