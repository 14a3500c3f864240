from .bounds import LOWER_BOUND_INCLUSIVE, UPPER_BOUND_INCLUSIVE, Bounds
from .errors import (
    DateRangeParseError,
    InvalidRangeElement,
    InvalidRangeFormat,
    MissingBoundsError,
    NumRangeParseError,
    PostgresRangeParseError,
    RangeError,
)
from .postgres import (
    parse_date_range,
    parse_num_range,
    serialize_date_range,
    serialize_num_range,
)
from .range import EMPTY, Range

__all__ = [
    "Range",
    "Bounds",
    "EMPTY",
    "LOWER_BOUND_INCLUSIVE",
    "UPPER_BOUND_INCLUSIVE",
    "parse_date_range",
    "serialize_date_range",
    "parse_num_range",
    "serialize_num_range",
    "RangeError",
    "InvalidRangeFormat",
    "InvalidRangeElement",
    "MissingBoundsError",
    "PostgresRangeParseError",
    "DateRangeParseError",
    "NumRangeParseError",
]
