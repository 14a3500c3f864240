"""Codecs for PostgreSQL range column text.

Covers timestamp ranges (``tstzrange``/``tsrange``) and ``numrange``. Parsing
delegates to ``Range.parse`` with a column-specific decoder; any failure is
re-raised once as a codec-specific error with the original attached.

Example:
    >>> r = parse_num_range("[1.5,99.9)")
    >>> r.contains(50.0)
    True
    >>> serialize_num_range(r)
    '[1.5,99.9)'
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as date_parser

from pgrange.errors import (
    DateRangeParseError,
    InvalidRangeElement,
    MissingBoundsError,
    NumRangeParseError,
    RangeError,
)
from pgrange.range import Range

logger = logging.getLogger(__name__)

_QUOTE = '"'
_POSITIVE_INFINITY = "Infinity"
_NEGATIVE_INFINITY = "-Infinity"


def _decode_timestamp(raw: str) -> datetime:
    """Decode one bound of a timestamp range, quoted or not."""
    text = raw.removeprefix(_QUOTE).removesuffix(_QUOTE)
    try:
        parsed = date_parser.parse(text)
        # Naive timestamps come from ``tsrange`` columns and are read as UTC
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        # Out-of-range offsets and instants only fail here
        return parsed.astimezone(timezone.utc)
    except (date_parser.ParserError, ValueError, OverflowError) as exc:
        raise InvalidRangeElement(f"Invalid date format: {text}", text) from exc


def _encode_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc).replace(tzinfo=None)
    return utc.isoformat(timespec="milliseconds") + "Z"


def _decode_number(raw: str) -> float:
    # float() allows digit separators, PostgreSQL numerics never contain them
    if "_" in raw:
        raise InvalidRangeElement(f"Invalid number format: {raw}", raw)
    try:
        parsed = float(raw)
    except ValueError as exc:
        raise InvalidRangeElement(f"Invalid number format: {raw}", raw) from exc

    if math.isnan(parsed):
        raise InvalidRangeElement(f"Invalid number format: {raw}", raw)
    return parsed


def _encode_number(value: Any) -> str:
    """Render a number the way PostgreSQL reads it back.

    Integral floats drop the trailing ``.0`` so ``[1,10)`` round-trips
    unchanged.
    """
    if isinstance(value, float):
        if math.isinf(value):
            return _POSITIVE_INFINITY if value > 0 else _NEGATIVE_INFINITY
        if value.is_integer():
            return str(int(value))
    return str(value)


def _require_bounds(rng: Range[Any], kind: str) -> None:
    if not rng.has_lower_bound or not rng.has_upper_bound:
        raise MissingBoundsError(
            "Both lower and upper bounds must be defined to serialize "
            f"PostgreSQL {kind} range"
        )


def parse_date_range(text: str) -> Range[datetime]:
    """Parse a PostgreSQL timestamp range literal.

    Accepts quoted or unquoted bounds in ISO-8601 or PostgreSQL's native
    ``YYYY-MM-DD HH:MM:SS+TZ`` form, e.g.
    ``["2025-07-13 18:26:00+00","2025-07-13 20:26:00+00")``. Bounds are
    returned as UTC-aware datetimes.

    Raises:
        DateRangeParseError: On a malformed range or an unparseable timestamp
    """
    try:
        return Range.parse(text, _decode_timestamp)
    except RangeError as exc:
        logger.debug("Rejected PostgreSQL date range %r: %s", text, exc)
        raise DateRangeParseError(
            f"Failed to parse PostgreSQL date range: {exc}", exc
        ) from exc


def serialize_date_range(rng: Range[datetime]) -> str:
    """Render ``rng`` as ``["<utc iso>","<utc iso>")`` with millisecond precision.

    Raises:
        MissingBoundsError: If either bound is missing, including the empty range
    """
    _require_bounds(rng, "date")
    open_bracket, close_bracket = rng.bounds.brackets()
    lower = _encode_timestamp(rng.lower)  # type: ignore[arg-type]
    upper = _encode_timestamp(rng.upper)  # type: ignore[arg-type]
    return f'{open_bracket}"{lower}","{upper}"{close_bracket}'


def parse_num_range(text: str) -> Range[float]:
    """Parse a PostgreSQL ``numrange`` literal such as ``(0.5,99.9]``.

    Raises:
        NumRangeParseError: On a malformed range or a non-numeric bound
    """
    try:
        return Range.parse(text, _decode_number)
    except RangeError as exc:
        logger.debug("Rejected PostgreSQL number range %r: %s", text, exc)
        raise NumRangeParseError(
            f"Failed to parse PostgreSQL number range: {exc}", exc
        ) from exc


def serialize_num_range(rng: Range[float]) -> str:
    """Render ``rng`` as an unquoted ``numrange`` literal.

    Raises:
        MissingBoundsError: If either bound is missing, including the empty range
    """
    _require_bounds(rng, "number")
    return Range.serialize(rng, _encode_number)
