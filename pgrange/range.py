import operator as op
import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, overload

from pgrange.bounds import Bounds
from pgrange.errors import InvalidRangeFormat

T = TypeVar("T")
V = TypeVar("V")

EMPTY = "empty"

# Values start on a non-space so surrounding whitespace is left to the \s* runs
_RANGE_PATTERN = re.compile(r"([\[(])\s*(\S.*?)\s*,\s*(\S.*?)\s*([\])])")


@dataclass(frozen=True)
class Range(Generic[T]):
    """An interval over an ordered domain with per-edge inclusivity.

    ``None`` on either side means "no bound". A range with neither bound is
    the empty range. No ordering check is made between ``lower`` and
    ``upper``; the range stores exactly what it is given.

    Example:
        >>> r = Range(1, 10, Bounds.INCLUSIVE)
        >>> str(r)
        '[1,10]'
        >>> r.contains(10)
        True
    """

    lower: T | None
    upper: T | None
    bounds: Bounds = Bounds.EXCLUSIVE

    def __post_init__(self) -> None:
        if not isinstance(self.bounds, Bounds):
            object.__setattr__(self, "bounds", Bounds(self.bounds))

    @classmethod
    def empty(cls) -> "Range[Any]":
        return cls(None, None, Bounds.EXCLUSIVE)

    @property
    def is_empty(self) -> bool:
        return self.lower is None and self.upper is None

    @property
    def is_bounded(self) -> bool:
        return self.lower is not None and self.upper is not None

    @property
    def has_lower_bound(self) -> bool:
        return self.lower is not None

    @property
    def has_upper_bound(self) -> bool:
        return self.upper is not None

    @property
    def lower_inclusive(self) -> bool:
        return self.bounds.lower_inclusive

    @property
    def upper_inclusive(self) -> bool:
        return self.bounds.upper_inclusive

    @overload
    @classmethod
    def parse(cls, text: str) -> "Range[str]": ...

    @overload
    @classmethod
    def parse(cls, text: str, decode: Callable[[str], V]) -> "Range[V]": ...

    @classmethod
    def parse(cls, text: str, decode: Callable[[str], Any] = str) -> "Range[Any]":
        """Parse ``empty`` or ``<[|(>lower,upper<]|)>`` into a Range.

        Args:
            text: Range literal, e.g. ``"[1,5)"``
            decode: Converts each raw bound (whitespace already stripped) to
                a typed value. Called for the lower bound first.

        Raises:
            InvalidRangeFormat: If the text does not match the range grammar
            TypeError: If text is not a string

        Errors raised by ``decode`` propagate unchanged.
        """
        if not isinstance(text, str):
            raise TypeError(
                f"Range literal must be a str, got {type(text).__name__!r}: {text!r}"
            )
        if text == EMPTY:
            return cls(None, None, Bounds.EXCLUSIVE)

        match = _RANGE_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidRangeFormat(f"Invalid range format: {text}", text)

        open_bracket, raw_lower, raw_upper, close_bracket = match.groups()
        bounds = Bounds.from_brackets(open_bracket, close_bracket)

        lower = decode(raw_lower)
        upper = decode(raw_upper)
        return cls(lower, upper, bounds)

    @staticmethod
    def serialize(rng: "Range[Any]", encode: Callable[[Any], str] = str) -> str:
        """Render a range in the same grammar ``parse`` accepts.

        Raises:
            InvalidRangeFormat: If exactly one bound is missing, since the
                grammar has no literal for a half-bounded range
        """
        if rng.is_empty:
            return EMPTY
        if not rng.is_bounded:
            side = "upper" if rng.has_lower_bound else "lower"
            raise InvalidRangeFormat(
                f"Cannot serialize range without a {side} bound: {rng!r}",
                repr(rng),
            )

        open_bracket, close_bracket = rng.bounds.brackets()
        return f"{open_bracket}{encode(rng.lower)},{encode(rng.upper)}{close_bracket}"

    def _satisfies_lower(self, value: Any) -> bool:
        check = op.ge if self.lower_inclusive else op.gt
        return check(value, self.lower)

    def _satisfies_upper(self, value: Any) -> bool:
        check = op.le if self.upper_inclusive else op.lt
        return check(value, self.upper)

    def contains(self, value: T) -> bool:
        """True if ``value`` lies inside this range.

        Always False unless both bounds are present.
        """
        if not self.is_bounded:
            return False
        return self._satisfies_lower(value) and self._satisfies_upper(value)

    def contains_range(self, other: "Range[T]") -> bool:
        """True if both of ``other``'s edges pass this range's edge tests.

        Only this range's inclusivity is consulted; ``other.bounds`` is
        ignored, so ``(1,10)`` does not contain ``(1,5)``. Always False unless
        both ranges are bounded.
        """
        if not self.is_bounded or not other.is_bounded:
            return False
        return self._satisfies_lower(other.lower) and self._satisfies_upper(
            other.upper
        )

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        # Half-bounded ranges have no literal form
        if not self.is_empty and not self.is_bounded:
            return repr(self)
        return Range.serialize(self)
