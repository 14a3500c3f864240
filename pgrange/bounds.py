"""Boundary inclusivity flags for ranges.

A range carries two independent facts: whether its lower edge is inclusive
and whether its upper edge is inclusive. Both live in one small flag set.
"""

from enum import IntFlag

_OPEN_BRACKETS = {"[": True, "(": False}
_CLOSE_BRACKETS = {"]": True, ")": False}


class Bounds(IntFlag):
    EXCLUSIVE = 0
    LOWER_INCLUSIVE = 1
    UPPER_INCLUSIVE = 2
    INCLUSIVE = LOWER_INCLUSIVE | UPPER_INCLUSIVE

    @classmethod
    def from_brackets(cls, open: str, close: str) -> "Bounds":
        """Build flags from an opening and closing bracket character.

        Raises:
            ValueError: If either character is not a range bracket
        """
        if open not in _OPEN_BRACKETS:
            raise ValueError(f"Invalid opening bracket {open!r}, expected '[' or '('")
        if close not in _CLOSE_BRACKETS:
            raise ValueError(
                f"Invalid closing bracket {close!r}, expected ']' or ')'"
            )

        flags = cls.EXCLUSIVE
        if _OPEN_BRACKETS[open]:
            flags |= cls.LOWER_INCLUSIVE
        if _CLOSE_BRACKETS[close]:
            flags |= cls.UPPER_INCLUSIVE
        return flags

    @property
    def lower_inclusive(self) -> bool:
        return bool(self & Bounds.LOWER_INCLUSIVE)

    @property
    def upper_inclusive(self) -> bool:
        return bool(self & Bounds.UPPER_INCLUSIVE)

    def brackets(self) -> tuple[str, str]:
        """Return the (opening, closing) bracket characters for these flags."""
        return (
            "[" if self.lower_inclusive else "(",
            "]" if self.upper_inclusive else ")",
        )


LOWER_BOUND_INCLUSIVE = Bounds.LOWER_INCLUSIVE
UPPER_BOUND_INCLUSIVE = Bounds.UPPER_INCLUSIVE
