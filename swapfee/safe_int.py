"""Safe integer wrapper for fee arithmetic on token amounts.

Token amounts are arbitrary-precision integers (18-decimal assets routinely
exceed 2^64), so fee math never goes through floats. SafeInt keeps the
arithmetic natural while refusing results that cannot be a token amount:
- Subtraction underflow raises Underflow

Usage pattern:
    from swapfee.safe_int import S

    fee = (S(amount) * bps) // BPS_DENOMINATOR
    remainder = S(amount) - fee
    return remainder.value
"""

from __future__ import annotations

import re

_DECIMAL_DIGITS = re.compile(r"[0-9]+")


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""


class Underflow(SafeIntError):
    """Subtraction would produce negative result."""


class SafeInt:
    """Non-negative integer with checked arithmetic.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt (bool is rejected)
            Underflow: If value is negative
        """
        if isinstance(value, SafeInt):
            self._value = value._value
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")
        if value < 0:
            raise Underflow(f"Negative value cannot be a token amount: {value}")
        self._value = value

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division, truncating toward zero for non-negative operands."""
        return SafeInt(self._value // _extract_value(other))

    @classmethod
    def from_str(cls, s: str) -> SafeInt:
        """Parse a SafeInt from a string of ASCII decimal digits.

        Signs, whitespace, underscores and non-ASCII digits are rejected,
        unlike int().

        Raises:
            ValueError: If the string is not a plain decimal integer
        """
        if not _DECIMAL_DIGITS.fullmatch(s):
            raise ValueError(f"Not a decimal integer string: {s!r}")
        return cls(int(s))


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
