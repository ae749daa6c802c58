"""Checked integer wrapper for fixed-point pool arithmetic.

The on-chain program keeps balances in u64 and widens to u128 for
intermediate products, failing the instruction on any overflow. This module
provides SafeInt, a lightweight wrapper that reproduces those semantics:
- Results above the width bound raise Overflow
- Subtraction below zero raises Underflow
- Division by zero raises DivisionByZero
- to_u64() narrows a wide intermediate back to balance width, or raises

All three errors derive from ArithmeticOverflow, so callers can treat them
as one failure kind.

Usage pattern:
    from hybridswap.safe_int import S

    def calculate(a: int, b: int, c: int) -> int:
        # Wrap at entry
        sa, sb, sc = S(a), S(b), S(c)

        # Natural arithmetic, checked at every step
        result = (sa * sb) // sc  # Raises if sc == 0 or sa * sb > u128
        remainder = sa - sb       # Raises if sb > sa

        # Narrow at exit
        return result.to_u64()
"""

from __future__ import annotations

from typing import ClassVar

from hybridswap.constants import U64_MAX, U128_MAX, U256_MAX
from hybridswap.errors import ArithmeticOverflow


class Overflow(ArithmeticOverflow):
    """Value exceeds the integer width bound."""

    pass


class Underflow(ArithmeticOverflow):
    """Subtraction would produce negative result."""

    pass


class DivisionByZero(ArithmeticOverflow):
    """Division by zero."""

    pass


class SafeInt:
    """Unsigned integer with checked arithmetic, bounded by u128.

    Every operation produces a new instance of the same class and validates
    it against the class bound. Mixing with plain ints is allowed; the plain
    operand is checked as part of the result.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    MAX: ClassVar[int] = U128_MAX

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt
            Underflow: If value is negative
            Overflow: If value exceeds the class bound
        """
        if isinstance(value, SafeInt):
            value = value._value
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{type(self).__name__} requires int, got {type(value).__name__}")
        if value < 0:
            raise Underflow(f"Negative value: {value}")
        if value > self.MAX:
            raise Overflow(f"Value exceeds {type(self).__name__} bound: {value}")
        self._value = value

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return type(self)(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return type(self)(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return type(self)(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return type(self)(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        """Multiply two values.

        Raises:
            Overflow: If the product exceeds the class bound
        """
        other_val = _extract_value(other)
        result = self._value * other_val
        if result > self.MAX:
            raise Overflow(
                f"Overflow: {self._value} * {other_val} exceeds {type(self).__name__} bound"
            )
        return type(self)(result)

    def __rmul__(self, other: int) -> SafeInt:
        return self.__mul__(other)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division, truncating toward zero.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return type(self)(self._value // other_val)

    def __rfloordiv__(self, other: int) -> SafeInt:
        if self._value == 0:
            raise DivisionByZero(f"Division by zero: {other} // 0")
        return type(self)(other // self._value)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def abs_diff(self, other: SafeInt | int) -> SafeInt:
        """Absolute difference |self - other|, never underflows."""
        other_val = _extract_value(other)
        return type(self)(abs(self._value - other_val))

    def saturating_sub(self, other: SafeInt | int) -> SafeInt:
        """Subtract, clamping result to zero instead of raising."""
        other_val = _extract_value(other)
        return type(self)(max(0, self._value - other_val))

    def to_u64(self) -> int:
        """Narrow to the u64 balance width.

        Raises:
            Overflow: If value exceeds 2^64-1
        """
        if self._value > U64_MAX:
            raise Overflow(f"Value exceeds u64 max: {self._value}")
        return self._value

    @classmethod
    def zero(cls) -> SafeInt:
        """Create a value of 0."""
        return cls(0)


class SafeInt256(SafeInt):
    """SafeInt bounded by u256, for ratio computations wider than the pool math."""

    __slots__ = ()

    MAX: ClassVar[int] = U256_MAX


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience aliases for concise code
S = SafeInt
S256 = SafeInt256
