"""Tests for SafeInt checked arithmetic."""

import pytest

from hybridswap.constants import U64_MAX, U128_MAX, U256_MAX
from hybridswap.errors import ArithmeticOverflow
from hybridswap.safe_int import (
    S,
    S256,
    DivisionByZero,
    Overflow,
    SafeInt,
    SafeInt256,
    Underflow,
)


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        """SafeInt can be constructed from int."""
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        """SafeInt can be constructed from another SafeInt."""
        assert SafeInt(SafeInt(42)).value == 42

    def test_from_negative_raises(self):
        """Negative values are rejected."""
        with pytest.raises(Underflow):
            SafeInt(-1)

    def test_at_bound(self):
        """The u128 maximum itself is representable."""
        assert SafeInt(U128_MAX).value == U128_MAX

    def test_above_bound_raises(self):
        """Values above u128 are rejected."""
        with pytest.raises(Overflow):
            SafeInt(U128_MAX + 1)

    def test_from_invalid_type_raises(self):
        """SafeInt rejects invalid types."""
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(True)  # type: ignore

    def test_alias_s(self):
        """S is an alias for SafeInt."""
        assert S is SafeInt
        assert S256 is SafeInt256

    def test_zero_constructor(self):
        """SafeInt.zero() creates zero value."""
        assert SafeInt.zero().value == 0


class TestSafeIntArithmetic:
    """Tests for SafeInt arithmetic operations."""

    def test_add(self):
        """Addition works correctly."""
        assert (S(10) + S(5)).value == 15
        assert (S(10) + 5).value == 15
        assert (5 + S(10)).value == 15

    def test_add_overflow_raises(self):
        """Addition past u128 raises Overflow."""
        with pytest.raises(Overflow):
            S(U128_MAX) + 1

    def test_sub(self):
        """Subtraction works correctly."""
        assert (S(10) - S(3)).value == 7
        assert (S(10) - 10).value == 0

    def test_sub_underflow_raises(self):
        """Subtraction below zero raises Underflow."""
        with pytest.raises(Underflow):
            S(5) - S(10)

    def test_rsub_underflow_raises(self):
        """Reverse subtraction below zero raises Underflow."""
        with pytest.raises(Underflow):
            5 - S(10)

    def test_mul(self):
        """Multiplication works correctly."""
        assert (S(10) * S(5)).value == 50
        assert (3 * S(7)).value == 21

    def test_mul_u64_squared_fits(self):
        """Product of two u64 values fits in u128."""
        assert (S(U64_MAX) * U64_MAX).value == U64_MAX * U64_MAX

    def test_mul_overflow_raises(self):
        """Multiplication past u128 raises Overflow."""
        with pytest.raises(Overflow):
            S(2**64) * S(2**64)

    def test_floordiv(self):
        """Floor division truncates."""
        assert (S(10) // S(3)).value == 3
        assert (100 // S(7)).value == 14

    def test_floordiv_by_zero_raises(self):
        """Division by zero raises DivisionByZero."""
        with pytest.raises(DivisionByZero):
            S(10) // 0

    def test_rfloordiv_by_zero_raises(self):
        """Reverse division by zero raises DivisionByZero."""
        with pytest.raises(DivisionByZero):
            10 // S(0)

    def test_result_keeps_width(self):
        """Operations on SafeInt256 stay 256-bit wide."""
        result = S256(2**64) * S256(2**64)
        assert isinstance(result, SafeInt256)
        assert result.value == 2**128

    def test_safeint256_bound(self):
        """SafeInt256 overflows only past u256."""
        with pytest.raises(Overflow):
            S256(U256_MAX) + 1


class TestSafeIntComparison:
    """Tests for SafeInt comparison operations."""

    def test_eq(self):
        assert S(5) == S(5)
        assert S(5) == 5
        assert S(5) != 6

    def test_ordering(self):
        assert S(3) < S(5)
        assert S(5) <= 5
        assert S(6) > 5
        assert S(5) >= S(5)


class TestSafeIntConversion:
    """Tests for SafeInt conversion."""

    def test_int(self):
        assert int(S(42)) == 42

    def test_bool(self):
        assert bool(S(1))
        assert not bool(S(0))

    def test_str_and_repr(self):
        assert str(S(42)) == "42"
        assert repr(S(42)) == "SafeInt(42)"
        assert repr(S256(42)) == "SafeInt256(42)"

    def test_hash(self):
        assert hash(S(42)) == hash(42)

    def test_to_u64(self):
        """to_u64 returns values that fit in u64."""
        assert S(U64_MAX).to_u64() == U64_MAX

    def test_to_u64_overflow_raises(self):
        """to_u64 raises for values wider than u64."""
        with pytest.raises(Overflow):
            S(U64_MAX + 1).to_u64()


class TestSafeIntNamedOps:
    """Tests for SafeInt named operations."""

    def test_abs_diff(self):
        """abs_diff never underflows."""
        assert S(3).abs_diff(10).value == 7
        assert S(10).abs_diff(S(3)).value == 7

    def test_saturating_sub(self):
        """saturating_sub clamps at zero."""
        assert S(10).saturating_sub(3).value == 7
        assert S(3).saturating_sub(10).value == 0


class TestSafeIntExceptionHierarchy:
    """Tests for exception class hierarchy."""

    @pytest.mark.parametrize("error", [Overflow, Underflow, DivisionByZero])
    def test_errors_are_arithmetic_overflow(self, error):
        """All checked-arithmetic failures are ArithmeticOverflow."""
        assert issubclass(error, ArithmeticOverflow)
        assert issubclass(error, ArithmeticError)

    def test_can_catch_all_with_arithmetic_overflow(self):
        """A single except clause catches every checked failure."""
        for operation in (lambda: S(1) - 2, lambda: S(1) // 0, lambda: S(U128_MAX) * 2):
            with pytest.raises(ArithmeticOverflow):
                operation()
