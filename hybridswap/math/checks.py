"""Argument validation shared by the pool math functions."""

from hybridswap.constants import BPS_DENOMINATOR, I64_MAX, I64_MIN, U64_MAX
from hybridswap.errors import InvalidInput


def _require_int_in(width: str, low: int, high: int, values: dict[str, int]) -> None:
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(f"{name} must be an int, got {type(value).__name__}")
        if not low <= value <= high:
            raise InvalidInput(f"{name} out of {width} range: {value}")


def require_u64(**values: int) -> None:
    """Check that every keyword argument is an integer in the u64 range.

    Raises:
        InvalidInput: If any value is not an int, is negative, or exceeds 2^64-1
    """
    _require_int_in("u64", 0, U64_MAX, values)


def require_i64(**values: int) -> None:
    """Check that every keyword argument is an integer in the i64 range.

    Timestamps and durations are signed 64-bit on-chain.

    Raises:
        InvalidInput: If any value is not an int or lies outside [-2^63, 2^63-1]
    """
    _require_int_in("i64", I64_MIN, I64_MAX, values)


def require_bps(name: str, value: int) -> None:
    """Check that a basis-point rate lies in [0, 10000].

    Raises:
        InvalidInput: If value is outside the basis-point domain
    """
    require_u64(**{name: value})
    if value > BPS_DENOMINATOR:
        raise InvalidInput(f"{name} must be at most {BPS_DENOMINATOR}, got {value}")
