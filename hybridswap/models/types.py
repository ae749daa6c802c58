"""Shared type definitions for pool and quote models.

Integers arrive from account decoders and JSON clients either as ints or as
decimal strings (JSON numbers lose precision above 2^53 in many clients).
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from hybridswap.constants import BPS_DENOMINATOR, I64_MAX, I64_MIN, U64_MAX


def validate_u64(value: Any) -> int:
    """Validate that a value is a u64, given as int or decimal string.

    Args:
        value: Value to validate (int or string)

    Returns:
        The value as int

    Raises:
        ValueError: If value is not a non-negative integer within u64 range
    """
    if isinstance(value, bool):
        raise ValueError("U64 cannot be a boolean")

    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"U64 must be a decimal integer string: '{value}'") from err
    elif not isinstance(value, int):
        raise ValueError(f"U64 must be string or int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"U64 cannot be negative: {value}")
    if value > U64_MAX:
        raise ValueError(f"U64 overflow: {value} > 2^64-1")
    return value


# 64-bit unsigned integer (token amounts, balances, supplies, amps)
U64 = Annotated[
    int,
    BeforeValidator(validate_u64),
    Field(description="64-bit unsigned integer, as int or decimal string"),
]

# Unix timestamp in seconds (i64 on-chain)
Timestamp = Annotated[int, Field(ge=I64_MIN, le=I64_MAX, description="Unix timestamp (s)")]

# Basis-point rate
Bps = Annotated[int, Field(ge=0, le=BPS_DENOMINATOR, description="Rate in basis points")]
