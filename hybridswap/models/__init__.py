"""Pydantic models for pool state and quotes."""

from hybridswap.models.pool import PoolState, SwapDirection
from hybridswap.models.quote import (
    AmpResponse,
    DepositQuote,
    DepositQuoteRequest,
    PoolQueryRequest,
    SwapQuote,
    SwapQuoteRequest,
    VirtualPriceResponse,
    WithdrawQuote,
    WithdrawQuoteRequest,
)
from hybridswap.models.types import U64, Bps, Timestamp

__all__ = [
    # Types
    "U64",
    "Bps",
    "Timestamp",
    # Pool state
    "PoolState",
    "SwapDirection",
    # Requests
    "SwapQuoteRequest",
    "DepositQuoteRequest",
    "WithdrawQuoteRequest",
    "PoolQueryRequest",
    # Responses
    "SwapQuote",
    "DepositQuote",
    "WithdrawQuote",
    "VirtualPriceResponse",
    "AmpResponse",
]
