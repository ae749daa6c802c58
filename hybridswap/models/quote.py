"""Pydantic models for quote requests and responses.

Integer outputs are exact; prices, virtual price and price impact are
scaled by PRICE_PRECISION (1e18 == 1.0). The *_float properties are a
presentation convenience and carry float rounding.
"""

from pydantic import BaseModel, Field

from hybridswap.constants import PRICE_PRECISION
from hybridswap.models.pool import PoolState, SwapDirection
from hybridswap.models.types import U64, Bps, Timestamp


class SwapQuoteRequest(BaseModel):
    """Request to quote a swap against a pool snapshot."""

    pool: PoolState
    direction: SwapDirection = SwapDirection.T0_T1
    amount_in: U64 = Field(alias="amountIn")
    now: Timestamp
    slippage_bps: Bps | None = Field(default=None, alias="slippageBps")

    model_config = {"populate_by_name": True}


class SwapQuote(BaseModel):
    """Predicted outcome of a swap."""

    direction: SwapDirection
    amount_in: int = Field(alias="amountIn")
    amount_out: int = Field(alias="amountOut")
    min_amount_out: int = Field(alias="minAmountOut")
    fee: int
    admin_fee: int = Field(alias="adminFee")
    amp: int
    spot_price: int = Field(alias="spotPrice", description="Output per input, scaled 1e18")
    price_impact: int = Field(alias="priceImpact", description="Scaled 1e18 (1e18 == 100%)")

    model_config = {"populate_by_name": True}

    @property
    def price_impact_float(self) -> float:
        """Price impact as a fraction (0.01 == 1%)."""
        return self.price_impact / PRICE_PRECISION

    @property
    def spot_price_float(self) -> float:
        """Spot price as a float ratio."""
        return self.spot_price / PRICE_PRECISION


class DepositQuoteRequest(BaseModel):
    """Request to quote an LP deposit."""

    pool: PoolState
    amount0: U64
    amount1: U64
    now: Timestamp
    slippage_bps: Bps | None = Field(default=None, alias="slippageBps")

    model_config = {"populate_by_name": True}


class DepositQuote(BaseModel):
    """Predicted LP tokens minted by a deposit."""

    amount0: int
    amount1: int
    lp_minted: int = Field(alias="lpMinted")
    min_lp_minted: int = Field(alias="minLpMinted")
    amp: int
    virtual_price_after: int = Field(alias="virtualPriceAfter", description="Scaled 1e18")

    model_config = {"populate_by_name": True}


class WithdrawQuoteRequest(BaseModel):
    """Request to quote a balanced LP withdrawal."""

    pool: PoolState
    lp_amount: U64 = Field(alias="lpAmount")
    slippage_bps: Bps | None = Field(default=None, alias="slippageBps")

    model_config = {"populate_by_name": True}


class WithdrawQuote(BaseModel):
    """Predicted tokens returned for burning LP tokens."""

    lp_amount: int = Field(alias="lpAmount")
    amount0: int
    amount1: int
    min_amount0: int = Field(alias="minAmount0")
    min_amount1: int = Field(alias="minAmount1")

    model_config = {"populate_by_name": True}


class PoolQueryRequest(BaseModel):
    """Request for a time-dependent pool metric."""

    pool: PoolState
    now: Timestamp


class VirtualPriceResponse(BaseModel):
    """Invariant value per LP share at a point in time."""

    virtual_price: int = Field(alias="virtualPrice", description="Scaled 1e18")
    amp: int

    model_config = {"populate_by_name": True}

    @property
    def virtual_price_float(self) -> float:
        return self.virtual_price / PRICE_PRECISION


class AmpResponse(BaseModel):
    """Effective amplification coefficient at a point in time."""

    amp: int
    ramping: bool
