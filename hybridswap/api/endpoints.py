"""API endpoints for the quote service.

Quotes run the Newton solvers, so handlers hand them to the default executor
and keep the event loop free.
"""

import asyncio

import structlog
from fastapi import APIRouter, Depends

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
from hybridswap.quoter import PoolQuoter, get_default_quoter

logger = structlog.get_logger()

router = APIRouter()


def get_quoter() -> PoolQuoter:
    """Dependency provider for the quoter instance.

    Override this in tests to inject a custom quoter:
        app.dependency_overrides[get_quoter] = lambda: PoolQuoter(config)
    """
    return get_default_quoter()


@router.post("/quote/swap")
async def quote_swap(
    request: SwapQuoteRequest,
    quoter: PoolQuoter = Depends(get_quoter),
) -> SwapQuote:
    """Quote a swap against the supplied pool snapshot."""
    logger.info(
        "received_swap_quote",
        direction=request.direction.value,
        amount_in=request.amount_in,
        now=request.now,
    )
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(
        None,
        quoter.quote_swap,
        request.pool,
        request.direction,
        request.amount_in,
        request.now,
        request.slippage_bps,
    )


@router.post("/quote/deposit")
async def quote_deposit(
    request: DepositQuoteRequest,
    quoter: PoolQuoter = Depends(get_quoter),
) -> DepositQuote:
    """Quote LP tokens minted for a deposit."""
    logger.info(
        "received_deposit_quote",
        amount0=request.amount0,
        amount1=request.amount1,
        now=request.now,
    )
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(
        None,
        quoter.quote_deposit,
        request.pool,
        request.amount0,
        request.amount1,
        request.now,
        request.slippage_bps,
    )


@router.post("/quote/withdraw")
async def quote_withdraw(
    request: WithdrawQuoteRequest,
    quoter: PoolQuoter = Depends(get_quoter),
) -> WithdrawQuote:
    """Quote a balanced withdrawal."""
    logger.info("received_withdraw_quote", lp_amount=request.lp_amount)
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(
        None, quoter.quote_withdraw, request.pool, request.lp_amount, request.slippage_bps
    )


@router.post("/virtual-price")
async def virtual_price(
    request: PoolQueryRequest,
    quoter: PoolQuoter = Depends(get_quoter),
) -> VirtualPriceResponse:
    """Virtual price of the pool's LP token."""
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, quoter.virtual_price, request.pool, request.now)


@router.post("/amp")
async def current_amp(
    request: PoolQueryRequest,
    quoter: PoolQuoter = Depends(get_quoter),
) -> AmpResponse:
    """Effective amplification coefficient."""
    return quoter.current_amp(request.pool, request.now)
