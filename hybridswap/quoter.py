"""Pool quoter.

PoolQuoter resolves the effective amp of a pool snapshot at a timestamp,
runs the pool math and packages the result as quote models, applying the
slippage guard and the program's pause and minimum-size rules. It holds no
pool state between calls.
"""

from __future__ import annotations

import structlog

from hybridswap.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from hybridswap.constants import MIN_DEPOSIT, MIN_SWAP
from hybridswap.errors import InvalidInput, PoolPaused
from hybridswap.math import (
    calc_lp_tokens,
    calc_min_output,
    calc_swap,
    calc_virtual_price,
    calc_withdraw,
    price_impact_from_swap,
    spot_price_from_swap,
)
from hybridswap.models.pool import PoolState, SwapDirection
from hybridswap.models.quote import (
    AmpResponse,
    DepositQuote,
    SwapQuote,
    VirtualPriceResponse,
    WithdrawQuote,
)
from hybridswap.safe_int import S

logger = structlog.get_logger()


class PoolQuoter:
    """Quotes swaps, deposits and withdrawals against pool snapshots.

    Args:
        config: Quote configuration. Defaults to DEFAULT_QUOTE_CONFIG.
    """

    def __init__(self, config: QuoteConfig | None = None) -> None:
        self.config = config or DEFAULT_QUOTE_CONFIG

    def _slippage(self, slippage_bps: int | None) -> int:
        if slippage_bps is None:
            return self.config.default_slippage_bps
        return slippage_bps

    def _check_paused(self, pool: PoolState, operation: str) -> None:
        if pool.paused and self.config.reject_paused:
            logger.debug("pool_paused", operation=operation)
            raise PoolPaused(f"Pool is paused; {operation} would be rejected")

    def quote_swap(
        self,
        pool: PoolState,
        direction: SwapDirection,
        amount_in: int,
        now: int,
        slippage_bps: int | None = None,
    ) -> SwapQuote:
        """Quote selling amount_in of the direction's input token.

        Args:
            pool: Pool snapshot
            direction: Which token is sold
            amount_in: Input amount
            now: Timestamp used to resolve the effective amp
            slippage_bps: Tolerance for min_amount_out (config default if None)

        Returns:
            SwapQuote with output, fee split, guard, spot price and impact

        Raises:
            PoolPaused: If the pool is paused and config.reject_paused is set
            InvalidInput: If amount_in is below MIN_SWAP (with enforce_minimums)
            HybridSwapError: Any failure of the pool math
        """
        self._check_paused(pool, "swap")
        if self.config.enforce_minimums and amount_in < MIN_SWAP:
            raise InvalidInput(f"amount_in {amount_in} below minimum swap {MIN_SWAP}")

        amp = pool.get_amp(now)
        bal_in, bal_out = pool.get_reserves(direction)

        result = calc_swap(bal_in, bal_out, amount_in, amp, pool.fee_bps)
        slippage = self._slippage(slippage_bps)
        quote = SwapQuote(
            direction=direction,
            amount_in=amount_in,
            amount_out=result.amount_out,
            min_amount_out=calc_min_output(result.amount_out, slippage),
            fee=result.fee,
            admin_fee=result.admin_fee,
            amp=amp,
            spot_price=spot_price_from_swap(result, amp),
            price_impact=price_impact_from_swap(result, amp),
        )

        logger.debug(
            "swap_quoted",
            direction=direction.value,
            amount_in=amount_in,
            amount_out=quote.amount_out,
            min_amount_out=quote.min_amount_out,
            fee=quote.fee,
            amp=amp,
            price_impact=quote.price_impact,
        )
        return quote

    def quote_deposit(
        self,
        pool: PoolState,
        amount0: int,
        amount1: int,
        now: int,
        slippage_bps: int | None = None,
    ) -> DepositQuote:
        """Quote LP tokens minted for depositing (amount0, amount1).

        Raises:
            PoolPaused: If the pool is paused and config.reject_paused is set
            InvalidInput: If the deposit is below MIN_DEPOSIT (with enforce_minimums)
                or does not increase the invariant
            HybridSwapError: Any failure of the pool math
        """
        self._check_paused(pool, "deposit")
        if self.config.enforce_minimums and S(amount0) + S(amount1) < MIN_DEPOSIT:
            raise InvalidInput(
                f"Deposit total {amount0 + amount1} below minimum deposit {MIN_DEPOSIT}"
            )

        amp = pool.get_amp(now)
        lp_minted = calc_lp_tokens(amount0, amount1, pool.bal0, pool.bal1, pool.lp_supply, amp)
        virtual_price_after = calc_virtual_price(
            (S(pool.bal0) + S(amount0)).to_u64(),
            (S(pool.bal1) + S(amount1)).to_u64(),
            (S(pool.lp_supply) + S(lp_minted)).to_u64(),
            amp,
        )
        quote = DepositQuote(
            amount0=amount0,
            amount1=amount1,
            lp_minted=lp_minted,
            min_lp_minted=calc_min_output(lp_minted, self._slippage(slippage_bps)),
            amp=amp,
            virtual_price_after=virtual_price_after,
        )

        logger.debug(
            "deposit_quoted",
            amount0=amount0,
            amount1=amount1,
            lp_minted=lp_minted,
            initial=pool.lp_supply == 0,
            amp=amp,
        )
        return quote

    def quote_withdraw(
        self,
        pool: PoolState,
        lp_amount: int,
        slippage_bps: int | None = None,
    ) -> WithdrawQuote:
        """Quote tokens returned for a balanced withdrawal of lp_amount.

        Raises:
            InvalidInput: If the pool has no supply or lp_amount exceeds it
        """
        amount0, amount1 = calc_withdraw(lp_amount, pool.bal0, pool.bal1, pool.lp_supply)
        slippage = self._slippage(slippage_bps)
        quote = WithdrawQuote(
            lp_amount=lp_amount,
            amount0=amount0,
            amount1=amount1,
            min_amount0=calc_min_output(amount0, slippage),
            min_amount1=calc_min_output(amount1, slippage),
        )

        logger.debug(
            "withdraw_quoted",
            lp_amount=lp_amount,
            amount0=amount0,
            amount1=amount1,
        )
        return quote

    def virtual_price(self, pool: PoolState, now: int) -> VirtualPriceResponse:
        """Virtual price of the pool's LP token at timestamp now."""
        amp = pool.get_amp(now)
        return VirtualPriceResponse(
            virtual_price=calc_virtual_price(pool.bal0, pool.bal1, pool.lp_supply, amp),
            amp=amp,
        )

    def current_amp(self, pool: PoolState, now: int) -> AmpResponse:
        """Effective amp at timestamp now and whether a ramp is in progress."""
        return AmpResponse(amp=pool.get_amp(now), ramping=pool.ramp.is_ramping(now))


_default_quoter: PoolQuoter | None = None


def get_default_quoter() -> PoolQuoter:
    """Return the process-wide quoter, configured from the environment."""
    global _default_quoter
    if _default_quoter is None:
        config = QuoteConfig.from_env()
        logger.info(
            "quoter_configured",
            default_slippage_bps=config.default_slippage_bps,
            enforce_minimums=config.enforce_minimums,
            reject_paused=config.reject_paused,
        )
        _default_quoter = PoolQuoter(config)
    return _default_quoter
