"""Pytest configuration and fixtures."""

import pytest

from hybridswap.config import QuoteConfig
from hybridswap.models.pool import PoolState
from hybridswap.quoter import PoolQuoter

# Deep balanced pool: 1M tokens a side at 6 decimals
DEEP_BALANCE = 1_000_000_000_000


@pytest.fixture
def balanced_pool() -> PoolState:
    """A deep balanced pool at rest (no ramp), amp 1000, 30 bps fee."""
    return PoolState(
        bal0=DEEP_BALANCE,
        bal1=DEEP_BALANCE,
        lp_supply=2 * DEEP_BALANCE,
        amp=1000,
        target_amp=1000,
        fee_bps=30,
    )


@pytest.fixture
def ramping_pool() -> PoolState:
    """A balanced pool ramping amp from 100 to 200 over timestamps 0..1000."""
    return PoolState(
        bal0=DEEP_BALANCE,
        bal1=DEEP_BALANCE,
        lp_supply=2 * DEEP_BALANCE,
        amp=100,
        target_amp=200,
        ramp_start=0,
        ramp_end=1000,
    )


@pytest.fixture
def empty_pool() -> PoolState:
    """A freshly created pool with no liquidity."""
    return PoolState(bal0=0, bal1=0, lp_supply=0, amp=100, target_amp=100)


@pytest.fixture
def paused_pool(balanced_pool: PoolState) -> PoolState:
    """The balanced pool, paused."""
    return balanced_pool.model_copy(update={"paused": True})


@pytest.fixture
def quoter() -> PoolQuoter:
    """A quoter with default configuration."""
    return PoolQuoter(QuoteConfig())


@pytest.fixture
def lenient_quoter() -> PoolQuoter:
    """A quoter that ignores minimum sizes and pause flags."""
    return PoolQuoter(QuoteConfig(enforce_minimums=False, reject_paused=False))
