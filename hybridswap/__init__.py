"""Hybrid StableSwap simulator - off-chain pool math."""

from hybridswap.errors import (
    ArithmeticOverflow,
    DegenerateState,
    HybridSwapError,
    InvalidInput,
    NonConvergence,
    PoolPaused,
)
from hybridswap.math import (
    calc_d,
    calc_lp_tokens,
    calc_min_output,
    calc_price_impact,
    calc_virtual_price,
    calc_withdraw,
    calc_y,
    effective_amp,
    simulate_swap,
)

__version__ = "0.1.0"
__all__ = [
    "calc_d",
    "calc_y",
    "simulate_swap",
    "calc_min_output",
    "calc_price_impact",
    "calc_lp_tokens",
    "calc_withdraw",
    "calc_virtual_price",
    "effective_amp",
    "HybridSwapError",
    "InvalidInput",
    "NonConvergence",
    "ArithmeticOverflow",
    "DegenerateState",
    "PoolPaused",
    "__version__",
]
