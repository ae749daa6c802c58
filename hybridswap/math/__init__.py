"""Fixed-point StableSwap math.

This package mirrors the on-chain program's pool math:
- invariant: Newton-Raphson solvers for D and for a missing balance
- swap: swap output, fee split, slippage guard, spot price and price impact
- liquidity: LP mint/burn quotes and virtual price
- ramp: amplification coefficient interpolation and ramp scheduling
"""

from .invariant import calc_d, calc_y
from .liquidity import calc_lp_tokens, calc_virtual_price, calc_withdraw
from .ramp import AmpRamp, effective_amp, plan_ramp, stop_ramp
from .swap import (
    SwapResult,
    calc_min_output,
    calc_price_impact,
    calc_spot_price,
    calc_swap,
    price_impact_from_swap,
    simulate_swap,
    spot_price_from_swap,
)

__all__ = [
    # Invariant solver
    "calc_d",
    "calc_y",
    # Swap simulator
    "SwapResult",
    "calc_swap",
    "simulate_swap",
    "calc_min_output",
    "calc_spot_price",
    "calc_price_impact",
    "spot_price_from_swap",
    "price_impact_from_swap",
    # Liquidity calculator
    "calc_lp_tokens",
    "calc_withdraw",
    "calc_virtual_price",
    # Amplification ramp
    "AmpRamp",
    "effective_amp",
    "plan_ramp",
    "stop_ramp",
]
