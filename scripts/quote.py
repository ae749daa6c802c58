#!/usr/bin/env python3
"""Quote a swap against a pool snapshot from the command line.

The pool file is JSON with the PoolState fields, e.g.:

    {"bal0": "1000000000000", "bal1": "1000000000000", "lpSupply": "2000000000000",
     "amp": 1000, "targetAmp": 1000, "feeBps": 30}

Usage:
    python scripts/quote.py pool.json 10000000000
    python scripts/quote.py pool.json 10000000000 --direction t1_t0 --slippage-bps 100
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

import structlog

sys.path.insert(0, str(Path(__file__).parent.parent))

from hybridswap.config import QuoteConfig
from hybridswap.errors import HybridSwapError
from hybridswap.models.pool import PoolState, SwapDirection
from hybridswap.quoter import PoolQuoter

logger = structlog.get_logger()


def main() -> int:
    parser = argparse.ArgumentParser(description="Quote a hybrid StableSwap swap")
    parser.add_argument("pool", type=Path, help="Path to pool state JSON")
    parser.add_argument("amount_in", type=int, help="Input amount in base units")
    parser.add_argument(
        "--direction",
        choices=[d.value for d in SwapDirection],
        default=SwapDirection.T0_T1.value,
        help="Which token is sold (default: t0_t1)",
    )
    parser.add_argument(
        "--slippage-bps",
        type=int,
        default=None,
        help="Slippage tolerance for the min-output guard (default: config)",
    )
    parser.add_argument(
        "--now",
        type=int,
        default=None,
        help="Timestamp for amp ramp resolution (default: current time)",
    )
    parser.add_argument(
        "--no-minimums",
        action="store_true",
        help="Quote swaps below the program's minimum size",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    if not args.pool.exists():
        logger.error("pool_file_not_found", path=str(args.pool))
        print(f"Error: Pool file not found: {args.pool}")
        return 1

    with open(args.pool) as f:
        pool = PoolState.model_validate(json.load(f))

    config = QuoteConfig.from_env()
    if args.no_minimums:
        config = QuoteConfig(
            default_slippage_bps=config.default_slippage_bps,
            enforce_minimums=False,
            reject_paused=config.reject_paused,
        )
    quoter = PoolQuoter(config)
    now = args.now if args.now is not None else int(time.time())

    try:
        quote = quoter.quote_swap(
            pool,
            SwapDirection(args.direction),
            args.amount_in,
            now,
            args.slippage_bps,
        )
    except HybridSwapError as err:
        logger.error("quote_failed", error=type(err).__name__, detail=str(err))
        print(f"Error: {type(err).__name__}: {err}")
        return 1

    print("=" * 60)
    print(f"Direction:       {quote.direction.value}")
    print(f"Amount in:       {quote.amount_in}")
    print(f"Amount out:      {quote.amount_out}")
    print(f"Min amount out:  {quote.min_amount_out}")
    print(f"Fee:             {quote.fee} (admin {quote.admin_fee})")
    print(f"Effective amp:   {quote.amp}")
    print(f"Spot price:      {quote.spot_price_float:.8f}")
    print(f"Price impact:    {quote.price_impact_float * 100:.4f}%")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
