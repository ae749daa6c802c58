"""Quote configuration."""

import os
from dataclasses import dataclass

from hybridswap.constants import BPS_DENOMINATOR

_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class QuoteConfig:
    """Centralized configuration for the quoter.

    Attributes:
        default_slippage_bps: Slippage tolerance used for min-output guards
            when a request does not specify one (default: 50 = 0.5%)
        enforce_minimums: If True, reject swaps below MIN_SWAP and deposits
            below MIN_DEPOSIT, as the program would.
        reject_paused: If True, refuse to quote swaps and deposits on a
            paused pool. Withdrawals are always quoted.
    """

    default_slippage_bps: int = 50
    enforce_minimums: bool = True
    reject_paused: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.default_slippage_bps <= BPS_DENOMINATOR:
            raise ValueError(
                f"default_slippage_bps must be in [0, {BPS_DENOMINATOR}], "
                f"got {self.default_slippage_bps}"
            )

    @classmethod
    def from_env(cls) -> "QuoteConfig":
        """Build a config from environment variables.

        - HYBRIDSWAP_DEFAULT_SLIPPAGE_BPS (default: 50)
        - HYBRIDSWAP_ENFORCE_MINIMUMS (default: true)
        - HYBRIDSWAP_REJECT_PAUSED (default: true)
        """
        return cls(
            default_slippage_bps=int(os.environ.get("HYBRIDSWAP_DEFAULT_SLIPPAGE_BPS", "50")),
            enforce_minimums=os.environ.get("HYBRIDSWAP_ENFORCE_MINIMUMS", "true").lower()
            in _TRUE_VALUES,
            reject_paused=os.environ.get("HYBRIDSWAP_REJECT_PAUSED", "true").lower()
            in _TRUE_VALUES,
        )


# Default configuration instance
DEFAULT_QUOTE_CONFIG = QuoteConfig()
