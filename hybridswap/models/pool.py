"""Pydantic model for decoded 2-token pool state.

The account decoder supplies these fields as plain integers; no account
authenticity or layout checks happen here.
"""

from enum import Enum

from pydantic import BaseModel, Field

from hybridswap.constants import DEFAULT_FEE_BPS, MAX_AMP, MIN_AMP
from hybridswap.math.ramp import AmpRamp
from hybridswap.models.types import U64, Bps, Timestamp


class SwapDirection(str, Enum):
    """Which pool token is sold."""

    T0_T1 = "t0_t1"
    T1_T0 = "t1_t0"


class PoolState(BaseModel):
    """Snapshot of a 2-token hybrid StableSwap pool.

    Attributes:
        bal0: Reserve of token 0 (base units)
        bal1: Reserve of token 1 (base units)
        lp_supply: Outstanding LP tokens
        amp: Amp at ramp start (the stored, not the effective, coefficient)
        target_amp: Amp at ramp end
        ramp_start: Ramp start timestamp
        ramp_end: Ramp end timestamp
        fee_bps: Swap fee in basis points
        paused: Whether the program currently rejects swaps and deposits
    """

    bal0: U64
    bal1: U64
    lp_supply: U64 = Field(alias="lpSupply")
    amp: U64 = Field(ge=MIN_AMP, le=MAX_AMP)
    target_amp: U64 = Field(alias="targetAmp", ge=MIN_AMP, le=MAX_AMP)
    ramp_start: Timestamp = Field(default=0, alias="rampStart")
    ramp_end: Timestamp = Field(default=0, alias="rampEnd")
    fee_bps: Bps = Field(default=DEFAULT_FEE_BPS, alias="feeBps")
    paused: bool = False

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def ramp(self) -> AmpRamp:
        """The pool's amp ramp schedule."""
        return AmpRamp(
            initial_amp=self.amp,
            target_amp=self.target_amp,
            ramp_start=self.ramp_start,
            ramp_stop=self.ramp_end,
        )

    def get_amp(self, now: int) -> int:
        """Effective amp at timestamp now (handles ramping)."""
        return self.ramp.amp_at(now)

    def get_reserves(self, direction: SwapDirection) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if direction == SwapDirection.T0_T1:
            return self.bal0, self.bal1
        return self.bal1, self.bal0
