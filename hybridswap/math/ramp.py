"""Amplification coefficient ramping.

A ramp moves amp linearly from initial_amp to target_amp between two
timestamps. Whether a pool is before, inside or after a ramp is derived
purely from comparing the query time with the stored timestamps.
"""

from __future__ import annotations

from dataclasses import dataclass

from hybridswap.constants import MAX_AMP, MIN_AMP, RAMP_MIN_DURATION
from hybridswap.errors import InvalidInput
from hybridswap.safe_int import S

from .checks import require_i64, require_u64


@dataclass(frozen=True)
class AmpRamp:
    """Amp ramp schedule as stored by the pool.

    Attributes:
        initial_amp: Amp at (and before) ramp_start
        target_amp: Amp at (and after) ramp_stop
        ramp_start: Unix timestamp the ramp begins
        ramp_stop: Unix timestamp the ramp completes
    """

    initial_amp: int
    target_amp: int
    ramp_start: int
    ramp_stop: int

    def amp_at(self, now: int) -> int:
        """Effective amp at timestamp now."""
        return effective_amp(
            self.initial_amp, self.target_amp, self.ramp_start, self.ramp_stop, now
        )

    def is_ramping(self, now: int) -> bool:
        """True if now lies strictly inside a valid ramp window."""
        return self.ramp_start < now < self.ramp_stop


def effective_amp(
    initial_amp: int,
    target_amp: int,
    ramp_start_ts: int,
    ramp_stop_ts: int,
    now_ts: int,
) -> int:
    """Amp in effect at now_ts.

    - No valid ramp (stop <= start), or ramp complete (now >= stop): target_amp
    - Ramp not started (now <= start): initial_amp
    - Otherwise: initial + (target - initial) * elapsed / duration, truncated
      toward initial_amp in either direction

    Raises:
        InvalidInput: If amps are outside u64 or timestamps outside i64
    """
    require_u64(initial_amp=initial_amp, target_amp=target_amp)
    require_i64(ramp_start_ts=ramp_start_ts, ramp_stop_ts=ramp_stop_ts, now_ts=now_ts)

    if ramp_stop_ts <= ramp_start_ts or now_ts >= ramp_stop_ts:
        return target_amp
    if now_ts <= ramp_start_ts:
        return initial_amp

    elapsed = now_ts - ramp_start_ts
    duration = ramp_stop_ts - ramp_start_ts

    if target_amp > initial_amp:
        step = (S(target_amp) - initial_amp) * elapsed // duration
        return (S(initial_amp) + step).to_u64()
    step = (S(initial_amp) - target_amp) * elapsed // duration
    return (S(initial_amp) - step).to_u64()


def plan_ramp(current_amp: int, target_amp: int, now_ts: int, duration: int) -> AmpRamp:
    """Build the schedule a ramp started at now_ts would store.

    Args:
        current_amp: Amp in effect at now_ts (becomes initial_amp)
        target_amp: Amp to reach at the end of the ramp
        now_ts: Ramp start timestamp
        duration: Ramp length in seconds

    Raises:
        InvalidInput: If target_amp is outside [MIN_AMP, MAX_AMP] or the ramp
            is shorter than RAMP_MIN_DURATION
    """
    require_u64(current_amp=current_amp, target_amp=target_amp)
    require_i64(now_ts=now_ts, duration=duration)
    if current_amp < MIN_AMP:
        raise InvalidInput(f"current_amp must be at least {MIN_AMP}, got {current_amp}")
    if not MIN_AMP <= target_amp <= MAX_AMP:
        raise InvalidInput(f"target_amp must be in [{MIN_AMP}, {MAX_AMP}], got {target_amp}")
    if duration < RAMP_MIN_DURATION:
        raise InvalidInput(f"Ramp duration must be at least {RAMP_MIN_DURATION}s, got {duration}")

    ramp_stop = now_ts + duration
    require_i64(ramp_stop=ramp_stop)
    return AmpRamp(
        initial_amp=current_amp,
        target_amp=target_amp,
        ramp_start=now_ts,
        ramp_stop=ramp_stop,
    )


def stop_ramp(ramp: AmpRamp, now_ts: int) -> AmpRamp:
    """Freeze amp at its current effective value.

    The returned schedule has initial_amp == target_amp and a zero-length
    window at now_ts, so every later query yields the frozen amp.
    """
    current = ramp.amp_at(now_ts)
    return AmpRamp(
        initial_amp=current,
        target_amp=current,
        ramp_start=now_ts,
        ramp_stop=now_ts,
    )
