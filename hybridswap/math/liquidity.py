"""LP share mint/burn quotes and virtual price.

Deposits mint shares in proportion to the growth of the invariant D, so a
balanced deposit earns proportional shares while an imbalanced one earns
fewer (D grows sub-linearly off balance). No separate imbalance fee is
applied.
"""

from hybridswap.constants import PRICE_PRECISION
from hybridswap.errors import DegenerateState, InvalidInput
from hybridswap.safe_int import S

from .checks import require_u64
from .invariant import calc_d


def calc_lp_tokens(
    amt0: int,
    amt1: int,
    bal0: int,
    bal1: int,
    supply: int,
    amp: int,
) -> int:
    """Calculate LP tokens minted for a deposit.

    First deposit (supply == 0): the invariant of the deposit itself, so
    shares start 1:1 with D. Later deposits:

        lp = supply * (D_after - D_before) / D_before

    Args:
        amt0: Deposit of token 0
        amt1: Deposit of token 1
        bal0: Pool balance of token 0 before the deposit
        bal1: Pool balance of token 1 before the deposit
        supply: Outstanding LP supply
        amp: Effective amplification coefficient

    Returns:
        LP tokens minted

    Raises:
        InvalidInput: If the deposit does not increase D
        DegenerateState: If the pool has outstanding shares but D == 0
        ArithmeticOverflow: If the result does not fit in u64
    """
    require_u64(amt0=amt0, amt1=amt1, bal0=bal0, bal1=bal1, supply=supply, amp=amp)

    if supply == 0:
        lp = calc_d(amt0, amt1, amp)
        if lp == 0:
            raise InvalidInput("Initial deposit must be non-zero")
        return lp

    d_before = calc_d(bal0, bal1, amp)
    d_after = calc_d(
        (S(bal0) + S(amt0)).to_u64(),
        (S(bal1) + S(amt1)).to_u64(),
        amp,
    )

    if d_before == 0:
        raise DegenerateState(f"Pool has LP supply {supply} but zero invariant")
    if d_after <= d_before:
        raise InvalidInput(f"Deposit does not increase the invariant ({d_before} -> {d_after})")

    return (S(supply) * (d_after - d_before) // d_before).to_u64()


def calc_withdraw(lp_amount: int, bal0: int, bal1: int, supply: int) -> tuple[int, int]:
    """Calculate tokens received for burning LP tokens (balanced withdrawal).

    Each side is a direct proportional share of current reserves; amp plays
    no part. Rounds down on both sides.

    Returns:
        Tuple of (amount0, amount1)

    Raises:
        InvalidInput: If supply is zero or lp_amount exceeds supply
    """
    require_u64(lp_amount=lp_amount, bal0=bal0, bal1=bal1, supply=supply)
    if supply == 0:
        raise InvalidInput("Cannot withdraw from a pool with no LP supply")
    if lp_amount > supply:
        raise InvalidInput(f"lp_amount {lp_amount} exceeds supply {supply}")

    amount0 = S(bal0) * lp_amount // supply
    amount1 = S(bal1) * lp_amount // supply
    return amount0.to_u64(), amount1.to_u64()


def calc_virtual_price(bal0: int, bal1: int, supply: int, amp: int) -> int:
    """Invariant value per LP share, scaled by 1e18.

    virtual_price = D * 1e18 / supply

    Raises:
        InvalidInput: If supply is zero (price undefined)
    """
    require_u64(bal0=bal0, bal1=bal1, supply=supply, amp=amp)
    if supply == 0:
        raise InvalidInput("Virtual price undefined for a pool with no LP supply")

    d = calc_d(bal0, bal1, amp)
    return (S(d) * PRICE_PRECISION // supply).value
