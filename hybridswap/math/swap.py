"""Swap simulation on top of the invariant solvers.

The fee is taken from the output side: the curve output is computed first,
then fee_bps of it is withheld (rounded down), and the trader receives the
remainder. Of the withheld fee, ADMIN_FEE_PCT percent accrues to the pool
authority and the rest stays in the reserves for LPs.
"""

from dataclasses import dataclass

from hybridswap.constants import ADMIN_FEE_PCT, BPS_DENOMINATOR, PRICE_PRECISION
from hybridswap.errors import DegenerateState, InvalidInput
from hybridswap.safe_int import S, S256, SafeInt256

from .checks import require_bps, require_u64
from .invariant import amp_times_n, calc_d, calc_d_p, calc_y


@dataclass(frozen=True)
class SwapResult:
    """Full breakdown of a simulated swap.

    Attributes:
        amount_in: Input amount (base units of the input token)
        amount_out: Amount the trader receives, after fee
        fee: Fee withheld from the curve output
        admin_fee: Part of fee accruing to the pool authority
        invariant: Pool invariant D before the swap
        new_bal_in: Input-side reserve after the swap
        new_bal_out: Output-side reserve after the swap (fee retained in pool)
    """

    amount_in: int
    amount_out: int
    fee: int
    admin_fee: int
    invariant: int
    new_bal_in: int
    new_bal_out: int

    @property
    def bal_in(self) -> int:
        """Input-side reserve before the swap."""
        return self.new_bal_in - self.amount_in

    @property
    def bal_out(self) -> int:
        """Output-side reserve before the swap."""
        return self.new_bal_out + self.amount_out


def calc_swap(
    bal_in: int,
    bal_out: int,
    amount_in: int,
    amp: int,
    fee_bps: int,
) -> SwapResult:
    """Simulate a swap and return the full breakdown.

    Algorithm:
        1. D = calc_d(bal_in, bal_out)
        2. y = calc_y(bal_in + amount_in, D)
        3. raw_out = bal_out - y
        4. fee = raw_out * fee_bps / 10000 (rounded down)
        5. amount_out = raw_out - fee

    Raises:
        InvalidInput: If amount_in or a balance is zero, or fee_bps > 10000
        DegenerateState: If the solved balance does not leave a positive output,
            or the swap would drain the output reserve
        NonConvergence: If a solver doesn't converge
        ArithmeticOverflow: If an intermediate leaves its checked range
    """
    require_u64(bal_in=bal_in, bal_out=bal_out, amount_in=amount_in, amp=amp)
    require_bps("fee_bps", fee_bps)
    if amount_in == 0:
        raise InvalidInput("amount_in must be positive")
    if bal_in == 0 or bal_out == 0:
        raise InvalidInput(f"Cannot swap against an empty reserve ({bal_in}, {bal_out})")

    d = calc_d(bal_in, bal_out, amp)
    new_bal_in = (S(bal_in) + S(amount_in)).to_u64()
    y = calc_y(new_bal_in, d, amp)

    if y >= bal_out:
        raise DegenerateState(f"Solved balance {y} leaves no output from reserve {bal_out}")
    if y == 0:
        raise DegenerateState("Swap would drain the output reserve")

    raw_out = S(bal_out) - S(y)
    fee = raw_out * fee_bps // BPS_DENOMINATOR
    amount_out = raw_out - fee
    admin_fee = fee * ADMIN_FEE_PCT // 100

    return SwapResult(
        amount_in=amount_in,
        amount_out=amount_out.value,
        fee=fee.value,
        admin_fee=admin_fee.value,
        invariant=d,
        new_bal_in=new_bal_in,
        new_bal_out=(S(bal_out) - amount_out).value,
    )


def simulate_swap(
    bal_in: int,
    bal_out: int,
    amount_in: int,
    amp: int,
    fee_bps: int,
) -> int:
    """Return the output amount for selling amount_in into the pool.

    Args:
        bal_in: Reserve of the input token
        bal_out: Reserve of the output token
        amount_in: Input amount
        amp: Effective amplification coefficient
        fee_bps: Swap fee in basis points (0-10000)

    Returns:
        Output amount after fee
    """
    return calc_swap(bal_in, bal_out, amount_in, amp, fee_bps).amount_out


def calc_min_output(expected_out: int, slippage_bps: int) -> int:
    """Minimum acceptable output for a slippage tolerance.

    min_out = expected_out * (10000 - slippage_bps) / 10000, rounded down.

    Raises:
        InvalidInput: If slippage_bps > 10000 or expected_out is outside u64
    """
    require_u64(expected_out=expected_out)
    require_bps("slippage_bps", slippage_bps)
    return (S(expected_out) * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR).to_u64()


def _marginal_terms(d: int, bal_in: int, bal_out: int, amp: int) -> tuple[SafeInt256, SafeInt256]:
    """Partial derivatives of the invariant in x and y, each scaled by x*y.

    Returns (ann*x + d_p, ann*y + d_p) with d_p = D^3 / (4xy), so that

        dy/dx = F_x / F_y = (ann*x + d_p) * y / ((ann*y + d_p) * x)
    """
    ann = amp_times_n(amp)
    d_p = calc_d_p(S(d), bal_in, bal_out)
    return S256(ann * bal_in + d_p), S256(ann * bal_out + d_p)


def calc_spot_price(bal_in: int, bal_out: int, amp: int) -> int:
    """Marginal output-per-input rate at the current balances, scaled by 1e18.

    Follows from the total differential of the invariant F(x, y) = 0. A
    balanced pool prices at exactly 1e18.

    Raises:
        InvalidInput: If a balance is zero
    """
    require_u64(bal_in=bal_in, bal_out=bal_out, amp=amp)
    if bal_in == 0 or bal_out == 0:
        raise InvalidInput(f"Spot price undefined for an empty reserve ({bal_in}, {bal_out})")

    d = calc_d(bal_in, bal_out, amp)
    marginal_in, marginal_out = _marginal_terms(d, bal_in, bal_out, amp)
    return (marginal_in * bal_out * PRICE_PRECISION // (marginal_out * bal_in)).value


def spot_price_from_swap(result: SwapResult, amp: int) -> int:
    """Spot price at the pre-swap balances of an already simulated swap.

    Equal to calc_spot_price(result.bal_in, result.bal_out, amp), reusing the
    invariant the swap solved instead of solving it again.
    """
    marginal_in, marginal_out = _marginal_terms(
        result.invariant, result.bal_in, result.bal_out, amp
    )
    return (marginal_in * result.bal_out * PRICE_PRECISION // (marginal_out * result.bal_in)).value


def price_impact_from_swap(result: SwapResult, amp: int) -> int:
    """Price impact of an already simulated swap, scaled by 1e18.

    amp must be the coefficient the swap was simulated with.
    """
    marginal_in, marginal_out = _marginal_terms(
        result.invariant, result.bal_in, result.bal_out, amp
    )

    # realized / spot = (out / in) * ((ann*y + d_p) * x) / ((ann*x + d_p) * y)
    realized = S256(result.amount_out) * marginal_out * result.bal_in * PRICE_PRECISION
    spot = S256(result.amount_in) * marginal_in * result.bal_out
    ratio = realized // spot

    return S256(PRICE_PRECISION).saturating_sub(ratio).value


def calc_price_impact(
    bal_in: int,
    bal_out: int,
    amount_in: int,
    amp: int,
    fee_bps: int,
) -> int:
    """Relative shortfall of the realized rate versus the spot rate.

    impact = 1 - (amount_out / amount_in) / spot, scaled by 1e18 (1e18 == 100%).
    The realized rate includes the fee. Rounding can leave the realized rate a
    hair above spot on tiny trades; that case reports zero impact.

    Computed exactly in checked 256-bit arithmetic rather than through a
    rounded spot price.

    Raises:
        Any error of calc_swap; a swap that would drain the pool is a
        DegenerateState, never a reported impact above 100%.
    """
    result = calc_swap(bal_in, bal_out, amount_in, amp, fee_bps)
    return price_impact_from_swap(result, amp)
