"""StableSwap invariant solvers for 2-token pools.

Both solvers use Newton-Raphson iteration in checked integer arithmetic,
matching the on-chain program step for step: u64 operands, u128
intermediates, truncating division, and failure (never wraparound) on
overflow.

The invariant for n = 2 tokens with ann = A * n^n = 4 * amp:

    ann * (x + y) + D = ann * D + D^3 / (4 * x * y)

The amplification coefficient is used unscaled; the program applies no
separate precision factor to it.
"""

from hybridswap.constants import NEWTON_ITERATIONS
from hybridswap.errors import InvalidInput, NonConvergence
from hybridswap.safe_int import S, SafeInt

from .checks import require_u64


def _u64(x: SafeInt) -> SafeInt:
    """Narrow a checked intermediate to u64 width."""
    return S(x.to_u64())


def amp_times_n(amp: int) -> SafeInt:
    """Return ann = amp * n^n (n = 2) as a u64-width value.

    Raises:
        InvalidInput: If amp is zero
        ArithmeticOverflow: If amp * 4 does not fit in u64
    """
    if amp == 0:
        raise InvalidInput("amp must be positive")
    return _u64(S(amp) * 4)


def calc_d_p(d: SafeInt, x: int, y: int) -> SafeInt:
    """Compute D^3 / (4 * x * y), dividing early to keep intermediates in u128.

    Evaluated as ((D * D) / (2x)) * D / (2y), the same order the program uses.
    """
    return d * d // _u64(S(x) * 2) * d // _u64(S(y) * 2)


def calc_d(bal0: int, bal1: int, amp: int) -> int:
    """Solve the StableSwap invariant D for two balances.

    Algorithm:
        1. S = bal0 + bal1; an empty pool has D = 0
        2. Initial guess: D = S
        3. Iterate D' = (ann*S + 2*d_p) * D / ((ann - 1) * D + 3*d_p)
           until |D' - D| <= 1
        4. Max iterations: 255

    Args:
        bal0: Balance of token 0 (base units)
        bal1: Balance of token 1 (base units)
        amp: Amplification coefficient (unscaled)

    Returns:
        The invariant D

    Raises:
        InvalidInput: If arguments are outside u64, exactly one balance is zero,
            or amp is zero
        NonConvergence: If iteration doesn't converge
        ArithmeticOverflow: If an intermediate exceeds u128 or D exceeds u64
    """
    require_u64(bal0=bal0, bal1=bal1, amp=amp)

    s = _u64(S(bal0) + S(bal1))
    if s == 0:
        return 0
    if bal0 == 0 or bal1 == 0:
        raise InvalidInput(f"Balances must both be positive, got ({bal0}, {bal1})")

    ann = amp_times_n(amp)
    d = s

    for _ in range(NEWTON_ITERATIONS):
        d_p = calc_d_p(d, bal0, bal1)
        d_prev = d

        numerator = (ann * s + d_p * 2) * d
        denominator = (ann - 1) * d + d_p * 3
        d = _u64(numerator // denominator)

        if d.abs_diff(d_prev) <= 1:
            return d.value

    raise NonConvergence(f"Invariant did not converge after {NEWTON_ITERATIONS} iterations")


def calc_y(new_balance_in: int, d: int, amp: int) -> int:
    """Solve for the output-side balance that preserves invariant D.

    Given the input-side balance after a deposit, finds y such that the pair
    (new_balance_in, y) satisfies the invariant. Iterates
    y' = (y^2 + c) / (2y + b - D) from y = D, where

        c = D^3 / (4 * x * ann)
        b = x + D / ann

    Args:
        new_balance_in: Input-side balance after the trade (base units)
        d: Invariant to hold constant
        amp: Amplification coefficient (unscaled)

    Returns:
        The complementary balance

    Raises:
        InvalidInput: If new_balance_in is zero, amp is zero, or arguments are
            outside u64
        NonConvergence: If iteration doesn't converge
        ArithmeticOverflow: If an intermediate leaves its checked range
    """
    require_u64(new_balance_in=new_balance_in, d=d, amp=amp)
    if new_balance_in == 0:
        raise InvalidInput("new_balance_in must be positive")

    ann = amp_times_n(amp)
    x = S(new_balance_in)
    inv = S(d)

    c = inv * inv // _u64(x * 2) * inv // _u64(ann * 2)
    b = _u64(x + inv // ann)

    y = inv
    for _ in range(NEWTON_ITERATIONS):
        y_prev = y

        numerator = y * y + c
        denominator = _u64(_u64(y * 2) + b) - inv
        y = _u64(numerator // denominator)

        if y.abs_diff(y_prev) <= 1:
            return y.value

    raise NonConvergence(f"Balance solver did not converge after {NEWTON_ITERATIONS} iterations")
