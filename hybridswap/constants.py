"""Pool parameters for the hybrid StableSwap program.

Centralizes the protocol constants the simulator mirrors. Values match the
on-chain program; changing them breaks parity with it.
"""

# Integer widths. Balances, supplies and amps are u64; intermediates are u128.
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1
U256_MAX = 2**256 - 1

# Timestamps and durations are i64
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

# Amplification coefficient bounds
MIN_AMP = 1
MAX_AMP = 100_000

# Swap fee charged on output, in basis points (30 = 0.3%)
DEFAULT_FEE_BPS = 30

# Share of the swap fee retained by the pool authority, in percent
ADMIN_FEE_PCT = 50

# Smallest swap input and deposit the program accepts
MIN_SWAP = 100_000
MIN_DEPOSIT = 100_000_000

# Newton-Raphson iteration cap for both invariant solvers
NEWTON_ITERATIONS = 255

# Shortest amp ramp the program accepts
RAMP_MIN_DURATION = 86_400  # 1 day

# Basis-point denominator for fees and slippage
BPS_DENOMINATOR = 10_000

# Fixed-point scale for prices, virtual price and price impact (1e18 == 1.0)
PRICE_PRECISION = 10**18
