"""Tests for the StableSwap invariant solvers."""

import pytest

from hybridswap.constants import U64_MAX
from hybridswap.errors import ArithmeticOverflow, InvalidInput, NonConvergence
from hybridswap.math import calc_d, calc_y
from hybridswap.math import invariant


class TestCalcD:
    """Tests for invariant D calculation."""

    def test_balanced_pool_equals_sum(self) -> None:
        """A balanced pool's invariant is exactly the sum of balances."""
        assert calc_d(1_000_000, 1_000_000, 100) == 2_000_000

    def test_small_balanced_pool(self) -> None:
        assert calc_d(500, 500, 100) == 1000

    def test_deep_pool_at_least_sum_order(self) -> None:
        """Deep balanced pool: D sits at the sum of balances."""
        d = calc_d(1_000_000_000_000, 1_000_000_000_000, 1000)
        assert d == 2_000_000_000_000

    def test_imbalanced_pool_below_sum(self) -> None:
        """Off balance, D lies between the geometric-mean bound and the sum."""
        bal0, bal1 = 1_000_000_000, 3_000_000_000
        d = calc_d(bal0, bal1, 50)

        # Constant-product limit: 2 * sqrt(x * y); constant-sum limit: x + y
        assert 2 * 1_732_050_807 < d < bal0 + bal1

    def test_higher_amp_moves_d_toward_sum(self) -> None:
        """Flatter curve (higher amp) gives a D closer to the sum."""
        low = calc_d(1_000_000_000, 3_000_000_000, 1)
        high = calc_d(1_000_000_000, 3_000_000_000, 10_000)
        assert low < high <= 4_000_000_000

    def test_symmetric_in_balances(self) -> None:
        """Swapping the balance order does not change D."""
        assert calc_d(123_456_789, 987_654_321, 200) == calc_d(987_654_321, 123_456_789, 200)

    def test_empty_pool_returns_zero(self) -> None:
        """Both balances zero is the degenerate empty pool."""
        assert calc_d(0, 0, 100) == 0

    def test_one_zero_balance_raises(self) -> None:
        """A single zero balance makes the invariant ill-posed."""
        with pytest.raises(InvalidInput):
            calc_d(0, 1_000_000, 100)
        with pytest.raises(InvalidInput):
            calc_d(1_000_000, 0, 100)

    def test_zero_amp_raises(self) -> None:
        with pytest.raises(InvalidInput):
            calc_d(1_000_000, 1_000_000, 0)

    def test_negative_balance_raises(self) -> None:
        with pytest.raises(InvalidInput):
            calc_d(-1, 1_000_000, 100)

    def test_balance_above_u64_raises(self) -> None:
        with pytest.raises(InvalidInput):
            calc_d(U64_MAX + 1, 1_000_000, 100)

    def test_sum_overflow_detected(self) -> None:
        """Balances whose sum exceeds u64 fail instead of wrapping."""
        with pytest.raises(ArithmeticOverflow):
            calc_d(U64_MAX, U64_MAX, 100)

    def test_intermediate_overflow_detected(self) -> None:
        """A u128 intermediate overflow fails instead of wrapping."""
        with pytest.raises(ArithmeticOverflow):
            calc_d(2**62, 2**62, 100_000)

    def test_non_convergence_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Running out of iterations is an error, never a partial result."""
        monkeypatch.setattr(invariant, "NEWTON_ITERATIONS", 1)
        with pytest.raises(NonConvergence):
            calc_d(1_000_000_000, 3_000_000_000, 50)


class TestCalcY:
    """Tests for solving the complementary balance."""

    def test_recovers_balance_on_balanced_pool(self) -> None:
        """calc_y at the current input balance recovers the output balance."""
        d = calc_d(1_000_000, 1_000_000, 100)
        y = calc_y(1_000_000, d, 100)
        assert abs(y - 1_000_000) <= 1

    @pytest.mark.parametrize("amp", [1, 10, 100, 1000, 100_000])
    def test_recovers_balance_across_amps(self, amp: int) -> None:
        """Round trip along the invariant holds for flat and curved pools."""
        bal = 1_000_000_000_000
        d = calc_d(bal, bal, amp)
        assert abs(calc_y(bal, d, amp) - bal) <= 1

    def test_recovers_balance_on_imbalanced_pool(self) -> None:
        """A 3:1 pool round-trips within one unit."""
        bal0, bal1 = 1_000_000_000, 3_000_000_000
        d = calc_d(bal0, bal1, 50)
        y = calc_y(bal0, d, 50)
        assert abs(y - bal1) <= 1

    @pytest.mark.parametrize("amp", [1, 10, 100, 1000, 10_000])
    @pytest.mark.parametrize(
        ("bal0", "bal1"),
        [
            (1_000_000_000, 10_000_000_000),
            (10_000_000_000, 1_000_000_000),
            (300_000_000_000, 1_000_000_000_000),
            (123_456_789, 987_654_321),
            (700_000, 5_000_000),
        ],
    )
    def test_round_trip_up_to_tenfold_imbalance(self, bal0: int, bal1: int, amp: int) -> None:
        """Up to 10:1, truncation in the solvers costs at most two units."""
        d = calc_d(bal0, bal1, amp)
        assert abs(calc_y(bal0, d, amp) - bal1) <= 2

    def test_round_trip_error_on_extreme_imbalance(self) -> None:
        """Far off balance the truncated c = D*D // 2x * D // 2ann term grows the error.

        The program evaluates c in this order, so the simulator keeps the
        larger error rather than diverging from it.
        """
        bal0, bal1 = 78_185_010, 821_492_071_001
        d = calc_d(bal0, bal1, 1)
        assert abs(calc_y(bal0, d, 1) - bal1) <= 5

    def test_more_input_means_less_output_balance(self) -> None:
        """Adding to the input side lowers the solved output balance."""
        d = calc_d(1_000_000_000, 1_000_000_000, 100)
        y_small = calc_y(1_001_000_000, d, 100)
        y_large = calc_y(1_100_000_000, d, 100)
        assert y_large < y_small < 1_000_000_000

    def test_zero_input_balance_raises(self) -> None:
        """new_balance_in == 0 is rejected before iterating."""
        with pytest.raises(InvalidInput):
            calc_y(0, 2_000_000, 100)

    def test_zero_amp_raises(self) -> None:
        with pytest.raises(InvalidInput):
            calc_y(1_000_000, 2_000_000, 0)

    def test_non_convergence_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(invariant, "NEWTON_ITERATIONS", 1)
        d = calc_d(1_000_000_000, 1_000_000_000, 100)
        with pytest.raises(NonConvergence):
            calc_y(1_500_000_000, d, 100)
