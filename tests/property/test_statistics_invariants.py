"""Property tests for statistics and equity-curve invariants.

Uses hypothesis to verify:
- wins + losses + break-even always partition the trade count
- current balance is exactly starting balance plus summed P/L
- win rate stays within [0, 100]; drawdown and profit factor are non-negative
- the equity curve ends on the current balance
- a non-decreasing balance never reports a drawdown
"""

from decimal import Decimal

from hypothesis import given, settings, strategies as st

from trade_journal.journal.equity import compute_equity_curve
from trade_journal.journal.statistics import compute_statistics

from ..conftest import make_history

pnl_values = st.decimals(
    min_value=Decimal("-5000"),
    max_value=Decimal("5000"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)
balances = st.decimals(
    min_value=Decimal("0"),
    max_value=Decimal("1000000"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)


@given(balance=balances, pnls=st.lists(pnl_values, max_size=40))
@settings(max_examples=200)
def test_counts_partition_trades(balance, pnls):
    stats = compute_statistics(balance, make_history(pnls))
    assert stats.total_trades == len(pnls)
    assert stats.wins + stats.losses + stats.break_even == stats.total_trades


@given(balance=balances, pnls=st.lists(pnl_values, max_size=40))
@settings(max_examples=200)
def test_current_balance_is_start_plus_pnl(balance, pnls):
    stats = compute_statistics(balance, make_history(pnls))
    assert stats.current_balance == balance + sum(pnls, Decimal("0"))
    assert stats.current_balance == stats.starting_balance + stats.total_profit


@given(balance=balances, pnls=st.lists(pnl_values, max_size=40))
@settings(max_examples=200)
def test_ratio_bounds(balance, pnls):
    stats = compute_statistics(balance, make_history(pnls))
    assert 0 <= stats.win_rate <= 100
    assert stats.max_drawdown >= 0
    assert stats.profit_factor >= 0
    assert stats.max_drawdown.is_finite()
    assert stats.profit_factor.is_finite()


@given(balance=balances, pnls=st.lists(pnl_values, max_size=40))
def test_profit_factor_without_losses_is_gross_profit(balance, pnls):
    non_losing = [abs(p) for p in pnls]
    stats = compute_statistics(balance, make_history(non_losing))
    assert stats.losses == 0
    assert stats.profit_factor == stats.gross_profit


@given(balance=balances, pnls=st.lists(pnl_values, max_size=40))
@settings(max_examples=200)
def test_equity_curve_ends_on_current_balance(balance, pnls):
    trades = make_history(pnls)
    curve = compute_equity_curve(balance, trades)
    stats = compute_statistics(balance, trades)
    assert len(curve) == len(pnls) + 1
    assert curve[0].balance == balance
    assert curve[-1].balance == stats.current_balance


@given(
    balance=balances,
    gains=st.lists(
        st.decimals(min_value=Decimal("0"), max_value=Decimal("5000"), places=2),
        max_size=40,
    ),
)
def test_non_decreasing_balance_has_no_drawdown(balance, gains):
    stats = compute_statistics(balance, make_history(gains))
    assert stats.max_drawdown == 0


@given(balance=balances, pnls=st.lists(pnl_values, max_size=20))
def test_idempotent(balance, pnls):
    trades = make_history(pnls)
    assert compute_statistics(balance, trades) == compute_statistics(balance, trades)
