"""Performance statistics for a trade history.

:func:`compute_statistics` is a pure function of the starting balance and
the trade list: nothing is cached or retained between calls, and every
division it introduces has a defined fallback, so an empty history, a zero
balance or a run without losses never yields NaN or Infinity.

Usage::

    stats = compute_statistics(account.starting_balance, trades)
    print(stats.win_rate, stats.max_drawdown)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any

from .balance import HUNDRED, ZERO, drawdown_pct, engine_context, to_decimal, walk_balances
from .record import TradeRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Statistics:
    """Aggregate performance snapshot.

    ``win_rate``, ``max_drawdown`` and ``roi`` are percentages (0-100
    scale).  ``gross_loss`` is the absolute value of the summed losses.
    """

    total_trades: int = 0
    wins: int = 0
    losses: int = 0
    break_even: int = 0
    win_rate: Decimal = ZERO
    total_profit: Decimal = ZERO
    current_balance: Decimal = ZERO
    profit_factor: Decimal = ZERO
    max_drawdown: Decimal = ZERO

    # Supplementary
    starting_balance: Decimal = ZERO
    gross_profit: Decimal = ZERO
    gross_loss: Decimal = ZERO
    roi: Decimal = ZERO

    def to_dict(self) -> dict[str, Any]:
        """Render-ready dict with camelCase keys and float values."""
        raw = asdict(self)
        return {
            _CAMEL_KEYS[key]: float(value) if isinstance(value, Decimal) else value
            for key, value in raw.items()
        }

    def summary(self, *, currency: str = "$", decimal_places: int = 2) -> dict[str, str]:
        """Formatted dashboard strings."""
        dp = decimal_places
        return {
            "balance": f"{currency}{self.current_balance:.{dp}f}",
            "roi": f"{self.roi:.{dp}f}% ROI",
            "win_rate": f"{self.win_rate:.1f}%",
            "record": f"{self.wins}W - {self.losses}L",
            "profit_factor": f"{self.profit_factor:.2f}",
            "trades": f"{self.total_trades} Total Trade",
            "max_drawdown": f"{self.max_drawdown:.2f}%",
        }


_CAMEL_KEYS = {
    "total_trades": "totalTrades",
    "wins": "wins",
    "losses": "losses",
    "break_even": "breakEven",
    "win_rate": "winRate",
    "total_profit": "totalProfit",
    "current_balance": "currentBalance",
    "profit_factor": "profitFactor",
    "max_drawdown": "maxDrawdown",
    "starting_balance": "startingBalance",
    "gross_profit": "grossProfit",
    "gross_loss": "grossLoss",
    "roi": "roi",
}


def compute_statistics(
    starting_balance: Decimal | int | float | str,
    trades: Sequence[TradeRecord],
) -> Statistics:
    """Compute performance statistics.

    Parameters
    ----------
    starting_balance:
        Account capital before the first trade.  Not validated; zero and
        negative values are accepted.
    trades:
        Trade history, newest first.  Not mutated.

    Returns
    -------
    Statistics
        ``profit_factor`` is ``gross_profit`` when there are no losing
        trades (``0`` when there are no winners either).  ``max_drawdown``
        ignores points where the running peak is not positive.
    """
    start = to_decimal(starting_balance)

    with engine_context():
        total_trades = wins = losses = break_even = 0
        total_profit = gross_profit = gross_loss = ZERO
        peak = start
        max_drawdown = ZERO
        undefined_peak = False

        for trade, balance in walk_balances(start, trades):
            pnl = trade.profit_loss
            total_trades += 1
            total_profit += pnl
            if pnl > ZERO:
                wins += 1
                gross_profit += pnl
            elif pnl < ZERO:
                losses += 1
                gross_loss -= pnl
            else:
                break_even += 1

            if balance > peak:
                peak = balance
            if not peak > ZERO:
                undefined_peak = True
            drawdown = drawdown_pct(peak, balance)
            if drawdown > max_drawdown:
                max_drawdown = drawdown

        if undefined_peak:
            logger.debug(
                "Non-positive peak balance (start=%s); drawdown contribution set to 0",
                start,
            )

        win_rate = Decimal(wins) / Decimal(total_trades) * HUNDRED if total_trades else ZERO
        if gross_loss == ZERO:
            profit_factor = gross_profit
        else:
            profit_factor = gross_profit / gross_loss
        roi = total_profit / start * HUNDRED if start != ZERO else ZERO

        return Statistics(
            total_trades=total_trades,
            wins=wins,
            losses=losses,
            break_even=break_even,
            win_rate=win_rate,
            total_profit=total_profit,
            current_balance=start + total_profit,
            profit_factor=profit_factor,
            max_drawdown=max_drawdown,
            starting_balance=start,
            gross_profit=gross_profit,
            gross_loss=gross_loss,
            roi=roi,
        )


def trade_growth(
    trade: TradeRecord,
    starting_balance: Decimal | int | float | str,
) -> Decimal:
    """A trade's P/L as a percentage of the starting balance (0 on zero balance)."""
    start = to_decimal(starting_balance)
    with engine_context():
        if start == ZERO:
            return ZERO
        return trade.profit_loss / start * HUNDRED
