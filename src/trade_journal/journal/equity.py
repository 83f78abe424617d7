"""Equity curve derivation for charting.

One synthetic ``Start`` point at the starting balance, then one point per
trade (oldest first) with the running balance after the trade and the
trade's own P/L.  The balance series feeds the cumulative-balance chart,
the ``pnl`` series the per-trade P/L chart.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from .balance import ZERO, engine_context, to_decimal, walk_balances
from .record import TradeRecord

START_LABEL = "Start"
DEFAULT_LABEL_FORMAT = "%d %b"


@dataclass(frozen=True)
class EquityPoint:
    """A single point on the equity curve."""

    label: str
    balance: Decimal
    pnl: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.label, "balance": float(self.balance), "pnl": float(self.pnl)}


def compute_equity_curve(
    starting_balance: Decimal | int | float | str,
    trades: Sequence[TradeRecord],
    *,
    label_format: str = DEFAULT_LABEL_FORMAT,
) -> list[EquityPoint]:
    """Build the equity curve.

    Parameters
    ----------
    starting_balance:
        Account capital before the first trade.
    trades:
        Trade history, newest first.  Not mutated.
    label_format:
        ``strftime`` pattern applied to each trade's timestamp.

    Returns
    -------
    list[EquityPoint]
        ``len(trades) + 1`` points; the last balance equals
        ``compute_statistics(...).current_balance``.
    """
    start = to_decimal(starting_balance)
    curve = [EquityPoint(label=START_LABEL, balance=start, pnl=ZERO)]
    with engine_context():
        for trade, balance in walk_balances(start, trades):
            curve.append(
                EquityPoint(
                    label=trade.timestamp.strftime(label_format),
                    balance=balance,
                    pnl=trade.profit_loss,
                )
            )
    return curve
