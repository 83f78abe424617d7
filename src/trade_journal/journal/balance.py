"""Chronological running-balance walk shared by statistics and equity curve.

Trades reach the engine newest first, the storage layer's display order.
Drawdown and the equity curve both need the balance reconstructed oldest
first, so both go through :func:`walk_balances` and can never disagree on
the final balance.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from decimal import Decimal, InvalidOperation, localcontext

from .record import TradeRecord, to_decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@contextmanager
def engine_context() -> Iterator[None]:
    """Thread-local decimal context for engine arithmetic.

    The ``InvalidOperation`` trap is disabled so a caller-supplied NaN
    propagates into the result (comparisons against it are false) instead
    of raising.
    """
    with localcontext() as ctx:
        ctx.traps[InvalidOperation] = False
        yield


def walk_balances(
    starting_balance: Decimal,
    trades: Sequence[TradeRecord],
) -> Iterator[tuple[TradeRecord, Decimal]]:
    """Yield ``(trade, balance_after_trade)`` oldest first.

    ``trades`` must be newest first.  The input is snapshotted, never
    mutated.
    """
    running = starting_balance
    for trade in reversed(tuple(trades)):
        running = running + trade.profit_loss
        yield trade, running


def drawdown_pct(peak: Decimal, balance: Decimal) -> Decimal:
    """Percentage decline of ``balance`` from ``peak``.

    Undefined for a non-positive peak; contributes ``0`` there.
    """
    if not peak > ZERO:
        return ZERO
    return (peak - balance) / peak * HUNDRED
