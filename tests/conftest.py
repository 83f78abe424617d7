"""Shared fixtures for the trade-journal test suite."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from trade_journal.journal.record import Direction, TradeRecord

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_trade(
    pnl: float | str | Decimal,
    *,
    timestamp: datetime | None = None,
    instrument: str = "EURUSD",
    direction: Direction = Direction.LONG,
    size: str = "0.10",
    notes: str = "",
    trade_id: str | None = None,
) -> TradeRecord:
    """Create a TradeRecord with a Decimal P/L."""
    kwargs = {}
    if trade_id is not None:
        kwargs["trade_id"] = trade_id
    return TradeRecord(
        profit_loss=Decimal(str(pnl)),
        timestamp=timestamp or BASE_TIME,
        instrument=instrument,
        direction=direction,
        size=Decimal(size),
        notes=notes,
        **kwargs,
    )


def make_history(pnls: list, *, start: datetime | None = None) -> list[TradeRecord]:
    """Build a trade list from P/L values given oldest first.

    Trades are one day apart and returned newest first, the order the
    storage layer serves them in.
    """
    bt = start or BASE_TIME
    trades = [
        make_trade(pnl, timestamp=bt + timedelta(days=i), trade_id=f"t{i}")
        for i, pnl in enumerate(pnls)
    ]
    return list(reversed(trades))


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
def mixed_history() -> list[TradeRecord]:
    """+100, -50, +200 (oldest first), newest first."""
    return make_history([100, -50, 200])


@pytest.fixture
def drawdown_history() -> list[TradeRecord]:
    """+500, -300, -400 (oldest first), newest first."""
    return make_history([500, -300, -400])
