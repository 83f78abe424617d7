"""Trade record and account — the core data model.

A TradeRecord is one realized trade as logged by the user.  It is
immutable once created: editing a trade means deleting it and logging a
new one.  The statistics engine consumes only ``profit_loss`` and the
order in which records are supplied; every other field is carried for
display and export.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from ..core.ids import new_id, utc_now


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a numeric input to ``Decimal`` without binary float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


class Direction(str, enum.Enum):
    """Position direction of a trade."""

    LONG = "long"
    SHORT = "short"

    @classmethod
    def from_side(cls, side: str) -> Direction:
        """Map a storage-layer side (``"BUY"`` / ``"SELL"``) to a direction."""
        normalized = side.strip().upper()
        if normalized in ("BUY", "LONG"):
            return cls.LONG
        if normalized in ("SELL", "SHORT"):
            return cls.SHORT
        raise ValueError(f"Unknown trade side: {side!r}")

    @property
    def side(self) -> str:
        """Storage-layer side name."""
        return "BUY" if self is Direction.LONG else "SELL"


class TradeOutcome(str, enum.Enum):
    """Win / loss / break-even classification."""

    WIN = "win"
    LOSS = "loss"
    BREAKEVEN = "breakeven"

    @classmethod
    def classify(cls, pnl: Decimal) -> TradeOutcome:
        if pnl > 0:
            return cls.WIN
        if pnl < 0:
            return cls.LOSS
        return cls.BREAKEVEN

    @property
    def label(self) -> str:
        """Short badge text shown next to a trade."""
        return _OUTCOME_LABELS[self]


_OUTCOME_LABELS = {
    TradeOutcome.WIN: "WIN",
    TradeOutcome.LOSS: "LOSS",
    TradeOutcome.BREAKEVEN: "BE",
}


@dataclass(frozen=True)
class TradeRecord:
    """A single logged trade.

    Parameters
    ----------
    trade_id : str
        Unique identifier (UUID by default), never reused.
    timestamp : datetime
        When the trade was closed/recorded.  Need not be unique.
    instrument : str
        Free-form label, e.g. ``"EURUSD"``.
    direction : Direction
        ``LONG`` or ``SHORT``.
    size : Decimal
        Lot size.  Display only.
    profit_loss : Decimal
        Realized gain (positive) or loss (negative) in account currency.
    notes : str
        Optional free text.
    """

    profit_loss: Decimal
    instrument: str = ""
    direction: Direction = Direction.LONG
    size: Decimal = Decimal("0")
    timestamp: datetime = field(default_factory=utc_now)
    notes: str = ""
    trade_id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        # Frozen: normalise numeric fields in place so the engine only sees Decimal.
        object.__setattr__(self, "profit_loss", to_decimal(self.profit_loss))
        object.__setattr__(self, "size", to_decimal(self.size))

    @property
    def outcome(self) -> TradeOutcome:
        return TradeOutcome.classify(self.profit_loss)


@dataclass(frozen=True)
class Account:
    """Account context for statistics: the capital the history started from."""

    starting_balance: Decimal
    label: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "starting_balance", to_decimal(self.starting_balance))


def newest_first(trades: list[TradeRecord]) -> list[TradeRecord]:
    """Return trades in display order: most recent first.

    The sort is stable, so trades sharing a timestamp keep their relative
    storage order.
    """
    return sorted(trades, key=lambda t: t.timestamp, reverse=True)
