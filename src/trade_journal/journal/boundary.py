"""Conversion between the storage layer's wire records and journal types.

The storage collaborator serves trades as JSON rows shaped like::

    {"id": "...", "date": "2024-01-05T10:00:00Z", "pair": "EURUSD",
     "type": "BUY", "lot": 0.1, "pnl": -12.5, "notes": "..."}

newest first, and the account as ``{"initialBalance": 1000}``.  Rows are
validated here with pydantic; the statistics engine never validates.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.errors import AccountValidationError, BoundaryError, TradeValidationError
from ..core.ids import new_id
from .record import Account, Direction, TradeRecord


def _require_finite(value: Decimal) -> Decimal:
    if not value.is_finite():
        raise ValueError("must be a finite number")
    return value


class TradePayload(BaseModel):
    """One trade row as served by the storage layer."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    date: datetime
    pair: str = ""
    type: Direction = Direction.LONG
    lot: Decimal = Field(default=Decimal("0"), ge=0)
    pnl: Decimal
    notes: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> Any:
        # SERIAL primary keys arrive as integers
        return str(v) if isinstance(v, int) else v

    @field_validator("type", mode="before")
    @classmethod
    def _parse_side(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Direction.from_side(v)
        return v

    @field_validator("pnl", "lot")
    @classmethod
    def _finite(cls, v: Decimal) -> Decimal:
        return _require_finite(v)

    def to_record(self) -> TradeRecord:
        return TradeRecord(
            trade_id=self.id or new_id(),
            timestamp=self.date,
            instrument=self.pair,
            direction=self.type,
            size=self.lot,
            profit_loss=self.pnl,
            notes=self.notes or "",
        )


class AccountPayload(BaseModel):
    """The account row as served by the storage layer."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    initial_balance: Decimal = Field(alias="initialBalance", ge=0)
    label: str | None = None

    @field_validator("initial_balance")
    @classmethod
    def _finite(cls, v: Decimal) -> Decimal:
        return _require_finite(v)

    def to_account(self) -> Account:
        return Account(starting_balance=self.initial_balance, label=self.label or "")


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err.get('msg', 'invalid')}" if loc else err.get("msg", "invalid")


def parse_trades(rows: list[dict[str, Any]]) -> list[TradeRecord]:
    """Convert storage rows to trade records, keeping their order.

    Raises:
        TradeValidationError: A row is malformed; ``index`` is its position.
    """
    records = []
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise TradeValidationError(index, "expected an object")
        try:
            records.append(TradePayload.model_validate(row).to_record())
        except ValidationError as exc:
            raise TradeValidationError(index, _first_error(exc)) from exc
    return records


def parse_account(row: dict[str, Any]) -> Account:
    """Convert the storage account row to an :class:`Account`."""
    try:
        return AccountPayload.model_validate(row).to_account()
    except ValidationError as exc:
        raise AccountValidationError(_first_error(exc)) from exc


def load_document(data: Any) -> tuple[Account | None, list[TradeRecord]]:
    """Parse a journal document.

    Accepts either a bare list of trade rows or an object with
    ``initialBalance`` and ``trades`` keys.  The account is ``None`` when
    the document carries no balance.
    """
    if isinstance(data, list):
        return None, parse_trades(data)
    if not isinstance(data, dict):
        raise BoundaryError("Journal document must be a list or an object")

    rows = data.get("trades", [])
    if not isinstance(rows, list):
        raise BoundaryError("'trades' must be a list")
    account = parse_account(data) if "initialBalance" in data else None
    return account, parse_trades(rows)


def trade_to_wire(trade: TradeRecord) -> dict[str, Any]:
    """Convert a trade record back to the storage layer's row shape."""
    return {
        "id": trade.trade_id,
        "date": trade.timestamp.isoformat(),
        "pair": trade.instrument,
        "type": trade.direction.side,
        "lot": float(trade.size),
        "pnl": float(trade.profit_loss),
        "notes": trade.notes,
    }
