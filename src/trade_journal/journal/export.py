"""Journal export — CSV/JSON output of trades, equity curve and statistics.

Usage::

    exporter = JournalExporter()
    csv_str = exporter.trades_to_csv(trades, starting_balance=1000)
    report = exporter.report(stats, curve)
"""

from __future__ import annotations

import csv
import io
import json
import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from ..core.enums import ExportFormat
from ..core.errors import ExportError
from .boundary import trade_to_wire
from .equity import EquityPoint, compute_equity_curve
from .record import TradeRecord
from .statistics import Statistics, compute_statistics, trade_growth

logger = logging.getLogger(__name__)

# Default CSV columns
_TRADE_COLUMNS = [
    "id",
    "date",
    "pair",
    "type",
    "lot",
    "pnl",
    "outcome",
    "growth_pct",
    "notes",
]

_EQUITY_COLUMNS = ["date", "balance", "pnl"]


class JournalExporter:
    """Export journal data to CSV/JSON.

    Parameters
    ----------
    decimal_places : int
        Rounding precision for numeric fields.  Default 2.
    """

    def __init__(self, *, decimal_places: int = 2) -> None:
        self._dp = decimal_places

    # ------------------------------------------------------------------ #
    # Trades                                                               #
    # ------------------------------------------------------------------ #

    def trades_to_csv(
        self,
        trades: Sequence[TradeRecord],
        *,
        starting_balance: Decimal | None = None,
        columns: list[str] | None = None,
    ) -> str:
        """Export trades as a CSV string with a header row.

        ``growth_pct`` is left empty when no starting balance is given.
        """
        cols = columns or _TRADE_COLUMNS
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        for trade in trades:
            row = self._trade_to_row(trade, starting_balance)
            writer.writerow({c: row.get(c, "") for c in cols})
        return buf.getvalue()

    def trades_to_json(
        self,
        trades: Sequence[TradeRecord],
        *,
        starting_balance: Decimal | None = None,
        indent: int = 2,
    ) -> str:
        rows = [self._trade_to_row(t, starting_balance) for t in trades]
        return json.dumps(rows, indent=indent, default=str)

    # ------------------------------------------------------------------ #
    # Equity curve & statistics                                            #
    # ------------------------------------------------------------------ #

    def equity_to_csv(self, curve: Sequence[EquityPoint]) -> str:
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=_EQUITY_COLUMNS)
        writer.writeheader()
        for point in curve:
            writer.writerow(self._point_to_row(point))
        return buf.getvalue()

    def report(
        self,
        stats: Statistics,
        curve: Sequence[EquityPoint],
        *,
        indent: int = 2,
    ) -> str:
        """Statistics and equity curve as one JSON document."""
        stats_dict = {
            key: round(value, self._dp) if isinstance(value, float) else value
            for key, value in stats.to_dict().items()
        }
        return json.dumps(
            {
                "statistics": stats_dict,
                "equity_curve": [self._point_to_row(p) for p in curve],
            },
            indent=indent,
        )

    def render(
        self,
        fmt: ExportFormat | str,
        starting_balance: Decimal,
        trades: Sequence[TradeRecord],
        *,
        label_format: str = "%d %b",
    ) -> str:
        """Export in the named format.

        Raises:
            ExportError: ``fmt`` is not a known :class:`ExportFormat`.
        """
        try:
            fmt = ExportFormat(fmt)
        except ValueError as exc:
            raise ExportError(f"Unknown export format: {fmt!r}") from exc

        logger.debug("Exporting %d trades as %s", len(trades), fmt.value)
        if fmt is ExportFormat.CSV:
            return self.trades_to_csv(trades, starting_balance=starting_balance)
        if fmt is ExportFormat.JSON:
            return self.trades_to_json(trades, starting_balance=starting_balance)
        return self.report(
            compute_statistics(starting_balance, trades),
            compute_equity_curve(starting_balance, trades, label_format=label_format),
        )

    # ------------------------------------------------------------------ #
    # Private helpers                                                      #
    # ------------------------------------------------------------------ #

    def _trade_to_row(
        self, trade: TradeRecord, starting_balance: Decimal | None
    ) -> dict[str, Any]:
        dp = self._dp
        row = trade_to_wire(trade)
        row["pnl"] = round(row["pnl"], dp)
        row["outcome"] = trade.outcome.label
        row["growth_pct"] = (
            round(float(trade_growth(trade, starting_balance)), dp)
            if starting_balance is not None
            else None
        )
        return row

    def _point_to_row(self, point: EquityPoint) -> dict[str, Any]:
        row = point.to_dict()
        row["balance"] = round(row["balance"], self._dp)
        row["pnl"] = round(row["pnl"], self._dp)
        return row
