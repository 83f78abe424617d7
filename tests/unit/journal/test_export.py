"""Tests for JournalExporter — CSV/JSON export and combined report."""

import csv
import io
import json
from decimal import Decimal

import pytest

from trade_journal.core.enums import ExportFormat
from trade_journal.core.errors import ExportError
from trade_journal.journal.equity import compute_equity_curve
from trade_journal.journal.statistics import compute_statistics

from ...conftest import make_history


class TestTradesCSV:
    def test_header(self, exporter, mixed_history):
        reader = csv.DictReader(io.StringIO(exporter.trades_to_csv(mixed_history)))
        assert reader.fieldnames == [
            "id", "date", "pair", "type", "lot", "pnl", "outcome", "growth_pct", "notes",
        ]

    def test_row_count(self, exporter, mixed_history):
        rows = list(csv.reader(io.StringIO(exporter.trades_to_csv(mixed_history))))
        assert len(rows) == 4  # header + 3 data rows

    def test_keeps_input_order(self, exporter, mixed_history):
        reader = csv.DictReader(io.StringIO(exporter.trades_to_csv(mixed_history)))
        assert [row["id"] for row in reader] == ["t2", "t1", "t0"]

    def test_outcome_and_growth(self, exporter, mixed_history):
        csv_str = exporter.trades_to_csv(mixed_history, starting_balance=Decimal("1000"))
        rows = list(csv.DictReader(io.StringIO(csv_str)))
        assert rows[1]["outcome"] == "LOSS"
        assert float(rows[1]["growth_pct"]) == pytest.approx(-5.0)
        assert rows[0]["outcome"] == "WIN"

    def test_growth_empty_without_balance(self, exporter, mixed_history):
        rows = list(csv.DictReader(io.StringIO(exporter.trades_to_csv(mixed_history))))
        assert rows[0]["growth_pct"] == ""

    def test_custom_columns(self, exporter, mixed_history):
        csv_str = exporter.trades_to_csv(mixed_history, columns=["id", "pnl"])
        reader = csv.DictReader(io.StringIO(csv_str))
        assert set(reader.fieldnames) == {"id", "pnl"}

    def test_empty_trades(self, exporter):
        rows = list(csv.DictReader(io.StringIO(exporter.trades_to_csv([]))))
        assert rows == []


class TestTradesJSON:
    def test_valid_list(self, exporter, mixed_history):
        data = json.loads(exporter.trades_to_json(mixed_history))
        assert isinstance(data, list)
        assert len(data) == 3
        assert data[0]["pnl"] == 200.0
        assert data[0]["type"] == "BUY"


class TestEquityCSV:
    def test_rows(self, exporter, mixed_history):
        curve = compute_equity_curve(Decimal("1000"), mixed_history)
        rows = list(csv.DictReader(io.StringIO(exporter.equity_to_csv(curve))))
        assert rows[0] == {"date": "Start", "balance": "1000.0", "pnl": "0.0"}
        assert rows[-1]["balance"] == "1250.0"


class TestReport:
    def test_contains_statistics_and_curve(self, exporter, drawdown_history):
        stats = compute_statistics(Decimal("1000"), drawdown_history)
        curve = compute_equity_curve(Decimal("1000"), drawdown_history)
        data = json.loads(exporter.report(stats, curve))
        assert data["statistics"]["maxDrawdown"] == 46.67
        assert data["statistics"]["currentBalance"] == 800.0
        assert len(data["equity_curve"]) == 4

    def test_empty_history(self, exporter):
        stats = compute_statistics(Decimal("1000"), [])
        curve = compute_equity_curve(Decimal("1000"), [])
        data = json.loads(exporter.report(stats, curve))
        assert data["statistics"]["totalTrades"] == 0
        assert data["statistics"]["profitFactor"] == 0.0


class TestRender:
    def test_csv(self, exporter, mixed_history):
        out = exporter.render(ExportFormat.CSV, Decimal("1000"), mixed_history)
        assert out.startswith("id,date,pair")

    def test_json_by_name(self, exporter, mixed_history):
        out = exporter.render("json", Decimal("1000"), mixed_history)
        assert json.loads(out)[2]["growth_pct"] == 10.0

    def test_report(self, exporter):
        out = exporter.render("report", Decimal("1000"), make_history([10, 20]))
        assert json.loads(out)["statistics"]["profitFactor"] == 30.0

    def test_unknown_format(self, exporter, mixed_history):
        with pytest.raises(ExportError, match="xml"):
            exporter.render("xml", Decimal("1000"), mixed_history)
