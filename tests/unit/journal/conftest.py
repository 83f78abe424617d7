"""Shared fixtures for journal tests."""

import pytest

from trade_journal.journal.cache import StatisticsCache
from trade_journal.journal.export import JournalExporter


@pytest.fixture
def cache():
    return StatisticsCache(max_entries=4)


@pytest.fixture
def exporter():
    return JournalExporter(decimal_places=2)


@pytest.fixture
def wire_rows():
    """Storage-layer rows, newest first."""
    return [
        {
            "id": 3,
            "date": "2024-01-03T09:30:00Z",
            "pair": "XAUUSD",
            "type": "SELL",
            "lot": 0.5,
            "pnl": 200,
            "notes": "news spike",
        },
        {
            "id": 2,
            "date": "2024-01-02T14:00:00Z",
            "pair": "EURUSD",
            "type": "BUY",
            "lot": "0.10",
            "pnl": "-50",
            "notes": None,
        },
        {
            "id": 1,
            "date": "2024-01-01T08:15:00Z",
            "pair": "GBPUSD",
            "type": "buy",
            "lot": 1,
            "pnl": 100.0,
        },
    ]
