"""Trade journal analytics.

Key components
--------------
TradeRecord          One logged trade (immutable)
Account              Starting capital the history is measured against
compute_statistics   Win rate, profit factor, drawdown and balance snapshot
compute_equity_curve Running-balance series for charting
StatisticsCache      Collaborator-side memoisation of the two above
JournalExporter      CSV/JSON export of trades, curve and statistics
"""

from .boundary import load_document, parse_account, parse_trades, trade_to_wire
from .cache import StatisticsCache
from .equity import EquityPoint, compute_equity_curve
from .export import JournalExporter
from .record import Account, Direction, TradeOutcome, TradeRecord, newest_first
from .statistics import Statistics, compute_statistics, trade_growth

__all__ = [
    "Account",
    "Direction",
    "EquityPoint",
    "JournalExporter",
    "Statistics",
    "StatisticsCache",
    "TradeOutcome",
    "TradeRecord",
    "compute_equity_curve",
    "compute_statistics",
    "load_document",
    "newest_first",
    "parse_account",
    "parse_trades",
    "trade_growth",
    "trade_to_wire",
]
