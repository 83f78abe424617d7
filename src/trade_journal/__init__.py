"""Trade journal analytics.

Derives performance statistics and an equity curve from a recorded trade
history and the account's starting capital.
"""

from .journal.equity import EquityPoint, compute_equity_curve
from .journal.record import Account, Direction, TradeOutcome, TradeRecord
from .journal.statistics import Statistics, compute_statistics

__version__ = "0.1.0"

__all__ = [
    "Account",
    "Direction",
    "EquityPoint",
    "Statistics",
    "TradeOutcome",
    "TradeRecord",
    "compute_equity_curve",
    "compute_statistics",
]
