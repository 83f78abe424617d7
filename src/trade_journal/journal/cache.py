"""Memoisation of engine results for the rendering layer.

The engine recomputes everything on every call.  When a view re-renders
with an unchanged history, :class:`StatisticsCache` returns the previous
result instead.  Entries are keyed on the starting balance and a content
hash of the trade list, so any added, deleted or re-ordered trade misses.

Usage::

    cache = StatisticsCache(max_entries=64)
    stats = cache.statistics(account.starting_balance, trades)
    curve = cache.equity_curve(account.starting_balance, trades)
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any

from ..core.ids import payload_hash
from .balance import to_decimal
from .equity import DEFAULT_LABEL_FORMAT, EquityPoint, compute_equity_curve
from .record import TradeRecord
from .statistics import Statistics, compute_statistics

logger = logging.getLogger(__name__)


def trades_fingerprint(trades: Sequence[TradeRecord]) -> str:
    """Content hash of a trade list; sensitive to order and every field."""
    return payload_hash(
        [
            [t.trade_id, t.timestamp.isoformat(), str(t.profit_loss), t.instrument,
             t.direction.value, str(t.size), t.notes]
            for t in trades
        ],
        length=32,
    )


class StatisticsCache:
    """Bounded LRU cache over :func:`compute_statistics` and
    :func:`compute_equity_curve`.

    Parameters
    ----------
    max_entries : int
        Maximum cached results across both kinds.  Default 128.
    """

    def __init__(self, *, max_entries: int = 128) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self._max_entries = max_entries
        self._entries: OrderedDict[tuple, Any] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def statistics(
        self,
        starting_balance: Decimal | int | float | str,
        trades: Sequence[TradeRecord],
    ) -> Statistics:
        start = to_decimal(starting_balance)
        key = ("statistics", str(start), trades_fingerprint(trades))
        return self._get_or_compute(key, lambda: compute_statistics(start, trades))

    def equity_curve(
        self,
        starting_balance: Decimal | int | float | str,
        trades: Sequence[TradeRecord],
        *,
        label_format: str = DEFAULT_LABEL_FORMAT,
    ) -> list[EquityPoint]:
        start = to_decimal(starting_balance)
        key = ("equity", str(start), label_format, trades_fingerprint(trades))
        curve = self._get_or_compute(
            key,
            lambda: tuple(compute_equity_curve(start, trades, label_format=label_format)),
        )
        return list(curve)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _get_or_compute(self, key: tuple, compute: Callable[[], Any]) -> Any:
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                self.hits += 1
                logger.debug("Statistics cache hit: %s", key[0])
                return self._entries[key]

        value = compute()

        with self._lock:
            self.misses += 1
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)
        logger.debug("Statistics cache miss: %s (%d entries)", key[0], len(self._entries))
        return value
