"""Canonical ID, timestamp and content-hash factories.

All timestamps produced here are ``datetime`` with ``tzinfo=timezone.utc``.
"""

from __future__ import annotations

import hashlib
import json
import uuid
from datetime import datetime, timezone
from typing import Any


def new_id() -> str:
    """Generate a new UUID v4 string.  Used for trade IDs."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def payload_hash(payload: Any, *, length: int = 16) -> str:
    """Generate a deterministic hash from a JSON-serializable value.

    Parameters
    ----------
    payload:
        Value to hash.  Serialized with sorted keys and ``default=str``.
    length:
        Number of hex characters to return (default 16).
    """
    raw = json.dumps(payload, sort_keys=True, default=str)
    return hashlib.sha256(raw.encode()).hexdigest()[:length]
