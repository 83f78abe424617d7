"""Custom exception hierarchy for the trade journal.

The statistics engine itself raises none of these: its edge cases have
defined fallback values. They are raised by the collaborator-facing layers
(configuration, input boundary, export).
"""


class JournalError(Exception):
    """Base exception for all trade journal errors."""


# --- Configuration ---
class ConfigError(JournalError):
    """Invalid or missing configuration."""


# --- Boundary ---
class BoundaryError(JournalError):
    """Collaborator data could not be converted into journal types."""


class TradeValidationError(BoundaryError):
    """A trade record from the storage layer is malformed."""

    def __init__(self, index: int, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(f"Trade #{index}: {reason}")


class AccountValidationError(BoundaryError):
    """The account record from the storage layer is malformed."""


# --- Export ---
class ExportError(JournalError):
    """Export format or destination error."""
