"""Enumerations used across the trade journal."""

from enum import Enum


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    REPORT = "report"  # Statistics + equity curve in one JSON document
