"""Configuration management.

Loads from TOML config files + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from .enums import LogFormat
from .errors import ConfigError


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class AccountConfig(BaseModel):
    starting_balance: Decimal = Decimal("1000")  # Used when the input has none
    label: str = ""  # e.g. "Trader Forex"


class DisplayConfig(BaseModel):
    label_format: str = "%d %b"  # strftime pattern for equity-curve points
    decimal_places: int = Field(default=2, ge=0, le=10)
    currency_symbol: str = "$"


class CacheConfig(BaseModel):
    max_entries: int = Field(default=128, ge=1)


class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level application settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    account: AccountConfig = Field(default_factory=AccountConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "JOURNAL_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.

    Raises:
        ConfigError: The file is unreadable TOML or a value fails validation.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            try:
                with open(path, "rb") as f:
                    data = tomli.load(f)
            except tomli.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    if overrides:
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
