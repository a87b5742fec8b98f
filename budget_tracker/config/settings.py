"""
Configuration Management for Budget Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The ledger engine itself is host-independent, so the only knobs are
storage key names, receipt wording and the file store location.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """
    Ledger engine settings.

    Loads configuration from BUDGET_TRACKER_* environment variables
    and the .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="BUDGET_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Key-value store keys
    transactions_key: str = Field(
        default="transactions",
        min_length=1,
        description="Key holding the serialized transaction collection"
    )
    goal_key: str = Field(
        default="savingsGoal",
        min_length=1,
        description="Key holding the serialized savings goal"
    )

    # Receipt / summary wording
    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Symbol prefixed to display amounts"
    )
    receipt_title: str = Field(
        default="Budget-Tracker Receipt",
        description="Header title of exported summaries"
    )
    receipt_footer: str = Field(
        default="Thank you!",
        description="Footer line of exported summaries (empty to omit)"
    )

    # File-backed store
    store_path: str = Field(
        default="budget_tracker.json",
        description="Path of the JSON file used by the file key-value store"
    )
    write_retry_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts for a file store write before giving up"
    )

    log_level: str = Field(
        default="INFO",
        description="Minimum level for the stdlib logger behind structlog"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept standard logging level names."""
        allowed = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {allowed}")
        return v.upper()


@lru_cache()
def get_settings() -> LedgerSettings:
    """
    Get ledger settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return LedgerSettings()
