"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rail_insights.domain.models.reconcile_mode import ReconcileMode


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="RAIL_INSIGHTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    reconcile_mode: str = Field(
        default="single",
        description="Reconciliation mode: 'single' (one fahrt per batch) or 'multi' (several lines)",
    )
    log_level: str = Field(default="INFO", description="Logging level name (e.g., 'DEBUG')")
    validate_records: bool = Field(
        default=True,
        description="Reject trips with missing line/stop references before reconciling",
    )
    indent: int = Field(default=2, description="Indentation for JSON output")

    @field_validator("reconcile_mode")
    @classmethod
    def validate_reconcile_mode(cls, v: str) -> str:
        """Validate reconcile mode is either 'single' or 'multi'."""
        v = v.lower()
        if v not in {mode.value for mode in ReconcileMode}:
            raise ValueError("reconcile_mode must be either 'single' or 'multi'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level
