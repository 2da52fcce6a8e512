"""Configuration adapters."""

from rail_insights.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
