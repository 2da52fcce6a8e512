"""Adapters layer - configuration and data format integrations."""

from rail_insights.adapters.config import AppConfig
from rail_insights.adapters.db_api import TripSnapshotParser

__all__ = [
    "AppConfig",
    "TripSnapshotParser",
]
