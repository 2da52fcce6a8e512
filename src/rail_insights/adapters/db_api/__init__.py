"""Adapters for the v6.db.transport.rest data format."""

from rail_insights.adapters.db_api.trip_parser import TripSnapshotParser

__all__ = ["TripSnapshotParser"]
