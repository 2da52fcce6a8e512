"""Ports (interfaces) for the ports-and-adapters architecture."""

from rail_insights.domain.ports.trip_reconciler import TripReconciler

__all__ = [
    "TripReconciler",
]
