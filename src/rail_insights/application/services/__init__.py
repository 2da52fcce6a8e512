"""Application services."""

from rail_insights.application.services.trip_reconciliation_service import (
    TripReconciliationService,
)

__all__ = ["TripReconciliationService"]
