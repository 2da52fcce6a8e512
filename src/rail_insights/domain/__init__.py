"""Domain layer - core models and ports."""

from rail_insights.domain.errors import InvalidTripError
from rail_insights.domain.models import Line, ReconcileMode, Stop, Trip
from rail_insights.domain.ports import TripReconciler

__all__ = [
    "InvalidTripError",
    "Line",
    "ReconcileMode",
    "Stop",
    "Trip",
    "TripReconciler",
]
