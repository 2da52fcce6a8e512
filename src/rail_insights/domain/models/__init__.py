"""Domain models for trip reconciliation."""

from rail_insights.domain.models.line import Line
from rail_insights.domain.models.reconcile_mode import ReconcileMode
from rail_insights.domain.models.stop import Stop
from rail_insights.domain.models.trip import Trip

__all__ = [
    "Line",
    "ReconcileMode",
    "Stop",
    "Trip",
]
