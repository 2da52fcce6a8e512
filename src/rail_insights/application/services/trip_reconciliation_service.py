"""Trip reconciliation service."""

import logging

from rail_insights.application.reconciliation import (
    reconcile_multi_line,
    reconcile_single_line,
)
from rail_insights.domain.errors import InvalidTripError
from rail_insights.domain.models.reconcile_mode import ReconcileMode
from rail_insights.domain.models.trip import Trip
from rail_insights.domain.ports.trip_reconciler import TripReconciler

logger = logging.getLogger(__name__)

RECONCILERS: dict[ReconcileMode, TripReconciler] = {
    ReconcileMode.SINGLE: reconcile_single_line,
    ReconcileMode.MULTI: reconcile_multi_line,
}


class TripReconciliationService:
    """Service for reconciling batches of trip observations."""

    def __init__(self, validate_records: bool = True) -> None:
        """Initialize the service.

        Args:
            validate_records: Check line/stop references (and planned time in
                multi-line mode) before reconciling.
        """
        self._validate_records = validate_records

    def reconcile(self, trips: list[Trip], mode: ReconcileMode | str) -> list[Trip]:
        """Reconcile a batch of trips with the reconciler for ``mode``.

        Raises:
            ValueError: If ``mode`` is not a known reconciliation mode.
            InvalidTripError: If validation is enabled and a trip is incomplete.
        """
        mode = ReconcileMode(mode)
        if self._validate_records:
            self._validate(trips, mode)

        reconciled = RECONCILERS[mode](trips)

        removed = len(trips) - len(reconciled)
        if removed > 0:
            logger.debug(
                f"Reconciled {len(trips)} trips to {len(reconciled)} ({mode.value} line mode, "
                f"{removed} duplicates collapsed)"
            )
        else:
            logger.debug(f"No duplicates among {len(trips)} trips ({mode.value} line mode)")
        return reconciled

    def _validate(self, trips: list[Trip], mode: ReconcileMode) -> None:
        """Raise InvalidTripError for the first trip missing a required reference."""
        for trip in trips:
            if trip.line is None:
                raise InvalidTripError(trip.trip_id, "missing line")
            if trip.stop is None:
                raise InvalidTripError(trip.trip_id, "missing stop")
            if mode is ReconcileMode.MULTI and trip.planned_when is None:
                raise InvalidTripError(trip.trip_id, "missing planned time")
