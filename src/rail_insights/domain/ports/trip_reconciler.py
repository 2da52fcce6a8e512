"""Trip reconciler port."""

from typing import Protocol

from rail_insights.domain.models.trip import Trip


class TripReconciler(Protocol):
    """Port for collapsing repeated trip observations into canonical records."""

    def __call__(self, trips: list[Trip]) -> list[Trip]:
        """Return one trip per logical identity."""
        ...
