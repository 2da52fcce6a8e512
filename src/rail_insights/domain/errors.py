"""Domain errors."""


class InvalidTripError(ValueError):
    """Raised when a trip lacks a reference required for reconciliation."""

    def __init__(self, trip_id: str, reason: str) -> None:
        """Initialize with the offending trip id and what is missing."""
        super().__init__(f"Invalid trip {trip_id!r}: {reason}")
        self.trip_id = trip_id
        self.reason = reason
