"""Trip domain model."""

from dataclasses import dataclass
from datetime import datetime

from rail_insights.domain.models.line import Line
from rail_insights.domain.models.stop import Stop


@dataclass(frozen=True)
class Trip:
    """One observation (snapshot) of a trip at a stop.

    The same logical trip is usually observed several times while a feed is
    polled, so several Trip values may describe the same run at the same stop.
    """

    trip_id: str
    line: Line
    stop: Stop
    planned_when: datetime | None
    when: datetime | None = None
    created_at: datetime | None = None
    delay: int | None = None  # Seconds, positive means late
    cancelled: bool = False
