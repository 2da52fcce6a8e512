"""Shared fixtures for trip reconciliation tests."""

from collections.abc import Callable
from datetime import datetime

import pytest

from rail_insights.domain.models import Line, Stop, Trip

T1 = datetime(2024, 3, 6, 8, 15)


@pytest.fixture
def make_trip() -> Callable[..., Trip]:
    """Factory for trips with sensible defaults."""

    def _make_trip(
        trip_id: str = "1|100|0|80|6032024",
        fahrt_nr: str = "S41",
        stop_id: int = 42,
        line_id: str = "s-41",
        planned_when: datetime | None = T1,
        when: datetime | None = None,
        created_at: datetime | None = None,
        delay: int | None = 0,
        cancelled: bool = False,
        line_name: str | None = "S 41",
    ) -> Trip:
        return Trip(
            trip_id=trip_id,
            line=Line(fahrt_nr=fahrt_nr, line_id=line_id, product="suburban", name=line_name),
            stop=Stop(stop_id=stop_id),
            planned_when=planned_when,
            when=when,
            created_at=created_at,
            delay=delay,
            cancelled=cancelled,
        )

    return _make_trip
