"""In-memory selections that narrow a batch before it is reconciled.

These mirror the lookups a store runs to build a candidate batch, e.g. all
observations of one run at one stop on one day.
"""

from datetime import date, datetime

from rail_insights.application.trip_identity import date_fragment
from rail_insights.domain.models.trip import Trip


def trips_for_date(trips: list[Trip], day: date) -> list[Trip]:
    """Return trips whose trip id ends with the date fragment of ``day``.

    The fragment is the last "|"-separated segment of a trip id. Day is not
    zero-padded, so only an exact segment match separates 1 Jan from 11 Jan.
    """
    fragment = date_fragment(day)
    return [trip for trip in trips if trip.trip_id.rsplit("|", 1)[-1] == fragment]


def trips_for_run_at_stop(
    trips: list[Trip],
    fahrt_nr: str,
    stop_id: int,
    day: date,
    created_after: datetime | None = None,
) -> list[Trip]:
    """Return observations of one run at one stop on one day.

    Args:
        trips: Candidate observations.
        fahrt_nr: Fahrt number of the run.
        stop_id: Stop to look at.
        day: Service day, matched against the trip id fragment.
        created_after: If set, only observations ingested strictly after this time.
    """
    return [
        trip
        for trip in trips_for_date(trips, day)
        if trip.line.fahrt_nr == fahrt_nr
        and trip.stop.stop_id == stop_id
        and (
            created_after is None
            or (trip.created_at is not None and trip.created_at > created_after)
        )
    ]


def trips_at_stop_between(
    trips: list[Trip], stop_id: int, start: datetime, end: datetime
) -> list[Trip]:
    """Return trips at a stop whose planned time lies strictly between start and end."""
    return [
        trip
        for trip in trips
        if trip.stop.stop_id == stop_id
        and trip.planned_when is not None
        and start < trip.planned_when < end
    ]


def trips_for_line_name(trips: list[Trip], name: str) -> list[Trip]:
    """Return trips whose line display name equals ``name``."""
    return [trip for trip in trips if trip.line.name == name]
