"""Helpers that derive the date and id fragments of a trip."""

from datetime import date, datetime

from rail_insights.domain.models.trip import Trip


def canonical_date(trip: Trip) -> datetime | None:
    """Return the date of a trip: planned time, else live time, else ingestion time."""
    for candidate in (trip.planned_when, trip.when, trip.created_at):
        if candidate is not None:
            return candidate
    return None


def date_fragment(day: date) -> str:
    """Convert a date to the fragment used inside upstream trip ids.

    Only the month is zero-padded, matching the feed's own format:
    2024-03-06 -> "6032024", 2024-12-25 -> "25122024".
    """
    return f"{day.day}{day.month:02d}{day.year}"
