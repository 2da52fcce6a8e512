"""Parser for trip snapshots in the v6.db.transport.rest departure format.

Snapshots are read from already-fetched data (e.g., a JSON dump of polled
departures); nothing here talks to the network.
"""

import logging
from datetime import datetime
from typing import Any

from rail_insights.domain.models.line import Line
from rail_insights.domain.models.stop import Stop
from rail_insights.domain.models.trip import Trip

logger = logging.getLogger(__name__)


class TripSnapshotParser:
    """Parses departure/arrival dictionaries into Trip objects and back."""

    @staticmethod
    def parse_trips(entries: list[dict[str, Any]]) -> list[Trip]:
        """Parse trip snapshots, skipping entries that cannot be parsed.

        Args:
            entries: List of departure dictionaries (as returned by the API or
                stored with an additional ``createdAt`` field).

        Returns:
            List of Trip objects in input order.
        """
        results = []

        for entry in entries:
            trip = TripSnapshotParser._parse_trip(entry)
            if trip:
                results.append(trip)

        skipped = len(entries) - len(results)
        if skipped:
            logger.warning(f"Skipped {skipped} of {len(entries)} trip snapshots")
        return results

    @staticmethod
    def _parse_time(time_str: str | None) -> datetime | None:
        """Parse ISO 8601 time string."""
        if not time_str:
            return None

        try:
            return datetime.fromisoformat(time_str.replace("Z", "+00:00"))
        except ValueError:
            return None

    @staticmethod
    def _parse_delay(delay: Any) -> int | None:
        """Parse delay in seconds, keeping negative values (early)."""
        if delay is None:
            return None
        try:
            return int(delay)
        except (ValueError, TypeError):
            return None

    @staticmethod
    def _parse_line(line_data: Any) -> Line | None:
        """Extract line information. Requires a fahrt number."""
        if not isinstance(line_data, dict):
            return None
        fahrt_nr = line_data.get("fahrtNr")
        if not fahrt_nr:
            return None
        return Line(
            fahrt_nr=str(fahrt_nr),
            line_id=str(line_data.get("id", "")),
            product=str(line_data.get("product", "")),
            name=line_data.get("name"),
        )

    @staticmethod
    def _parse_stop(stop_data: Any) -> Stop | None:
        """Extract stop information. Stop ids are numeric (e.g., "8010205")."""
        if not isinstance(stop_data, dict):
            return None
        try:
            stop_id = int(stop_data.get("id", ""))
        except (ValueError, TypeError):
            return None
        return Stop(stop_id=stop_id, name=stop_data.get("name"))

    @staticmethod
    def _parse_trip(entry: dict[str, Any]) -> Trip | None:
        """Parse a single snapshot into a Trip object."""
        try:
            trip_id = entry.get("tripId")
            line = TripSnapshotParser._parse_line(entry.get("line"))
            stop = TripSnapshotParser._parse_stop(entry.get("stop"))
            if not trip_id or line is None or stop is None:
                logger.warning(f"Skipping incomplete trip snapshot: tripId={trip_id!r}")
                return None

            return Trip(
                trip_id=str(trip_id),
                line=line,
                stop=stop,
                planned_when=TripSnapshotParser._parse_time(entry.get("plannedWhen")),
                when=TripSnapshotParser._parse_time(entry.get("when")),
                created_at=TripSnapshotParser._parse_time(entry.get("createdAt")),
                delay=TripSnapshotParser._parse_delay(entry.get("delay")),
                cancelled=bool(entry.get("cancelled", False)),
            )
        except Exception as e:
            logger.warning(f"Error parsing trip snapshot: {e}")
            return None

    @staticmethod
    def serialize_trip(trip: Trip) -> dict[str, Any]:
        """Convert a Trip back into the snapshot dictionary format."""

        def _iso(value: datetime | None) -> str | None:
            return value.isoformat() if value is not None else None

        return {
            "tripId": trip.trip_id,
            "line": {
                "id": trip.line.line_id,
                "fahrtNr": trip.line.fahrt_nr,
                "name": trip.line.name,
                "product": trip.line.product,
            },
            "stop": {"id": str(trip.stop.stop_id), "name": trip.stop.name},
            "plannedWhen": _iso(trip.planned_when),
            "when": _iso(trip.when),
            "createdAt": _iso(trip.created_at),
            "delay": trip.delay,
            "cancelled": trip.cancelled,
        }
