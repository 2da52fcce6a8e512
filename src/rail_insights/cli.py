"""Command line interface for reconciling stored trip snapshots."""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from rail_insights.adapters.config import AppConfig
from rail_insights.adapters.db_api import TripSnapshotParser
from rail_insights.application.services import TripReconciliationService
from rail_insights.application.trip_identity import canonical_date, date_fragment
from rail_insights.domain.models import ReconcileMode, Trip

logger = logging.getLogger(__name__)


def load_snapshots(source: str) -> list[dict[str, Any]]:
    """Load snapshot dictionaries from a JSON file, or stdin when source is "-".

    Accepts either a plain list or an API response object with a
    "departures" or "arrivals" list.
    """
    if source == "-":
        data = json.load(sys.stdin)
    else:
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Snapshot file not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

    if isinstance(data, dict):
        data = data.get("departures") or data.get("arrivals") or []
    if not isinstance(data, list):
        raise ValueError("Snapshot file must contain a list of trips")
    return data


def format_trip(trip: Trip) -> str:
    """Format a trip as a single summary line."""
    trip_date = canonical_date(trip)
    when = trip_date.strftime("%Y-%m-%d %H:%M") if trip_date else "unknown"
    line_name = trip.line.name or trip.line.line_id
    delay = f"{trip.delay:+d}s" if trip.delay is not None else "n/a"
    status = " cancelled" if trip.cancelled else ""
    return f"{when}  {line_name} ({trip.line.fahrt_nr}) stop {trip.stop.stop_id}  delay {delay}{status}"


def run_reconcile(source: str, mode: str, as_json: bool, config: AppConfig) -> int:
    """Reconcile snapshots from ``source`` and print the canonical trips."""
    trips = TripSnapshotParser.parse_trips(load_snapshots(source))
    service = TripReconciliationService(validate_records=config.validate_records)
    reconciled = service.reconcile(trips, ReconcileMode(mode))

    if as_json:
        payload = [TripSnapshotParser.serialize_trip(trip) for trip in reconciled]
        print(json.dumps(payload, indent=config.indent, ensure_ascii=False))
    else:
        print(f"\n{len(trips)} snapshot(s) -> {len(reconciled)} trip(s):\n")
        for trip in reconciled:
            print(f"  {format_trip(trip)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    parser = argparse.ArgumentParser(
        description="Rail Insights trip reconciliation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Collapse repeated observations of one run
  rail-insights reconcile snapshots.json

  # Several lines at one stop, JSON output
  rail-insights reconcile snapshots.json --mode multi --json

  # Trip id fragment for a service day
  rail-insights fragment 2024-03-06
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    reconcile_parser = subparsers.add_parser(
        "reconcile", help="Collapse duplicate trip snapshots"
    )
    reconcile_parser.add_argument("file", help="JSON file with trip snapshots ('-' for stdin)")
    reconcile_parser.add_argument(
        "--mode",
        choices=[m.value for m in ReconcileMode],
        default=config.reconcile_mode,
        help="Identity used for deduplication",
    )
    reconcile_parser.add_argument("--json", action="store_true", help="Output as JSON")

    fragment_parser = subparsers.add_parser(
        "fragment", help="Print the trip id fragment for a date"
    )
    fragment_parser.add_argument("date", help="Date in ISO format (e.g., 2024-03-06)")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "reconcile":
            return run_reconcile(args.file, args.mode, args.json, config)

        if args.command == "fragment":
            print(date_fragment(date.fromisoformat(args.date)))
            return 0

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
