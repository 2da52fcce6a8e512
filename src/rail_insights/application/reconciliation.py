"""Collapse repeated observations of the same trip into canonical records.

A live feed is polled repeatedly, so one trip at one stop is usually stored
several times with different delays. Both reconcilers keep the first
observation of every identity as the survivor, then swap in the duplicate with
the highest delay while keeping the survivor's planned time.

Input lists and the trips in them are never modified. Replaced entries are new
Trip values built with dataclasses.replace.
"""

from collections.abc import Callable, Hashable
from dataclasses import replace

from rail_insights.domain.models.trip import Trip

TripKey = Callable[[Trip], Hashable]


def _single_line_identity(trip: Trip) -> Hashable:
    return (trip.line.fahrt_nr, trip.stop.stop_id)


def _multi_line_identity(trip: Trip) -> Hashable:
    return (trip.line.fahrt_nr, trip.planned_when)


def _stop_scope(trip: Trip) -> Hashable:
    return trip.stop.stop_id


def _stop_and_line_scope(trip: Trip) -> Hashable:
    return (trip.stop.stop_id, trip.line.line_id)


def _delay_rank(trip: Trip) -> tuple[bool, int]:
    """Sort key for delays where an unknown delay ranks below any known one."""
    return (trip.delay is not None, trip.delay or 0)


def _mark_duplicates(trips: list[Trip], identity: TripKey) -> list[int]:
    """Return positions of trips that repeat an earlier trip's identity.

    Positions are listed in the order the pair scan (outer i, inner j) first
    marks them.
    """
    keys = [identity(trip) for trip in trips]
    marked: list[int] = []
    seen: set[int] = set()
    for i in range(len(trips)):
        for j in range(i + 1, len(trips)):
            if j not in seen and keys[i] == keys[j]:
                marked.append(j)
                seen.add(j)
    return marked


def _select_best_delay(trips: list[Trip], marked: list[int], scope: TripKey) -> list[Trip]:
    """Drop marked trips, then give every survivor the best delay of its scope.

    The pool for a survivor is every dropped duplicate sharing its scope key.
    On equal delays the first duplicate in marking order wins.
    """
    duplicates = [trips[j] for j in marked]
    marked_positions = set(marked)
    survivors = [trip for index, trip in enumerate(trips) if index not in marked_positions]

    result: list[Trip] = []
    for survivor in survivors:
        scope_key = scope(survivor)
        pool = [duplicate for duplicate in duplicates if scope(duplicate) == scope_key]
        if not pool:
            result.append(survivor)
            continue

        winner = max(pool, key=_delay_rank)
        result.append(
            replace(winner, trip_id=winner.trip_id, planned_when=survivor.planned_when)
        )
    return result


def reconcile_single_line(trips: list[Trip]) -> list[Trip]:
    """Deduplicate trips of one run, keyed by (fahrt number, stop).

    The best-delay pool of a survivor is matched on stop only; the fahrt number
    is not checked again at that step.

    Args:
        trips: Observations, ordered as fetched.

    Returns:
        The same list object when nothing repeats, otherwise a new list with
        one entry per surviving (fahrt number, stop). Survivors of other runs
        at the same stop take the same winner.
    """
    marked = _mark_duplicates(trips, _single_line_identity)
    if not marked:
        return trips
    return _select_best_delay(trips, marked, _stop_scope)


def reconcile_multi_line(trips: list[Trip]) -> list[Trip]:
    """Deduplicate trips served by several lines, keyed by (fahrt number, planned time).

    The best-delay pool of a survivor is matched on (stop, line id), so each
    line serving a stop gets its own best observation.

    Args:
        trips: Observations, ordered as fetched. Every trip needs a planned time.

    Returns:
        The same list object when nothing repeats, otherwise a new list with
        one entry per surviving (fahrt number, planned time). Survivors that
        share a stop and line id take the same winner, so their fahrt numbers
        can coincide afterwards.
    """
    marked = _mark_duplicates(trips, _multi_line_identity)
    if not marked:
        return trips
    return _select_best_delay(trips, marked, _stop_and_line_scope)
