"""Stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stop:
    """A physical stop."""

    stop_id: int
    name: str | None = None
