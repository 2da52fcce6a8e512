"""Line domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """A line as reported by the feed for one observed trip."""

    fahrt_nr: str  # Identifies one scheduled run, shared by all stops of that run
    line_id: str  # Logical route identifier (e.g., "s-41")
    product: str  # Transport mode (e.g., "suburban", "regional", "bus")
    name: str | None = None  # Display name (e.g., "S 41")
