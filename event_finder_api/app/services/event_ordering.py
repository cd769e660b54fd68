"""
Ordering and pagination helpers for the event list.

Events are ranked by an instant built from their local start date and
time.  The local wall-clock values are tagged as UTC when building
that instant, so events in different time zones are compared by their
local clock readings rather than by their true start.  That behaviour
lives entirely in ``composite_instant`` so it can be changed in one
place.
"""

from datetime import datetime, timezone
from typing import List, Optional

from ..core.errors import MalformedInputError
from .event_fields import EventFields
from .event_formatting import parse_date, parse_time


def composite_instant(local_date: str, local_time: str) -> datetime:
    """Build ``<date>T<time>Z`` as an aware UTC datetime."""
    if local_date is None or local_time is None:
        raise MalformedInputError((local_date, local_time), "a local date and time")
    day = parse_date(local_date)
    hours, minutes, seconds = parse_time(local_time)
    return datetime(
        day.year, day.month, day.day, hours, minutes, seconds, tzinfo=timezone.utc
    )


def rank_events(events: List[EventFields]) -> List[EventFields]:
    """Return ``events`` sorted ascending by start instant.

    ``sorted`` is stable, so events with equal instants keep their
    upstream order.
    """
    return sorted(events, key=lambda event: composite_instant(event.local_date, event.local_time))


def next_page(
    current_page: int,
    raw_count: int,
    page_size: int,
    max_page: int,
) -> Optional[int]:
    """Estimate whether the upstream has another page.

    ``raw_count`` is the number of events the upstream returned before
    filtering.  A full page suggests more results; pages at or beyond
    ``max_page`` never offer a next page.
    """
    if raw_count >= page_size and current_page < max_page:
        return current_page + 1
    return None
