"""
Event list and event detail pipelines.

The list pipeline fetches one upstream page, drops incomplete
records, ranks the rest by start instant, formats dates and times for
display (after ranking, which needs the machine form) and estimates
whether a next page exists.  The detail pipeline fetches one event and
formats whatever fields it can resolve, leaving the rest ``None``.

Neither pipeline recovers from upstream failures; ``UpstreamError``
and ``MalformedInputError`` propagate to the HTTP layer.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..core.config import settings
from ..core.errors import UpstreamError
from ..schemas.event import EventDetail, EventPage, EventSummary
from .event_fields import EventFields, extract_fields, is_listable
from .event_formatting import (
    format_date,
    format_detail_price,
    format_list_price,
    format_time,
)
from .event_ordering import next_page, rank_events
from .ticketmaster_client import TicketmasterClient, UpstreamConfig


logger = logging.getLogger(__name__)


def raw_events_from_envelope(envelope: Dict[str, Any]) -> List[Any]:
    """Pull ``_embedded.events`` out of a search response.

    An envelope without ``_embedded`` is an empty result when it still
    carries the ``page`` block: the upstream answers that way both for
    zero matches and for a page past the last one.
    """
    embedded = envelope.get("_embedded")
    if embedded is None:
        page = envelope.get("page")
        if isinstance(page, dict):
            logger.debug("No events on upstream page %s", page.get("number"))
            return []
        raise UpstreamError("Upstream response has no embedded events")
    events = embedded.get("events") if isinstance(embedded, dict) else None
    if not isinstance(events, list):
        raise UpstreamError("Upstream response has no event list")
    return events


def summarize(fields: EventFields) -> EventSummary:
    """Build the list-view record from complete, ranked fields."""
    return EventSummary(
        name=fields.name,
        id=fields.id,
        date=format_date(fields.local_date),
        time=format_time(fields.local_time),
        date_time_utc=fields.start_utc,
        price_min=format_list_price(fields.price_min, fields.currency),
        price_max=format_list_price(fields.price_max, fields.currency),
        location=fields.location,
        venue=fields.venue,
    )


def describe(fields: EventFields) -> EventDetail:
    """Build the detail-view record; unresolved fields stay ``None``."""
    return EventDetail(
        name=fields.name,
        date=format_date(fields.local_date) if fields.local_date is not None else None,
        time=format_time(fields.local_time) if fields.local_time is not None else None,
        price_min=format_detail_price(fields.price_min, fields.currency),
        price_max=format_detail_price(fields.price_max, fields.currency),
        info=fields.info,
        image=fields.image,
        seatmap=fields.seatmap,
        location=fields.location,
        venue=fields.venue,
        address=fields.address,
        url=fields.url,
    )


class EventService:
    """Runs the event pipelines against one upstream configuration."""

    def __init__(
        self,
        config: UpstreamConfig,
        client: Optional[TicketmasterClient] = None,
    ) -> None:
        self.config = config
        self.client = client or TicketmasterClient(config)

    def effective_page_size(self, params: Mapping[str, Any]) -> int:
        """Page size actually requested upstream (caller ``size`` wins).

        A repeated ``size`` counts by its last value.
        """
        size = params.get("size")
        if isinstance(size, list):
            size = size[-1] if size else None
        try:
            return int(size)
        except (TypeError, ValueError):
            return self.config.page_size

    async def list_events(self, params: Mapping[str, Any], page: int = 1) -> EventPage:
        """Return one page of complete, ranked, display-ready events.

        ``params`` are forwarded to the upstream search unchanged;
        ``page`` is the caller's 1-based page number used only for the
        next-page estimate.
        """
        envelope = await self.client.search_events(params)
        raw_events = raw_events_from_envelope(envelope)

        complete = [fields for fields in map(extract_fields, raw_events) if is_listable(fields)]
        ranked = rank_events(complete)
        events = [summarize(fields) for fields in ranked]

        following = next_page(
            page,
            len(raw_events),
            self.effective_page_size(params),
            self.config.max_page,
        )
        logger.info(
            "Listed %d of %d upstream events (page %d, next page %s)",
            len(events), len(raw_events), page, following,
        )
        return EventPage(events=events, next_page=following)

    async def get_event(self, event_id: str, params: Mapping[str, Any]) -> EventDetail:
        """Return the detail view of one event."""
        raw = await self.client.get_event(event_id, params)
        return describe(extract_fields(raw))


def get_event_service() -> EventService:
    """FastAPI dependency returning a service bound to the current settings."""
    return EventService(UpstreamConfig.from_settings(settings))
