"""
Event endpoints for API v1.

Both routes forward every query parameter they receive to the
upstream provider.  Upstream failures and unparseable dates or times
produce a 500 with a generic message; the cause is only logged.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from event_finder_api.app.core.errors import MalformedInputError, UpstreamError
from event_finder_api.app.schemas.event import EventDetail, EventPage
from event_finder_api.app.services.event_service import EventService, get_event_service

from . import forwarded_params, internal_error


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=EventPage)
async def list_events(
    request: Request,
    page: Optional[int] = Query(None, ge=0),
    service: EventService = Depends(get_event_service),
) -> EventPage:
    """Search upstream events and return one normalised page.

    - **page** — 1‑based page number, forwarded upstream and used to
      compute ``nextPage``.  Defaults to 1.
    - any other parameter (``keyword``, ``city``, ``size``...) is passed
      through untouched.
    """
    params = forwarded_params(request)
    try:
        return await service.list_events(params, page=page if page is not None else 1)
    except (UpstreamError, MalformedInputError) as exc:
        raise internal_error(logger, exc) from exc


@router.get("/{event_id}", response_model=EventDetail)
async def get_event(
    event_id: str,
    request: Request,
    service: EventService = Depends(get_event_service),
) -> EventDetail:
    """Return the detail view of a single event."""
    params = forwarded_params(request)
    try:
        return await service.get_event(event_id, params)
    except (UpstreamError, MalformedInputError) as exc:
        raise internal_error(logger, exc) from exc
