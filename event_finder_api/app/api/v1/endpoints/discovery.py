"""
Pass-through discovery endpoints for API v1.

Classifications, attraction details and search suggestions are
returned exactly as the upstream provider sends them.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from event_finder_api.app.core.errors import UpstreamError
from event_finder_api.app.services.event_service import EventService, get_event_service

from . import forwarded_params, internal_error


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/classes", response_model=Dict[str, Any])
async def list_classifications(
    request: Request,
    service: EventService = Depends(get_event_service),
) -> Dict[str, Any]:
    """Return upstream classifications (segments, genres, sub-genres)."""
    try:
        return await service.client.get_classifications(forwarded_params(request))
    except UpstreamError as exc:
        raise internal_error(logger, exc) from exc


@router.get("/attractions/{attraction_id}", response_model=Dict[str, Any])
async def get_attraction(
    attraction_id: str,
    request: Request,
    service: EventService = Depends(get_event_service),
) -> Dict[str, Any]:
    """Return one upstream attraction."""
    try:
        return await service.client.get_attraction(attraction_id, forwarded_params(request))
    except UpstreamError as exc:
        raise internal_error(logger, exc) from exc


@router.get("/suggest", response_model=Dict[str, Any])
async def suggest(
    request: Request,
    service: EventService = Depends(get_event_service),
) -> Dict[str, Any]:
    """Return upstream search suggestions for the given keyword."""
    try:
        return await service.client.suggest(forwarded_params(request))
    except UpstreamError as exc:
        raise internal_error(logger, exc) from exc
