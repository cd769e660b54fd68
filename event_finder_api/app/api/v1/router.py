"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import accounts, discovery, events

router = APIRouter()

router.include_router(events.router, prefix="/events", tags=["events"])
# Discovery routes define their own paths (/classes, /attractions, /suggest).
router.include_router(discovery.router, tags=["discovery"])
router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
