"""Pytest configuration and shared fixtures."""

import copy
import dataclasses
from typing import Any, Callable, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from event_finder_api.app.core import config
from event_finder_api.app.main import app
from event_finder_api.app.services.event_service import EventService, get_event_service
from event_finder_api.app.services.ticketmaster_client import TicketmasterClient, UpstreamConfig


EVENTS_URL = "https://upstream.test/discovery/v2/events"

BASE_RAW_EVENT: Dict[str, Any] = {
    "name": "Summer Jam",
    "id": "evt-1",
    "url": "https://tickets.test/evt-1",
    "info": "  Doors open at 6pm.  ",
    "description": "An evening of music.",
    "dates": {
        "start": {
            "localDate": "2024-07-04",
            "localTime": "19:30:00",
            "dateTime": "2024-07-05T00:30:00Z",
        }
    },
    "priceRanges": [{"type": "standard", "currency": "USD", "min": 25.0, "max": 89.5}],
    "images": [
        {"url": "https://img.test/summer_RETINA_PORTRAIT_3_2.jpg"},
        {"url": "https://img.test/summer_ARTIST_PAGE_3_2.jpg"},
        {"url": "https://img.test/summer_ARTIST_PAGE_16_9.jpg"},
    ],
    "seatmap": {"staticUrl": "https://maps.test/seatmap.gif"},
    "_embedded": {
        "venues": [
            {
                "name": "Moody Center",
                "postalCode": "78712",
                "city": {"name": "Austin"},
                "state": {"name": "Texas", "stateCode": "TX"},
                "address": {"line1": "2001 Robert Dedman Dr"},
            }
        ]
    },
}


@pytest.fixture
def raw_event() -> Callable[..., Dict[str, Any]]:
    """Factory for raw upstream events; keyword overrides replace top-level keys."""

    def _make(**overrides: Any) -> Dict[str, Any]:
        event = copy.deepcopy(BASE_RAW_EVENT)
        event.update(overrides)
        return event

    return _make


@pytest.fixture
def upstream_config() -> UpstreamConfig:
    return UpstreamConfig(
        api_key="test-key",
        events_url=EVENTS_URL,
        classifications_url="https://upstream.test/discovery/v2/classifications",
        attractions_url="https://upstream.test/discovery/v2/attractions",
        suggest_url="https://upstream.test/discovery/v2/suggest",
        page_size=200,
        max_page=4,
        timeout=5.0,
        max_retries=2,
        retry_backoff=0,
    )


class RecordingUpstream:
    """Serves canned responses through ``httpx.MockTransport`` and records requests."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self.respond = respond
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


@pytest.fixture
def upstream() -> Callable[..., RecordingUpstream]:
    """Build a recording upstream from a handler, or from a JSON body and status."""

    def _make(payload: Any = None, status_code: int = 200, handler=None) -> RecordingUpstream:
        if handler is None:
            def handler(request: httpx.Request) -> httpx.Response:
                return httpx.Response(status_code, json=payload)
        return RecordingUpstream(handler)

    return _make


@pytest.fixture
def make_service(upstream_config):
    def _make(recording: RecordingUpstream) -> EventService:
        client = TicketmasterClient(upstream_config, transport=recording.transport)
        return EventService(upstream_config, client=client)

    return _make


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the credential store at a fresh SQLite file."""
    test_settings = dataclasses.replace(
        config.settings,
        database_url=str(tmp_path / "accounts.db"),
        secret_key="test-secret",
    )
    monkeypatch.setattr(config, "settings", test_settings)
    return test_settings


@pytest.fixture
def api_client(database):
    """TestClient with startup hooks run against the temporary database."""
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def override_service(make_service):
    """Route the event endpoints through a recording upstream."""

    def _override(recording: RecordingUpstream) -> EventService:
        service = make_service(recording)
        app.dependency_overrides[get_event_service] = lambda: service
        return service

    yield _override
    app.dependency_overrides.clear()
