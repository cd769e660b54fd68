"""Event Finder API client.

This module defines a small client wrapper around the Event Finder
REST API.  The client uses the ``requests`` library internally and
never raises for HTTP or network failures: every operation returns a
``(data, error)`` tuple where ``error`` is ``None`` on success and a
dictionary with ``status_code`` and ``message`` otherwise.

Operations:

* :meth:`list_events` – one page of normalised events.
* :meth:`iter_events` – every event, following ``nextPage``.
* :meth:`get_event` – the detail view of a single event.
* :meth:`register` – create an account.
* :meth:`sign_in` – obtain a token; later calls send it automatically.
* :meth:`me` – the signed-in account.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class EventFinderAPI:
    """Client for interacting with the Event Finder API."""

    API_PREFIX = "/api/v1"

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            token: Optional access token sent as ``Authorization: Bearer``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against the API.

        Args:
            method: HTTP method (``GET``, ``POST``...).
            path: Path below the API prefix (e.g. ``/events``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{self.API_PREFIX}{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Event operations
    # ------------------------------------------------------------------
    def list_events(self, page: int = 1, **filters: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve one page of events.

        Returns:
            A tuple ``(page, error)`` where ``page`` holds ``events`` and
            ``nextPage``.
        """
        params = dict(filters)
        params["page"] = page
        return self._request("GET", "/events", params=params)

    def iter_events(self, page: int = 1, **filters: Any) -> Iterator[Dict[str, Any]]:
        """Yield events page by page until ``nextPage`` is null.

        Stops quietly (after logging) if a page cannot be fetched.
        """
        current: Optional[int] = page
        while current is not None:
            data, error = self.list_events(page=current, **filters)
            if error or not data:
                logger.warning("Stopped paging at page %s: %s", current, error)
                return
            yield from data.get("events", [])
            current = data.get("nextPage")

    def get_event(self, event_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve the detail view of a single event."""
        return self._request("GET", f"/events/{event_id}")

    # ------------------------------------------------------------------
    # Account operations
    # ------------------------------------------------------------------
    def register(self, username: str, email: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a new account."""
        payload = {"username": username, "email": email, "password": password}
        return self._request("POST", "/accounts/register", json_body=payload)

    def sign_in(self, email: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Sign in and remember the returned token for later requests."""
        data, error = self._request(
            "POST", "/accounts/signin", json_body={"email": email, "password": password}
        )
        if data and data.get("token"):
            self.token = data["token"]
        return data, error

    def me(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the account behind the current token."""
        return self._request("GET", "/accounts/me")
