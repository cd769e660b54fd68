"""
Async client for the Ticketmaster Discovery API.

``UpstreamConfig`` is the immutable configuration the client and the
event pipelines are built from.  ``TicketmasterClient`` performs one
GET per call with a bounded timeout.  Transport failures (connection
errors, timeouts) are retried with exponential backoff; error statuses
are not.  Every failure surfaces as ``UpstreamError``.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx

from ..core.config import Settings
from ..core.errors import UpstreamError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamConfig:
    """Everything the upstream client and pipelines need to know."""

    api_key: str
    events_url: str
    classifications_url: str
    attractions_url: str
    suggest_url: str
    page_size: int = 200
    max_page: int = 4
    timeout: float = 10.0
    max_retries: int = 2
    retry_backoff: float = 0.5

    @classmethod
    def from_settings(cls, settings: Settings) -> "UpstreamConfig":
        return cls(
            api_key=settings.ticketmaster_api_key,
            events_url=settings.ticketmaster_events_api_url,
            classifications_url=settings.ticketmaster_class_api_url,
            attractions_url=settings.ticketmaster_attraction_api_url,
            suggest_url=settings.ticketmaster_suggest_api_url,
            page_size=settings.events_page_size,
            max_page=settings.events_max_page,
            timeout=settings.upstream_timeout,
            max_retries=settings.upstream_max_retries,
            retry_backoff=settings.upstream_retry_backoff,
        )


class TicketmasterClient:
    """Thin wrapper around the Discovery endpoints used by the service."""

    def __init__(
        self,
        config: UpstreamConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            config: Upstream URLs, key, timeout and retry policy.
            transport: Optional httpx transport, used by tests to serve
                canned responses.
        """
        self.config = config
        self.transport = transport

    def search_params(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge caller params over the default page size.

        Callers may override ``size``; the API key is always ours.  A list
        value goes out as repeated keys.
        """
        merged: Dict[str, Any] = {"size": self.config.page_size}
        merged.update(params)
        merged["apikey"] = self.config.api_key
        return merged

    async def search_events(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Run an event search and return the raw envelope."""
        return await self._get(f"{self.config.events_url}.json", self.search_params(params))

    async def get_event(self, event_id: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Fetch one raw event by id."""
        return await self._get(
            f"{self.config.events_url}/{event_id}.json", self._keyed(params)
        )

    async def get_classifications(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._get(f"{self.config.classifications_url}.json", self._keyed(params))

    async def get_attraction(self, attraction_id: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._get(
            f"{self.config.attractions_url}/{attraction_id}.json", self._keyed(params)
        )

    async def suggest(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._get(self.config.suggest_url, self._keyed(params))

    def _keyed(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        merged = dict(params)
        merged["apikey"] = self.config.api_key
        return merged

    async def _get(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """GET ``url`` and return the decoded JSON object.

        Raises:
            UpstreamError: on a non-2xx status, a body that is not a JSON
                object, or a transport failure that outlives the retries.
        """
        attempts = self.config.max_retries + 1
        async with httpx.AsyncClient(
            timeout=self.config.timeout, transport=self.transport
        ) as client:
            for attempt in range(attempts):
                try:
                    logger.debug("GET %s (attempt %d/%d)", url, attempt + 1, attempts)
                    response = await client.get(url, params=params)
                    break
                except httpx.TransportError as exc:
                    if attempt < attempts - 1:
                        delay = self.config.retry_backoff * (2 ** attempt)
                        logger.warning(
                            "Request to %s failed (attempt %d/%d): %s. Retrying in %.2f seconds",
                            url, attempt + 1, attempts, exc, delay,
                        )
                        await asyncio.sleep(delay)
                    else:
                        logger.error("All %d attempts to reach %s failed: %s", attempts, url, exc)
                        raise UpstreamError(f"Upstream unreachable: {exc}") from exc

        if not response.is_success:
            logger.error(
                "Upstream %s answered %d %s", url, response.status_code, response.reason_phrase
            )
            raise UpstreamError(
                f"Upstream error {response.status_code}: {response.reason_phrase}",
                status_code=response.status_code,
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError("Upstream returned a non-JSON body") from exc
        if not isinstance(data, dict) or not data:
            raise UpstreamError("Upstream returned an empty or unexpected body")
        return data
