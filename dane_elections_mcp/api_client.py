from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import httpx

from .config import Settings
from .errors import APIResponseError, ElectionsAPIError

logger = logging.getLogger(__name__)

_FAILURE_PREFIX = "Failed to fetch from Dane County Elections API"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


class ElectionsAPIClient:
    """
    Thin async wrapper around the Dane County elections REST API.

    Every call performs exactly one GET against `settings.base_url` + path and
    returns the decoded JSON body as-is. Redirects are followed. There is no
    retry and no caching; a new `httpx.AsyncClient` is opened per request.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = settings.base_url.rstrip("/")
        self._headers: Dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": settings.user_agent,
        }
        # Injected transports are used by tests (httpx.MockTransport).
        self._transport = transport

    async def get(self, path: str) -> Any:
        """
        Fetch `path` (already interpolated, e.g. `/api/v1/elections/list`).

        Raises `ElectionsAPIError` for non-2xx responses, transport failures
        and undecodable bodies. Anything else propagates unchanged.
        """
        url = f"{self._base_url}{path}"
        logger.debug("GET %s", url)

        try:
            async with httpx.AsyncClient(
                headers=self._headers,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)

            if not response.is_success:
                raise APIResponseError(response.status_code, response.reason_phrase)

            return json.loads(response.content, parse_constant=_reject_constant)
        except (APIResponseError, httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise ElectionsAPIError(f"{_FAILURE_PREFIX}: {e}") from e
