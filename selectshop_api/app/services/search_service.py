"""Shopping search client.

This module wraps the external shopping search API (Naver Shopping by
default) that supplies product listings and their current lowest
price.  It is the "price lookup" collaborator of the product service:
the ``/api/search`` endpoint proxies it and ``sync_prices.py`` feeds
its results into ``ProductService.update_by_search``.

The client uses ``requests`` and authenticates with the client id and
secret headers the API expects.  Any transport or HTTP failure is
raised as ``ExternalServiceError`` so the API layer can answer 502.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from ..core.config import settings
from ..core.exceptions import ExternalServiceError
from ..core.messages import ErrorCode
from ..schemas.search import SearchItem


logger = logging.getLogger(__name__)


class SearchClient:
    """Client for the shopping search API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        display: Optional[int] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Search endpoint URL.  Defaults to ``settings.search_api_url``.
            client_id: API client id sent as ``X-Naver-Client-Id``.
            client_secret: API secret sent as ``X-Naver-Client-Secret``.
            display: Number of results requested per query.
            timeout: Request timeout in seconds.
            session: Optional requests session; one is created when omitted.
        """
        self.base_url = base_url or settings.search_api_url
        self.client_id = client_id if client_id is not None else settings.search_client_id
        self.client_secret = client_secret if client_secret is not None else settings.search_client_secret
        self.display = display or settings.search_display
        self.timeout = timeout or settings.search_timeout
        self.session = session or requests.Session()

    def _request(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Perform the GET request and return the decoded JSON body."""
        if not self.client_id or not self.client_secret:
            logger.error("Search API credentials are not configured")
            raise ExternalServiceError(ErrorCode.SEARCH_UNAVAILABLE)
        headers = {
            "X-Naver-Client-Id": self.client_id,
            "X-Naver-Client-Secret": self.client_secret,
        }
        try:
            logger.debug("Sending search request to %s with %s", self.base_url, params)
            response = self.session.request(
                method="GET",
                url=self.base_url,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("Search request failed (%s): %s", status, exc)
            raise ExternalServiceError(ErrorCode.SEARCH_UNAVAILABLE) from exc
        except (requests.RequestException, ValueError) as exc:
            logger.error("Search request failed: %s", exc)
            raise ExternalServiceError(ErrorCode.SEARCH_UNAVAILABLE) from exc

    def search_items(self, query: str) -> List[SearchItem]:
        """Search listings for ``query``.

        Returns:
            Up to ``display`` items in the order the API ranks them.
        """
        data = self._request({"query": query, "display": self.display, "start": 1, "sort": "sim"})
        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            return []
        return [SearchItem.from_api(item) for item in items if isinstance(item, dict)]


def get_search_client() -> SearchClient:
    """FastAPI dependency returning a client configured from settings."""
    return SearchClient()
