"""Scryfall API client.

Every request is a single best-effort GET: there is no retry, backoff or
rate limiting. Responses are classified into "found" and "not found" by HTTP
status; anything that prevents reading a response at all is a TransportError.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import requests

from proxysheet.config import ProxySheetSettings, get_settings
from proxysheet.core.logging import get_logger
from proxysheet.errors import TransportError

logger = get_logger(__name__)


@dataclass
class ApiResponse:
    """Status and decoded body of one API call."""

    status_code: int
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return 200 <= self.status_code < 300


class ScryfallClient:
    """
    Thin Scryfall API client over a requests.Session.

    Features:
    - User-Agent and Accept headers on every request
    - Per-request timeout from settings
    - Transport failures raised as TransportError with the query attached
    """

    def __init__(
        self,
        api_base: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the Scryfall client.

        Args:
            api_base: API root URL (defaults to settings.api_base)
            user_agent: User-Agent string for API requests
            timeout: Request timeout in seconds
            session: Pre-built session (tests pass a mock here)
        """
        config = get_settings()
        self.api_base = (api_base or config.api_base).rstrip("/")
        self.user_agent = user_agent or config.user_agent
        self.timeout = timeout or config.http_timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {"User-Agent": self.user_agent, "Accept": "application/json"}
        )

        self.stats = {
            "requests": 0,
            "not_found": 0,
            "errors": 0,
        }

    @classmethod
    def from_settings(cls, settings: ProxySheetSettings) -> "ScryfallClient":
        return cls(
            api_base=settings.api_base,
            user_agent=settings.user_agent,
            timeout=settings.http_timeout,
        )

    def get(self, path: str, params: dict[str, str], query: str) -> ApiResponse:
        """
        Make a GET request to the Scryfall API.

        Args:
            path: API path (e.g., "/cards/search")
            params: Query parameters
            query: The user's query text, attached to any TransportError

        Returns:
            ApiResponse; non-2xx statuses are returned, not raised

        Raises:
            TransportError: On connection failure, timeout or a 2xx body
                that is not a JSON object
        """
        url = f"{self.api_base}{path}"
        self.stats["requests"] += 1

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            self.stats["errors"] += 1
            logger.warning("Request to {} failed: {}", path, exc)
            raise TransportError(query, f"Request failed: {exc}") from exc

        if not response.ok:
            self.stats["not_found"] += 1
            logger.debug("{} returned HTTP {} for '{}'", path, response.status_code, query)
            return ApiResponse(status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            self.stats["errors"] += 1
            raise TransportError(query, "Response was not valid JSON") from exc

        if not isinstance(payload, dict):
            self.stats["errors"] += 1
            raise TransportError(query, "Response was not a JSON object")

        return ApiResponse(status_code=response.status_code, payload=payload)

    def named_fuzzy(self, name: str) -> ApiResponse:
        """Resolve approximate card name text to a single card object."""
        return self.get("/cards/named", {"fuzzy": name}, query=name)

    def search(self, text: str, order: str = "name") -> ApiResponse:
        """Full-text card search, sorted by the given ordering."""
        return self.get("/cards/search", {"q": text, "order": order}, query=text)

    def close(self) -> None:
        self.session.close()
