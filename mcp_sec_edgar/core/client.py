import asyncio
import logging
from typing import Any, Dict, Optional

import requests

from ..config import EdgarConfig, initialize_config
from ..utils.exceptions import ParseError, TransportError, UpstreamStatusError
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

# Characters of an error body kept for diagnostics
ERROR_BODY_EXCERPT = 500


class EdgarClient:
    """Rate-limited HTTP access to the SEC EDGAR endpoints.

    One instance owns the process-wide ``RateLimiter``; every tool group must
    share it so that all outbound requests pass through the same gate.
    """

    def __init__(self, config: Optional[EdgarConfig] = None, rate_limiter: Optional[RateLimiter] = None):
        self.config = config or initialize_config()
        self.rate_limiter = rate_limiter or RateLimiter(self.config.rate_limit_interval)

    @property
    def default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

    async def dispatch(self, url: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """
        Send a GET request to EDGAR once the rate limiter allows it.

        Parameters:
            url (str): Fully built target URL.
            headers (Optional[Dict[str, str]]): Extra headers; they win over the defaults.

        Returns:
            requests.Response: The unmodified 2xx response.

        Raises:
            TransportError: EDGAR could not be reached.
            UpstreamStatusError: EDGAR answered with a non-2xx status.
        """
        merged_headers = {**self.default_headers, **(headers or {})}

        await self.rate_limiter.acquire()
        logger.debug("GET %s", url)

        try:
            response = await asyncio.to_thread(
                requests.get, url, headers=merged_headers, timeout=self.config.timeout
            )
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise TransportError(f"Failed to reach EDGAR at {url}: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            excerpt = response.text[:ERROR_BODY_EXCERPT]
            logger.warning("EDGAR returned %s for %s", response.status_code, url)
            raise UpstreamStatusError(response.status_code, response.reason, excerpt)

        return response

    async def get_json(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        """Dispatch a request and decode the JSON body."""
        response = await self.dispatch(url, headers)
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Malformed JSON from {url}: {str(e)}") from e

    async def get_text(self, url: str, headers: Optional[Dict[str, str]] = None) -> str:
        """Dispatch a request and return the body as text."""
        response = await self.dispatch(url, headers)
        return response.text
