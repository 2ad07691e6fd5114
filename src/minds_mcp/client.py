"""Async HTTP client for the Minds REST API."""

import json
import logging
from typing import Any, Optional

import httpx

from minds_mcp.core.config import MindsConfig
from minds_mcp.utils.exceptions import MindsAPIError, MindsConnectionError, MindsError

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class MindsClient:
    """Wrapper for Minds API requests.

    Every call opens its own connection and performs exactly one request.
    """

    def __init__(
        self,
        config: MindsConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            config: minds-mcp configuration
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.config = config
        self._transport = transport

    @property
    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.config.api_key}"}

    def _url(self, path: str) -> str:
        return f"{self.config.base_url}{path}"

    async def _send(
        self,
        method: str,
        path: str,
        body: Any = None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {"headers": self._auth_headers}
        if body is not None:
            kwargs["json"] = body

        logger.debug("%s %s", method, path)
        try:
            async with httpx.AsyncClient(transport=self._transport) as http:
                return await http.request(method, self._url(path), **kwargs)
        except httpx.InvalidURL as e:
            logger.warning("%s %s rejected: %s", method, path, e)
            raise MindsError(f"{method} {path} is not a valid request URL: {e}") from e
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise MindsConnectionError(method, path, str(e) or type(e).__name__) from e

    async def request(self, method: str, path: str, body: Any = None) -> Any:
        """Perform a JSON request against the Minds API.

        Args:
            method: HTTP method
            path: Path relative to the base URL, query string included
            body: Optional JSON-serializable request body

        Returns:
            Parsed JSON body, or None for an empty / 204 response

        Raises:
            MindsAPIError: If the response status is not 2xx
            MindsConnectionError: If the API cannot be reached
            MindsError: If a successful response is not valid JSON
        """
        response = await self._send(method, path, body)
        text = response.text

        if not response.is_success:
            logger.warning("%s %s → %s", method, path, response.status_code)
            raise MindsAPIError(method, path, response.status_code, text)

        if response.status_code == 204 or len(text) == 0:
            return None

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise MindsError(f"{method} {path} returned invalid JSON: {e}") from e

    async def request_text(self, path: str) -> str:
        """GET a non-JSON resource and return its body untouched.

        The status is checked directly and the error body is not read.

        Args:
            path: Path relative to the base URL

        Returns:
            Raw response text

        Raises:
            MindsAPIError: If the response status is not 2xx
            MindsConnectionError: If the API cannot be reached
        """
        response = await self._send("GET", path)
        if not response.is_success:
            logger.warning("GET %s → %s", path, response.status_code)
            raise MindsAPIError(
                "GET",
                path,
                response.status_code,
                "",
                message=f"Export failed: {response.status_code}",
            )
        return response.text
