"""Base HTTP client for the Tensor marketplace API.

This module provides the shared request handling used by the Tensor client.
"""

# Standard library imports
import json
from typing import Any, Dict, Optional

# Third-party library imports
import httpx

# Internal imports
from tensor_actions.config import TensorConfig, get_tensor_config
from tensor_actions.constants import TENSOR_API_KEY_HEADER
from tensor_actions.logging_config import get_logger
from tensor_actions.utils.errors import MarketplaceApiError

# Get logger
logger = get_logger(__name__)


class BaseTensorClient:
    """Base client for the Tensor REST API.

    Requests are made once; a failed request is reported to the caller
    without retrying.
    """

    def __init__(self, config: Optional[TensorConfig] = None,
                 http_client: Optional[httpx.AsyncClient] = None):
        """Initialize the client.

        Args:
            config: Tensor configuration. Defaults to environment-based config.
            http_client: Optional shared HTTP client. When omitted the client
                creates its own on first use and closes it in `close()`.
        """
        self.config = config or get_tensor_config()
        self.headers = {"Accept": "application/json"}
        if self.config.api_key:
            self.headers[TENSOR_API_KEY_HEADER] = self.config.api_key

        self._http_client = http_client
        self._owns_http_client = http_client is None

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.config.api_url,
                timeout=self.config.timeout,
                limits=httpx.Limits(max_keepalive_connections=10, max_connections=20)
            )
        return self._http_client

    async def _get(self, path: str, params: Dict[str, Any], operation: str,
                   allow_not_found: bool = False) -> Optional[Any]:
        """Make a GET request and decode the JSON body.

        Args:
            path: Path relative to the API URL
            params: Query parameters
            operation: Operation name used in logs and errors
            allow_not_found: Return None instead of raising on HTTP 404

        Returns:
            The decoded JSON body, or None for an allowed 404

        Raises:
            MarketplaceApiError: On network errors, non-2xx responses or
                undecodable bodies
        """
        client = self._get_http_client()
        try:
            response = await client.get(path, params=params, headers=self.headers)
        except httpx.HTTPError as e:
            logger.warning("Tensor request failed", operation=operation, error=str(e))
            raise MarketplaceApiError(
                f"Tensor request failed: {str(e)}", operation=operation
            ) from e

        if allow_not_found and response.status_code == httpx.codes.NOT_FOUND:
            return None

        if response.is_error:
            logger.warning(
                "Tensor returned an error status",
                operation=operation,
                status_code=response.status_code,
            )
            raise MarketplaceApiError(
                f"Tensor returned HTTP {response.status_code}",
                operation=operation,
                details={"status_code": response.status_code, "body": response.text[:500]},
            )

        try:
            return response.json()
        except json.JSONDecodeError as e:
            raise MarketplaceApiError(
                "Tensor returned an invalid JSON body", operation=operation
            ) from e

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
