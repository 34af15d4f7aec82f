"""
HTTP adapter for the Steam store API.

Fetches appdetails batches over HTTP with httpx.
"""

from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from steamstore.api.interface import (
    StoreInterface,
    StoreConnectionError,
    StoreDecodeError,
    StoreStatusError,
)
from steamstore.api.query import StoreQuery
from steamstore.config import StoreConfig, get_config
from steamstore.core.batch import AppBatch
from steamstore.core.response import StoreResponse, decode_store_response

logger = structlog.get_logger(__name__)


class HttpStoreClient(StoreInterface):
    """
    httpx based store client.

    Implements the StoreInterface with one GET per batch on a shared
    ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        config: Optional[StoreConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            config: Store configuration. Uses global config if not provided.
            transport: Custom httpx transport (used by tests)
        """
        self.config = config or get_config()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def headers(self) -> dict:
        """Get request headers."""
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def query(self, locale: str, currency: str) -> StoreQuery:
        """Get the query configuration for a locale and currency."""
        return StoreQuery(
            locale=locale,
            currency=currency,
            version=self.config.api_version,
            base_url=self.config.base_url,
        )

    async def connect(self) -> None:
        """Create the HTTP client."""
        if self._client is not None:
            return

        self._client = httpx.AsyncClient(
            headers=self.headers,
            timeout=httpx.Timeout(self.config.timeout_seconds),
            follow_redirects=True,
            transport=self._transport,
        )
        logger.debug("store_client_connected", base_url=self.config.base_url)

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.debug("store_client_disconnected")

    async def fetch_batch(
        self,
        batch: AppBatch,
        locale: str,
        currency: str,
    ) -> StoreResponse:
        """Fetch one batch of appdetails."""
        if not self._client:
            await self.connect()

        query = self.query(locale, currency)
        url = query.to_url(batch.app_ids)
        logger.debug("store_request", batch=batch.index, params=query.params(batch.app_ids))

        try:
            response = await self._client.get(url)
        except httpx.RequestError as e:
            logger.error("store_request_error", batch=batch.index, url=url, error=str(e))
            raise StoreConnectionError(
                f"Store request failed: {e}", batch_index=batch.index
            ) from e

        if not response.is_success:
            logger.error(
                "store_request_failed",
                batch=batch.index,
                url=url,
                status=response.status_code,
            )
            raise StoreStatusError(response.status_code, batch_index=batch.index)

        try:
            return decode_store_response(response.json())
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            kind = "schema" if isinstance(e, ValidationError) else "json"
            logger.error("store_decode_failed", batch=batch.index, kind=kind, error=str(e))
            raise StoreDecodeError(
                f"Could not decode store response: {e}", batch_index=batch.index
            ) from e
