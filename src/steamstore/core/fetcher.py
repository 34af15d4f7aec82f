"""
Store fetcher orchestrator.

Splits an appid list into batches, fetches the batches concurrently and
merges the partial results into a single response map.
"""

import asyncio
from typing import List, Optional, Sequence

import structlog

from steamstore.api.http import HttpStoreClient
from steamstore.api.interface import StoreError, StoreInterface
from steamstore.config import StoreConfig, get_config
from steamstore.core.batch import AppBatch, partition
from steamstore.core.response import StoreResponse

logger = structlog.get_logger(__name__)


def _discard_result(task: asyncio.Task) -> None:
    """Retrieve the outcome of an abandoned task so it is not reported."""
    if not task.cancelled():
        task.exception()


class StoreFetcher:
    """
    Fetches appdetails for arbitrarily long appid lists.

    Batches are fetched concurrently, one task per batch. The first failing
    batch aborts the whole call: the other batches are cancelled and no
    partial response is returned.

    Usage:
        ```python
        fetcher = StoreFetcher()
        response = await fetcher.fetch_all([10, 20, 30], "english", "us")
        ```
    """

    def __init__(
        self,
        config: Optional[StoreConfig] = None,
        client: Optional[StoreInterface] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            config: Store configuration
            client: Custom store client (an HttpStoreClient is created per
                call if not provided)
        """
        self.config = config or get_config()
        self._client = client

    async def fetch_all(
        self,
        app_ids: Sequence[int],
        locale: str,
        currency: str,
    ) -> StoreResponse:
        """
        Fetch store data for all appids.

        Args:
            app_ids: Appids to query, any length
            locale: Language of the returned texts
            currency: Country code selecting the price currency

        Returns:
            Response map keyed by appid string

        Raises:
            ValueError: If an appid is negative
            StoreError: The first batch failure observed
        """
        for app_id in app_ids:
            if app_id < 0:
                raise ValueError(f"appids must be non-negative, got {app_id}")

        batches = partition(app_ids, self.config.batch_size)
        if not batches:
            return {}

        logger.info("store_fetch_started", ids=len(app_ids), batches=len(batches))

        owns_client = self._client is None
        client = self._client or HttpStoreClient(self.config)
        try:
            await client.connect()
            response = await self._gather(client, batches, locale, currency)
        finally:
            if owns_client:
                await client.disconnect()

        logger.info("store_fetch_completed", entries=len(response))
        return response

    async def _gather(
        self,
        client: StoreInterface,
        batches: List[AppBatch],
        locale: str,
        currency: str,
    ) -> StoreResponse:
        """Dispatch one task per batch and merge results as they arrive."""
        tasks = [
            asyncio.create_task(self._fetch_batch(client, batch, locale, currency))
            for batch in batches
        ]

        response: StoreResponse = {}
        try:
            for completed in asyncio.as_completed(tasks):
                response.update(await completed)
        except BaseException:
            for task in tasks:
                if not task.done():
                    task.cancel()
                task.add_done_callback(_discard_result)
            raise

        return response

    async def _fetch_batch(
        self,
        client: StoreInterface,
        batch: AppBatch,
        locale: str,
        currency: str,
    ) -> StoreResponse:
        """Fetch a single batch, logging its outcome."""
        try:
            partial = await client.fetch_batch(batch, locale, currency)
        except StoreError as e:
            if e.batch_index is None:
                e.batch_index = batch.index
            logger.warning("store_batch_failed", batch=batch.index, error=str(e))
            raise

        logger.debug("store_batch_fetched", batch=batch.index, entries=len(partial))
        return partial


async def fetch_store_response(
    app_ids: Sequence[int],
    locale: str,
    currency: str,
    config: Optional[StoreConfig] = None,
) -> StoreResponse:
    """
    Fetch store data for all appids.

    Args:
        app_ids: Appids to query
        locale: Language of the returned texts, e.g. 'english'
        currency: Country code selecting the price currency, e.g. 'us'
        config: Store configuration. Uses global config if not provided.

    Returns:
        Response map keyed by appid string
    """
    return await StoreFetcher(config).fetch_all(app_ids, locale, currency)


def get_store_response(
    app_ids: Sequence[int],
    locale: str,
    currency: str,
    config: Optional[StoreConfig] = None,
) -> StoreResponse:
    """Blocking variant of fetch_store_response."""
    return asyncio.run(fetch_store_response(app_ids, locale, currency, config))
