"""
Abstract interface for the Steam store API.

Defines the contract the fetcher relies on to retrieve a single batch.
"""

from abc import ABC, abstractmethod
from typing import Optional

from steamstore.core.batch import AppBatch
from steamstore.core.response import StoreResponse


class StoreInterface(ABC):
    """
    Abstract interface for appdetails access.

    One call to ``fetch_batch`` maps to one HTTP request. Implementations
    must be safe to call concurrently for different batches.
    """

    @abstractmethod
    async def connect(self) -> None:
        """
        Prepare the underlying connection.

        Calling it on an already connected client is a no-op.
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Release the underlying connection."""
        pass

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether ``connect`` has been called and not undone."""
        pass

    @abstractmethod
    async def fetch_batch(
        self,
        batch: AppBatch,
        locale: str,
        currency: str,
    ) -> StoreResponse:
        """
        Fetch store data for every appid of a batch.

        Args:
            batch: Batch of appids to query
            locale: Language of the returned texts
            currency: Country code selecting the price currency

        Returns:
            Partial response map for the batch

        Raises:
            StoreConnectionError: If the request could not complete
            StoreStatusError: If the server answered with a non-2xx status
            StoreDecodeError: If the body is not the expected JSON document
        """
        pass


class StoreError(Exception):
    """Base class of all errors raised while fetching store data."""

    def __init__(self, message: str, batch_index: Optional[int] = None):
        super().__init__(message)
        self.batch_index = batch_index


class StoreConnectionError(StoreError):
    """Raised when a request fails to complete (DNS, connection, timeout)."""
    pass


class StoreStatusError(StoreError):
    """Raised when the server responds with a non-2xx status."""

    def __init__(self, status_code: int, batch_index: Optional[int] = None):
        super().__init__(f"Server responded with status {status_code}", batch_index)
        self.status_code = status_code


class StoreDecodeError(StoreError):
    """Raised when a response body cannot be decoded into a StoreResponse."""
    pass
