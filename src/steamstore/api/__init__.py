"""
Store API Integration Layer.

Provides access to the Steam storefront appdetails endpoint.
"""

from steamstore.api.interface import (
    StoreInterface,
    StoreError,
    StoreConnectionError,
    StoreStatusError,
    StoreDecodeError,
)
from steamstore.api.query import StoreQuery
from steamstore.api.http import HttpStoreClient

__all__ = [
    "StoreInterface",
    "StoreError",
    "StoreConnectionError",
    "StoreStatusError",
    "StoreDecodeError",
    "StoreQuery",
    "HttpStoreClient",
]
