"""
Steam Store Client

Fetches storefront metadata for Steam apps from the appdetails API.
Appid lists of any length are split into batches that are requested
concurrently and merged into a single response map.
"""

__version__ = "0.1.0"

from steamstore.api.interface import (
    StoreError,
    StoreConnectionError,
    StoreStatusError,
    StoreDecodeError,
)
from steamstore.api.query import StoreQuery
from steamstore.core.fetcher import StoreFetcher, fetch_store_response, get_store_response
from steamstore.core.response import AppData, AppResponse, JsonNumber, StoreResponse

__all__ = [
    "StoreFetcher",
    "fetch_store_response",
    "get_store_response",
    "StoreQuery",
    "StoreResponse",
    "AppResponse",
    "AppData",
    "JsonNumber",
    "StoreError",
    "StoreConnectionError",
    "StoreStatusError",
    "StoreDecodeError",
]
