"""
Core store components.

This module contains the batch model, the response schema and the
fetcher orchestrating concurrent batch requests.
"""

from steamstore.core.batch import AppBatch, partition
from steamstore.core.response import AppData, AppResponse, JsonNumber, StoreResponse

__all__ = [
    "AppBatch",
    "partition",
    "AppData",
    "AppResponse",
    "JsonNumber",
    "StoreResponse",
]
