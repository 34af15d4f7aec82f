"""
Pytest configuration and shared fixtures for the test suite.
"""

import asyncio
from typing import Dict, List, Optional, Set

import pytest

from steamstore.api.interface import StoreInterface, StoreStatusError
from steamstore.config import StoreConfig
from steamstore.core.batch import AppBatch
from steamstore.core.response import AppData, AppResponse, StoreResponse


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def test_config() -> StoreConfig:
    """Create a test configuration."""
    return StoreConfig(
        base_url="http://store.steampowered.com/api/appdetails/",
        locale="en",
        currency="cc",
        api_version=1,
        batch_size=50,
        timeout_seconds=5.0,
        log_level="DEBUG",
    )


# ============================================================================
# Test Data
# ============================================================================

LONG_APP_IDS = [
    224760, 400, 41050, 209540, 2420, 4920, 99700, 241600, 3590, 102600,
    205790, 304930, 223220, 70600, 10, 65800, 48240, 219680, 41070, 203210,
    242110, 32460, 24800, 205910, 12900, 17480, 107100, 55110, 6120, 42910,
    6850, 203140, 98200, 222730, 32360, 8850, 201790, 41060, 24740, 32800,
    24980, 41000, 232910, 201420, 206440, 24780, 47790, 203810, 214970, 207570,
    2400, 93200, 204360, 63000, 8930, 219190, 65530, 225260, 17460, 730,
    50650, 207170, 22600, 63710, 108800, 550, 204300, 214870, 219890, 204880,
    227080, 219200, 221260, 620, 41500, 49520, 6900, 644, 39690, 35720,
    218620, 94200, 239070, 227780, 220780, 200390, 211820, 2430, 4000, 200710,
    500, 219150, 22000, 40800, 17410, 210770, 218060, 233720, 8190, 9350,
    91600, 39650, 38440, 238010, 9420, 113020, 17470, 214770, 237530, 7670,
    70, 238430, 41800, 201480, 95300, 47830, 204340, 48000, 221380, 244870,
    240, 223530,
]


@pytest.fixture
def long_app_ids() -> List[int]:
    """A realistic list of appids spanning several batches."""
    return list(LONG_APP_IDS)


def app_payload(app_id: int, success: bool = True) -> dict:
    """Build the JSON entry the API returns for one appid."""
    if not success:
        return {"success": False}
    return {
        "success": True,
        "data": {
            "type": "game",
            "name": f"App {app_id}",
            "steam_appid": app_id,
            "is_free": False,
            "price_overview": {
                "currency": "USD",
                "initial": 1999,
                "final": "999",
                "discount_percent": 50,
            },
        },
    }


# ============================================================================
# Mock Store Interface
# ============================================================================

class MockStoreInterface(StoreInterface):
    """Mock store client for testing."""

    def __init__(
        self,
        fail_batches: Optional[Set[int]] = None,
        delays: Optional[Dict[int, float]] = None,
    ):
        self.fail_batches = fail_batches or set()
        self.delays = delays or {}
        self.calls: List[AppBatch] = []
        self.cancelled: List[int] = []
        self.cancelled_event = asyncio.Event()
        self.connect_count = 0
        self._connected = False

    async def connect(self) -> None:
        self.connect_count += 1
        self._connected = True

    async def disconnect(self) -> None:
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def fetch_batch(
        self,
        batch: AppBatch,
        locale: str,
        currency: str,
    ) -> StoreResponse:
        self.calls.append(batch)
        try:
            await asyncio.sleep(self.delays.get(batch.index, 0))
        except asyncio.CancelledError:
            self.cancelled.append(batch.index)
            self.cancelled_event.set()
            raise

        if batch.index in self.fail_batches:
            raise StoreStatusError(500)

        return {
            str(app_id): AppResponse(success=True, data=AppData(name=f"App {app_id}"))
            for app_id in batch.app_ids
        }

    @property
    def requested_ids(self) -> List[int]:
        """All appids requested, in batch order."""
        ordered = sorted(self.calls, key=lambda b: b.index)
        return [app_id for batch in ordered for app_id in batch.app_ids]


@pytest.fixture
def mock_store() -> MockStoreInterface:
    """Create a mock store client."""
    return MockStoreInterface()
