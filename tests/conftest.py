"""
Pytest configuration and shared fixtures.
"""

import json
from typing import Callable, Union
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from openweather_client.config import OpenWeatherConfig
from openweather_client.enums import Units


@pytest.fixture
def sample_api_key() -> str:
    """Sample API key for testing."""
    return "test_openweather_api_key_123"


@pytest.fixture
def mock_openweather_response() -> dict:
    """Mock OpenWeatherMap API response for London."""
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [
            {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}
        ],
        "main": {
            "temp": 280.32,
            "feels_like": 278.0,
            "temp_min": 279.0,
            "temp_max": 281.0,
            "pressure": 1012,
            "humidity": 81,
        },
        "visibility": 10000,
        "wind": {"speed": 4.1, "deg": 80},
        "clouds": {"all": 0},
        "sys": {"country": "GB", "sunrise": 1560343627, "sunset": 1560396563},
        "timezone": 3600,
        "name": "London",
        "id": 2643743,
    }


@pytest.fixture
def make_session() -> Callable[..., MagicMock]:
    """
    Build a fake aiohttp session answering every GET with one response.

    ``body`` may be a decoded dict or raw bytes, decoded on ``json()``.
    """

    def _make(status: int = 200, body: Union[dict, bytes] = b"{}") -> MagicMock:
        response = MagicMock()
        response.status = status
        if isinstance(body, dict):
            response.json = AsyncMock(return_value=body)
        else:
            response.json = AsyncMock(side_effect=lambda **kwargs: json.loads(body))

        session = MagicMock(spec=aiohttp.ClientSession)
        session.get.return_value.__aenter__.return_value = response
        return session

    return _make


@pytest.fixture
def make_config(sample_api_key) -> Callable[..., OpenWeatherConfig]:
    """Build a configuration bound to a fake session."""

    def _make(session=None, units: Units = Units.DEFAULT) -> OpenWeatherConfig:
        return OpenWeatherConfig(api_key=sample_api_key, units=units, session=session)

    return _make
