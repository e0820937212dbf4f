"""
Asynchronous OpenWeatherMap client: one GET per lookup, mapped into a Forecast.
"""

import logging
from typing import Any, Optional, Union

import aiohttp

from openweather_client.config import (
    ExternalAPIConfig,
    OpenWeatherConfig,
    WeatherBuilder,
)
from openweather_client.enums import Language, Units
from openweather_client.exceptions import (
    AuthenticationError,
    MalformedResponseError,
    NotFoundError,
    UnexpectedResponseError,
)
from openweather_client.mapper import map_forecast
from openweather_client.models import Coordinates, Forecast
from openweather_client.query import FetchMode, build_query, build_url

logger = logging.getLogger(__name__)

CoordinatesInput = Union[Coordinates, tuple, list, str]


async def fetch_forecast(
    config: OpenWeatherConfig,
    mode: FetchMode,
    query: Any,
    base_url: str = ExternalAPIConfig.OPENWEATHER_BASE_URL,
) -> Forecast:
    """
    Fetch the current weather for a single location.

    Args:
        config: Client configuration
        mode: Lookup mode
        query: Mode-specific lookup input
        base_url: Endpoint to query

    Returns:
        Forecast: Mapped weather data

    Raises:
        InvalidQueryError: If the lookup input is invalid (no request is made)
        AuthenticationError: If the API key is rejected
        NotFoundError: If no location matched the query
        UnexpectedResponseError: For any other non-200 status
        MalformedResponseError: If the body cannot be decoded or mapped
    """
    params = build_query(mode, query, config.units, config.language, config.api_key)
    url = build_url(base_url, params)
    masked_url = build_url(
        base_url, [(k, "***" if k == "appid" else v) for k, v in params]
    )

    logger.debug("Requesting weather data: %s", masked_url)

    if config.session is not None:
        status, payload = await _get(config.session, url)
    else:
        session_kwargs = {}
        if config.timeout:
            session_kwargs["timeout"] = aiohttp.ClientTimeout(total=config.timeout)
        async with aiohttp.ClientSession(**session_kwargs) as session:
            status, payload = await _get(session, url)

    if status == 401:
        logger.error("Invalid API key (status: %d)", status)
        raise AuthenticationError()

    if status == 404:
        logger.warning("No location found for %s query %r", mode.value, query)
        raise NotFoundError(f"Nothing has been found by the query {query!r}")

    if status != 200:
        logger.error("Unexpected API response for %s (status: %d)", masked_url, status)
        raise UnexpectedResponseError(status)

    forecast = map_forecast(payload, config)
    logger.debug("Successfully fetched weather for %s", forecast.location.name)
    return forecast


async def _get(session: aiohttp.ClientSession, url: str):
    async with session.get(url) as response:
        if response.status != 200:
            return response.status, None
        try:
            return response.status, await response.json(content_type=None)
        except ValueError as e:
            raise MalformedResponseError("Response body is not valid JSON") from e


class OpenWeatherMapClient:
    """
    Asynchronous client for the OpenWeatherMap current weather API.

    Each lookup makes a single request and shares no state with other calls
    apart from the configured session.
    """

    def __init__(self, config: OpenWeatherConfig):
        """
        Initialize the OpenWeatherMap client.

        Args:
            config: Validated client configuration
        """
        self.config = config
        self.base_url = ExternalAPIConfig.OPENWEATHER_BASE_URL

    async def _fetch(self, mode: FetchMode, query: Any) -> Forecast:
        return await fetch_forecast(self.config, mode, query, self.base_url)

    async def from_name(self, name: str) -> Forecast:
        """Retrieve the forecast by location name, e.g. "London" or "London,GB"."""
        return await self._fetch(FetchMode.NAME, name)

    async def from_id(self, location_id: int) -> Forecast:
        """Retrieve the forecast by OpenWeatherMap city ID."""
        return await self._fetch(FetchMode.ID, location_id)

    async def from_zip_code(self, zip_code: str) -> Forecast:
        """Retrieve the forecast by zip code, optionally "code,countryCode"."""
        return await self._fetch(FetchMode.ZIP_CODE, zip_code)

    async def from_coordinates(self, coordinates: CoordinatesInput) -> Forecast:
        """Retrieve the forecast by longitude and latitude."""
        return await self._fetch(FetchMode.COORDINATES, coordinates)

    async def from_name_or_none(self, name: str) -> Optional[Forecast]:
        """Like from_name, but returns None when no location matched."""
        try:
            return await self.from_name(name)
        except NotFoundError:
            return None

    async def from_id_or_none(self, location_id: int) -> Optional[Forecast]:
        """Like from_id, but returns None when no location matched."""
        try:
            return await self.from_id(location_id)
        except NotFoundError:
            return None

    async def from_zip_code_or_none(self, zip_code: str) -> Optional[Forecast]:
        """Like from_zip_code, but returns None when no location matched."""
        try:
            return await self.from_zip_code(zip_code)
        except NotFoundError:
            return None

    async def from_coordinates_or_none(
        self, coordinates: CoordinatesInput
    ) -> Optional[Forecast]:
        """Like from_coordinates, but returns None when no location matched."""
        try:
            return await self.from_coordinates(coordinates)
        except NotFoundError:
            return None


def open_weather_api(
    key: Optional[str],
    units: Units = Units.DEFAULT,
    language: Language = Language.ENGLISH,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: Optional[float] = None,
) -> OpenWeatherMapClient:
    """
    Create a client directly from its settings.

    Raises:
        ConfigurationError: If no API key is supplied
    """
    config = (
        WeatherBuilder()
        .key(key)
        .units(units)
        .language(language)
        .session(session)
        .timeout(timeout)
        .build()
        .unwrap()
    )
    return OpenWeatherMapClient(config)
