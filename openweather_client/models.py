"""
Immutable domain models for a current weather forecast.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from openweather_client.config import OpenWeatherConfig
from openweather_client.enums import TemperatureUnit, WindUnit


class _Entity(BaseModel):
    model_config = ConfigDict(frozen=True)


class Coordinates(_Entity):
    """Geographic coordinates of a location."""

    longitude: float
    latitude: float


class Location(_Entity):
    """Location the forecast was requested for."""

    name: str
    id: int = Field(..., description="OpenWeatherMap city identifier")
    country_code: str = Field(..., description="Two-letter country code, e.g. GB")


class Cloudiness(_Entity):
    """Cloudiness, percent."""

    percent: int


class Humidity(_Entity):
    """Relative humidity, percent."""

    percent: Optional[int] = None


class Pressure(_Entity):
    """Atmospheric pressure, hPa."""

    surface_pressure: float
    sea_level: Optional[float] = None
    ground_level: Optional[float] = None


class Temperature(_Entity):
    """Temperature readings, all four expressed in ``unit``."""

    value: float
    feels_like: float
    min: float
    max: float
    unit: TemperatureUnit


class Wind(_Entity):
    """Wind readings; ``speed`` and ``gust`` share ``unit``."""

    speed: float
    direction: Optional[int] = Field(None, description="Degrees, absent if variable")
    gust: Optional[float] = None
    unit: WindUnit

    @property
    def direction_name(self) -> Optional[str]:
        """Compass direction name for the degree value."""
        if self.direction is None:
            return None
        degrees = self.direction
        if 0 <= degrees <= 25 or 336 <= degrees <= 360:
            return "North"
        if 26 <= degrees <= 70:
            return "Northeast"
        if 71 <= degrees <= 110:
            return "East"
        if 111 <= degrees <= 155:
            return "Southeast"
        if 156 <= degrees <= 200:
            return "South"
        if 201 <= degrees <= 250:
            return "Southwest"
        if 251 <= degrees <= 290:
            return "West"
        if 291 <= degrees <= 335:
            return "Northwest"
        return None


class Time(_Entity):
    """Time zone and sun events of a location. Instants are UTC."""

    timezone_offset: int = Field(..., description="Offset from UTC, seconds")
    sunrise: datetime
    sunset: datetime

    @property
    def time_zone(self) -> timezone:
        return timezone(timedelta(seconds=self.timezone_offset))

    @property
    def local_sunrise(self) -> datetime:
        return self.sunrise.astimezone(self.time_zone)

    @property
    def local_sunset(self) -> datetime:
        return self.sunset.astimezone(self.time_zone)

    @property
    def sunrise_millis(self) -> int:
        return _epoch_millis(self.sunrise)

    @property
    def sunset_millis(self) -> int:
        return _epoch_millis(self.sunset)


class Visibility(_Entity):
    """Visibility, meters."""

    meters: Optional[int] = None


class WeatherCondition(_Entity):
    """Weather condition as classified by the provider."""

    condition_id: int
    main: str
    description: str
    icon_id: str


class Forecast(_Entity):
    """
    Current weather for one location.

    Carries the configuration it was fetched with, so the unit system and
    language behind the values are known without re-deriving them.
    """

    config: OpenWeatherConfig
    location: Location
    cloudiness: Cloudiness
    coordinates: Coordinates
    humidity: Humidity
    pressure: Pressure
    temperature: Temperature
    time: Time
    visibility: Visibility
    weather: WeatherCondition
    wind: Wind


def _epoch_millis(instant: datetime) -> int:
    return (instant - datetime(1970, 1, 1, tzinfo=timezone.utc)) // timedelta(
        milliseconds=1
    )
