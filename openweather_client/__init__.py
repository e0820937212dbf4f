"""Asynchronous client for the OpenWeatherMap current weather API."""

__version__ = "1.0.0"

from openweather_client.config import (
    BuildResult,
    ExternalAPIConfig,
    OpenWeatherConfig,
    WeatherBuilder,
)
from openweather_client.conversion import convert_temperature, convert_wind
from openweather_client.enums import Language, TemperatureUnit, Units, WindUnit
from openweather_client.exceptions import (
    AuthenticationError,
    ConfigurationError,
    InvalidQueryError,
    MalformedResponseError,
    NotFoundError,
    UnexpectedResponseError,
    WeatherAPIError,
)
from openweather_client.external_api import (
    OpenWeatherMapClient,
    fetch_forecast,
    open_weather_api,
)
from openweather_client.models import (
    Cloudiness,
    Coordinates,
    Forecast,
    Humidity,
    Location,
    Pressure,
    Temperature,
    Time,
    Visibility,
    WeatherCondition,
    Wind,
)
from openweather_client.query import FetchMode, build_query, build_url

__all__ = [
    "AuthenticationError",
    "BuildResult",
    "Cloudiness",
    "ConfigurationError",
    "Coordinates",
    "ExternalAPIConfig",
    "FetchMode",
    "Forecast",
    "Humidity",
    "InvalidQueryError",
    "Language",
    "Location",
    "MalformedResponseError",
    "NotFoundError",
    "OpenWeatherConfig",
    "OpenWeatherMapClient",
    "Pressure",
    "Temperature",
    "TemperatureUnit",
    "Time",
    "UnexpectedResponseError",
    "Units",
    "Visibility",
    "WeatherAPIError",
    "WeatherBuilder",
    "WeatherCondition",
    "Wind",
    "WindUnit",
    "build_query",
    "build_url",
    "convert_temperature",
    "convert_wind",
    "fetch_forecast",
    "open_weather_api",
]
