"""
Mapping of the decoded current weather payload into domain models.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple, Type

from openweather_client.config import OpenWeatherConfig
from openweather_client.enums import TemperatureUnit, WindUnit
from openweather_client.exceptions import MalformedResponseError
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

_NUMBER = (int, float)


def _check_type(value: Any, kinds: Tuple[Type, ...], path: str) -> Any:
    # bool is an int subclass but never a valid reading
    if isinstance(value, bool) or not isinstance(value, kinds):
        raise MalformedResponseError(
            f"Field '{path}' has unexpected type {type(value).__name__}", field=path
        )
    return value


def require(obj: Dict[str, Any], key: str, kinds: Tuple[Type, ...], path: str) -> Any:
    """Return a required field, raising MalformedResponseError if absent or mistyped."""
    if key not in obj or obj[key] is None:
        raise MalformedResponseError(f"Missing required field '{path}'", field=path)
    return _check_type(obj[key], kinds, path)


def optional(
    obj: Dict[str, Any], key: str, kinds: Tuple[Type, ...], path: str
) -> Optional[Any]:
    """Return an optional field or None when absent or null."""
    value = obj.get(key)
    if value is None:
        return None
    return _check_type(value, kinds, path)


def _require_int(obj: Dict[str, Any], key: str, path: str) -> int:
    return _as_int(require(obj, key, _NUMBER, path), path)


def _optional_int(obj: Dict[str, Any], key: str, path: str) -> Optional[int]:
    value = optional(obj, key, _NUMBER, path)
    return None if value is None else _as_int(value, path)


def _as_int(value: Any, path: str) -> int:
    if isinstance(value, float):
        if not value.is_integer():
            raise MalformedResponseError(
                f"Field '{path}' is not an integer: {value}", field=path
            )
        return int(value)
    return value


def _optional_float(obj: Dict[str, Any], key: str, path: str) -> Optional[float]:
    value = optional(obj, key, _NUMBER, path)
    return None if value is None else float(value)


def _require_float(obj: Dict[str, Any], key: str, path: str) -> float:
    return float(require(obj, key, _NUMBER, path))


def _instant(obj: Dict[str, Any], key: str, path: str) -> datetime:
    epoch_seconds = _require_int(obj, key, path)
    try:
        return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise MalformedResponseError(
            f"Field '{path}' is not a valid timestamp: {epoch_seconds}", field=path
        ) from e


def map_forecast(payload: Any, config: OpenWeatherConfig) -> Forecast:
    """
    Map a decoded response body into a Forecast.

    Temperature and wind unit tags come from the configured unit system, since
    the provider does not echo the unit back.

    Args:
        payload: Decoded JSON body
        config: Configuration the request was made with

    Returns:
        Forecast: Fully populated forecast

    Raises:
        MalformedResponseError: If a required field is missing or mistyped
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError("Response body is not a JSON object")

    coord = require(payload, "coord", (dict,), "coord")
    coordinates = Coordinates(
        longitude=_require_float(coord, "lon", "coord.lon"),
        latitude=_require_float(coord, "lat", "coord.lat"),
    )

    conditions = require(payload, "weather", (list,), "weather")
    if not conditions:
        raise MalformedResponseError("Field 'weather' is empty", field="weather")
    condition = _check_type(conditions[0], (dict,), "weather[0]")
    weather = WeatherCondition(
        condition_id=_require_int(condition, "id", "weather[0].id"),
        main=require(condition, "main", (str,), "weather[0].main"),
        description=require(condition, "description", (str,), "weather[0].description"),
        icon_id=require(condition, "icon", (str,), "weather[0].icon"),
    )

    main = require(payload, "main", (dict,), "main")
    temperature = Temperature(
        value=_require_float(main, "temp", "main.temp"),
        feels_like=_require_float(main, "feels_like", "main.feels_like"),
        min=_require_float(main, "temp_min", "main.temp_min"),
        max=_require_float(main, "temp_max", "main.temp_max"),
        unit=TemperatureUnit.for_units(config.units),
    )
    pressure = Pressure(
        surface_pressure=_require_float(main, "pressure", "main.pressure"),
        sea_level=_optional_float(main, "sea_level", "main.sea_level"),
        ground_level=_optional_float(main, "grnd_level", "main.grnd_level"),
    )
    humidity = Humidity(percent=_optional_int(main, "humidity", "main.humidity"))

    visibility = Visibility(meters=_optional_int(payload, "visibility", "visibility"))

    wind_data = require(payload, "wind", (dict,), "wind")
    wind = Wind(
        speed=_require_float(wind_data, "speed", "wind.speed"),
        direction=_optional_int(wind_data, "deg", "wind.deg"),
        gust=_optional_float(wind_data, "gust", "wind.gust"),
        unit=WindUnit.for_units(config.units),
    )

    clouds = require(payload, "clouds", (dict,), "clouds")
    cloudiness = Cloudiness(percent=_require_int(clouds, "all", "clouds.all"))

    system = require(payload, "sys", (dict,), "sys")
    time = Time(
        timezone_offset=_require_int(payload, "timezone", "timezone"),
        sunrise=_instant(system, "sunrise", "sys.sunrise"),
        sunset=_instant(system, "sunset", "sys.sunset"),
    )

    location = Location(
        name=require(payload, "name", (str,), "name"),
        id=_require_int(payload, "id", "id"),
        country_code=require(system, "country", (str,), "sys.country"),
    )

    return Forecast(
        config=config,
        location=location,
        cloudiness=cloudiness,
        coordinates=coordinates,
        humidity=humidity,
        pressure=pressure,
        temperature=temperature,
        time=time,
        visibility=visibility,
        weather=weather,
        wind=wind,
    )
