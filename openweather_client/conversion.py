"""
Unit conversion for temperature and wind readings.

Conversions return new values and never modify the input; a reading that is
already in the target unit is returned as is.
"""

from typing import Callable

from openweather_client.enums import TemperatureUnit, WindUnit
from openweather_client.models import Temperature, Wind

KELVIN_OFFSET = 273.15
MPH_TO_MPS = 0.44704


def _celsius_to_fahrenheit(value: float) -> float:
    return value * 1.8 + 32


def _fahrenheit_to_celsius(value: float) -> float:
    return (value - 32) / 1.8


def _celsius_to_kelvin(value: float) -> float:
    return value + KELVIN_OFFSET


def _kelvin_to_celsius(value: float) -> float:
    return value - KELVIN_OFFSET


def _apply(
    temperature: Temperature, func: Callable[[float], float], unit: TemperatureUnit
) -> Temperature:
    return Temperature(
        value=func(temperature.value),
        feels_like=func(temperature.feels_like),
        min=func(temperature.min),
        max=func(temperature.max),
        unit=unit,
    )


def convert_temperature(
    temperature: Temperature, target: TemperatureUnit
) -> Temperature:
    """
    Convert all four temperature readings to another scale.

    Kelvin and Fahrenheit convert to each other through Celsius.

    Args:
        temperature: Readings to convert
        target: Scale to convert to

    Returns:
        Temperature: New readings tagged with ``target``
    """
    source = temperature.unit
    if source is target:
        return temperature

    if source is TemperatureUnit.CELSIUS:
        if target is TemperatureUnit.KELVIN:
            return _apply(temperature, _celsius_to_kelvin, target)
        return _apply(temperature, _celsius_to_fahrenheit, target)

    if source is TemperatureUnit.KELVIN:
        celsius = _apply(temperature, _kelvin_to_celsius, TemperatureUnit.CELSIUS)
        return convert_temperature(celsius, target)

    # Fahrenheit
    celsius = _apply(temperature, _fahrenheit_to_celsius, TemperatureUnit.CELSIUS)
    return convert_temperature(celsius, target)


def convert_wind(wind: Wind, target: WindUnit) -> Wind:
    """
    Convert wind speed and gust to another unit. Direction is unchanged.

    Args:
        wind: Readings to convert
        target: Unit to convert to

    Returns:
        Wind: New readings tagged with ``target``
    """
    if wind.unit is target:
        return wind

    if target is WindUnit.METERS_PER_SECOND:
        factor = MPH_TO_MPS
    else:
        factor = 1 / MPH_TO_MPS

    return Wind(
        speed=wind.speed * factor,
        direction=wind.direction,
        gust=wind.gust * factor if wind.gust is not None else None,
        unit=target,
    )
