"""
Domain model tests.
"""

from datetime import datetime, timedelta, timezone

import pydantic
import pytest

from openweather_client.enums import Language, TemperatureUnit, Units, WindUnit
from openweather_client.models import Location, Time, Wind


class TestWindDirectionName:
    """Test compass names derived from wind degrees."""

    @pytest.mark.parametrize(
        "degrees, name",
        [
            (0, "North"),
            (25, "North"),
            (26, "Northeast"),
            (70, "Northeast"),
            (80, "East"),
            (110, "East"),
            (111, "Southeast"),
            (180, "South"),
            (225, "Southwest"),
            (270, "West"),
            (300, "Northwest"),
            (335, "Northwest"),
            (336, "North"),
            (360, "North"),
        ],
    )
    def test_direction_name(self, degrees, name):
        wind = Wind(speed=1.0, direction=degrees, unit=WindUnit.METERS_PER_SECOND)
        assert wind.direction_name == name

    @pytest.mark.parametrize("degrees", [None, -1, 361])
    def test_unknown_direction(self, degrees):
        wind = Wind(speed=1.0, direction=degrees, unit=WindUnit.METERS_PER_SECOND)
        assert wind.direction_name is None


class TestTime:
    """Test time zone helpers."""

    def test_local_times(self):
        sunrise = datetime.fromtimestamp(1560343627, tz=timezone.utc)
        sunset = datetime.fromtimestamp(1560396563, tz=timezone.utc)
        time = Time(timezone_offset=3600, sunrise=sunrise, sunset=sunset)

        assert time.time_zone.utcoffset(None) == timedelta(hours=1)
        assert time.local_sunrise == sunrise
        assert time.local_sunrise.utcoffset() == timedelta(hours=1)
        assert time.sunrise_millis == 1560343627000
        assert time.sunset_millis == 1560396563000


class TestEntities:
    """Test value semantics of entities."""

    def test_structural_equality(self):
        assert Location(name="London", id=1, country_code="GB") == Location(
            name="London", id=1, country_code="GB"
        )

    def test_entities_are_immutable(self):
        location = Location(name="London", id=1, country_code="GB")
        with pytest.raises(pydantic.ValidationError):
            location.name = "Paris"


class TestUnitEnums:
    """Test unit system lookups."""

    def test_temperature_unit_for_units(self):
        assert TemperatureUnit.for_units(Units.DEFAULT) is TemperatureUnit.KELVIN
        assert TemperatureUnit.for_units(Units.METRIC) is TemperatureUnit.CELSIUS
        assert TemperatureUnit.for_units(Units.IMPERIAL) is TemperatureUnit.FAHRENHEIT

    def test_wind_unit_for_units(self):
        assert WindUnit.for_units(Units.DEFAULT) is WindUnit.METERS_PER_SECOND
        assert WindUnit.for_units(Units.METRIC) is WindUnit.METERS_PER_SECOND
        assert WindUnit.for_units(Units.IMPERIAL) is WindUnit.MILES_PER_HOUR

    def test_tokens(self):
        assert Units.DEFAULT.token is None
        assert Units.METRIC.token == "metric"
        assert Language.CHINESE_SIMPLIFIED.token == "zh_cn"
        assert TemperatureUnit.CELSIUS.symbol == "°C"
