"""
Unit systems, languages and measurement units understood by OpenWeatherMap.
"""

from enum import Enum
from typing import Optional


class Units(Enum):
    """
    Measurement unit system requested from the provider.

    DEFAULT is the scientific system (Kelvin, meters per second) and is
    signalled by omitting the ``units`` query parameter.
    """

    DEFAULT = None
    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def token(self) -> Optional[str]:
        return self.value


class Language(str, Enum):
    """Language of the textual fields in the provider's responses."""

    AFRIKAANS = "af"
    ALBANIAN = "al"
    ARABIC = "ar"
    AZERBAIJANI = "az"
    BASQUE = "eu"
    BULGARIAN = "bg"
    CATALAN = "ca"
    CHINESE_SIMPLIFIED = "zh_cn"
    CHINESE_TRADITIONAL = "zh_tw"
    CROATIAN = "hr"
    CZECH = "cz"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    FARSI = "fa"
    FINNISH = "fi"
    FRENCH = "fr"
    GALICIAN = "gl"
    GERMAN = "de"
    GREEK = "el"
    HEBREW = "he"
    HINDI = "hi"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "kr"
    LATVIAN = "la"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    NORWEGIAN = "no"
    POLISH = "pl"
    PORTUGUESE = "pt"
    PORTUGUESE_BRAZIL = "pt_br"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SWEDISH = "se"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "ua"
    VIETNAMESE = "vi"
    ZULU = "zu"

    @property
    def token(self) -> str:
        return self.value


class TemperatureUnit(Enum):
    """Temperature scale, valued by its display symbol."""

    KELVIN = "K"
    CELSIUS = "°C"
    FAHRENHEIT = "°F"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def for_units(cls, units: Units) -> "TemperatureUnit":
        """Scale the provider reports temperatures in for a unit system."""
        return {
            Units.DEFAULT: cls.KELVIN,
            Units.METRIC: cls.CELSIUS,
            Units.IMPERIAL: cls.FAHRENHEIT,
        }[units]


class WindUnit(Enum):
    """Wind speed unit, valued by its display symbol."""

    METERS_PER_SECOND = "m/s"
    MILES_PER_HOUR = "mph"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def for_units(cls, units: Units) -> "WindUnit":
        """Speed unit the provider reports wind in for a unit system."""
        if units is Units.IMPERIAL:
            return cls.MILES_PER_HOUR
        return cls.METERS_PER_SECOND
