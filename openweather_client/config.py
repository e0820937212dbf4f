"""
Configuration for the OpenWeatherMap client.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import aiohttp
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from openweather_client.enums import Language, Units
from openweather_client.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ExternalAPIConfig:
    """External API configuration"""

    OPENWEATHER_BASE_URL = "http://api.openweathermap.org/data/2.5/weather"

    # Environment variables read by WeatherBuilder.from_env
    API_KEY_ENV = "OPENWEATHER_API_KEY"
    UNITS_ENV = "OPENWEATHER_UNITS"
    LANGUAGE_ENV = "OPENWEATHER_LANGUAGE"


class OpenWeatherConfig(BaseModel):
    """
    Immutable client configuration.

    Attributes:
        api_key: OpenWeatherMap API key
        units: Unit system the provider should report values in
        language: Language of the provider's textual fields
        session: Shared aiohttp session; a session per request is opened when None
        timeout: Total timeout in seconds for per-request sessions
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    api_key: Optional[str] = Field(None, validate_default=True)
    units: Units = Units.DEFAULT
    language: Language = Language.ENGLISH
    session: Optional[aiohttp.ClientSession] = None
    timeout: Optional[float] = None

    @field_validator("api_key", mode="before")
    @classmethod
    def _require_api_key(cls, value):
        # ConfigurationError is not a ValueError, so pydantic lets it through
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError("The provided API key is empty")
        return value.strip()

    def __repr__(self) -> str:
        return (
            f"OpenWeatherConfig(api_key='***', units={self.units.name}, "
            f"language={self.language.name}, timeout={self.timeout})"
        )

    __str__ = __repr__


@dataclass(frozen=True)
class BuildResult:
    """Outcome of WeatherBuilder.build: exactly one of config or error is set."""

    config: Optional[OpenWeatherConfig] = None
    error: Optional[ConfigurationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> OpenWeatherConfig:
        if self.error is not None:
            raise self.error
        return self.config


class WeatherBuilder:
    """
    Fluent builder accumulating optional settings for an OpenWeatherConfig.

    Example:
        result = WeatherBuilder().key("...").units(Units.METRIC).build()
        if result.ok:
            config = result.config
    """

    def __init__(self):
        self._api_key: Optional[str] = None
        self._units = Units.DEFAULT
        self._language = Language.ENGLISH
        self._session: Optional[aiohttp.ClientSession] = None
        self._timeout: Optional[float] = None
        self._errors: list[str] = []

    def key(self, api_key: Optional[str]) -> "WeatherBuilder":
        self._api_key = api_key
        return self

    def units(self, units: Units) -> "WeatherBuilder":
        self._units = units
        return self

    def language(self, language: Language) -> "WeatherBuilder":
        self._language = language
        return self

    def session(self, session: Optional[aiohttp.ClientSession]) -> "WeatherBuilder":
        self._session = session
        return self

    def timeout(self, timeout: Optional[float]) -> "WeatherBuilder":
        self._timeout = timeout
        return self

    def build(self) -> BuildResult:
        """
        Validate the accumulated settings.

        Returns:
            BuildResult holding either the configuration or the ConfigurationError
        """
        if self._errors:
            return BuildResult(error=ConfigurationError("; ".join(self._errors)))
        if not isinstance(self._api_key, str) or not self._api_key.strip():
            return BuildResult(error=ConfigurationError("The provided API key is empty"))

        try:
            config = OpenWeatherConfig(
                api_key=self._api_key,
                units=self._units,
                language=self._language,
                session=self._session,
                timeout=self._timeout,
            )
        except ConfigurationError as e:
            return BuildResult(error=e)
        except ValidationError as e:
            return BuildResult(error=ConfigurationError(str(e)))
        return BuildResult(config=config)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "WeatherBuilder":
        """
        Create a builder from environment variables.

        Variables from ``env_file`` (or the nearest ``.env`` file searched upward
        from the current working directory) are loaded first without overriding
        the process environment.

        Args:
            env_file: Optional path to a dotenv file

        Returns:
            WeatherBuilder: Builder seeded with key, units and language
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))
        builder = cls().key(os.getenv(ExternalAPIConfig.API_KEY_ENV))

        units_name = os.getenv(ExternalAPIConfig.UNITS_ENV)
        if units_name:
            try:
                builder.units(Units[units_name.strip().upper()])
            except KeyError:
                builder._errors.append(f"Unknown unit system: {units_name}")

        language_name = os.getenv(ExternalAPIConfig.LANGUAGE_ENV)
        if language_name:
            try:
                builder.language(_parse_language(language_name))
            except ValueError:
                builder._errors.append(f"Unknown language: {language_name}")

        logger.debug(
            "Loaded client settings from environment (units=%s, language=%s)",
            builder._units.name,
            builder._language.name,
        )
        return builder


def _parse_language(name: str) -> Language:
    """Resolve a language by enum name ("GERMAN") or wire token ("de")."""
    name = name.strip()
    try:
        return Language[name.upper()]
    except KeyError:
        return Language(name.lower())
