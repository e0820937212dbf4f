"""
Configuration and builder tests.
"""

import pytest

from openweather_client.config import ExternalAPIConfig, OpenWeatherConfig, WeatherBuilder
from openweather_client.enums import Language, Units
from openweather_client.exceptions import ConfigurationError

ENV_NAMES = (
    ExternalAPIConfig.API_KEY_ENV,
    ExternalAPIConfig.UNITS_ENV,
    ExternalAPIConfig.LANGUAGE_ENV,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Clear client variables and restore them after the test."""
    for name in ENV_NAMES:
        # setenv first so monkeypatch also undoes values loaded by python-dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestOpenWeatherConfig:
    """Test direct configuration construction."""

    def test_defaults(self, sample_api_key):
        config = OpenWeatherConfig(api_key=sample_api_key)

        assert config.units is Units.DEFAULT
        assert config.language is Language.ENGLISH
        assert config.session is None
        assert config.timeout is None

    def test_missing_key_rejected(self):
        """Test omitting the key raises ConfigurationError, not a validation error."""
        with pytest.raises(ConfigurationError):
            OpenWeatherConfig()

    def test_non_string_key_rejected(self):
        with pytest.raises(ConfigurationError):
            OpenWeatherConfig(api_key=12345)

    @pytest.mark.parametrize("key", ["", "   "])
    def test_blank_key_rejected(self, key):
        with pytest.raises(ConfigurationError):
            OpenWeatherConfig(api_key=key)

    def test_repr_masks_key(self, sample_api_key):
        assert sample_api_key not in repr(OpenWeatherConfig(api_key=sample_api_key))


class TestWeatherBuilder:
    """Test the fluent builder."""

    def test_build_success(self, sample_api_key):
        result = (
            WeatherBuilder()
            .key(sample_api_key)
            .units(Units.IMPERIAL)
            .language(Language.UKRAINIAN)
            .timeout(3.5)
            .build()
        )

        assert result.ok
        assert result.error is None
        assert result.config.api_key == sample_api_key
        assert result.config.units is Units.IMPERIAL
        assert result.config.language is Language.UKRAINIAN
        assert result.config.timeout == 3.5

    def test_build_without_key_returns_error(self):
        result = WeatherBuilder().units(Units.METRIC).build()

        assert not result.ok
        assert result.config is None
        assert isinstance(result.error, ConfigurationError)

    def test_build_with_non_string_key_returns_error(self):
        result = WeatherBuilder().key(12345).build()

        assert not result.ok
        assert isinstance(result.error, ConfigurationError)

    def test_build_with_invalid_units_returns_error(self, sample_api_key):
        """Test values rejected by the model are reported, not raised."""
        result = WeatherBuilder().key(sample_api_key).units("kelvin").build()

        assert not result.ok
        assert result.config is None
        assert isinstance(result.error, ConfigurationError)
        assert "units" in result.error.message

    def test_build_with_invalid_language_returns_error(self, sample_api_key):
        result = WeatherBuilder().key(sample_api_key).language("klingon").build()

        assert isinstance(result.error, ConfigurationError)

    def test_unwrap_raises_error(self):
        with pytest.raises(ConfigurationError):
            WeatherBuilder().build().unwrap()

    def test_from_env(self, clean_env, tmp_path, sample_api_key):
        env_file = tmp_path / ".env"
        env_file.write_text(
            f"OPENWEATHER_API_KEY={sample_api_key}\n"
            "OPENWEATHER_UNITS=metric\n"
            "OPENWEATHER_LANGUAGE=de\n"
        )

        config = WeatherBuilder.from_env(str(env_file)).build().unwrap()

        assert config.api_key == sample_api_key
        assert config.units is Units.METRIC
        assert config.language is Language.GERMAN

    def test_from_env_finds_dotenv_in_working_directory(
        self, clean_env, tmp_path, sample_api_key
    ):
        """Test the default .env lookup starts from the current directory."""
        (tmp_path / ".env").write_text(
            f"OPENWEATHER_API_KEY={sample_api_key}\nOPENWEATHER_UNITS=imperial\n"
        )
        clean_env.chdir(tmp_path)

        config = WeatherBuilder.from_env().build().unwrap()

        assert config.api_key == sample_api_key
        assert config.units is Units.IMPERIAL

    def test_from_env_language_by_name(self, clean_env, tmp_path, sample_api_key):
        env_file = tmp_path / ".env"
        env_file.write_text("")
        clean_env.setenv(ExternalAPIConfig.API_KEY_ENV, sample_api_key)
        clean_env.setenv(ExternalAPIConfig.LANGUAGE_ENV, "portuguese_brazil")

        config = WeatherBuilder.from_env(str(env_file)).build().unwrap()

        assert config.language is Language.PORTUGUESE_BRAZIL

    def test_from_env_missing_key(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("")

        result = WeatherBuilder.from_env(str(env_file)).build()

        assert isinstance(result.error, ConfigurationError)

    def test_from_env_unknown_units(self, clean_env, tmp_path, sample_api_key):
        env_file = tmp_path / ".env"
        env_file.write_text("")
        clean_env.setenv(ExternalAPIConfig.API_KEY_ENV, sample_api_key)
        clean_env.setenv(ExternalAPIConfig.UNITS_ENV, "furlongs")

        result = WeatherBuilder.from_env(str(env_file)).build()

        assert not result.ok
        assert "furlongs" in result.error.message
