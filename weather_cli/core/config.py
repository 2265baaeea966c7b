from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_cli.core.errors import ConfigError


class Settings(BaseSettings):
    """
    Command-line configuration settings.

    This class loads configuration values from environment variables
    and optionally from a `.env` file. It uses Pydantic Settings
    to provide type validation and default values.

    Environment variables take precedence over `.env` values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------
    # Provider settings
    # ---------------------------------------------------------------------

    api_key: Optional[str] = Field(
        default=None,
        alias="API_KEY",
        description="API key used to authenticate requests to OpenWeatherMap",
    )

    base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5",
        alias="OWM_BASE_URL",
        description="Base URL of the OpenWeatherMap data API",
    )

    request_timeout: float = Field(
        default=10.0,
        gt=0,
        alias="REQUEST_TIMEOUT",
        description="Deadline in seconds for the weather request",
    )

    # ---------------------------------------------------------------------
    # Logging settings
    # ---------------------------------------------------------------------

    log_level: str = Field(
        default="WARNING",
        alias="LOG_LEVEL",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    def require_api_key(self) -> str:
        """
        Return the configured API key.

        Raises:
            ConfigError: if `API_KEY` is unset, empty or only whitespace.
        """
        if not self.api_key or not self.api_key.strip():
            raise ConfigError("API_KEY is not configured")
        return self.api_key


def get_settings(env_file: Optional[str] = ".env") -> Settings:
    """
    Build a fresh settings object.

    Pass `env_file=None` to read the process environment only.
    Malformed values (e.g. a non-numeric REQUEST_TIMEOUT) raise `ConfigError`.
    """
    try:
        return Settings(_env_file=env_file)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
