"""
Failure kinds surfaced by the weather command.

Every error is fatal to a run; the CLI maps each class to its exit code.
"""

from typing import Optional


class WeatherCliError(Exception):
    exit_code = 1


class ConfigError(WeatherCliError):
    """Missing or empty API credential."""

    exit_code = 78


class ArgumentError(WeatherCliError):
    """Missing, extra or empty command-line arguments."""

    exit_code = 2


class UrlConstructionError(WeatherCliError):
    """The request URL could not be composed."""


class NetworkError(WeatherCliError):
    """No response was obtained (DNS, refused connection, timeout...)."""


class DecodeError(WeatherCliError):
    """A response was obtained but it is not a valid weather report."""


class HttpStatusError(DecodeError):
    """
    The provider answered with a non-success status.

    Kept as a `DecodeError` so an error payload is still a decode failure
    for callers that do not care about the status.
    """

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        text = f"provider returned HTTP {status_code}"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)


class TimeConversionError(WeatherCliError):
    """An epoch value does not map to a calendar time."""
