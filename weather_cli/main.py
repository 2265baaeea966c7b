"""
Weather CLI: current conditions for a city from OpenWeatherMap.

Usage:
  weather-cli London GB

Requires API_KEY in the environment or in a local .env file.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from weather_cli.core.config import get_settings
from weather_cli.core.errors import ArgumentError, WeatherCliError
from weather_cli.core.log import configure_logging
from weather_cli.services.providers.openweather_client import OpenWeatherClient
from weather_cli.services.report import render

log = logging.getLogger("weather_cli")


class _Parser(argparse.ArgumentParser):
    """Raise instead of exiting so every failure goes through one exit path."""

    def error(self, message):
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="weather-cli",
        description="Print the current weather for a city.",
    )
    parser.add_argument("city", help="City name, e.g. London")
    parser.add_argument("country_code", help="Country code, e.g. GB")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    args = build_parser().parse_args(argv)
    if not args.city:
        raise ArgumentError("city must not be empty")
    if not args.country_code:
        raise ArgumentError("country_code must not be empty")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the command and return the process exit code.

    On failure nothing is written to stdout; the error goes to stderr.
    """
    try:
        args = parse_args(argv)
        settings = get_settings()
        configure_logging(settings.log_level)

        client = OpenWeatherClient(
            api_key=settings.require_api_key(),
            base_url=settings.base_url,
            timeout_s=settings.request_timeout,
        )
        log.info("Fetching weather for %s, %s", args.city, args.country_code)
        report = asyncio.run(client.fetch(args.city, args.country_code))
        output = render(report)
    except WeatherCliError as e:
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code

    print(output)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
