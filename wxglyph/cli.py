"""CLI entry point for the one-line weather forecast."""

import argparse
import logging
import sys
from pathlib import Path

from wxglyph.config.defaults import DEFAULT_CONFIG_PATH
from wxglyph.config.loader import ConfigError, load_config, load_token
from wxglyph.config.schema import AppConfig
from wxglyph.forecasting.darksky_forecaster import DarkSkyForecaster, Forecaster
from wxglyph.ingest.darksky_client import DarkSkyRestClient, FetchError
from wxglyph.reporting.formatters import format_daily_line, format_hourly_line

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wxglyph",
        description="Print the daily or hourly weather forecast",
    )
    parser.add_argument(
        "-d", "--daily", action="store_true",
        help="Print the daily forecast (default is hourly)",
    )
    parser.add_argument(
        "--config", default=None,
        help=f"Settings YAML path (default {DEFAULT_CONFIG_PATH} if present)",
    )
    parser.add_argument("--token-file", default=None, help="API token JSON path")
    parser.add_argument(
        "--no-color", action="store_true", help="Disable terminal colors"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging to stderr"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs request URLs, which carry the API token
    logging.getLogger("httpx").setLevel(logging.WARNING)

    try:
        config = _load_app_config(args.config)
        token = load_token(args.token_file or config.token_file)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    forecaster = create_forecaster(config, token.token)
    color = config.display.color and not args.no_color
    logger.debug(
        "Fetching %s forecast for %s",
        "daily" if args.daily else "hourly", config.location.path_segment(),
    )

    if args.daily:
        return _cmd_daily(forecaster, color)
    return _cmd_hourly(forecaster, config.display.hourly_count, color)


def create_forecaster(config: AppConfig, token: str) -> DarkSkyForecaster:
    client = DarkSkyRestClient(
        token,
        config.location,
        base_url=config.provider.base_url,
        timeout=config.provider.timeout,
    )
    return DarkSkyForecaster(client)


def _load_app_config(path: str | None) -> AppConfig:
    if path is not None:
        return load_config(path)
    if Path(DEFAULT_CONFIG_PATH).exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return load_config()


def _cmd_daily(forecaster: Forecaster, color: bool) -> int:
    try:
        forecasts = forecaster.daily_forecast()
    except FetchError as e:
        print(f"Failed to reach DarkSky: {e}", file=sys.stderr)
        return 1
    print(format_daily_line(forecasts, color=color))
    return 0


def _cmd_hourly(forecaster: Forecaster, limit: int, color: bool) -> int:
    # Current conditions are optional: on failure the temperature is left out
    try:
        current_temp = forecaster.current().temp
    except FetchError:
        current_temp = None

    try:
        forecasts = forecaster.hourly_forecast()
    except FetchError as e:
        print(f"Failed to reach DarkSky: {e}", file=sys.stderr)
        return 1
    print(format_hourly_line(current_temp, forecasts, limit=limit, color=color))
    return 0
