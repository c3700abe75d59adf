"""Maps Dark Sky payloads onto the internal Forecast model."""

import logging
from typing import Protocol

from wxglyph.ingest.darksky_client import DarkSkyClient
from wxglyph.models.common import date_for, local_now, time_for
from wxglyph.models.forecast import Forecast, Weather
from wxglyph.models.provider import DSForecast

logger = logging.getLogger(__name__)

ICON_WEATHER: dict[str, Weather] = {
    "clear-day": Weather.SUNNY,
    "clear-night": Weather.SUNNY,
    "partly-cloudy-day": Weather.PARTLY_SUNNY,
    "partly-cloudy-night": Weather.PARTLY_SUNNY,
    "cloudy": Weather.CLOUDY,
    "rain": Weather.RAIN,
    "fog": Weather.FOG,
    "snow": Weather.SNOW,
}


class Forecaster(Protocol):
    def daily_forecast(self) -> list[Forecast]: ...

    def hourly_forecast(self) -> list[Forecast]: ...

    def current(self) -> Forecast: ...


def weather_for(icon: str) -> Weather:
    """Classify a provider icon string. Unrecognized icons map to UNKNOWN."""
    return ICON_WEATHER.get(icon, Weather.UNKNOWN)


class DarkSkyForecaster:
    def __init__(self, client: DarkSkyClient):
        self.client = client

    def daily_forecast(self) -> list[Forecast]:
        data = self.client.forecasts().daily.data
        return [_daily_entry(p) for p in data]

    def hourly_forecast(self) -> list[Forecast]:
        data = self.client.forecasts().hourly.data
        return [_hourly_entry(p) for p in data]

    def current(self) -> Forecast:
        """Current temperature as of now.

        Reports SUNNY with no precipitation regardless of the provider's
        current icon; only the temperature is taken from the payload.
        """
        currently = self.client.forecasts().currently
        return Forecast.for_time(Weather.SUNNY, 0.0, currently.temperature, local_now())


def _precip(point: DSForecast) -> float:
    if point.precip_probability is None:
        return 0.0
    return point.precip_probability


def _daily_entry(point: DSForecast) -> Forecast:
    weather = weather_for(point.icon)
    if weather is Weather.UNKNOWN:
        logger.debug("Unrecognized daily icon %r at %d", point.icon, point.time)
    return Forecast.for_date(
        weather, _precip(point), point.temperature_high, date_for(point.time)
    )


def _hourly_entry(point: DSForecast) -> Forecast:
    weather = weather_for(point.icon)
    if weather is Weather.UNKNOWN:
        logger.debug("Unrecognized hourly icon %r at %d", point.icon, point.time)
    temp = point.temperature if point.temperature is not None else point.temperature_high
    return Forecast.for_time(weather, _precip(point), temp, time_for(point.time))
