"""Internal weather taxonomy and normalized forecast record."""

from dataclasses import dataclass
from datetime import date as Date
from datetime import datetime
from enum import StrEnum


class Weather(StrEnum):
    SUNNY = "sunny"
    PARTLY_SUNNY = "partly-sunny"
    CLOUDY = "cloudy"
    SHOWERS = "showers"
    RAIN = "rain"
    SNOW = "snow"
    FOG = "fog"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Forecast:
    """One forecast entry, scoped either to a calendar day or to an instant.

    Exactly one of `date` and `time` is set.
    """

    weather: Weather
    precip_chance: float  # 0.0 - 1.0
    temp: float | None = None
    date: Date | None = None
    time: datetime | None = None

    def __post_init__(self) -> None:
        if (self.date is None) == (self.time is None):
            raise ValueError("Forecast needs exactly one of date or time")

    @classmethod
    def for_date(
        cls,
        weather: Weather,
        precip_chance: float,
        temp: float | None,
        date: Date,
    ) -> "Forecast":
        return cls(weather=weather, precip_chance=precip_chance, temp=temp, date=date)

    @classmethod
    def for_time(
        cls,
        weather: Weather,
        precip_chance: float,
        temp: float | None,
        time: datetime,
    ) -> "Forecast":
        return cls(weather=weather, precip_chance=precip_chance, temp=temp, time=time)
