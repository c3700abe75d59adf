"""Glyph formatting for one-line terminal output."""

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from wxglyph.models.forecast import Forecast, Weather

RAIN_THRESHOLD = 0.25

_ANSI_COLORS = {
    "red": "31",
    "yellow": "33",
    "cyan": "36",
    "white": "37",
}
_ANSI_BOLD = "1"
_ANSI_RESET = "\x1b[0m"

_WEEKDAY_LETTERS = ("M", "T", "W", "T", "F", "S", "S")


@dataclass(frozen=True)
class Glyph:
    char: str
    color: str
    bold: bool = False


def format_weather(weather: Weather, precip_chance: float) -> Glyph:
    """Map a weather class and precipitation chance to its display glyph.

    Rain and fog switch glyphs only when the chance is strictly above 25%.
    """
    wet = precip_chance > RAIN_THRESHOLD
    if weather is Weather.SUNNY:
        return Glyph("S", "yellow", bold=True)
    if weather is Weather.PARTLY_SUNNY:
        return Glyph("s", "yellow")
    if weather is Weather.CLOUDY:
        return Glyph("C", "white")
    if weather in (Weather.SHOWERS, Weather.RAIN):
        return Glyph("r" if wet else "R", "cyan", bold=True)
    if weather is Weather.SNOW:
        return Glyph("*", "white", bold=True)
    if weather is Weather.FOG:
        if wet:
            return Glyph("f", "cyan", bold=True)
        return Glyph("F", "white")
    return Glyph("?", "red")


def render_glyph(glyph: Glyph, color: bool = True) -> str:
    return _style(glyph.char, glyph.color, glyph.bold, color)


def weekday_letter(day: date) -> str:
    return _WEEKDAY_LETTERS[day.weekday()]


def format_daily_line(forecasts: Iterable[Forecast], color: bool = True) -> str:
    """Weekday letter followed by its glyph, for every day."""
    parts = []
    for f in forecasts:
        assert f.date is not None
        glyph = format_weather(f.weather, f.precip_chance)
        parts.append(f"{weekday_letter(f.date)}{render_glyph(glyph, color)}")
    return "".join(parts)


def format_hourly_line(
    current_temp: float | None,
    forecasts: Iterable[Forecast],
    limit: int = 8,
    color: bool = True,
) -> str:
    """Current temperature, then up to `limit` hourly glyphs."""
    parts = []
    if current_temp is not None:
        parts.append(_style(str(int(current_temp)), "white", True, color))
    for i, f in enumerate(forecasts):
        if i >= limit:
            break
        parts.append(render_glyph(format_weather(f.weather, f.precip_chance), color))
    return " ".join(parts)


def _style(text: str, color_name: str, bold: bool, enabled: bool) -> str:
    if not enabled:
        return text
    codes = [_ANSI_BOLD] if bold else []
    codes.append(_ANSI_COLORS[color_name])
    return f"\x1b[{';'.join(codes)}m{text}{_ANSI_RESET}"
