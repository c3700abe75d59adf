"""Dark Sky forecast API client."""

import logging
from typing import Protocol

import httpx
from pydantic import ValidationError

from wxglyph.config.defaults import DARKSKY_BASE_URL
from wxglyph.config.schema import Coordinate
from wxglyph.models.provider import DSForecasts

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a forecast cannot be fetched or decoded."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DarkSkyClient(Protocol):
    def forecasts(self) -> DSForecasts:
        """Fetch daily, hourly and current conditions in one round trip."""
        ...


class DarkSkyRestClient:
    """Fetches forecasts for one location over HTTP.

    A single GET per call. No retries and no caching: any failure is
    reported as FetchError and left to the caller.
    """

    def __init__(
        self,
        token: str,
        location: Coordinate,
        base_url: str = DARKSKY_BASE_URL,
        timeout: float = 30.0,
    ):
        self.token = token
        self.location = location
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _url(self) -> str:
        return f"{self.base_url}/forecast/{self.token}/{self.location.path_segment()}"

    def forecasts(self) -> DSForecasts:
        # Never log the full URL, it embeds the token
        where = f"forecast/***/{self.location.path_segment()}"
        try:
            resp = httpx.get(self._url(), timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("Dark Sky request failed: %s -> %s", where, e)
            raise FetchError(f"Request failed: {e}") from e

        if not resp.is_success:
            logger.error("Dark Sky %d: %s", resp.status_code, where)
            raise FetchError(f"HTTP {resp.status_code}", resp.status_code)

        try:
            payload = resp.json()
        except ValueError as e:
            logger.error("Dark Sky returned a non-JSON body for %s", where)
            raise FetchError(f"Malformed response: {e}") from e

        try:
            result = DSForecasts.model_validate(payload)
        except ValidationError as e:
            logger.error("Dark Sky payload failed validation for %s: %s", where, e)
            raise FetchError(f"Unexpected response shape: {e}") from e

        logger.debug(
            "Fetched %d daily and %d hourly entries for %s",
            len(result.daily.data), len(result.hourly.data), where,
        )
        return result


class StaticDarkSkyClient:
    """In-memory client that replays one payload or one error."""

    def __init__(
        self,
        forecasts: DSForecasts | None = None,
        error: FetchError | None = None,
    ):
        if forecasts is None and error is None:
            raise ValueError("forecasts and error cannot both be None")
        if forecasts is not None and error is not None:
            raise ValueError("forecasts and error cannot both be set")
        self._forecasts = forecasts
        self._error = error
        self.call_count = 0

    def forecasts(self) -> DSForecasts:
        self.call_count += 1
        if self._error is not None:
            raise self._error
        assert self._forecasts is not None
        return self._forecasts.model_copy(deep=True)
