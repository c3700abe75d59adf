"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from wxglyph.config.defaults import (
    DARKSKY_BASE_URL,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    DEFAULT_TOKEN_PATH,
)


class Coordinate(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    def path_segment(self) -> str:
        """Render as the `lat,long` path segment used in forecast URLs."""
        return f"{self.latitude},{self.longitude}"


class ApiToken(BaseModel):
    token: str = Field(min_length=1)


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = DARKSKY_BASE_URL
    timeout: float = Field(default=30.0, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    hourly_count: int = Field(default=8, ge=1)
    color: bool = True


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    token_file: str = DEFAULT_TOKEN_PATH
    location: Coordinate = Coordinate(
        latitude=DEFAULT_LATITUDE, longitude=DEFAULT_LONGITUDE
    )
    provider: ProviderConfig = ProviderConfig()
    display: DisplayConfig = DisplayConfig()
