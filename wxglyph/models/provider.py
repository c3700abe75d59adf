"""Dark Sky response payload models."""

from pydantic import BaseModel, Field

_PROVIDER_MODEL_CONFIG = {"populate_by_name": True, "extra": "ignore"}

# 9999-12-31T00:00:00Z, the last instant every local zone can still represent
MAX_EPOCH_SECONDS = 253402214400


class DSForecast(BaseModel):
    model_config = _PROVIDER_MODEL_CONFIG

    time: int = Field(ge=0, le=MAX_EPOCH_SECONDS)  # epoch seconds
    icon: str
    precip_probability: float | None = Field(
        default=None, alias="precipProbability", ge=0.0, le=1.0
    )
    temperature: float | None = Field(default=None, allow_inf_nan=False)
    temperature_high: float | None = Field(
        default=None, alias="temperatureHigh", allow_inf_nan=False
    )
    temperature_low: float | None = Field(
        default=None, alias="temperatureLow", allow_inf_nan=False
    )


class DSData(BaseModel):
    model_config = _PROVIDER_MODEL_CONFIG

    summary: str = ""
    data: list[DSForecast] = []


class DSCurrent(BaseModel):
    model_config = _PROVIDER_MODEL_CONFIG

    temperature: float = Field(allow_inf_nan=False)
    icon: str
    precip_probability: float | None = Field(
        default=None, alias="precipProbability", ge=0.0, le=1.0
    )


class DSForecasts(BaseModel):
    model_config = _PROVIDER_MODEL_CONFIG

    daily: DSData
    hourly: DSData
    currently: DSCurrent
