from datetime import date as _date
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------- Location --------------------------------

class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False)


class PlaceName(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1)


LocationQuery = Union[Coordinates, PlaceName]


class UnavailableReason(str, Enum):
    CAPABILITY_ABSENT = "capability_absent"
    CAPABILITY_FAILED = "capability_failed"


class LocationUnavailable(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: UnavailableReason
    message: str


LocationResolution = Union[Coordinates, LocationUnavailable]


def build_query(
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    city: Optional[str] = None,
) -> Optional[LocationQuery]:
    """
    Pick the location source for a fetch.

    Coordinates win when both are present; otherwise a non-blank city becomes
    a PlaceName. Returns None when neither source is usable.
    """
    if latitude is not None and longitude is not None:
        return Coordinates(latitude=latitude, longitude=longitude)
    text = (city or "").strip()
    if text:
        return PlaceName(text=text)
    return None


# ---------------------------- Units -----------------------------------

class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def symbol(self) -> str:
        return "°C" if self is TemperatureUnit.CELSIUS else "°F"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def toggled(self) -> "TemperatureUnit":
        if self is TemperatureUnit.CELSIUS:
            return TemperatureUnit.FAHRENHEIT
        return TemperatureUnit.CELSIUS


# ---------------------------- Upstream payloads -----------------------

class WeatherEntry(BaseModel):
    description: str


class CurrentMain(BaseModel):
    temp: float
    humidity: int = Field(..., ge=0, le=100)


class Wind(BaseModel):
    speed: float = Field(..., ge=0)


class CurrentConditionsPayload(BaseModel):
    """Body of the current-conditions endpoint; unknown fields are ignored."""
    name: str
    main: CurrentMain
    weather: List[WeatherEntry] = Field(..., min_length=1)
    wind: Wind


class SampleMain(BaseModel):
    temp: float
    temp_min: float
    temp_max: float


class RawSample(BaseModel):
    """One 3-hour element of the forecast series."""
    dt: int
    main: SampleMain
    weather: List[WeatherEntry] = Field(..., min_length=1)


class ForecastPayload(BaseModel):
    samples: List[RawSample] = Field(..., alias="list")


# ---------------------------- Domain records --------------------------

class WeatherSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str
    temp: float
    description: str
    humidity: int = Field(..., ge=0, le=100)
    wind_speed: float = Field(..., ge=0)


class ForecastDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: _date
    temp: float
    min_temp: float
    max_temp: float
    description: str


# ---------------------------- Fetch outcome ---------------------------

class FailureReason(str, Enum):
    NO_LOCATION_PROVIDED = "no_location_provided"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    MALFORMED_RESPONSE = "malformed_response"


class FetchSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    snapshot: WeatherSnapshot
    forecast: List[ForecastDay]

    @property
    def ok(self) -> bool:
        return True


class FetchFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: FailureReason
    message: str = "Failed to fetch weather data. Please try again."

    @property
    def ok(self) -> bool:
        return False


FetchOutcome = Union[FetchSuccess, FetchFailure]
