from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, ValidationError

from weather_cli.core.errors import DecodeError

# Strict: a quoted number, a negative count or a missing key is a decode
# failure, never a default.
_WIRE_CONFIG = ConfigDict(frozen=True, strict=True)


class Coordinates(BaseModel):
    model_config = _WIRE_CONFIG

    longitude: float = Field(..., alias="lon")
    latitude: float = Field(..., alias="lat")


class Condition(BaseModel):
    """
    One entry of the provider's `weather` list.
    """
    model_config = _WIRE_CONFIG

    id: NonNegativeInt
    category: str = Field(..., alias="main", description="Condition group, e.g. Rain")
    description: str
    icon_code: str = Field(..., alias="icon")


class Measurements(BaseModel):
    """
    Temperatures in °C (metric units), pressure in hPa, humidity in %.
    """
    model_config = _WIRE_CONFIG

    temperature: float = Field(..., alias="temp")
    feels_like: float
    pressure: NonNegativeInt
    humidity: NonNegativeInt
    temp_min: float
    temp_max: float


class Wind(BaseModel):
    model_config = _WIRE_CONFIG

    speed: float = Field(..., description="Wind speed in m/s")
    direction_degrees: NonNegativeInt = Field(..., alias="deg")


class Cloudiness(BaseModel):
    model_config = _WIRE_CONFIG

    coverage_percent: NonNegativeInt = Field(..., alias="all")


class Station(BaseModel):
    """
    Provider `sys` block: reporting station, country and sun times.
    """
    model_config = _WIRE_CONFIG

    kind: NonNegativeInt = Field(..., alias="type")
    id: NonNegativeInt
    country_code: str = Field(..., alias="country")
    sunrise: NonNegativeInt = Field(..., description="Unix epoch seconds, UTC")
    sunset: NonNegativeInt = Field(..., description="Unix epoch seconds, UTC")


class WeatherReport(BaseModel):
    """
    Current weather for one location, as returned by `/weather`.

    Field names are descriptive; aliases carry the provider's wire keys.
    """
    model_config = _WIRE_CONFIG

    coordinates: Coordinates = Field(..., alias="coord")
    conditions: tuple[Condition, ...] = Field(..., alias="weather")
    source_tag: str = Field(..., alias="base")
    measurements: Measurements = Field(..., alias="main")
    visibility: NonNegativeInt = Field(..., description="Visibility in metres")
    wind: Wind
    cloudiness: Cloudiness = Field(..., alias="clouds")
    observed_at: NonNegativeInt = Field(..., alias="dt")
    station: Station = Field(..., alias="sys")
    location_id: NonNegativeInt = Field(..., alias="id")
    location_name: str = Field(..., alias="name")
    response_code: NonNegativeInt = Field(..., alias="cod")

    @classmethod
    def from_json(cls, raw: Union[bytes, str]) -> "WeatherReport":
        """
        Decode a provider response body.

        Raises:
            DecodeError: if the body is not JSON or any required field is
                missing or has the wrong type.
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError(f"invalid weather payload: {e}") from e

    def to_wire(self) -> Dict[str, Any]:
        """Serialize back to the provider's JSON shape."""
        return self.model_dump(mode="json", by_alias=True)
