# shared/pydantic_models.py
from typing import Annotated, Optional, Type, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from shared.exceptions import ValidationError

ModelT = TypeVar('ModelT', bound=BaseModel)


class CamelModel(BaseModel):
    """Request body schema: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class GeoCoordinates(BaseModel):
    model_config = ConfigDict(extra="forbid")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")


def _check_lng_lat(value: list[float]) -> list[float]:
    lng, lat = value
    if not -180 <= lng <= 180:
        raise ValueError("longitude must be between -180 and 180")
    if not -90 <= lat <= 90:
        raise ValueError("latitude must be between -90 and 90")
    return value


# GeoJSON order: [longitude, latitude]
Coordinates = Annotated[list[float], Field(min_length=2, max_length=2), AfterValidator(_check_lng_lat)]


class LocationPayload(CamelModel):
    address: str = ""
    coordinates: Optional[Coordinates] = None

    def geo(self) -> Optional[GeoCoordinates]:
        if not self.coordinates:
            return None
        lng, lat = self.coordinates
        return GeoCoordinates(latitude=lat, longitude=lng)


def _describe(error) -> str:
    location = '.'.join(str(part) for part in error.get('loc', ()) if part != '__root__')
    message = error.get('msg', 'Invalid value')
    if message.startswith('Value error, '):
        message = message[len('Value error, '):]
    return f"{location}: {message}" if location else message


def validate_payload(model: Type[ModelT], data) -> ModelT:
    """Validate request data against ``model`` or raise a 400 ValidationError."""
    if data is None:
        data = {}
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError('; '.join(_describe(err) for err in exc.errors())) from exc
