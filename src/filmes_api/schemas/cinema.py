"""Pydantic schemas for cinema data."""

from pydantic import BaseModel, ConfigDict, Field

from filmes_api.models.base import INT32_MAX, INT32_MIN
from filmes_api.schemas.address import ReadAddress


class CinemaBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    address_id: int = Field(..., ge=INT32_MIN, le=INT32_MAX)


class CreateCinema(CinemaBase):
    """Payload for creating a cinema."""


class UpdateCinema(CinemaBase):
    """Payload for a full cinema update."""


class ReadCinema(BaseModel):
    """Cinema response schema."""

    id: int
    name: str
    address_id: int
    address: ReadAddress | None = None
