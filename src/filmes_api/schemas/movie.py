"""Pydantic schemas for movie data."""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from filmes_api.models.base import INT32_MAX
from filmes_api.schemas.showing import ReadShowing

# Revenue is stored as an exact decimal but rendered as a JSON number.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class MovieBase(BaseModel):
    """Fields shared by the movie write schemas."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=200)
    director: str | None = Field(default=None, max_length=200)
    genre: str | None = Field(default=None, max_length=50)
    duration: int = Field(..., ge=0, le=INT32_MAX, description="Running time in minutes")
    release_date: date | None = None
    revenue: Money | None = None


class CreateMovie(MovieBase):
    """Payload for creating a movie."""


class UpdateMovie(MovieBase):
    """Payload for a full update, and the target shape of a patch document."""


class ReadMovie(BaseModel):
    """Movie response schema."""

    id: int
    title: str
    director: str | None = None
    genre: str | None = None
    duration: int
    release_date: date | None = None
    revenue: Money | None = None
    showings: list[ReadShowing] = Field(default_factory=list)

    # Set when the response is built, never stored
    queried_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
