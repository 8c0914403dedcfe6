"""Pydantic schemas for showing data."""

from pydantic import BaseModel, Field

from filmes_api.models.base import INT32_MAX, INT32_MIN


class CreateShowing(BaseModel):
    """Payload linking an existing movie to an existing cinema."""

    movie_id: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    cinema_id: int = Field(..., ge=INT32_MIN, le=INT32_MAX)


class ReadShowing(BaseModel):
    """Showing response schema."""

    id: int
    movie_id: int
    cinema_id: int
