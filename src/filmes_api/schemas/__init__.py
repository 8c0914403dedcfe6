"""Pydantic schemas for API requests and responses."""

from filmes_api.schemas.address import CreateAddress, ReadAddress, UpdateAddress
from filmes_api.schemas.cinema import CreateCinema, ReadCinema, UpdateCinema
from filmes_api.schemas.movie import CreateMovie, ReadMovie, UpdateMovie
from filmes_api.schemas.patch import PatchOperation
from filmes_api.schemas.showing import CreateShowing, ReadShowing

__all__ = [
    "CreateAddress",
    "ReadAddress",
    "UpdateAddress",
    "CreateCinema",
    "ReadCinema",
    "UpdateCinema",
    "CreateMovie",
    "ReadMovie",
    "UpdateMovie",
    "PatchOperation",
    "CreateShowing",
    "ReadShowing",
]
