"""SQLAlchemy ORM models."""

from filmes_api.models.address import Address
from filmes_api.models.base import Base
from filmes_api.models.cinema import Cinema
from filmes_api.models.movie import Movie
from filmes_api.models.showing import Showing

__all__ = ["Address", "Base", "Cinema", "Movie", "Showing"]
