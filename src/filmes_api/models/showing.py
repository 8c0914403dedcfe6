"""Showing model linking a movie to a cinema."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmes_api.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from filmes_api.models.cinema import Cinema
    from filmes_api.models.movie import Movie


class Showing(Base, TimestampMixin):
    """
    Showing model.

    Join entity between movies and cinemas; the movie list uses it to filter
    by cinema name.
    """

    __tablename__ = "showings"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Foreign keys
    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    cinema_id: Mapped[int] = mapped_column(
        ForeignKey("cinemas.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    movie: Mapped["Movie"] = relationship(back_populates="showings")
    cinema: Mapped["Cinema"] = relationship(back_populates="showings")

    def __repr__(self) -> str:
        return f"<Showing(movie_id={self.movie_id!r}, cinema_id={self.cinema_id!r})>"
