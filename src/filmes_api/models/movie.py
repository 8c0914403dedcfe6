"""Movie model."""

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmes_api.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from filmes_api.models.showing import Showing


class Movie(Base, TimestampMixin):
    """
    Movie model.

    The read-time ``queried_at`` timestamp lives on the read schema only and
    is never stored.
    """

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    director: Mapped[str | None] = mapped_column(String(200), nullable=True)
    genre: Mapped[str | None] = mapped_column(String(50), nullable=True)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    revenue: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)

    # Relationships
    showings: Mapped[list["Showing"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id!r}, title={self.title!r})>"
