"""Address model referenced by cinemas."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmes_api.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from filmes_api.models.cinema import Cinema


class Address(Base, TimestampMixin):
    __tablename__ = "addresses"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    street: Mapped[str] = mapped_column(String(300), nullable=False)

    # Relationships
    cinema: Mapped["Cinema"] = relationship(
        back_populates="address",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Address(id={self.id!r}, street={self.street!r})>"
