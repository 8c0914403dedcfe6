"""Cinema model."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmes_api.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from filmes_api.models.address import Address
    from filmes_api.models.showing import Showing


class Cinema(Base, TimestampMixin):
    """
    Cinema venue model.

    Each cinema points at one address and has many showings.
    """

    __tablename__ = "cinemas"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    address_id: Mapped[int] = mapped_column(
        ForeignKey("addresses.id"),
        nullable=False,
        unique=True,
    )

    # Relationships
    address: Mapped["Address"] = relationship(back_populates="cinema")
    showings: Mapped[list["Showing"]] = relationship(
        back_populates="cinema",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Cinema(id={self.id!r}, name={self.name!r})>"
