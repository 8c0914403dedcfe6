"""Explicit field-copy functions between DTOs and ORM entities.

Every DTO pair gets its own function so the copied fields are visible at a
glance. None of the functions assign ``id``: it is generated by the database
on insert and never changes afterwards.
"""

from typing import Any

from filmes_api.models import Address, Cinema, Movie, Showing
from filmes_api.schemas import (
    CreateAddress,
    CreateCinema,
    CreateMovie,
    CreateShowing,
    ReadAddress,
    ReadCinema,
    ReadMovie,
    ReadShowing,
    UpdateAddress,
    UpdateCinema,
    UpdateMovie,
)


# ---------------------------------------------------------------------------
# Movies
# ---------------------------------------------------------------------------


def movie_from_create(dto: CreateMovie) -> Movie:
    return Movie(
        title=dto.title,
        director=dto.director,
        genre=dto.genre,
        duration=dto.duration,
        release_date=dto.release_date,
        revenue=dto.revenue,
        showings=[],
    )


def movie_to_read(movie: Movie) -> ReadMovie:
    """
    Build the response DTO; ``queried_at`` is stamped at this moment.

    Requires ``movie.showings`` to be loaded already.
    """
    return ReadMovie(
        id=movie.id,
        title=movie.title,
        director=movie.director,
        genre=movie.genre,
        duration=movie.duration,
        release_date=movie.release_date,
        revenue=movie.revenue,
        showings=[showing_to_read(showing) for showing in movie.showings],
    )


def movie_to_update(movie: Movie) -> UpdateMovie:
    """
    Snapshot the stored movie in update-DTO shape.

    Built without validation: this is the starting point of a patch, and is
    validated only after the patch has been applied.
    """
    return UpdateMovie.model_construct(
        title=movie.title,
        director=movie.director,
        genre=movie.genre,
        duration=movie.duration,
        release_date=movie.release_date,
        revenue=movie.revenue,
    )


def apply_movie_update(dto: UpdateMovie, movie: Movie) -> None:
    movie.title = dto.title
    movie.director = dto.director
    movie.genre = dto.genre
    movie.duration = dto.duration
    movie.release_date = dto.release_date
    movie.revenue = dto.revenue


def validate_movie_update(data: dict[str, Any]) -> UpdateMovie:
    """
    Validate raw field data against the full-update rules.

    Raises:
        pydantic.ValidationError: if any field fails validation
    """
    return UpdateMovie.model_validate(data)


# ---------------------------------------------------------------------------
# Cinemas
# ---------------------------------------------------------------------------


def cinema_from_create(dto: CreateCinema) -> Cinema:
    return Cinema(name=dto.name, address_id=dto.address_id)


def cinema_to_read(cinema: Cinema) -> ReadCinema:
    """Requires ``cinema.address`` to be loaded already."""
    address = address_to_read(cinema.address) if cinema.address is not None else None
    return ReadCinema(
        id=cinema.id,
        name=cinema.name,
        address_id=cinema.address_id,
        address=address,
    )


def apply_cinema_update(dto: UpdateCinema, cinema: Cinema) -> None:
    cinema.name = dto.name
    cinema.address_id = dto.address_id


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------


def address_from_create(dto: CreateAddress) -> Address:
    return Address(street=dto.street)


def address_to_read(address: Address) -> ReadAddress:
    return ReadAddress(id=address.id, street=address.street)


def apply_address_update(dto: UpdateAddress, address: Address) -> None:
    address.street = dto.street


# ---------------------------------------------------------------------------
# Showings
# ---------------------------------------------------------------------------


def showing_from_create(dto: CreateShowing) -> Showing:
    return Showing(movie_id=dto.movie_id, cinema_id=dto.cinema_id)


def showing_to_read(showing: Showing) -> ReadShowing:
    return ReadShowing(
        id=showing.id,
        movie_id=showing.movie_id,
        cinema_id=showing.cinema_id,
    )
