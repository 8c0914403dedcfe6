"""Movie API endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from filmes_api.api.params import EntityId
from filmes_api.database import get_db
from filmes_api.models import Cinema, Movie, Showing
from filmes_api.models.base import INT32_MAX
from filmes_api.schemas import CreateMovie, PatchOperation, ReadMovie, UpdateMovie
from filmes_api.services.json_patch import apply_patch
from filmes_api.services.mapping import (
    apply_movie_update,
    movie_from_create,
    movie_to_read,
    movie_to_update,
    validate_movie_update,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/Filme", response_model=ReadMovie, status_code=status.HTTP_201_CREATED)
async def create_movie(
    payload: CreateMovie,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> ReadMovie:
    """Add a movie and point the Location header at its read endpoint."""
    movie = movie_from_create(payload)
    db.add(movie)
    await db.commit()

    logger.info(f"Created movie {movie.id} ({movie.title!r})")
    response.headers["Location"] = str(request.url_for("get_movie", movie_id=movie.id))
    return movie_to_read(movie)


@router.get("/Filme", response_model=list[ReadMovie])
async def list_movies(
    skip: int = Query(0, ge=0, le=INT32_MAX, description="Number of movies to skip"),
    take: int = Query(10, ge=0, le=INT32_MAX, description="Number of movies to return"),
    cinema_name: str | None = Query(
        None,
        alias="nomeCinema",
        description="Only movies with a showing at the cinema with exactly this name",
    ),
    db: AsyncSession = Depends(get_db),
) -> list[ReadMovie]:
    """
    List movies in insertion order.

    The skip/take window is taken first; the cinema-name filter then narrows
    that window, so a filtered page may hold fewer than ``take`` movies.
    """
    window = select(Movie.id).order_by(Movie.id).offset(skip).limit(take).subquery()
    query = (
        select(Movie)
        .join(window, window.c.id == Movie.id)
        .options(selectinload(Movie.showings))
    )

    if cinema_name is not None:
        query = query.where(
            Movie.showings.any(Showing.cinema.has(Cinema.name == cinema_name))
        )

    result = await db.execute(query.order_by(Movie.id))
    movies = result.scalars().all()
    return [movie_to_read(movie) for movie in movies]


@router.get("/Filme/{movie_id}", response_model=ReadMovie)
async def get_movie(movie_id: EntityId, db: AsyncSession = Depends(get_db)):
    movie = await db.get(Movie, movie_id, options=[selectinload(Movie.showings)])
    if movie is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return movie_to_read(movie)


@router.put("/Filme/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_movie(
    movie_id: EntityId,
    payload: UpdateMovie,
    db: AsyncSession = Depends(get_db),
) -> Response:
    movie = await db.get(Movie, movie_id)
    if movie is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    apply_movie_update(payload, movie)
    await db.commit()

    logger.info(f"Updated movie {movie_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/Filme/{movie_id}", response_model=ReadMovie)
async def patch_movie(
    movie_id: EntityId,
    operations: list[PatchOperation],
    db: AsyncSession = Depends(get_db),
):
    """
    Apply a patch document to a movie.

    The patch runs against the movie's update-DTO snapshot and the result is
    validated with the same rules as a full update. Nothing is written when
    the patch or the validation fails.
    """
    movie = await db.get(Movie, movie_id, options=[selectinload(Movie.showings)])
    if movie is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    snapshot = movie_to_update(movie).model_dump(mode="json")
    patched = apply_patch(snapshot, operations)
    try:
        updated = validate_movie_update(patched)
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e

    apply_movie_update(updated, movie)
    await db.commit()

    logger.info(f"Patched movie {movie_id} with {len(operations)} operation(s)")
    return movie_to_read(movie)


@router.delete("/Filme/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie(movie_id: EntityId, db: AsyncSession = Depends(get_db)) -> Response:
    movie = await db.get(Movie, movie_id)
    if movie is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    await db.delete(movie)
    await db.commit()

    logger.info(f"Deleted movie {movie_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
