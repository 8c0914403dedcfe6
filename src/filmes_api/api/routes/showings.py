"""Showing API endpoints."""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from filmes_api.api.errors import validation_problem
from filmes_api.api.params import EntityId
from filmes_api.database import get_db
from filmes_api.models import Cinema, Movie, Showing
from filmes_api.schemas import CreateShowing, ReadShowing
from filmes_api.services.mapping import showing_from_create, showing_to_read

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/Sessao", response_model=ReadShowing, status_code=status.HTTP_201_CREATED)
async def create_showing(
    payload: CreateShowing,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """
    Schedule an existing movie at an existing cinema.

    Args:
        payload: Movie and cinema references
        request: Incoming request, used to build the Location header
        response: Outgoing response, receives the Location header
        db: Database session

    Returns:
        The created showing, or a 400 validation problem naming every
        reference that does not exist
    """
    errors: dict[str, list[str]] = {}
    if await db.get(Movie, payload.movie_id) is None:
        errors["movie_id"] = [f"Movie {payload.movie_id} does not exist."]
    if await db.get(Cinema, payload.cinema_id) is None:
        errors["cinema_id"] = [f"Cinema {payload.cinema_id} does not exist."]
    if errors:
        return validation_problem(errors)

    showing = showing_from_create(payload)
    db.add(showing)
    await db.commit()

    logger.info(
        f"Created showing {showing.id} (movie {showing.movie_id} at cinema {showing.cinema_id})"
    )
    response.headers["Location"] = str(request.url_for("get_showing", showing_id=showing.id))
    return showing_to_read(showing)


@router.get("/Sessao", response_model=list[ReadShowing])
async def list_showings(db: AsyncSession = Depends(get_db)) -> list[ReadShowing]:
    """Get every showing in insertion order."""
    result = await db.execute(select(Showing).order_by(Showing.id))
    return [showing_to_read(showing) for showing in result.scalars().all()]


@router.get("/Sessao/{showing_id}", response_model=ReadShowing)
async def get_showing(showing_id: EntityId, db: AsyncSession = Depends(get_db)):
    showing = await db.get(Showing, showing_id)
    if showing is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return showing_to_read(showing)
