"""Cinema API endpoints."""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from filmes_api.api.errors import validation_problem
from filmes_api.api.params import EntityId
from filmes_api.database import get_db
from filmes_api.models import Address, Cinema
from filmes_api.schemas import CreateCinema, ReadCinema, UpdateCinema
from filmes_api.services.mapping import apply_cinema_update, cinema_from_create, cinema_to_read

logger = logging.getLogger(__name__)
router = APIRouter()


async def check_address(db: AsyncSession, address_id: int) -> Response | None:
    """Return a validation problem when the referenced address is missing."""
    if await db.get(Address, address_id) is None:
        return validation_problem({"address_id": [f"Address {address_id} does not exist."]})
    return None


@router.post("/Cinema", response_model=ReadCinema, status_code=status.HTTP_201_CREATED)
async def create_cinema(
    payload: CreateCinema,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """
    Add a cinema at an existing address.

    Args:
        payload: Cinema name and address reference
        request: Incoming request, used to build the Location header
        response: Outgoing response, receives the Location header
        db: Database session

    Returns:
        The created cinema with its address, or a 400 validation problem if
        the address does not exist
    """
    problem = await check_address(db, payload.address_id)
    if problem is not None:
        return problem

    cinema = cinema_from_create(payload)
    db.add(cinema)
    await db.commit()
    await db.refresh(cinema, attribute_names=["address"])

    logger.info(f"Created cinema {cinema.id} ({cinema.name!r})")
    response.headers["Location"] = str(request.url_for("get_cinema", cinema_id=cinema.id))
    return cinema_to_read(cinema)


@router.get("/Cinema", response_model=list[ReadCinema])
async def list_cinemas(db: AsyncSession = Depends(get_db)) -> list[ReadCinema]:
    """
    Get every cinema in insertion order.

    Args:
        db: Database session

    Returns:
        List of cinemas with their addresses
    """
    query = select(Cinema).options(selectinload(Cinema.address)).order_by(Cinema.id)
    result = await db.execute(query)
    cinemas = result.scalars().all()
    return [cinema_to_read(cinema) for cinema in cinemas]


@router.get("/Cinema/{cinema_id}", response_model=ReadCinema)
async def get_cinema(cinema_id: EntityId, db: AsyncSession = Depends(get_db)):
    """Get one cinema, or 404 with an empty body."""
    cinema = await db.get(Cinema, cinema_id, options=[selectinload(Cinema.address)])
    if cinema is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return cinema_to_read(cinema)


@router.put("/Cinema/{cinema_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_cinema(
    cinema_id: EntityId,
    payload: UpdateCinema,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """
    Overwrite a cinema's name and address reference.

    Args:
        cinema_id: Cinema to update
        payload: New name and address reference
        db: Database session

    Returns:
        204 on success, 404 for an unknown cinema, 400 for an unknown address
    """
    cinema = await db.get(Cinema, cinema_id)
    if cinema is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    problem = await check_address(db, payload.address_id)
    if problem is not None:
        return problem

    apply_cinema_update(payload, cinema)
    await db.commit()

    logger.info(f"Updated cinema {cinema_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/Cinema/{cinema_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cinema(cinema_id: EntityId, db: AsyncSession = Depends(get_db)) -> Response:
    """Delete a cinema together with its showings."""
    cinema = await db.get(Cinema, cinema_id)
    if cinema is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    await db.delete(cinema)
    await db.commit()

    logger.info(f"Deleted cinema {cinema_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
