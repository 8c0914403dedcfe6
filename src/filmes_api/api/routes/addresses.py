"""Address API endpoints."""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from filmes_api.api.params import EntityId
from filmes_api.database import get_db
from filmes_api.models import Address
from filmes_api.schemas import CreateAddress, ReadAddress, UpdateAddress
from filmes_api.services.mapping import (
    address_from_create,
    address_to_read,
    apply_address_update,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/Endereco", response_model=ReadAddress, status_code=status.HTTP_201_CREATED)
async def create_address(
    payload: CreateAddress,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> ReadAddress:
    """
    Add an address that a cinema can later reference.

    Args:
        payload: Street line of the address
        request: Incoming request, used to build the Location header
        response: Outgoing response, receives the Location header
        db: Database session

    Returns:
        The created address
    """
    address = address_from_create(payload)
    db.add(address)
    await db.commit()

    logger.info(f"Created address {address.id}")
    response.headers["Location"] = str(request.url_for("get_address", address_id=address.id))
    return address_to_read(address)


@router.get("/Endereco", response_model=list[ReadAddress])
async def list_addresses(db: AsyncSession = Depends(get_db)) -> list[ReadAddress]:
    """Get every address in insertion order."""
    result = await db.execute(select(Address).order_by(Address.id))
    return [address_to_read(address) for address in result.scalars().all()]


@router.get("/Endereco/{address_id}", response_model=ReadAddress)
async def get_address(address_id: EntityId, db: AsyncSession = Depends(get_db)):
    """Get one address, or 404 with an empty body."""
    address = await db.get(Address, address_id)
    if address is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return address_to_read(address)


@router.put("/Endereco/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_address(
    address_id: EntityId,
    payload: UpdateAddress,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """
    Overwrite the street of an address.

    Returns:
        204 on success, 404 for an unknown address
    """
    address = await db.get(Address, address_id)
    if address is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    apply_address_update(payload, address)
    await db.commit()

    logger.info(f"Updated address {address_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/Endereco/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_address(address_id: EntityId, db: AsyncSession = Depends(get_db)) -> Response:
    """
    Delete an address.

    The cinema at this address, and that cinema's showings, are deleted too.
    """
    address = await db.get(Address, address_id)
    if address is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    await db.delete(address)
    await db.commit()

    logger.info(f"Deleted address {address_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
