"""Pydantic schemas for address data."""

from pydantic import BaseModel, ConfigDict, Field


class AddressBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    street: str = Field(..., min_length=1, max_length=300)


class CreateAddress(AddressBase):
    pass


class UpdateAddress(AddressBase):
    pass


class ReadAddress(BaseModel):
    id: int
    street: str
