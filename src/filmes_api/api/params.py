"""Shared request parameter types."""

from typing import Annotated

from fastapi import Path

from filmes_api.models.base import INT32_MAX, INT32_MIN

# Ids outside the INTEGER column range are rejected as validation errors
EntityId = Annotated[
    int,
    Path(ge=INT32_MIN, le=INT32_MAX, description="Primary key of the record"),
]
