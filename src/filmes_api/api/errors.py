"""Validation-problem responses and exception handler registration."""

import logging
from collections import defaultdict
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from filmes_api.services.json_patch import JsonPatchError

logger = logging.getLogger(__name__)

VALIDATION_TITLE = "One or more validation errors occurred."

# Location prefixes FastAPI adds to request validation errors
_SOURCE_PARTS = {"body", "query", "path", "header", "cookie"}


def collect_errors(errors: Sequence[dict[str, Any]]) -> dict[str, list[str]]:
    """Group pydantic error entries by dotted field location."""
    grouped: dict[str, list[str]] = defaultdict(list)
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _SOURCE_PARTS:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "$"
        grouped[field].append(error["msg"])
    return dict(grouped)


def validation_problem(errors: dict[str, list[str]]) -> JSONResponse:
    """Render a 400 response enumerating every failed field."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "title": VALIDATION_TITLE,
            "status": status.HTTP_400_BAD_REQUEST,
            "errors": errors,
        },
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = collect_errors(exc.errors())
    logger.info(f"Validation failed for {request.method} {request.url.path}: {sorted(errors)}")
    return validation_problem(errors)


async def json_patch_error_handler(request: Request, exc: JsonPatchError) -> JSONResponse:
    logger.info(f"Patch rejected for {request.url.path}: {exc}")
    return validation_problem({exc.path: [exc.message]})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(JsonPatchError, json_patch_error_handler)
