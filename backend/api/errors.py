"""Exception handlers mapping domain errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.schemas import ErrorResponse
from domain.shared.errors import RepositoryError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Server error"


async def repository_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer any storage failure with a generic 500.

    The cause is logged; the client only ever sees ``{"error": "Server error"}``.
    """
    logger.error(
        "storage.failed",
        extra={
            "method": request.method,
            "path": request.url.path,
            "error": str(exc),
        },
    )
    body = ErrorResponse(error=GENERIC_ERROR_MESSAGE)
    return JSONResponse(status_code=500, content=body.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RepositoryError, repository_error_handler)
