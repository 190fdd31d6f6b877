"""Map lookup failures onto ``{"error": ...}`` JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from roadsnap.domain.entities import InvalidInput, ProviderFailure, RoadLookupError

logger = logging.getLogger(__name__)


def error_response(exc: RoadLookupError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def road_lookup_error_handler(request: Request, exc: RoadLookupError) -> JSONResponse:
    return error_response(exc)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed JSON, missing fields and out-of-range values all look the same
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(InvalidInput())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(ProviderFailure(str(exc)))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RoadLookupError, road_lookup_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
