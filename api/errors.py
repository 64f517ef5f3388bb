"""Translation of marketplace and subgraph errors into HTTP responses.

Not-found lookups answer 400 with the message as a plain-text body, which is
what existing clients of this API expect. Upstream and data faults answer 500
with a generic body; their detail only goes to the log.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from marketplace import NotFoundError, PriceParseError
from subgraph import SubgraphError

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = "The requested resource could not be found"
FAULT_BODY = "Internal server error"

async def not_found_handler(request: Request, exc: NotFoundError) -> PlainTextResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

async def fault_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}")
    return PlainTextResponse(FAULT_BODY, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Answer unknown routes and methods with a plain-text 404."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return PlainTextResponse(NOT_FOUND_BODY, status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(SubgraphError, fault_handler)
    app.add_exception_handler(PriceParseError, fault_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
