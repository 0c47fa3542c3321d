# product_api/middleware.py
#
# Request pipeline plumbing: access logging for every request and the
# exception handlers that turn any failure into the JSON error body.

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from .errors import NotFoundError, ProductAPIError, ValidationError, error_body, error_response

logger = logging.getLogger(__name__)


def _request_target(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url += f"?{request.url.query}"
    return url


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        logger.info("%s %s", request.method, _request_target(request))
        return await call_next(request)


def _log_failure(request: Request, exc: ProductAPIError) -> None:
    logger.warning(
        "%s %s -> %d %s: %s",
        request.method, _request_target(request), exc.status_code, exc.name, exc.message,
    )


async def product_api_exception_handler(request: Request, exc: ProductAPIError) -> JSONResponse:
    _log_failure(request, exc)
    return error_response(exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unsupported methods both count as an unmatched route
    if exc.status_code in (404, 405):
        return await product_api_exception_handler(
            request, NotFoundError(f"Route {_request_target(request)} not found")
        )
    # Other client errors (e.g. an unparseable form body) are bad input
    error_cls = ValidationError if 400 <= exc.status_code < 500 else ProductAPIError
    return await product_api_exception_handler(
        request, error_cls(str(exc.detail), status_code=exc.status_code)
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        message = "Request body is not valid JSON"
    elif errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'invalid value')}"
    else:
        message = ValidationError.default_message
    return await product_api_exception_handler(request, ValidationError(message))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, _request_target(request), exc_info=exc
    )
    return JSONResponse(
        status_code=500,
        content=error_body(type(exc).__name__, str(exc) or "Internal Server Error", 500),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductAPIError, product_api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
