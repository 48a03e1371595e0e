"""
Exception handling for the HTTP API.

Core errors (``core.exceptions``) are mapped to status codes here, so routers
and services can simply raise them. Error bodies look like:

    {"error": "not_found", "detail": "Image 'photo' not found"}
"""

import functools
import inspect
import logging
from typing import Dict, Type

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from core.exceptions import (
    CodecError,
    DimensionMismatchError,
    DuplicateNameError,
    ImageNotFoundError,
    ImagingError,
    InvalidDimensionsError,
    OutOfRangeError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: Dict[Type[ImagingError], int] = {
    ImageNotFoundError: 404,
    DuplicateNameError: 409,
    DimensionMismatchError: 422,
    OutOfRangeError: 422,
    InvalidDimensionsError: 422,
    CodecError: 400,
}


def status_for(exc: ImagingError) -> int:
    """HTTP status for a core error; subclasses inherit their parent's code"""
    for cls in type(exc).__mro__:
        if cls in STATUS_CODES:
            return STATUS_CODES[cls]
    return 400


def error_body(exc: ImagingError) -> Dict[str, str]:
    return {"error": exc.kind, "detail": exc.message}


async def imaging_error_handler(request: Request, exc: ImagingError) -> JSONResponse:
    status_code = status_for(exc)
    logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return JSONResponse(status_code=status_code, content=error_body(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500, content={"error": "internal_error", "detail": str(exc)}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the core error mapping to an app"""
    app.add_exception_handler(ImagingError, imaging_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def _internal_error(func_name: str, exc: Exception) -> JSONResponse:
    logger.error(f"Error in {func_name}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500, content={"error": "internal_error", "detail": str(exc)}
    )


def safe_endpoint(func):
    """
    Decorator for endpoints, sync or async.

    Core errors and HTTPExceptions pass through to their handlers; anything
    else is logged and answered with a flat 500 error body.
    """

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except (ImagingError, HTTPException):
                raise
            except Exception as e:
                return _internal_error(func.__name__, e)

        return async_wrapper

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (ImagingError, HTTPException):
            raise
        except Exception as e:
            return _internal_error(func.__name__, e)

    return wrapper
