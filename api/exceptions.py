"""
Exception handling for the API layer.

Maps URL builder errors to HTTP responses and provides the safe_endpoint
decorator used by the routers.
"""

import functools
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from core.exceptions import ImagePathRequiredError, UrlBuilderError

logger = logging.getLogger(__name__)


def safe_endpoint(func):
    """
    Wrap an async endpoint so unexpected errors become HTTP 500.

    HTTPException and UrlBuilderError propagate unchanged so that FastAPI
    and the registered handlers can turn them into proper responses.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (HTTPException, UrlBuilderError):
            raise
        except Exception as e:
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=str(e))

    return wrapper


async def image_path_required_handler(request: Request, exc: ImagePathRequiredError):
    logger.warning(f"Rejected request to {request.url.path}: {exc.message}")
    return JSONResponse(status_code=400, content={"detail": exc.message})


async def url_builder_error_handler(request: Request, exc: UrlBuilderError):
    logger.warning(f"URL builder error on {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Register URL builder exception handlers on the app"""
    app.add_exception_handler(ImagePathRequiredError, image_path_required_handler)
    app.add_exception_handler(UrlBuilderError, url_builder_error_handler)
