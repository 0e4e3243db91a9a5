import logging
from functools import wraps
from http import HTTPStatus
from fastapi import HTTPException
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


def handle_domain_errors(mapping: dict[type[Exception], HTTPStatus]):
    """
    Map service exceptions to HTTP responses via a lookup table.

    A mapped exception becomes a text/plain response carrying its message,
    e.g. {TourNotFoundError: HTTPStatus.NOT_FOUND}. RuntimeError raised for
    storage failures becomes a 500 with detail "internal_error".
    """
    def decorator(fn):
        @wraps(fn)
        async def wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except tuple(mapping) as e:
                status = next(
                    code for exc_type, code in mapping.items()
                    if isinstance(e, exc_type))
                return PlainTextResponse(str(e), status_code=status)
            except RuntimeError:
                logger.exception("unhandled_runtime_error")
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail="internal_error")
        return wrapper
    return decorator
