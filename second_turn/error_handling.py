"""
Error types and handling utilities for the Second Turn package.
"""

import logging
from typing import Callable
from functools import wraps

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for game lookup failures."""


class InvalidInput(CatalogError):
    """A query or id was missing or blank. Raised before any I/O."""


class UpstreamUnavailable(CatalogError):
    """The catalog API failed, timed out, answered non-200 or sent unreadable XML."""


class IndexUnavailable(CatalogError):
    """The local index could not be loaded. Sticky until the process restarts."""


def handle_errors(failure_message: str, log_error: bool = True):
    """
    Decorator that maps lookup errors onto JSON error responses.

    The wrapped view returns whatever it returns on success. On error it
    returns a ``({"error": message}, status)`` tuple, which Flask turns into
    a JSON response. Only static messages reach the client.

    Args:
        failure_message: Message sent to the client on 500 responses
        log_error: Whether to log upstream/index failures
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except InvalidInput as e:
                return {"error": str(e) or "Invalid request"}, 400
            except CatalogError as e:
                if log_error:
                    logger.error(f"Error in {func.__name__}: {e}", exc_info=e.__cause__ is not None)
                return {"error": failure_message}, 500
        return wrapper
    return decorator
