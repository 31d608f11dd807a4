"""
Error handling decorators for dashboard fetches.

Every fetch in both access paths follows the same policy: any failure from
the transport is logged with its traceback and re-raised as a domain error
carrying a fixed message. This module holds that policy in one place.
"""

import inspect
from functools import wraps
from typing import Callable, Type

from exceptions import DataFetchError, DatabaseError, RemoteApiError
from utils.logging_utils import StructuredLogger

logger = StructuredLogger(__name__)

_LOG_PREFIXES = {
    DatabaseError: "Database Error",
    RemoteApiError: "API Error",
}


def handle_data_errors(error_cls: Type[DataFetchError], message: str):
    """
    Decorator converting any failure into error_cls(message).

    Args:
        error_cls: DataFetchError subclass raised to the caller
        message: Static, human-readable failure message

    Returns:
        Decorated function that fails uniformly

    Example:
        @handle_data_errors(DatabaseError, ErrorMessages.CUSTOMERS)
        async def fetch_customers(self):
            ...
    """
    prefix = _LOG_PREFIXES.get(error_cls, "Data Error")

    def decorator(func: Callable):
        operation = func.__name__

        def _convert(e: Exception) -> DataFetchError:
            logger.error(
                f"{prefix}: {type(e).__name__}: {e}",
                extra={"operation": operation, "error_type": type(e).__name__},
                exc_info=True,
            )
            return error_cls(operation, message)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                raise _convert(e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                raise _convert(e) from e

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
