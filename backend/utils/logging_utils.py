"""
Structured Logging Utilities

Provides logging setup plus helpers for adding structured context to log
messages emitted by dashboard fetches.
"""

import inspect
import logging
import sys
from contextvars import ContextVar
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Argument names copied into the log context by log_operation
_CONTEXT_KEYS = ("invoice_id", "query", "current_page")


def configure_logging(log_file: Optional[Path] = None, level: int = logging.INFO) -> None:
    """
    Install console (and optionally rotating file) handlers on the root logger.

    Args:
        log_file: Path of the rotating log file, or None for console only
        level: Minimum level for all handlers
    """
    log_formatter = logging.Formatter(LOG_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # 10MB per file, keep 5 backups
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Fields bound by log_operation for the running operation are merged into
    every record's extra dict.

    Usage:
        logger = StructuredLogger(__name__)
        logger.error("Database Error", extra={"error_type": "OperationalError"})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Merge the context variable with the per-call extra dict."""
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def log_operation(operation_name: str):
    """
    Decorator binding the operation name and its identifying arguments
    (invoice_id, query, current_page) into the logging context for the
    duration of the call, and logging start/end at debug level.

    Arguments are read from the call signature, so positional and keyword
    calls produce the same context. Failures are not logged here;
    handle_data_errors, applied beneath this decorator, logs them with the
    bound context.

    Example:
        @log_operation("fetch_invoice_by_id")
        @handle_data_errors(DatabaseError, ErrorMessages.INVOICE)
        async def fetch_invoice_by_id(self, invoice_id: str):
            ...
    """
    def decorator(func):
        signature = inspect.signature(func)
        logger = StructuredLogger(func.__module__)

        def _bind(args, kwargs):
            arguments = signature.bind_partial(*args, **kwargs).arguments
            context = _logging_context.get().copy()
            context["operation"] = operation_name
            for key in _CONTEXT_KEYS:
                if key in arguments:
                    context[key] = arguments[key]
            return _logging_context.set(context)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            token = _bind(args, kwargs)
            try:
                logger.debug(f"Starting {operation_name}")
                result = await func(*args, **kwargs)
                logger.debug(f"Completed {operation_name}")
                return result
            finally:
                _logging_context.reset(token)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            token = _bind(args, kwargs)
            try:
                logger.debug(f"Starting {operation_name}")
                result = func(*args, **kwargs)
                logger.debug(f"Completed {operation_name}")
                return result
            finally:
                _logging_context.reset(token)

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
