"""
Custom exception classes for the application.

This module defines domain-specific exceptions raised across the data layer.
Fetch failures surface only a static, human-readable message; the underlying
transport error is chained as __cause__ and written to the logs.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class DataFetchError(ApplicationError):
    """Raised when a dashboard fetch fails, regardless of backend"""

    source = "data"

    def __init__(self, operation: str, message: str):
        details = {"operation": operation, "source": self.source}
        super().__init__(message, details)

    @property
    def operation(self) -> str:
        return self.details["operation"]


class DatabaseError(DataFetchError):
    """Raised when database operations fail"""

    source = "database"


class RemoteApiError(DataFetchError):
    """Raised when a request to the remote dashboard API fails"""

    source = "api"
