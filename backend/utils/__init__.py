"""
Utility functions and decorators.
"""

from .error_handlers import handle_data_errors

__all__ = ["handle_data_errors"]
