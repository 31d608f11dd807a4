"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- Money: Amount in cents with currency formatting
- Pagination: Page number with offset and page-count math
"""

from .money import Money, format_currency, cents_to_dollars
from .pagination import Pagination, total_pages

__all__ = [
    "Money",
    "format_currency",
    "cents_to_dollars",
    "Pagination",
    "total_pages",
]
