"""
Pagination Value Object

Page number plus the arithmetic needed by LIMIT/OFFSET queries.
"""

import math
from dataclasses import dataclass

from constants import ITEMS_PER_PAGE


@dataclass(frozen=True)
class Pagination:
    """
    Immutable 1-based page selection.

    Pages below 1 are rejected; a negative OFFSET is not a valid query.
    """

    current_page: int = 1
    page_size: int = ITEMS_PER_PAGE

    def __post_init__(self):
        """Validate page size and page number."""
        if self.page_size <= 0:
            raise ValueError(f"Page size must be positive: {self.page_size}")
        if self.current_page < 1:
            raise ValueError(f"Page number must be at least 1: {self.current_page}")

    @property
    def offset(self) -> int:
        """Number of rows to skip."""
        return (self.current_page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Number of rows to return."""
        return self.page_size


def total_pages(count: int, page_size: int = ITEMS_PER_PAGE) -> int:
    """
    Convert a row count into a page count.

    Args:
        count: Total matching rows
        page_size: Rows per page

    Returns:
        ceil(count / page_size), e.g. 13 rows -> 3 pages
    """
    if page_size <= 0:
        raise ValueError(f"Page size must be positive: {page_size}")
    return math.ceil(int(count) / page_size)
