"""
Service Interfaces

Abstract base class shared by the two dashboard access paths (direct database
and remote API). Callers depend on this interface and can swap one backend
for the other, or for a mock in tests.
"""

from abc import ABC, abstractmethod
from typing import Any


class IDashboardDataSource(ABC):
    """
    Interface for the eight dashboard fetch operations.

    Every implementation raises a DataFetchError subclass carrying a fixed
    message when the underlying transport fails.
    """

    @abstractmethod
    async def fetch_revenue(self) -> Any:
        """Monthly revenue series for the revenue chart."""
        pass

    @abstractmethod
    async def fetch_latest_invoices(self) -> Any:
        """The five most recent invoices with customer details."""
        pass

    @abstractmethod
    async def fetch_card_data(self) -> Any:
        """Customer/invoice counts and paid/pending totals."""
        pass

    @abstractmethod
    async def fetch_filtered_invoices(self, query: str, current_page: int) -> Any:
        """
        One page of invoices matching the search text.

        Args:
            query: Search text
            current_page: 1-based page number
        """
        pass

    @abstractmethod
    async def fetch_invoices_pages(self, query: str) -> Any:
        """
        Number of pages of invoices matching the search text.

        Args:
            query: Search text
        """
        pass

    @abstractmethod
    async def fetch_invoice_by_id(self, invoice_id: str) -> Any:
        """
        A single invoice for the edit form.

        Args:
            invoice_id: Invoice UUID
        """
        pass

    @abstractmethod
    async def fetch_customers(self) -> Any:
        """All customers as id/name pairs, ordered by name."""
        pass

    @abstractmethod
    async def fetch_filtered_customers(self, query: str) -> Any:
        """
        Customers matching the search text, with invoice totals.

        Args:
            query: Search text
        """
        pass
