"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .invoice_repository import InvoiceRepository
from .customer_repository import CustomerRepository
from .revenue_repository import RevenueRepository

__all__ = [
    "BaseRepository",
    "InvoiceRepository",
    "CustomerRepository",
    "RevenueRepository",
]
