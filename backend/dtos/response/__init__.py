"""
Response DTOs

DTOs for data handed to the dashboard. These decouple the presentation layer
from database models and provide a clear contract for what each fetch returns.
"""

from .dashboard_response import (
    RevenueResponse,
    LatestInvoiceResponse,
    CardDataResponse,
    InvoiceTableRow,
    InvoiceFormResponse,
    CustomerFieldResponse,
    CustomerTableRow,
)

__all__ = [
    "RevenueResponse",
    "LatestInvoiceResponse",
    "CardDataResponse",
    "InvoiceTableRow",
    "InvoiceFormResponse",
    "CustomerFieldResponse",
    "CustomerTableRow",
]
