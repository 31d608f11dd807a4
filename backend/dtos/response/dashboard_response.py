"""
Dashboard Response DTOs

Shapes returned by the database access path. Currency fields that the
dashboard renders directly are pre-formatted strings; table rows keep raw
cents so the UI can format them per cell.
"""

from pydantic import BaseModel, Field
import datetime
from typing import Literal


class RevenueResponse(BaseModel):
    """Monthly revenue for the revenue chart."""

    month: str = Field(description="Month label, e.g. 'Jan'")
    revenue: int = Field(description="Revenue in whole dollars")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class LatestInvoiceResponse(BaseModel):
    """One row of the latest invoices widget."""

    id: str = Field(description="Invoice ID")
    name: str = Field(description="Customer name")
    image_url: str = Field(description="Customer avatar path")
    email: str = Field(description="Customer email")
    amount: str = Field(description="Formatted invoice amount, e.g. '$1,250.00'")


class CardDataResponse(BaseModel):
    """
    Summary cards at the top of the dashboard.

    Built from three independent queries joined into one record.
    """

    number_of_customers: int = Field(description="Total number of customers")
    number_of_invoices: int = Field(description="Total number of invoices")
    total_paid_invoices: str = Field(description="Formatted sum of paid invoices")
    total_pending_invoices: str = Field(description="Formatted sum of pending invoices")


class InvoiceTableRow(BaseModel):
    """One row of the paginated invoices table."""

    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: datetime.date
    amount: int = Field(description="Amount in cents")
    status: Literal['pending', 'paid']

    class Config:
        from_attributes = True


class InvoiceFormResponse(BaseModel):
    """Invoice as loaded into the edit form."""

    id: str
    customer_id: str
    amount: float = Field(description="Amount in dollars")
    status: Literal['pending', 'paid']


class CustomerFieldResponse(BaseModel):
    """Customer option for select inputs."""

    id: str
    name: str

    class Config:
        from_attributes = True


class CustomerTableRow(BaseModel):
    """One row of the customers table with invoice aggregates."""

    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int = Field(description="Number of invoices for the customer")
    total_pending: str = Field(description="Formatted sum of pending invoices")
    total_paid: str = Field(description="Formatted sum of paid invoices")
