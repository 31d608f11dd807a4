"""
Customer repository for customer-specific data access operations.
"""

from typing import Any, List
from sqlalchemy import case, func, or_
from sqlalchemy.orm import Session

from constants import InvoiceStatus
from models import Customer, Invoice
from .base_repository import BaseRepository


class CustomerRepository(BaseRepository[Customer]):
    """Repository for Customer model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Customer)

    def get_fields(self) -> List[Any]:
        """
        Get id and name of every customer, ordered by name.

        Returns:
            Rows with id, name
        """
        return self.db.query(
            Customer.id,
            Customer.name,
        ).order_by(Customer.name.asc()).all()

    def search_with_totals(self, query: str) -> List[Any]:
        """
        Get customers matching the search text with invoice aggregates.

        Customers without invoices are included with zero totals.

        Args:
            query: Search text matched against name and email

        Returns:
            Rows with id, name, email, image_url, total_invoices,
            total_pending, total_paid (cents)
        """
        pattern = f"%{query}%"
        return self.db.query(
            Customer.id,
            Customer.name,
            Customer.email,
            Customer.image_url,
            func.count(Invoice.id).label('total_invoices'),
            func.sum(case((Invoice.status == InvoiceStatus.PENDING.value, Invoice.amount), else_=0)).label('total_pending'),
            func.sum(case((Invoice.status == InvoiceStatus.PAID.value, Invoice.amount), else_=0)).label('total_paid'),
        ).outerjoin(
            Invoice, Customer.id == Invoice.customer_id
        ).filter(
            or_(
                Customer.name.ilike(pattern),
                Customer.email.ilike(pattern),
            )
        ).group_by(
            Customer.id,
            Customer.name,
            Customer.email,
            Customer.image_url,
        ).order_by(Customer.name.asc()).all()
