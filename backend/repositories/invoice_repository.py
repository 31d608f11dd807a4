"""
Invoice repository for invoice-specific data access operations.
"""

from typing import Any, List, Optional
from sqlalchemy import String, case, cast, func, or_
from sqlalchemy.orm import Session

from constants import InvoiceStatus, LATEST_INVOICES_LIMIT
from domain.value_objects import Pagination
from models import Customer, Invoice
from .base_repository import BaseRepository


def _search_filter(query: str):
    """
    Case-insensitive substring match used by the invoices table search.

    Matches customer name/email, the amount and date rendered as text,
    and the status.
    """
    pattern = f"%{query}%"
    return or_(
        Customer.name.ilike(pattern),
        Customer.email.ilike(pattern),
        cast(Invoice.amount, String).ilike(pattern),
        cast(Invoice.date, String).ilike(pattern),
        Invoice.status.ilike(pattern),
    )


class InvoiceRepository(BaseRepository[Invoice]):
    """Repository for Invoice model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Invoice)

    def get_latest(self, limit: int = LATEST_INVOICES_LIMIT) -> List[Any]:
        """
        Get the newest invoices joined to their customers.

        Args:
            limit: Number of rows to return

        Returns:
            Rows with amount, name, image_url, email, id
        """
        return self.db.query(
            Invoice.amount,
            Customer.name,
            Customer.image_url,
            Customer.email,
            Invoice.id,
        ).join(
            Customer, Invoice.customer_id == Customer.id
        ).order_by(
            Invoice.date.desc()
        ).limit(limit).all()

    def get_status_totals(self) -> Any:
        """
        Sum invoice amounts per status.

        Returns:
            Row with `paid` and `pending` sums in cents (None on an empty table)
        """
        return self.db.query(
            func.sum(case((Invoice.status == InvoiceStatus.PAID.value, Invoice.amount), else_=0)).label('paid'),
            func.sum(case((Invoice.status == InvoiceStatus.PENDING.value, Invoice.amount), else_=0)).label('pending'),
        ).one()

    def search(self, query: str, pagination: Pagination) -> List[Any]:
        """
        Get one page of invoices matching the search text, newest first.

        Args:
            query: Search text; empty matches everything
            pagination: Page to return

        Returns:
            Rows for the invoices table
        """
        return self.db.query(
            Invoice.id,
            Invoice.customer_id,
            Invoice.amount,
            Invoice.date,
            Invoice.status,
            Customer.name,
            Customer.email,
            Customer.image_url,
        ).join(
            Customer, Invoice.customer_id == Customer.id
        ).filter(
            _search_filter(query)
        ).order_by(
            Invoice.date.desc()
        ).limit(pagination.limit).offset(pagination.offset).all()

    def count_matching(self, query: str) -> int:
        """
        Count invoices matching the search text.

        Args:
            query: Search text; empty matches everything

        Returns:
            Number of matching invoices
        """
        return self.db.query(func.count(Invoice.id)).select_from(Invoice).join(
            Customer, Invoice.customer_id == Customer.id
        ).filter(
            _search_filter(query)
        ).scalar() or 0

    def get_form(self, invoice_id: str) -> Optional[Any]:
        """
        Get the editable fields of one invoice.

        Args:
            invoice_id: Invoice UUID

        Returns:
            Row with id, customer_id, amount, status, or None if not found
        """
        return self.db.query(
            Invoice.id,
            Invoice.customer_id,
            Invoice.amount,
            Invoice.status,
        ).filter(Invoice.id == invoice_id).first()
