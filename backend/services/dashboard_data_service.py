"""
Dashboard Data Service

Direct-database access path for the dashboard. Runs the queries through the
repositories, shapes the rows for presentation (currency formatting, cents to
dollars, page counts) and returns response DTOs.

SQLAlchemy sessions are synchronous, so each query runs in the default
executor with its own session; this lets the card queries run in parallel.
"""

import asyncio
import logging
from typing import Callable, List, Optional, TypeVar

from sqlalchemy.orm import Session

from constants import ErrorMessages
from database import get_session
from domain.value_objects import Pagination, cents_to_dollars, format_currency, total_pages
from dtos.response import (
    CardDataResponse,
    CustomerFieldResponse,
    CustomerTableRow,
    InvoiceFormResponse,
    InvoiceTableRow,
    LatestInvoiceResponse,
    RevenueResponse,
)
from exceptions import DatabaseError
from repositories import CustomerRepository, InvoiceRepository, RevenueRepository
from services.interfaces import IDashboardDataSource
from utils.error_handlers import handle_data_errors
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)

T = TypeVar('T')


class DashboardDataService(IDashboardDataSource):
    """Database-backed implementation of the dashboard fetches."""

    def __init__(
        self,
        session_factory: Optional[Callable[[], Session]] = None,
        revenue_delay_seconds: float = 0.0,
    ):
        """
        Initialize DashboardDataService.

        Args:
            session_factory: Callable returning a new Session (defaults to database.get_session)
            revenue_delay_seconds: Artificial delay before the revenue query,
                used to demo loading states in the UI
        """
        self.session_factory = session_factory or get_session
        self.revenue_delay_seconds = revenue_delay_seconds

    def _query(self, work: Callable[[Session], T]) -> T:
        db = self.session_factory()
        try:
            return work(db)
        finally:
            db.close()

    async def _run(self, work: Callable[[Session], T]) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._query, work)

    @log_operation("fetch_revenue")
    @handle_data_errors(DatabaseError, ErrorMessages.REVENUE)
    async def fetch_revenue(self) -> List[RevenueResponse]:
        if self.revenue_delay_seconds > 0:
            logger.info("Fetching revenue data...")
            await asyncio.sleep(self.revenue_delay_seconds)

        rows = await self._run(lambda db: RevenueRepository(db).get_all())

        if self.revenue_delay_seconds > 0:
            logger.info(f"Data fetch completed after {self.revenue_delay_seconds:g} seconds.")
        return [RevenueResponse.model_validate(row) for row in rows]

    @log_operation("fetch_latest_invoices")
    @handle_data_errors(DatabaseError, ErrorMessages.LATEST_INVOICES)
    async def fetch_latest_invoices(self) -> List[LatestInvoiceResponse]:
        rows = await self._run(lambda db: InvoiceRepository(db).get_latest())
        return [
            LatestInvoiceResponse(
                id=row.id,
                name=row.name,
                image_url=row.image_url,
                email=row.email,
                amount=format_currency(row.amount),
            )
            for row in rows
        ]

    @log_operation("fetch_card_data")
    @handle_data_errors(DatabaseError, ErrorMessages.CARD_DATA)
    async def fetch_card_data(self) -> CardDataResponse:
        """
        Fetch the dashboard summary cards.

        The three queries are independent and run concurrently; if any of
        them fails the whole fetch fails.
        """
        invoice_count, customer_count, totals = await asyncio.gather(
            self._run(lambda db: InvoiceRepository(db).count()),
            self._run(lambda db: CustomerRepository(db).count()),
            self._run(lambda db: InvoiceRepository(db).get_status_totals()),
        )

        return CardDataResponse(
            number_of_customers=int(customer_count or 0),
            number_of_invoices=int(invoice_count or 0),
            total_paid_invoices=format_currency(totals.paid),
            total_pending_invoices=format_currency(totals.pending),
        )

    @log_operation("fetch_filtered_invoices")
    @handle_data_errors(DatabaseError, ErrorMessages.FILTERED_INVOICES)
    async def fetch_filtered_invoices(self, query: str, current_page: int) -> List[InvoiceTableRow]:
        pagination = Pagination(current_page=current_page)
        rows = await self._run(lambda db: InvoiceRepository(db).search(query, pagination))
        return [InvoiceTableRow.model_validate(row) for row in rows]

    @log_operation("fetch_invoices_pages")
    @handle_data_errors(DatabaseError, ErrorMessages.INVOICES_PAGES)
    async def fetch_invoices_pages(self, query: str) -> int:
        count = await self._run(lambda db: InvoiceRepository(db).count_matching(query))
        return total_pages(count)

    @log_operation("fetch_invoice_by_id")
    @handle_data_errors(DatabaseError, ErrorMessages.INVOICE)
    async def fetch_invoice_by_id(self, invoice_id: str) -> Optional[InvoiceFormResponse]:
        row = await self._run(lambda db: InvoiceRepository(db).get_form(invoice_id))
        if row is None:
            return None
        return InvoiceFormResponse(
            id=row.id,
            customer_id=row.customer_id,
            amount=cents_to_dollars(row.amount),
            status=row.status,
        )

    @log_operation("fetch_customers")
    @handle_data_errors(DatabaseError, ErrorMessages.CUSTOMERS)
    async def fetch_customers(self) -> List[CustomerFieldResponse]:
        rows = await self._run(lambda db: CustomerRepository(db).get_fields())
        return [CustomerFieldResponse.model_validate(row) for row in rows]

    @log_operation("fetch_filtered_customers")
    @handle_data_errors(DatabaseError, ErrorMessages.FILTERED_CUSTOMERS)
    async def fetch_filtered_customers(self, query: str) -> List[CustomerTableRow]:
        rows = await self._run(lambda db: CustomerRepository(db).search_with_totals(query))
        return [
            CustomerTableRow(
                id=row.id,
                name=row.name,
                email=row.email,
                image_url=row.image_url,
                total_invoices=int(row.total_invoices or 0),
                total_pending=format_currency(row.total_pending),
                total_paid=format_currency(row.total_paid),
            )
            for row in rows
        ]
