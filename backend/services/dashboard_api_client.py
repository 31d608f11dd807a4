"""
Dashboard API Client

Remote-API access path for the dashboard. Each fetch issues one GET against
the configured base URL and returns the decoded JSON body unchanged; shaping
is the remote service's job.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from constants import ApiPaths, ErrorMessages
from exceptions import RemoteApiError
from services.interfaces import IDashboardDataSource
from utils.error_handlers import handle_data_errors
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


def build_async_client(
    base_url: str,
    timeout_seconds: float,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create an httpx.AsyncClient bound to the dashboard API.

    Args:
        base_url: API base URL, e.g. "http://host:8720/next"
        timeout_seconds: Request timeout
        transport: Optional transport override (tests use httpx.MockTransport)
    """
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout_seconds),
        headers={"Accept": "application/json"},
        transport=transport,
    )


class DashboardApiClient(IDashboardDataSource):
    """HTTP implementation of the dashboard fetches."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize DashboardApiClient.

        Args:
            base_url: API base URL without trailing slash
            timeout_seconds: Request timeout
            transport: Optional transport override
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        async with build_async_client(
            self.base_url, self.timeout_seconds, transport=self._transport
        ) as client:
            response = await client.get(path, params=params)
            logger.debug(f"GET {response.url} -> {response.status_code}")
            response.raise_for_status()
            return response.json()

    @log_operation("fetch_revenue")
    @handle_data_errors(RemoteApiError, ErrorMessages.REVENUE)
    async def fetch_revenue(self) -> Any:
        return await self._get(ApiPaths.REVENUE)

    @log_operation("fetch_latest_invoices")
    @handle_data_errors(RemoteApiError, ErrorMessages.LATEST_INVOICES)
    async def fetch_latest_invoices(self) -> Any:
        return await self._get(ApiPaths.LATEST_INVOICES)

    @log_operation("fetch_card_data")
    @handle_data_errors(RemoteApiError, ErrorMessages.CARD_DATA)
    async def fetch_card_data(self) -> Any:
        return await self._get(ApiPaths.CARD_DATA)

    @log_operation("fetch_filtered_invoices")
    @handle_data_errors(RemoteApiError, ErrorMessages.FILTERED_INVOICES)
    async def fetch_filtered_invoices(self, query: str, current_page: int) -> Any:
        return await self._get(
            ApiPaths.FILTERED_INVOICES,
            params={"query": query, "page": current_page},
        )

    @log_operation("fetch_invoices_pages")
    @handle_data_errors(RemoteApiError, ErrorMessages.INVOICES_PAGES)
    async def fetch_invoices_pages(self, query: str) -> Any:
        return await self._get(ApiPaths.INVOICES_PAGES, params={"query": query})

    @log_operation("fetch_invoice_by_id")
    @handle_data_errors(RemoteApiError, ErrorMessages.INVOICE)
    async def fetch_invoice_by_id(self, invoice_id: str) -> Any:
        return await self._get(ApiPaths.INVOICE.format(invoice_id=quote(invoice_id, safe="")))

    @log_operation("fetch_customers")
    @handle_data_errors(RemoteApiError, ErrorMessages.CUSTOMERS)
    async def fetch_customers(self) -> Any:
        return await self._get(ApiPaths.CUSTOMERS)

    @log_operation("fetch_filtered_customers")
    @handle_data_errors(RemoteApiError, ErrorMessages.FILTERED_CUSTOMERS)
    async def fetch_filtered_customers(self, query: str) -> Any:
        return await self._get(ApiPaths.FILTERED_CUSTOMERS, params={"query": query})
