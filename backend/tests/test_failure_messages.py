from __future__ import annotations

import asyncio
import logging

import httpx
import pytest

from constants import ErrorMessages
from exceptions import DatabaseError, RemoteApiError
from services.dashboard_api_client import DashboardApiClient
from services.dashboard_data_service import DashboardDataService

OPERATIONS = [
    ("fetch_revenue", (), ErrorMessages.REVENUE),
    ("fetch_latest_invoices", (), ErrorMessages.LATEST_INVOICES),
    ("fetch_card_data", (), ErrorMessages.CARD_DATA),
    ("fetch_filtered_invoices", ("lee", 1), ErrorMessages.FILTERED_INVOICES),
    ("fetch_invoices_pages", ("lee",), ErrorMessages.INVOICES_PAGES),
    ("fetch_invoice_by_id", ("abc-123",), ErrorMessages.INVOICE),
    ("fetch_customers", (), ErrorMessages.CUSTOMERS),
    ("fetch_filtered_customers", ("evil",), ErrorMessages.FILTERED_CUSTOMERS),
]


def _broken_session_factory():
    raise ConnectionError("could not connect to server")


def _unavailable(request: httpx.Request) -> httpx.Response:
    return httpx.Response(503, json={"detail": "maintenance"})


@pytest.mark.parametrize("method, args, message", OPERATIONS)
def test_database_path_fails_with_operation_message(method, args, message) -> None:
    service = DashboardDataService(session_factory=_broken_session_factory)

    with pytest.raises(DatabaseError) as exc_info:
        asyncio.run(getattr(service, method)(*args))

    assert str(exc_info.value) == message
    assert exc_info.value.operation == method


@pytest.mark.parametrize("method, args, message", OPERATIONS)
def test_api_path_fails_with_operation_message(method, args, message) -> None:
    client = DashboardApiClient("http://dashboard.test/next", transport=httpx.MockTransport(_unavailable))

    with pytest.raises(RemoteApiError) as exc_info:
        asyncio.run(getattr(client, method)(*args))

    assert str(exc_info.value) == message
    assert exc_info.value.operation == method


def test_failure_log_carries_positional_arguments(caplog) -> None:
    service = DashboardDataService(session_factory=_broken_session_factory)

    with caplog.at_level(logging.ERROR, logger="utils.error_handlers"):
        with pytest.raises(DatabaseError):
            asyncio.run(service.fetch_filtered_invoices("lee", 2))

    record = caplog.records[-1]
    assert record.operation == "fetch_filtered_invoices"
    assert record.query == "lee"
    assert record.current_page == 2


def test_api_failure_log_carries_invoice_id(caplog) -> None:
    client = DashboardApiClient("http://dashboard.test/next", transport=httpx.MockTransport(_unavailable))

    with caplog.at_level(logging.ERROR, logger="utils.error_handlers"):
        with pytest.raises(RemoteApiError):
            asyncio.run(client.fetch_invoice_by_id("abc-123"))

    record = caplog.records[-1]
    assert record.getMessage().startswith("API Error: HTTPStatusError")
    assert record.invoice_id == "abc-123"
