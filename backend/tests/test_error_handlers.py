import asyncio
import logging

import pytest

from exceptions import DatabaseError, DataFetchError, RemoteApiError
from utils.error_handlers import handle_data_errors
from utils.logging_utils import StructuredLogger, log_operation


def test_sync_function_failure_is_converted() -> None:
    @handle_data_errors(DatabaseError, "Failed to fetch things.")
    def fetch_things():
        raise ValueError("syntax error at or near SELECT")

    with pytest.raises(DatabaseError) as exc_info:
        fetch_things()

    assert exc_info.value.message == "Failed to fetch things."
    assert exc_info.value.operation == "fetch_things"
    assert isinstance(exc_info.value, DataFetchError)
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_async_function_failure_is_converted() -> None:
    @handle_data_errors(RemoteApiError, "Failed to fetch things.")
    async def fetch_things():
        raise TimeoutError("read timeout")

    with pytest.raises(RemoteApiError) as exc_info:
        asyncio.run(fetch_things())

    assert exc_info.value.details["source"] == "api"


def test_success_passes_result_through() -> None:
    @handle_data_errors(DatabaseError, "unused")
    async def fetch_things(n):
        return [n] * 2

    assert asyncio.run(fetch_things(3)) == [3, 3]
    assert fetch_things.__name__ == "fetch_things"


def test_failure_is_logged_with_traceback_and_context(caplog) -> None:
    @log_operation("fetch_thing")
    @handle_data_errors(DatabaseError, "Failed to fetch thing.")
    def fetch_thing(invoice_id):
        raise RuntimeError("relation \"invoices\" does not exist")

    with caplog.at_level(logging.ERROR, logger="utils.error_handlers"):
        with pytest.raises(DatabaseError):
            fetch_thing("inv-1")

    record = caplog.records[-1]
    assert record.getMessage().startswith("Database Error: RuntimeError")
    assert record.exc_info is not None
    assert record.operation == "fetch_thing"
    assert record.invoice_id == "inv-1"


def test_log_operation_reads_keyword_arguments_and_resets_context() -> None:
    seen = {}

    @log_operation("fetch_page")
    def fetch_page(query, current_page=1):
        seen.update(StructuredLogger(__name__)._add_context())
        return current_page

    assert fetch_page(query="lee", current_page=3) == 3
    assert seen == {"operation": "fetch_page", "query": "lee", "current_page": 3}
    assert StructuredLogger(__name__)._add_context() == {}
