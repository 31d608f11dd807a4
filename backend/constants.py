"""
Application-wide constants.

This module centralizes the magic strings and numbers shared by the database
and remote API access paths.
"""
from enum import Enum


# Rows returned per page by the paginated invoice queries
ITEMS_PER_PAGE = 6

# Rows shown in the "latest invoices" dashboard widget
LATEST_INVOICES_LIMIT = 5


class InvoiceStatus(str, Enum):
    """Invoice payment status as stored in the invoices table."""

    PENDING = 'pending'
    PAID = 'paid'


class DataSource(str, Enum):
    """Backend used to answer dashboard queries."""

    DATABASE = 'database'
    API = 'api'


class ApiPaths:
    """Resource paths on the remote dashboard API, relative to the base URL."""

    REVENUE = '/revenue'
    LATEST_INVOICES = '/latest-invoices'
    CARD_DATA = '/invoice-card-data'
    FILTERED_INVOICES = '/filtered-invoices'
    INVOICES_PAGES = '/invoices-pages'
    INVOICE = '/invoices/{invoice_id}'
    CUSTOMERS = '/customers'
    FILTERED_CUSTOMERS = '/filtered-customers'


class ErrorMessages:
    """
    Static messages raised to callers when a fetch fails.

    The same message is used by both access paths so callers can't tell
    (and don't need to know) which backend failed.
    """

    REVENUE = 'Failed to fetch revenue data.'
    LATEST_INVOICES = 'Failed to fetch the latest invoices.'
    CARD_DATA = 'Failed to fetch card data.'
    FILTERED_INVOICES = 'Failed to fetch invoices.'
    INVOICES_PAGES = 'Failed to fetch total number of invoices.'
    INVOICE = 'Failed to fetch invoice.'
    CUSTOMERS = 'Failed to fetch all customers.'
    FILTERED_CUSTOMERS = 'Failed to fetch customer table.'
