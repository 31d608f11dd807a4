"""
Dependency providers.

This module provides factory functions for creating the dashboard data
sources, so callers depend on IDashboardDataSource rather than a concrete
backend. Tests pass their own settings or session factory.
"""

from typing import Callable, Optional
from sqlalchemy.orm import Session

from config.settings import Settings, get_settings
from constants import DataSource
from services.dashboard_api_client import DashboardApiClient
from services.dashboard_data_service import DashboardDataService
from services.interfaces import IDashboardDataSource


def get_dashboard_data_service(
    settings: Optional[Settings] = None,
    session_factory: Optional[Callable[[], Session]] = None,
) -> DashboardDataService:
    """
    Factory function for creating the database-backed data source.

    Args:
        settings: Settings to use (defaults to the environment)
        session_factory: Session factory (defaults to database.get_session)

    Returns:
        DashboardDataService instance
    """
    settings = settings or get_settings()
    return DashboardDataService(
        session_factory=session_factory,
        revenue_delay_seconds=settings.revenue_fetch_delay_seconds,
    )


def get_dashboard_api_client(settings: Optional[Settings] = None) -> DashboardApiClient:
    """
    Factory function for creating the remote API data source.

    Args:
        settings: Settings to use (defaults to the environment)

    Returns:
        DashboardApiClient instance
    """
    settings = settings or get_settings()
    return DashboardApiClient(
        base_url=settings.api_url,
        timeout_seconds=settings.api_timeout_seconds,
    )


def get_data_source(settings: Optional[Settings] = None) -> IDashboardDataSource:
    """
    Return the data source selected by DASHBOARD_DATA_SOURCE.

    Args:
        settings: Settings to use (defaults to the environment)

    Returns:
        IDashboardDataSource: database or API implementation
    """
    settings = settings or get_settings()
    if settings.data_source == DataSource.API:
        return get_dashboard_api_client(settings)
    return get_dashboard_data_service(settings)
