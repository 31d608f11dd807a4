from pathlib import Path

import pytest

from config.settings import DEFAULT_API_URL, get_settings
from constants import DataSource
from dependencies import get_data_source, get_dashboard_data_service
from exceptions import ConfigurationError
from services.dashboard_api_client import DashboardApiClient
from services.dashboard_data_service import DashboardDataService

_VARS = (
    "DASHBOARD_API_URL",
    "DASHBOARD_API_TIMEOUT_SECONDS",
    "DASHBOARD_DATA_SOURCE",
    "REVENUE_FETCH_DELAY_SECONDS",
    "DASHBOARD_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = get_settings()

    assert settings.api_url == DEFAULT_API_URL
    assert settings.api_timeout_seconds == 10.0
    assert settings.data_source == DataSource.DATABASE
    assert settings.revenue_fetch_delay_seconds == 0.0
    assert settings.log_file is None


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("DASHBOARD_API_URL", "http://211.108.22.198:8720/next/")
    monkeypatch.setenv("DASHBOARD_API_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("DASHBOARD_DATA_SOURCE", "API")
    monkeypatch.setenv("REVENUE_FETCH_DELAY_SECONDS", "3")
    monkeypatch.setenv("DASHBOARD_LOG_FILE", "/tmp/dashboard.log")

    settings = get_settings()

    assert settings.api_url == "http://211.108.22.198:8720/next"
    assert settings.api_timeout_seconds == 2.5
    assert settings.data_source == DataSource.API
    assert settings.revenue_fetch_delay_seconds == 3.0
    assert settings.log_file == Path("/tmp/dashboard.log")


def test_blank_values_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("DASHBOARD_API_URL", "   ")

    assert get_settings().api_url == DEFAULT_API_URL


@pytest.mark.parametrize(
    "name, value",
    [
        ("DASHBOARD_DATA_SOURCE", "graphql"),
        ("DASHBOARD_API_TIMEOUT_SECONDS", "soon"),
        ("REVENUE_FETCH_DELAY_SECONDS", "-1"),
    ],
)
def test_invalid_values_raise_configuration_error(monkeypatch, name, value) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError) as exc_info:
        get_settings()

    assert exc_info.value.details == {"missing_keys": [name]}


def test_get_data_source_selects_backend(monkeypatch) -> None:
    assert isinstance(get_data_source(), DashboardDataService)

    monkeypatch.setenv("DASHBOARD_DATA_SOURCE", "api")
    monkeypatch.setenv("DASHBOARD_API_URL", "http://example.test/next")
    source = get_data_source()

    assert isinstance(source, DashboardApiClient)
    assert source.base_url == "http://example.test/next"


def test_data_service_factory_uses_revenue_delay(monkeypatch) -> None:
    monkeypatch.setenv("REVENUE_FETCH_DELAY_SECONDS", "1.5")

    assert get_dashboard_data_service().revenue_delay_seconds == 1.5
