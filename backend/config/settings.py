"""
Runtime Configuration

Reads every environment variable the data layer depends on. This is the only
module that touches os.environ.

Includes:
- Remote API base URL and timeout
- SQLAlchemy database URL
- Default data source selection (database or api)
- Demo delay for the revenue chart
- Optional rotating log file
"""
import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from constants import DataSource
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8720/next"
DEFAULT_DB_PATH = Path.home() / ".invoice-dashboard" / "dashboard.db"


@dataclass(frozen=True)
class Settings:
    api_url: str
    api_timeout_seconds: float
    database_url: str
    data_source: DataSource
    revenue_fetch_delay_seconds: float
    log_file: Optional[Path]


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(name, default)
    if value is None:
        return None
    value = value.strip()
    return value or default


def _get_float(name: str, default: float) -> float:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}", missing_keys=[name])
    if value < 0:
        raise ConfigurationError(f"{name} cannot be negative: {value}", missing_keys=[name])
    return value


def get_settings() -> Settings:
    """
    Build settings from the current environment.

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    source = (_getenv("DASHBOARD_DATA_SOURCE", DataSource.DATABASE.value) or "").lower()
    try:
        data_source = DataSource(source)
    except ValueError:
        raise ConfigurationError(
            f"DASHBOARD_DATA_SOURCE must be one of {[s.value for s in DataSource]}, got {source!r}",
            missing_keys=["DASHBOARD_DATA_SOURCE"],
        )

    log_file = _getenv("DASHBOARD_LOG_FILE")

    settings = Settings(
        api_url=(_getenv("DASHBOARD_API_URL", DEFAULT_API_URL) or DEFAULT_API_URL).rstrip("/"),
        api_timeout_seconds=_get_float("DASHBOARD_API_TIMEOUT_SECONDS", 10.0),
        database_url=_getenv("DATABASE_URL", f"sqlite:///{DEFAULT_DB_PATH}") or "",
        data_source=data_source,
        revenue_fetch_delay_seconds=_get_float("REVENUE_FETCH_DELAY_SECONDS", 0.0),
        log_file=Path(log_file) if log_file else None,
    )
    logger.debug(f"Loaded settings: data_source={settings.data_source.value}, api_url={settings.api_url}")
    return settings
