from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from pathlib import Path

from config.settings import get_settings

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """
    Create an engine for the given SQLAlchemy URL.

    SQLite gets WAL mode and a busy timeout so the parallel card queries can
    share the file; other backends use the driver defaults.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=False, pool_pre_ping=True)

    db_file = database_url.split("///", 1)[-1]
    if db_file and db_file != ":memory:":
        Path(db_file).parent.mkdir(parents=True, exist_ok=True)

    sqlite_engine = create_engine(
        database_url,
        connect_args={'check_same_thread': False},
        echo=False,
    )

    @event.listens_for(sqlite_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return sqlite_engine


# Bound on first use so importing models/repositories never reads settings
SessionLocal = sessionmaker()
_engine: Engine | None = None


def get_engine() -> Engine:
    """Return the application engine, building it from settings on first call"""
    global _engine
    if _engine is None:
        _engine = build_engine(get_settings().database_url)
        SessionLocal.configure(bind=_engine)
    return _engine


def get_session() -> Session:
    """Open a new session on the application engine"""
    get_engine()
    return SessionLocal()
