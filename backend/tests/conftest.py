import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
from sqlalchemy.orm import sessionmaker
from database import Base, build_engine
from init_db import seed_placeholder_data
import models  # noqa: F401  registers tables on Base


@pytest.fixture
def session_factory(tmp_path):
    """
    File-backed SQLite session factory.

    A file (not :memory:) so the executor threads used by the data service
    each get a connection to the same database.
    """
    engine = build_engine(f"sqlite:///{tmp_path / 'dashboard.db'}")
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def seeded_session_factory(session_factory):
    """Session factory over a database holding the placeholder rows"""
    db = session_factory()
    try:
        seed_placeholder_data(db)
    finally:
        db.close()
    return session_factory
