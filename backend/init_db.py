from datetime import date
import argparse
import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from config.settings import get_settings
from database import Base, get_engine, get_session
from models import Customer, Invoice, Revenue
from utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)

PLACEHOLDER_CUSTOMERS = [
    {"id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa", "name": "Evil Rabbit", "email": "evil@rabbit.com", "image_url": "/customers/evil-rabbit.png"},
    {"id": "3958dc9e-712f-4377-85e9-fec4b6a6442a", "name": "Delba de Oliveira", "email": "delba@oliveira.com", "image_url": "/customers/delba-de-oliveira.png"},
    {"id": "3958dc9e-742f-4377-85e9-fec4b6a6442a", "name": "Lee Robinson", "email": "lee@robinson.com", "image_url": "/customers/lee-robinson.png"},
    {"id": "76d65c26-f784-44a2-ac19-586678f7c2f2", "name": "Michael Novotny", "email": "michael@novotny.com", "image_url": "/customers/michael-novotny.png"},
]

PLACEHOLDER_INVOICES = [
    {"customer_id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa", "amount": 15795, "status": "pending", "date": date(2022, 12, 6)},
    {"customer_id": "3958dc9e-712f-4377-85e9-fec4b6a6442a", "amount": 20348, "status": "pending", "date": date(2022, 11, 14)},
    {"customer_id": "3958dc9e-742f-4377-85e9-fec4b6a6442a", "amount": 3040, "status": "paid", "date": date(2022, 10, 29)},
    {"customer_id": "76d65c26-f784-44a2-ac19-586678f7c2f2", "amount": 44800, "status": "paid", "date": date(2023, 9, 10)},
    {"customer_id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa", "amount": 34577, "status": "pending", "date": date(2023, 8, 5)},
    {"customer_id": "3958dc9e-742f-4377-85e9-fec4b6a6442a", "amount": 54246, "status": "pending", "date": date(2023, 7, 16)},
    {"customer_id": "76d65c26-f784-44a2-ac19-586678f7c2f2", "amount": 666, "status": "pending", "date": date(2023, 6, 27)},
    {"customer_id": "3958dc9e-712f-4377-85e9-fec4b6a6442a", "amount": 32545, "status": "paid", "date": date(2023, 6, 9)},
]

PLACEHOLDER_REVENUE = [
    ("Jan", 2000), ("Feb", 1800), ("Mar", 2200), ("Apr", 2500),
    ("May", 2300), ("Jun", 3200), ("Jul", 3500), ("Aug", 3700),
    ("Sep", 2500), ("Oct", 2800), ("Nov", 3000), ("Dec", 4800),
]


def init_database(bind: Engine | None = None):
    """Create any missing dashboard tables."""
    bind = bind or get_engine()
    existing = set(inspect(bind).get_table_names())
    Base.metadata.create_all(bind=bind)
    created = set(Base.metadata.tables) - existing
    if created:
        logger.info(f"Created tables: {', '.join(sorted(created))}")
    else:
        logger.info("Database schema up to date")


def seed_placeholder_data(db: Session) -> int:
    """
    Insert demo customers, invoices and revenue into empty tables.

    Tables that already hold rows are left untouched.

    Returns:
        Number of rows inserted
    """
    inserted = 0

    if db.query(Customer).count() == 0:
        db.add_all(Customer(**row) for row in PLACEHOLDER_CUSTOMERS)
        inserted += len(PLACEHOLDER_CUSTOMERS)

    if db.query(Invoice).count() == 0:
        db.add_all(Invoice(**row) for row in PLACEHOLDER_INVOICES)
        inserted += len(PLACEHOLDER_INVOICES)

    if db.query(Revenue).count() == 0:
        db.add_all(Revenue(month=month, revenue=revenue) for month, revenue in PLACEHOLDER_REVENUE)
        inserted += len(PLACEHOLDER_REVENUE)

    db.commit()
    logger.info(f"Seeded {inserted} placeholder rows")
    return inserted


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create the dashboard tables")
    parser.add_argument("--seed", action="store_true", help="insert placeholder data into empty tables")
    args = parser.parse_args(argv)

    configure_logging(get_settings().log_file)
    init_database()
    if args.seed:
        db = get_session()
        try:
            seed_placeholder_data(db)
        finally:
            db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
