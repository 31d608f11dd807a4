"""
Revenue repository.
"""

from sqlalchemy.orm import Session

from models import Revenue
from .base_repository import BaseRepository


class RevenueRepository(BaseRepository[Revenue]):
    """Repository for Revenue model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Revenue)
