"""
Base repository providing common read operations.
"""

from typing import Generic, TypeVar, List, Type
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic read-only base repository.
    All specific repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def get_all(self) -> List[T]:
        """
        Retrieve all records.

        Returns:
            List of model instances
        """
        return self.db.query(self.model).all()

    def count(self) -> int:
        """
        Count total records.

        Returns:
            Total number of records
        """
        return self.db.query(self.model).count()
