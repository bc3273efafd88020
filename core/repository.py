"""Repository pattern base class for database operations.

Provides the small set of CRUD helpers the meal endpoints need so that
services do not repeat session bookkeeping.
"""

from sqlalchemy import update
from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, Optional, List, Any, Dict
from database.models import Base

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object.

        Args:
            obj: Model instance to persist.

        Returns:
            The persisted object with refreshed attributes.
        """
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an object by its primary key, bypassing the identity map.

        Rows changed by `update_by_id` are re-read from the database rather
        than served stale from the session.
        """
        return self.session.get(self.model, id, populate_existing=True)

    def list_ordered(self, *order_by) -> List[T]:
        """Return every row ordered by the given column expressions."""
        return self.session.query(self.model).order_by(*order_by).all()

    def update_by_id(self, id: Any, values: Dict[str, Any]) -> int:
        """Apply `values` to the row with primary key `id` in one statement.

        Values may be column expressions (``Meal.times_cooked + 1``) so that
        read-modify-write updates stay atomic in the database.

        Returns:
            Number of rows changed (0 when no row matches).
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        self.session.commit()
        return result.rowcount
