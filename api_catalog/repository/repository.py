# Repository layer for music catalog project

from sqlalchemy.orm import Session
from typing import Any, Dict, List


class ResourceRepository:
    """Single-statement CRUD access to one resource table.

    Identifiers arrive straight from the URL and are bound as query
    parameters as-is; the database decides how they compare against the
    integer primary key.
    """

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    def get_all(self) -> List[Any]:
        return self.db.query(self.model).all()

    def get_by_id(self, item_id: str) -> Any:
        """Fetch exactly one row; a missing row raises NoResultFound."""
        return self.db.query(self.model).filter(self.model.id == item_id).one()

    def create(self, values: Dict[str, Any]) -> int:
        """Insert a row and return the identifier the store assigned to it."""
        db_item = self.model(**values)
        self.db.add(db_item)
        self.db.flush()
        item_id = db_item.id
        self.db.commit()
        return item_id

    def update(self, item_id: str, values: Dict[str, Any]) -> int:
        """Overwrite every given column of the matching row, returning the row count."""
        updated = self.db.query(self.model).filter(self.model.id == item_id).update(
            values, synchronize_session=False
        )
        self.db.commit()
        return updated

    def delete(self, item_id: str) -> int:
        deleted = self.db.query(self.model).filter(self.model.id == item_id).delete(
            synchronize_session=False
        )
        self.db.commit()
        return deleted
