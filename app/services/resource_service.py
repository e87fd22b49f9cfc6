from typing import Any, Dict, Optional, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.crud import mutations, queries


class ResourceService:
    """
    Facade over the crud layer for one resource. Handlers only talk to
    services; services only forward, apart from defaulting pagination.
    """

    model: Type[Any]
    resource_name: str = "Resource"

    def __init__(self, db: Session):
        self.db = db

    def create(self, data: BaseModel):
        return mutations.insert(self.db, self.model, data.model_dump(exclude_unset=True))

    def find_many(self, page: Optional[int] = None, limit: Optional[int] = None, q: Optional[str] = None) -> Dict[str, Any]:
        return queries.find_many(self.db, self.model, page=page or 1, limit=limit or 20, q=q)

    def find_by_id(self, row_id: str):
        return queries.find_by_id(self.db, self.model, row_id)

    def update(self, row_id: str, data: BaseModel):
        """Apply only the fields present in ``data``. Returns None when ``row_id`` does not exist."""
        return mutations.update(self.db, self.model, row_id, data.model_dump(exclude_unset=True))

    def delete(self, row_id: str) -> bool:
        return mutations.delete(self.db, self.model, row_id)
