# Service layer for music catalog project

import logging

from sqlalchemy.orm import Session
from pydantic import BaseModel
from api_catalog.repository.repository import ResourceRepository
from api_catalog.resource.resource import Resource
from typing import List

logger = logging.getLogger(__name__)


class ResourceService:
    def __init__(self, db: Session, resource: Resource):
        self.resource = resource
        self.repo = ResourceRepository(db, resource.model)

    def get_all(self) -> List[BaseModel]:
        items = self.repo.get_all()
        return [self.resource.response_schema.model_validate(item) for item in items]

    def get_by_id(self, item_id: str) -> BaseModel:
        db_item = self.repo.get_by_id(item_id)
        return self.resource.response_schema.model_validate(db_item)

    def create(self, payload: BaseModel) -> BaseModel:
        values = payload.model_dump()
        item_id = self.repo.create(values)
        logger.info("Created %s %s", self.resource.name, item_id)
        return self.resource.response_schema(id=item_id, **values)

    def update(self, item_id: str, payload: BaseModel) -> None:
        updated = self.repo.update(item_id, self._columns(payload))
        logger.info("Updated %s %s (%d rows)", self.resource.name, item_id, updated)

    def delete(self, item_id: str) -> None:
        deleted = self.repo.delete(item_id)
        logger.info("Deleted %s %s (%d rows)", self.resource.name, item_id, deleted)

    def _columns(self, payload: BaseModel) -> dict:
        # Fields the client left out are written with their defaults
        values = payload.model_dump()
        return {field: values[field] for field in self.resource.mutable_fields}
