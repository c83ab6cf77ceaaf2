# Router for music catalog project

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from api_catalog.config.config import get_db
from api_catalog.resource.resource import Resource, RESOURCES
from api_catalog.service.service import ResourceService
from api_catalog.schema.schema import ErrorResponse, MessageResponse
from typing import List

router = APIRouter()


# Greeting endpoints
@router.get("/", response_class=PlainTextResponse)
def root():
    return "Hello, World!"


@router.get("/api/data", response_model=MessageResponse)
def get_data():
    return {"message": "Hello From music catalog server"}


def build_resource_router(resource: Resource) -> APIRouter:
    """Build the five CRUD routes for one resource."""
    resource_router = APIRouter(prefix=resource.path, tags=[resource.name])
    payload_schema = resource.payload_schema
    response_schema = resource.response_schema

    @resource_router.get("", response_model=List[response_schema])
    def list_items(db: Session = Depends(get_db)):
        return ResourceService(db, resource).get_all()

    @resource_router.get(
        "/{item_id}",
        response_model=response_schema,
        responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
    )
    def get_item(item_id: str, db: Session = Depends(get_db)):
        return ResourceService(db, resource).get_by_id(item_id)

    @resource_router.post("", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    def create_item(payload: payload_schema, db: Session = Depends(get_db)):
        return ResourceService(db, resource).create(payload)

    @resource_router.put("/{item_id}")
    def update_item(item_id: str, payload: payload_schema, db: Session = Depends(get_db)):
        ResourceService(db, resource).update(item_id, payload)
        return Response(status_code=status.HTTP_200_OK)

    @resource_router.delete("/{item_id}")
    def delete_item(item_id: str, db: Session = Depends(get_db)):
        ResourceService(db, resource).delete(item_id)
        return Response(status_code=status.HTTP_200_OK)

    return resource_router


for _resource in RESOURCES:
    router.include_router(build_resource_router(_resource))
