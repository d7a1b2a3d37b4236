"""
Resource endpoints.

CRUD routes for resources.  Each handler validates its input before
touching the store: a malformed ``id`` or a create request without a
``name`` is rejected with 400.  Missing rows yield 404.  Any failure
raised by the store is reported as 500 with the failure text in
``details``.
"""

import re
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from resource_api.app.core.body import parse_payload, read_body
from resource_api.app.core.db import Database, get_database
from resource_api.app.core.errors import ApiError, store_errors
from resource_api.app.schemas.resource import (
    MessageEnvelope,
    ResourceCreate,
    ResourceEnvelope,
    ResourceFilters,
    ResourceListEnvelope,
    ResourceUpdate,
)
from resource_api.app.services.resource_service import ResourceService

router = APIRouter()

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_resource_service(database: Database = Depends(get_database)) -> ResourceService:
    return ResourceService(database)


def parse_resource_id(resource_id: str) -> int:
    """Convert a path segment to an integer id or raise 400.

    The leading integer is used and anything after it is ignored, so
    ``"12abc"`` and ``"1.5"`` address ids 12 and 1.  Segments that do
    not start with an integer are rejected.
    """
    match = _ID_PATTERN.match(resource_id.lstrip())
    if match is None:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Invalid resource ID")
    value = int(match.group())
    # SQLite integers are signed 64-bit.
    if not -(2**63) <= value < 2**63:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Invalid resource ID")
    return value


def _not_found() -> ApiError:
    return ApiError(status.HTTP_404_NOT_FOUND, "Resource not found")


@router.post("", response_model=ResourceEnvelope, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ResourceEnvelope, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_resource(
    request: Request,
    service: ResourceService = Depends(get_resource_service),
) -> ResourceEnvelope:
    """Create a resource.  ``name`` is required; ``status`` defaults to ``active``."""
    body = await read_body(request)
    payload = parse_payload(ResourceCreate, body)
    if not payload.name:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Name is required")
    with store_errors("Failed to create resource"):
        resource = service.create(payload)
    return ResourceEnvelope(message="Resource created successfully", data=resource)


@router.get("", response_model=ResourceListEnvelope)
@router.get("/", response_model=ResourceListEnvelope, include_in_schema=False)
async def list_resources(
    category: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    name: Optional[str] = Query(None),
    service: ResourceService = Depends(get_resource_service),
) -> ResourceListEnvelope:
    """List resources, most recent first.

    - **category**, **status**: exact match.
    - **name**: case-sensitive substring match.
    """
    filters = ResourceFilters(category=category, status=status_filter, name=name)
    with store_errors("Failed to retrieve resources"):
        resources = service.find_all(filters)
    return ResourceListEnvelope(
        message="Resources retrieved successfully",
        count=len(resources),
        data=resources,
    )


@router.get("/{resource_id}", response_model=ResourceEnvelope)
async def get_resource(
    resource_id: str,
    service: ResourceService = Depends(get_resource_service),
) -> ResourceEnvelope:
    rid = parse_resource_id(resource_id)
    with store_errors("Failed to retrieve resource"):
        resource = service.find_by_id(rid)
    if resource is None:
        raise _not_found()
    return ResourceEnvelope(message="Resource retrieved successfully", data=resource)


@router.put("/{resource_id}", response_model=ResourceEnvelope)
async def update_resource(
    resource_id: str,
    request: Request,
    service: ResourceService = Depends(get_resource_service),
) -> ResourceEnvelope:
    """Partially update a resource.

    Only non-empty fields overwrite stored values; ``updated_at`` is
    always refreshed.
    """
    rid = parse_resource_id(resource_id)
    body = await read_body(request)
    payload = parse_payload(ResourceUpdate, body)
    with store_errors("Failed to update resource"):
        resource = service.update(rid, payload)
    if resource is None:
        raise _not_found()
    return ResourceEnvelope(message="Resource updated successfully", data=resource)


@router.delete("/{resource_id}", response_model=MessageEnvelope)
async def delete_resource(
    resource_id: str,
    service: ResourceService = Depends(get_resource_service),
) -> MessageEnvelope:
    rid = parse_resource_id(resource_id)
    with store_errors("Failed to delete resource"):
        deleted = service.delete(rid)
    if not deleted:
        raise _not_found()
    return MessageEnvelope(message="Resource deleted successfully")
