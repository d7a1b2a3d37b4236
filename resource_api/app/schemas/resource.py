"""
Pydantic schemas for resources.

``ResourceCreate`` and ``ResourceUpdate`` describe request payloads,
``ResourceRead`` a stored row.  ``name`` is optional on
``ResourceCreate`` on purpose: the create handler reports a missing
name itself.  The envelope models wrap responses in the
``{"message", "data"}`` shape returned by every resource endpoint.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ResourceBase(BaseModel):
    description: Optional[str] = Field(None, examples=["A blue widget"])
    category: Optional[str] = Field(None, examples=["hardware"])
    status: Optional[str] = Field(None, examples=["active"])


class ResourceCreate(ResourceBase):
    """Schema for creating a resource."""

    name: Optional[str] = Field(None, examples=["Widget"])


class ResourceUpdate(ResourceBase):
    """Schema for a partial update.

    Fields that are absent or empty leave the stored value unchanged.
    """

    name: Optional[str] = None


class ResourceRead(BaseModel):
    """Schema for a stored resource."""

    id: int
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    created_at: str
    updated_at: str

    model_config = {
        "from_attributes": True,
    }


class ResourceFilters(BaseModel):
    """Optional predicates for listing resources, combined with AND."""

    category: Optional[str] = None
    status: Optional[str] = None
    name: Optional[str] = None


class MessageEnvelope(BaseModel):
    message: str


class ResourceEnvelope(MessageEnvelope):
    data: ResourceRead


class ResourceListEnvelope(MessageEnvelope):
    count: int
    data: List[ResourceRead]
