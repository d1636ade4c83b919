"""Organization Schemas."""

from enum import Enum

from pydantic import BaseModel


class OrganizationType(str, Enum):
    STANDARD = "standard"
    ENTERPRISE = "enterprise"


class Organization(BaseModel):
    id: str
    name: str
    type: OrganizationType
    created_at: str
    updated_at: str


class OrganizationList(BaseModel):
    """Organizations page; next_page is always null (single page)."""
    organizations: list[Organization]
    next_page: str | None = None
