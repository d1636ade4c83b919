"""API Key Schemas: read, create and delete response shapes.

Invariants:
    - ApiKey never carries the secret value
    - ApiKeyCreated is the only model exposing api_key (returned once, on creation)
"""

from pydantic import BaseModel


class ApiKey(BaseModel):
    id: str
    name: str
    description: str | None = None
    user_id: str
    creation_date: str
    expiration_date: str | None = None


class ApiKeyCreated(ApiKey):
    api_key: str


class ApiKeyDeleteResponse(BaseModel):
    found: bool = True
    invalidated: bool = True
