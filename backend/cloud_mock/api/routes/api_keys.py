"""API Key Routes: read, create and delete user API keys.

Invariants:
    - The trailing-slash paths carry an empty key ID: read accepts it, delete rejects it
    - Only creation returns the secret api_key value
"""

from fastapi import APIRouter, Request

from cloud_mock.core.payload import parse_json_object
from cloud_mock.schemas.api_key import ApiKey, ApiKeyCreated, ApiKeyDeleteResponse
from cloud_mock.schemas.error import ErrorResponse
from cloud_mock.services.handle_api_keys import (
    create_api_key, delete_api_key, get_api_key,
)

router = APIRouter(prefix="/api/v1/users/auth/keys", tags=["api-keys"])


@router.post(
    "", response_model=ApiKeyCreated,
    responses={400: {"model": ErrorResponse}},
)
async def post_api_key(request: Request):
    """Create a key from {"name"?, "description"?, "expiration_date"?}."""
    payload = parse_json_object(await request.body())
    settings = request.app.state.settings
    return create_api_key(payload, settings.api_key_prefix)


@router.get("/{key_id}", response_model=ApiKey)
async def read_api_key(key_id: str):
    return get_api_key(key_id)


@router.get("/", response_model=ApiKey, include_in_schema=False)
async def read_api_key_without_id():
    return get_api_key("")


@router.delete(
    "/{key_id}", response_model=ApiKeyDeleteResponse,
    responses={400: {"model": ErrorResponse}},
)
async def remove_api_key(key_id: str):
    return delete_api_key(key_id)


@router.delete("/", response_model=ApiKeyDeleteResponse, include_in_schema=False)
async def remove_api_key_without_id():
    return delete_api_key("")
