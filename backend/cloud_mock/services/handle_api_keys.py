"""API key handlers: read, create and delete.

Invariants:
    - read echoes the requested ID (empty accepted); no existence check
    - create never rejects a field: wrong type or absence falls back to defaults
    - create is the only operation that returns the secret value
    - delete rejects an empty ID; any other ID reports found + invalidated
"""

import logging
from typing import Any

from cloud_mock.core.errors import MissingFieldError
from cloud_mock.core.identifiers import new_id, new_secret, utc_now_iso
from cloud_mock.core.payload import optional_string
from cloud_mock.schemas.api_key import ApiKey, ApiKeyCreated, ApiKeyDeleteResponse

logger = logging.getLogger(__name__)

MOCK_USER_ID = "user_123"
DEFAULT_KEY_NAME = "Unnamed Key"
KEY_ID_REQUIRED = "API Key ID is required"


def get_api_key(key_id: str) -> ApiKey:
    return ApiKey(
        id=key_id,
        name="Test API Key",
        description="Mock API key for testing",
        user_id=MOCK_USER_ID,
        creation_date="2024-01-01T00:00:00Z",
        expiration_date=None,
    )


def create_api_key(payload: dict[str, Any], secret_prefix: str) -> ApiKeyCreated:
    """Create a synthetic key from an already-decoded JSON object."""
    name = optional_string(payload, "name", DEFAULT_KEY_NAME)
    description = optional_string(payload, "description")
    expiration_date = optional_string(payload, "expiration_date")

    key_id = new_id("key")
    logger.info(f"Issued API key {key_id}", extra={"resource_id": key_id})
    return ApiKeyCreated(
        id=key_id,
        name=name,
        description=description,
        user_id=MOCK_USER_ID,
        creation_date=utc_now_iso(),
        expiration_date=expiration_date,
        api_key=new_secret(secret_prefix),
    )


def delete_api_key(key_id: str) -> ApiKeyDeleteResponse:
    if not key_id:
        raise MissingFieldError("keyId", KEY_ID_REQUIRED)
    logger.info(f"Invalidated API key {key_id}", extra={"resource_id": key_id})
    return ApiKeyDeleteResponse(found=True, invalidated=True)
