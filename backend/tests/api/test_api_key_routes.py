"""API key write routes: create and delete over HTTP.

Invariants:
    - Creation returns the secret exactly once; reads never do
    - Bad creation bodies get the same structured 400 as deployments
    - Empty key ID on delete → 400 "API Key ID is required"
"""

import re

import pytest
from httpx import ASGITransport, AsyncClient

from cloud_mock.main import create_app
from tests.api.assertions import assert_api_error


async def test_create_key_without_name_defaults(client):
    res = await client.post("/api/v1/users/auth/keys", json={})
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Unnamed Key"
    assert body["description"] is None
    assert body["expiration_date"] is None
    assert body["user_id"] == "user_123"
    assert re.fullmatch(r"key_[0-9a-f]{8}", body["id"])
    assert re.fullmatch(r"essu_[0-9a-f]{32}", body["api_key"])


async def test_create_key_with_fields(client):
    res = await client.post(
        "/api/v1/users/auth/keys",
        json={"name": "foo", "description": "deploy bot", "expiration_date": "2031-01-01T00:00:00Z"},
    )
    body = res.json()
    assert body["name"] == "foo"
    assert body["description"] == "deploy bot"
    assert body["expiration_date"] == "2031-01-01T00:00:00Z"


async def test_created_secret_not_returned_on_read(client):
    created = (await client.post("/api/v1/users/auth/keys", json={"name": "foo"})).json()
    read = await client.get(f"/api/v1/users/auth/keys/{created['id']}")
    assert read.status_code == 200
    assert read.json()["id"] == created["id"]
    assert "api_key" not in read.json()


async def test_create_key_uses_configured_prefix(settings):
    app = create_app(settings.model_copy(update={"api_key_prefix": "test_"}))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        res = await c.post("/api/v1/users/auth/keys", json={})
    assert res.json()["api_key"].startswith("test_")


@pytest.mark.parametrize("body", [b"{", b"", b"[]", b'"foo"'])
async def test_create_key_rejects_bad_body(client, body):
    res = await client.post(
        "/api/v1/users/auth/keys", content=body,
        headers={"content-type": "application/json"},
    )
    assert_api_error(res, 400, "Invalid JSON payload")


async def test_delete_key(client):
    res = await client.delete("/api/v1/users/auth/keys/key_123")
    assert res.status_code == 200
    assert res.json() == {"found": True, "invalidated": True}


async def test_delete_unknown_key_still_succeeds(client):
    res = await client.delete("/api/v1/users/auth/keys/never-issued")
    assert res.json() == {"found": True, "invalidated": True}


async def test_delete_key_requires_id(client):
    res = await client.delete("/api/v1/users/auth/keys/")
    assert_api_error(res, 400, "API Key ID is required")
