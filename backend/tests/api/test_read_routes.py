"""Read-only routes: account, deployments list, organizations, key read.

Invariants:
    - Always 200 with fixed fields
    - Repeated GETs are byte-identical
"""

import pytest


async def test_get_account(client):
    res = await client.get("/api/v1/account")
    assert res.status_code == 200
    assert res.json() == {
        "id": "test-account-id",
        "trust": {"direct_trust": True, "external_trust": False, "trust_all": True},
    }


async def test_list_deployments(client):
    res = await client.get("/api/v1/deployments")
    assert res.status_code == 200
    assert res.json() == {
        "deployments": [
            {"id": "dep_1", "name": "Test Deployment 1", "region": "us-east-1",
             "status": "running", "resources": []},
            {"id": "dep_2", "name": "Test Deployment 2", "region": "us-west-2",
             "status": "stopped", "resources": []},
        ],
    }


async def test_list_organizations(client):
    res = await client.get("/api/v1/organizations")
    assert res.status_code == 200
    body = res.json()
    assert body["next_page"] is None
    assert body["organizations"] == [
        {"id": "org_1", "name": "Test Organization 1", "type": "standard",
         "created_at": "2024-01-01T00:00:00Z", "updated_at": "2024-01-01T00:00:00Z"},
        {"id": "org_2", "name": "Test Organization 2", "type": "enterprise",
         "created_at": "2024-01-01T00:00:00Z", "updated_at": "2024-01-01T00:00:00Z"},
    ]


async def test_get_api_key_echoes_id_without_secret(client):
    res = await client.get("/api/v1/users/auth/keys/key_42")
    assert res.status_code == 200
    body = res.json()
    assert body == {
        "id": "key_42",
        "name": "Test API Key",
        "description": "Mock API key for testing",
        "user_id": "user_123",
        "creation_date": "2024-01-01T00:00:00Z",
        "expiration_date": None,
    }


async def test_get_api_key_accepts_empty_id(client):
    res = await client.get("/api/v1/users/auth/keys/")
    assert res.status_code == 200
    assert res.json()["id"] == ""


@pytest.mark.parametrize("path", [
    "/api/v1/account",
    "/api/v1/deployments",
    "/api/v1/organizations",
    "/api/v1/users/auth/keys/key_42",
])
async def test_repeated_gets_are_byte_identical(client, path):
    responses = [await client.get(path) for _ in range(3)]
    assert len({r.content for r in responses}) == 1
