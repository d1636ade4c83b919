"""Deployment Routes: list, create and search.

Invariants:
    - Request bodies are read raw and decoded by core.payload (no request models)
    - Malformed JSON on create or search → 400 "Invalid JSON payload"
"""

from fastapi import APIRouter, Request

from cloud_mock.core.payload import parse_json, parse_json_object
from cloud_mock.schemas.deployment import (
    DeploymentCreateResponse, DeploymentList, DeploymentSearchResponse,
)
from cloud_mock.schemas.error import ErrorResponse
from cloud_mock.services.handle_deployments import (
    create_deployment, list_deployments, search_deployments,
)

router = APIRouter(prefix="/api/v1/deployments", tags=["deployments"])


@router.get("", response_model=DeploymentList)
async def read_deployments():
    return list_deployments()


@router.post(
    "", response_model=DeploymentCreateResponse,
    responses={400: {"model": ErrorResponse}},
)
async def post_deployment(request: Request):
    """Create a deployment from {"name", "alias"?}."""
    payload = parse_json_object(await request.body())
    return create_deployment(payload)


@router.post(
    "/_search", response_model=DeploymentSearchResponse,
    responses={400: {"model": ErrorResponse}},
)
async def post_deployment_search(request: Request):
    """Search deployments. Any JSON query returns the same fixed result."""
    query = parse_json(await request.body())
    return search_deployments(query)
