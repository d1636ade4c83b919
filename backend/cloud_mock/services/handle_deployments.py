"""Deployment handlers: list, create and search.

Invariants:
    - list/search results are fixed: dep_1 (running) and dep_2 (stopped)
    - create: name missing, null or empty -> MissingFieldError, checked in that order
    - create: ID is derived from the name (dep_<lowercased name>_123), never random
    - search: the query body is accepted but never evaluated
"""

import logging
from typing import Any

from cloud_mock.core.identifiers import deployment_id
from cloud_mock.core.payload import optional_string, required_text
from cloud_mock.schemas.deployment import (
    Deployment,
    DeploymentCreateResponse,
    DeploymentList,
    DeploymentSearchResponse,
    DeploymentStatus,
    Resource,
    SearchDeployment,
)

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Deployment name is required"

# (id, name, region, status)
_CANNED_DEPLOYMENTS = (
    ("dep_1", "Test Deployment 1", "us-east-1", DeploymentStatus.RUNNING),
    ("dep_2", "Test Deployment 2", "us-west-2", DeploymentStatus.STOPPED),
)


def list_deployments() -> DeploymentList:
    return DeploymentList(deployments=[
        Deployment(id=dep_id, name=name, region=region, status=status)
        for dep_id, name, region, status in _CANNED_DEPLOYMENTS
    ])


def create_deployment(payload: dict[str, Any]) -> DeploymentCreateResponse:
    """Validate a create request and synthesize the new deployment."""
    name = required_text(payload, "name", NAME_REQUIRED)
    alias = optional_string(payload, "alias")
    dep_id = deployment_id(name)
    logger.info(
        f"Synthesized deployment {dep_id}", extra={"resource_id": dep_id},
    )
    return DeploymentCreateResponse(
        created=True,
        id=dep_id,
        name=name,
        alias=alias,
        resources=[
            Resource(
                id="res_123", kind="elasticsearch",
                region="us-east-1", refId="main-elasticsearch",
            ),
        ],
    )


def search_deployments(query: Any) -> DeploymentSearchResponse:
    """Return the fixed result set; the query itself is ignored."""
    hits = [
        SearchDeployment(id=dep_id, name=name)
        for dep_id, name, _, _ in _CANNED_DEPLOYMENTS
    ]
    return DeploymentSearchResponse(
        deployments=hits, returnCount=len(hits), matchCount=len(hits),
    )
