"""Deployment Schemas: list, create and search response shapes.

Invariants:
    - Deployment.status is one of DeploymentStatus
    - SearchResources always lists every kind, each an (empty) list
    - DeploymentCreateResponse.created is always True
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class DeploymentStatus(str, Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class Resource(BaseModel):
    """A single resource attached to a deployment."""
    id: str
    kind: str
    region: str
    refId: str


class Deployment(BaseModel):
    id: str
    name: str
    region: str
    status: DeploymentStatus
    resources: list[Resource] = Field(default_factory=list)


class DeploymentList(BaseModel):
    deployments: list[Deployment]


class DeploymentCreateResponse(BaseModel):
    created: bool = True
    id: str
    name: str
    alias: str | None = None
    resources: list[Resource]


class SearchResources(BaseModel):
    """Per-kind resource breakdown of a search hit."""
    elasticsearch: list[dict[str, Any]] = Field(default_factory=list)
    kibana: list[dict[str, Any]] = Field(default_factory=list)
    apm: list[dict[str, Any]] = Field(default_factory=list)
    integrations_server: list[dict[str, Any]] = Field(default_factory=list)
    enterprise_search: list[dict[str, Any]] = Field(default_factory=list)


class SearchDeployment(BaseModel):
    id: str
    name: str
    healthy: bool = False
    resources: SearchResources = Field(default_factory=SearchResources)


class DeploymentSearchResponse(BaseModel):
    deployments: list[SearchDeployment]
    returnCount: int
    matchCount: int
