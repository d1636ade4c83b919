"""Organizations Route: GET /api/v1/organizations."""

from fastapi import APIRouter

from cloud_mock.schemas.organization import OrganizationList
from cloud_mock.services.handle_organizations import list_organizations

router = APIRouter(prefix="/api/v1/organizations", tags=["organizations"])


@router.get("", response_model=OrganizationList)
async def read_organizations():
    return list_organizations()
