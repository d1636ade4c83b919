"""Account Route: GET /api/v1/account."""

from fastapi import APIRouter

from cloud_mock.schemas.account import Account
from cloud_mock.services.handle_account import get_account

router = APIRouter(prefix="/api/v1/account", tags=["account"])


@router.get("", response_model=Account)
async def read_account():
    """Return the synthetic account of the calling user."""
    return get_account()
