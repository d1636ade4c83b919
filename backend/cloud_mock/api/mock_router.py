"""Mock Router: assembles every mock endpoint into one APIRouter.

Invariants:
    - Endpoints registered explicitly, one include per resource module
    - Carries no state; safe to build once per app
"""

from fastapi import APIRouter

from cloud_mock.api.routes import account, api_keys, deployments, organizations


def create_mock_router() -> APIRouter:
    router = APIRouter()
    router.include_router(account.router)
    router.include_router(deployments.router)
    router.include_router(api_keys.router)
    router.include_router(organizations.router)
    return router
