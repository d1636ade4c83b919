"""Health Probe: liveness endpoint, mounted in both mock and live mode."""

from fastapi import APIRouter, Request, status

from cloud_mock import __version__

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Returns 200 if the process is up, with the active mode."""
    settings = request.app.state.settings
    body = {
        "status": "healthy",
        "service": "cloud-mock-api",
        "version": __version__,
        "mode": "mock" if settings.mock_enabled else "live",
    }
    if not settings.mock_enabled:
        body["upstream_url"] = settings.upstream_url
    return body
