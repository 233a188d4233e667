"""Health & Readiness Probes.

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if durable storage is unreachable (readiness)
    - Storage being down never stops the UI: readiness only reports it
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from storefront.api.dependencies import get_context
from storefront.services.app_context import AppContext

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return {"status": "healthy", "service": "storefront-admin", "version": "1.0.0"}


@router.get("/ready")
async def readiness_check(ctx: AppContext = Depends(get_context)):
    """Readiness probe: includes durable storage connectivity."""
    if not ctx.storage.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "storage_unavailable"},
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}
