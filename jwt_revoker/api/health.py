"""Health check endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from jwt_revoker import __version__
from jwt_revoker.core.exceptions import BackendError
from jwt_revoker.dependencies import Backend

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness check: is the process running?"""
    return {
        "status": "healthy",
        "service": "jwt-revoker",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(backend: Backend):
    """Readiness check: can the membership backend be reached?"""
    try:
        await backend.verify()
    except BackendError as exc:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "degraded", "checks": {"backend": exc.reason.value}},
        )
    return {"status": "ready", "checks": {"backend": "ok"}}
