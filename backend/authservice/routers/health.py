"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, status

from authservice.services.credential_client import get_credential_client

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check():
    """
    Readiness check that verifies the credential service is reachable.
    """
    checks = {
        "api": "healthy",
        "credential_service": "unknown",
    }

    try:
        client = await get_credential_client()
        if await client.ping():
            checks["credential_service"] = "healthy"
        else:
            checks["credential_service"] = "unhealthy: non-2xx response"
    except Exception as e:
        checks["credential_service"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
