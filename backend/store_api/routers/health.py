"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, Depends, status

from store_api.core.exceptions import StoreError
from store_api.database.connections import get_gateway
from store_api.database.gateway import MongoGateway

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
async def readiness_check(gateway: MongoGateway = Depends(get_gateway)):
    """
    Readiness check that verifies the database connection.
    Returns 200 with status "degraded" if MongoDB is not reachable.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
    }

    try:
        await gateway.ping()
        checks["mongodb"] = "healthy"
    except StoreError as e:
        checks["mongodb"] = f"unhealthy: {e.message}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
