"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, status

from mongoadmin.database.connections import open_driver

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
    Readiness check that verifies the MongoDB server answers a ping.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
    }

    # Check MongoDB
    try:
        driver = open_driver()
        try:
            await driver.ping()
        finally:
            driver.close()
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {str(e)}"

    # Overall status
    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
