"""
Health Check Endpoints.

Endpoints:
- /health: Liveness check (process running)
- /health/ready: Readiness check (database reachable)
"""

from typing import Any

from fastapi import APIRouter, HTTPException
from sqlalchemy import text

from notekeeper.backend.core.dependencies import DbSession
from notekeeper.backend.core.logging import get_logger
from notekeeper.backend.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


async def check_database(db: DbSession) -> dict[str, Any]:
    """
    Check database connectivity with a trivial query.

    Returns:
        Dict with status, latency, and optional error message
    """
    start = utc_now()
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        return {"status": "unhealthy", "error": str(e)}

    latency_ms = int((utc_now() - start).total_seconds() * 1000)
    return {"status": "healthy", "latency_ms": latency_ms}


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Returns 200 if the process is running. No dependency checks.
    """
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(db: DbSession) -> dict[str, Any]:
    """
    Readiness check.

    Returns 503 when the database cannot be reached.
    """
    checks = {"database": await check_database(db)}

    if checks["database"]["status"] != "healthy":
        logger.warning("Readiness check failed", extra={"checks": checks})
        raise HTTPException(
            status_code=503,
            detail={
                "status": "unhealthy",
                "checks": checks,
                "timestamp": utc_now().isoformat(),
            },
        )

    return {
        "status": "healthy",
        "checks": checks,
        "timestamp": utc_now().isoformat(),
    }
