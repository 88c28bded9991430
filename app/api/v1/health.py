# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A quick "are you alive?" check for the plant care API, including whether the database answers.
# 🧪 Purpose (Technical Summary):
# Health check endpoint reporting service status, version and database connectivity. Answers 503
# when the database is unreachable so load balancers can take the instance out of rotation.
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, app.shared.infrastructure.database.connection
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check
from app.shared.utils.logging import SERVICE_NAME, get_logger

logger = get_logger(__name__)

health_router = APIRouter()


@health_router.get(
    "/health",
    summary="Health Check",
    description="Service health including database connectivity",
)
async def health_check() -> JSONResponse:
    """
    Health check endpoint.

    Returns 200 when the database answers, 503 otherwise.
    """
    database = await database_health_check()
    healthy = database.get("status") == "healthy"
    if not healthy:
        logger.warning("Health check failed", extra={"database": database})

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "success": healthy,
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
            "components": {"database": database},
        }
    )
