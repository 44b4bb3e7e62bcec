# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
#
#   /health             - plain liveness for platform probes
#   /api/health         - same, under the API prefix for the frontend
#   /api/health/ready   - database, storage and email checks
#   /api/health/live    - liveness
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Any, Callable

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from core.services.email_service import EmailService
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

router = APIRouter()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str


class ApiHealthResponse(HealthResponse):
    message: str


class ChecksResponse(BaseModel):
    """Individual service checks."""
    database: str
    storage: str
    email: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="OK",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
    )


@router.get("/api/health", response_model=ApiHealthResponse)
async def api_health_check():
    """Health check under the API prefix."""
    return ApiHealthResponse(
        status="ok",
        message="Portfolio API is running",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
    )


def _probe(check: Callable[[], Any]) -> str:
    """Run one connectivity check and describe the outcome."""
    try:
        check()
        return "healthy"
    except Exception as e:
        logger.warning(f"Readiness probe failed: {e}")
        return f"unhealthy: {str(e)[:50]}"


def _database_probe() -> None:
    SupabaseClient.get_client().table("projects").select("id").limit(1).execute()


def _storage_probe() -> None:
    SupabaseClient.get_client().storage.list_buckets()


@router.get("/api/health/ready", response_model=ReadinessResponse)
async def readiness_check():
    """
    Readiness check endpoint.

    Checks database, storage and SMTP. Email is optional: an unconfigured
    transport is reported as "disabled" and doesn't degrade readiness.
    """
    if settings.email_enabled:
        result = await EmailService.verify_connection()
        email = "healthy" if result["success"] else f"unhealthy: {result['message'][:50]}"
    else:
        email = "disabled"

    checks = ChecksResponse(
        database=_probe(_database_probe),
        storage=_probe(_storage_probe),
        email=email,
    )
    ready = (
        checks.database == "healthy"
        and checks.storage == "healthy"
        and not checks.email.startswith("unhealthy")
    )

    return ReadinessResponse(
        status="ready" if ready else "degraded",
        checks=checks,
        timestamp=_now(),
    )



@router.get("/api/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    """
    return LivenessResponse(
        status="alive",
        timestamp=_now(),
    )
