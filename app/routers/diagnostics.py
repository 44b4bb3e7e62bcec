# =============================================================================
# app/routers/diagnostics.py - Deployment Diagnostics
# =============================================================================
# /api/_endpoints lists every API route with whether it needs an admin
# token, built from the live route table so it can't drift from the code.
# /api/_cors shows how CORS_ORIGINS was interpreted.
# =============================================================================

from typing import Any

from fastapi import APIRouter, Request
from fastapi.dependencies.models import Dependant
from fastapi.routing import APIRoute

from app.auth import get_current_admin
from app.config import settings

router = APIRouter()


def requires_admin(dependant: Dependant) -> bool:
    """True if get_current_admin appears anywhere in the dependency tree."""
    return any(
        dep.call is get_current_admin or requires_admin(dep)
        for dep in dependant.dependencies
    )


def route_inventory(routes: list[Any]) -> list[dict[str, Any]]:
    """One entry per method/path pair, sorted by path."""
    endpoints = []
    for route in routes:
        if not isinstance(route, APIRoute) or not route.include_in_schema:
            continue
        auth = requires_admin(route.dependant)
        for method in sorted(route.methods - {"HEAD", "OPTIONS"}):
            endpoints.append({"method": method, "path": route.path, "auth": auth})
    endpoints.sort(key=lambda e: (e["path"], e["method"]))
    return endpoints


@router.get("/_endpoints")
async def list_endpoints(request: Request) -> dict[str, Any]:
    """Route inventory for checking a deployment."""
    endpoints = route_inventory(request.app.routes)
    return {
        "environment": settings.ENVIRONMENT,
        "total": len(endpoints),
        "endpoints": endpoints,
    }


@router.get("/_cors")
async def cors_config() -> dict[str, Any]:
    """Configured and derived CORS origins."""
    return {
        "environment": settings.ENVIRONMENT,
        "allow_all": not settings.is_production,
        "configured": [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()],
        "derived": settings.cors_origins_list,
        "origin_regex": settings.cors_origin_regex,
        "allow_localhost": settings.ALLOW_LOCALHOST,
    }
