# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection shared across routers.
# These are injected into route handlers using Depends() / Annotated.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Query

from app.auth import AdminUser, get_current_admin

# Type alias for routes that need the authenticated admin identity
AdminDep = Annotated[AdminUser, Depends(get_current_admin)]

# Router-level guard for routes that only need the check
require_admin = [Depends(get_current_admin)]


def pagination(
    limit: int = Query(100, ge=1, le=1000, description="Maximum rows to return"),
    offset: int = Query(0, ge=0, description="Rows to skip"),
) -> dict[str, int]:
    """Common limit/offset query parameters."""
    return {"limit": limit, "offset": offset}


PaginationDep = Annotated[dict[str, int], Depends(pagination)]
