# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Bearer-token authentication for the admin API, either with locally issued
# JWTs or with Supabase Auth (settings.AUTH_MODE).
#
# Usage:
#   from app.auth import get_current_admin, AdminUser
#
#   @router.get("/protected")
#   async def protected(admin: AdminUser = Depends(get_current_admin)):
#       return {"username": admin.username}
# =============================================================================

from app.auth.dependencies import create_access_token, decode_admin_token, get_current_admin
from app.auth.models import AdminUser, LoginRequest, LoginResponse

__all__ = [
    "create_access_token",
    "decode_admin_token",
    "get_current_admin",
    "AdminUser",
    "LoginRequest",
    "LoginResponse",
]
