# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for admin login and the identity carried by a token.
# =============================================================================

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AdminUser(BaseModel):
    """
    Authenticated admin extracted from a Bearer token.

    Built from the token claims alone, without a database lookup.
    """
    model_config = ConfigDict(frozen=True)

    username: str
    role: str = "admin"
    email: Optional[str] = None
    expires_at: Optional[datetime] = None


class LoginRequest(BaseModel):
    """
    Body for POST /api/admin/login.

    In supabase auth mode `username` is the account email.
    """
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginUser(BaseModel):
    username: str
    role: str = "admin"


class LoginResponse(BaseModel):
    """Issued token plus the identity it represents."""
    token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: LoginUser
    message: str = "Login successful"
