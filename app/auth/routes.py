# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Admin login and token verification.
#
# POST /api/admin/login issues a token; every other /api/admin route
# requires it as "Authorization: Bearer <token>".
# =============================================================================

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from jose import JWTError, jwt
from supabase import create_client

from app.auth.dependencies import create_access_token, get_current_admin
from app.auth.models import AdminUser, LoginRequest, LoginResponse, LoginUser
from app.config import settings
from app.exceptions import AdminNotConfiguredError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Auth"])

INVALID_CREDENTIALS = "Invalid credentials"


def _local_login(body: LoginRequest) -> LoginResponse:
    credentials = settings.admin_credentials
    if credentials is None:
        logger.error("Admin login attempted but credentials are not configured")
        raise AdminNotConfiguredError()

    username, password = credentials
    # Compare both fields even when the first one fails
    user_ok = secrets.compare_digest(body.username.encode(), username.encode())
    pass_ok = secrets.compare_digest(body.password.encode(), password.encode())
    if not (user_ok and pass_ok):
        logger.warning(f"Failed admin login for username: {body.username}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    token, expires_at = create_access_token(username)
    logger.info(f"Admin logged in: {username}")
    return LoginResponse(
        token=token,
        expires_at=expires_at,
        user=LoginUser(username=username),
    )


def _session_expiry(session: Any) -> datetime:
    """
    Expiry of a Supabase session.

    expires_at is optional on the session; fall back to the access token's
    exp claim, then to expires_in from now.
    """
    expires = session.expires_at
    if expires is None:
        try:
            expires = jwt.get_unverified_claims(session.access_token).get("exp")
        except JWTError:
            expires = None
    if expires is None:
        lifetime = getattr(session, "expires_in", None) or 3600
        return datetime.now(timezone.utc) + timedelta(seconds=lifetime)
    return datetime.fromtimestamp(expires, tz=timezone.utc)


def _supabase_login(body: LoginRequest) -> LoginResponse:
    email = body.username.strip().lower()
    allowed = settings.admin_emails_list
    if allowed and email not in allowed:
        logger.warning(f"Rejected Supabase login for non-admin: {email}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    # Sign-in uses its own client so the shared service-role client never
    # carries a user session
    auth_client = create_client(
        settings.SUPABASE_URL,
        settings.SUPABASE_ANON_KEY or settings.SUPABASE_SERVICE_KEY,
    )
    try:
        response = auth_client.auth.sign_in_with_password(
            {"email": email, "password": body.password}
        )
    except Exception as e:
        logger.warning(f"Supabase sign-in failed for {email}: {e}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    session = response.session
    if session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    logger.info(f"Admin logged in via Supabase: {email}")
    return LoginResponse(
        token=session.access_token,
        expires_at=_session_expiry(session),
        user=LoginUser(username=email),
    )


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest) -> LoginResponse:
    """
    Exchange admin credentials for a Bearer token.

    Raises:
        401: Wrong username or password
        500: Admin credentials not configured (production)
    """
    if settings.AUTH_MODE == "supabase":
        return _supabase_login(body)
    return _local_login(body)


@router.get("/login", include_in_schema=False)
async def login_wrong_method() -> JSONResponse:
    """Guide clients that try to GET the login endpoint."""
    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        content={
            "detail": "Method not allowed",
            "code": "METHOD_NOT_ALLOWED",
            "suggestion": 'Use POST /api/admin/login with JSON: {"username":"...","password":"..."}',
        },
        headers={"Allow": "POST, OPTIONS"},
    )


@router.get("/verify")
async def verify_token(
    admin: AdminUser = Depends(get_current_admin)
) -> dict:
    """
    Verify that the current token is valid.

    Useful for the admin UI to check a stored token on page load.
    """
    return {
        "valid": True,
        "username": admin.username,
        "role": admin.role,
        "expires_at": admin.expires_at,
    }
