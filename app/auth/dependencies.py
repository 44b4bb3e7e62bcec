# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for admin authentication.
#
# Two modes (settings.AUTH_MODE):
# - local: tokens are HS256 JWTs issued by POST /api/admin/login and signed
#   with JWT_SECRET
# - supabase: tokens come from Supabase Auth and are verified with
#   - ES256/RS256 (new Supabase JWT signing keys) via JWKS
#   - HS256 (legacy Supabase JWT secret) as fallback
#
# Usage:
#   from app.auth import get_current_admin, AdminUser
#
#   @router.get("/protected")
#   async def protected(admin: AdminUser = Depends(get_current_admin)):
#       return {"username": admin.username}
# =============================================================================

import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import httpx
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError, ExpiredSignatureError

from app.config import settings
from app.auth.models import AdminUser

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor; missing headers are reported by us, not FastAPI
security = HTTPBearer(auto_error=False)

# Cache for JWKS keys
_jwks_cache: dict = {}
_jwks_cache_time: float = 0
JWKS_CACHE_TTL = 3600  # 1 hour


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


# =============================================================================
# Local Tokens
# =============================================================================

def create_access_token(username: str, role: str = "admin") -> tuple[str, datetime]:
    """
    Issue a signed admin token.

    Returns:
        Tuple of (token, expires_at)
    """
    issued_at = datetime.now(timezone.utc)
    expires_at = issued_at + timedelta(hours=settings.JWT_EXPIRE_HOURS)
    claims = {
        "sub": username,
        "username": username,
        "role": role,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    token = jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    return token, expires_at


def _decode_local(token: str) -> dict[str, Any]:
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])


# =============================================================================
# Supabase Tokens
# =============================================================================

def _get_jwks_url() -> str:
    """Get the JWKS URL from Supabase URL."""
    supabase_url = settings.SUPABASE_URL.rstrip('/')
    return f"{supabase_url}/auth/v1/.well-known/jwks.json"


def _fetch_jwks() -> dict:
    """Fetch JWKS from Supabase with caching."""
    global _jwks_cache, _jwks_cache_time

    current_time = time.time()

    # Return cached if valid
    if _jwks_cache and (current_time - _jwks_cache_time) < JWKS_CACHE_TTL:
        return _jwks_cache

    try:
        jwks_url = _get_jwks_url()
        response = httpx.get(jwks_url, timeout=10)
        response.raise_for_status()
        _jwks_cache = response.json()
        _jwks_cache_time = current_time
        logger.debug(f"Fetched JWKS from {jwks_url}")
        return _jwks_cache
    except Exception as e:
        logger.warning(f"Failed to fetch JWKS: {e}")
        # Serve a stale cache rather than nothing
        if _jwks_cache:
            return _jwks_cache
        return {"keys": []}


def _get_signing_key(token: str) -> tuple[Any, str]:
    """
    Get the appropriate signing key for a Supabase token.

    Returns:
        Tuple of (key, algorithm) to use for verification
    """
    try:
        unverified_header = jwt.get_unverified_header(token)
    except JWTError:
        return settings.SUPABASE_JWT_SECRET, "HS256"

    alg = unverified_header.get("alg", "HS256")
    kid = unverified_header.get("kid")

    if alg == "HS256":
        return settings.SUPABASE_JWT_SECRET, "HS256"

    if kid:
        for key in _fetch_jwks().get("keys", []):
            if key.get("kid") == kid:
                return key, alg

    logger.warning(f"Could not find key for alg={alg}, kid={kid}, falling back to HS256")
    return settings.SUPABASE_JWT_SECRET, "HS256"


def _decode_supabase(token: str) -> dict[str, Any]:
    signing_key, algorithm = _get_signing_key(token)
    if not signing_key:
        raise JWTError("No verification key configured")
    return jwt.decode(
        token,
        signing_key,
        algorithms=[algorithm],
        audience="authenticated",
    )


# =============================================================================
# Dependencies
# =============================================================================

def decode_admin_token(token: str) -> AdminUser:
    """
    Verify a token and build the admin identity from its claims.

    Raises:
        HTTPException: 401 if the token is invalid or expired,
            403 if a Supabase user is not in ADMIN_EMAILS
    """
    try:
        if settings.AUTH_MODE == "supabase":
            payload = _decode_supabase(token)
        else:
            payload = _decode_local(token)

    except ExpiredSignatureError:
        logger.warning("Admin token has expired")
        raise _unauthorized("Token has expired")

    except JWTError as e:
        logger.warning(f"Admin token validation failed: {e}")
        raise _unauthorized("Invalid token")

    exp = payload.get("exp")
    expires_at = datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None

    if settings.AUTH_MODE == "supabase":
        email = (payload.get("email") or "").lower()
        allowed = settings.admin_emails_list
        if allowed and email not in allowed:
            logger.warning(f"Rejected non-admin Supabase user: {email or payload.get('sub')}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Admin access required",
            )
        return AdminUser(
            username=email or payload.get("sub", ""),
            role="admin",
            email=email or None,
            expires_at=expires_at,
        )

    username = payload.get("username") or payload.get("sub")
    if not username:
        raise _unauthorized("Invalid token")
    return AdminUser(
        username=username,
        role=payload.get("role", "admin"),
        expires_at=expires_at,
    )


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> AdminUser:
    """
    Require a valid admin Bearer token.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        AdminUser: The authenticated admin

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired;
            403 if the user is not an admin

    Usage:
        @router.get("/admin/thing")
        async def thing(admin: AdminUser = Depends(get_current_admin)):
            ...
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Access token required")

    admin = decode_admin_token(credentials.credentials)
    logger.debug(f"Authenticated admin: {admin.username}")
    return admin
