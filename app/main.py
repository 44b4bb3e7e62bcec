# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Portfolio API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.config import settings
from app.exceptions import (
    PortfolioException,
    portfolio_exception_handler,
    supabase_exception_handler,
    validation_exception_handler,
)
from app.routers import (
    admin,
    analytics,
    contact,
    diagnostics,
    health,
    projects,
    public,
    uploads,
)
from app.auth import routes as auth_routes
from app.dependencies import require_admin
from lib.supabase_client import SupabaseClientError
from lib.utils import rate_limit_key

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs the effective configuration on startup; nothing needs cleanup on
    shutdown.
    """
    logger.info(f"Starting Portfolio API in {settings.ENVIRONMENT} mode")
    logger.info(f"Auth mode: {settings.AUTH_MODE}")
    if settings.is_production:
        logger.info(f"CORS origins: {settings.cors_origins_list} regex={settings.cors_origin_regex}")
    else:
        logger.info("CORS: all origins allowed outside production")
    if not settings.email_enabled:
        logger.warning("SMTP not configured: contact notifications are disabled")
    if settings.AUTH_MODE == "local" and not (settings.ADMIN_USERNAME and settings.ADMIN_PASSWORD):
        if settings.is_production:
            logger.error("ADMIN_USERNAME/ADMIN_PASSWORD not set: admin login is disabled")
        else:
            logger.warning("Using development admin credentials")

    yield

    logger.info("Shutting down Portfolio API")


# Create FastAPI application
app = FastAPI(
    title="Portfolio API",
    description="""
## Portfolio Backend

Content API for a personal portfolio site plus the admin panel behind it.

### Public

- Portfolio content: personal info, projects, skills, experiences, hero, settings
- Contact form (stored, then emailed to the owner)
- Analytics capture (page views and custom events)

### Admin

Log in with `POST /api/admin/login`, then send `Authorization: Bearer <token>`
to manage content, read messages, view analytics and upload files.
""",
    version=API_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Public",
            "description": "Portfolio content for the public site",
        },
        {
            "name": "Projects",
            "description": "Public project listing",
        },
        {
            "name": "Contact",
            "description": "Contact form submission",
        },
        {
            "name": "Analytics",
            "description": "Event capture (public) and reporting (admin)",
        },
        {
            "name": "Auth",
            "description": "Admin login and token verification",
        },
        {
            "name": "Admin",
            "description": "Content management (token required)",
        },
        {
            "name": "Uploads",
            "description": "Image and resume uploads (token required)",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
        {
            "name": "Diagnostics",
            "description": "Route inventory and CORS configuration",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

def create_limiter(limit: str, enabled: bool = True) -> Limiter:
    """Per-IP limiter applying `limit` to every route."""
    return Limiter(key_func=rate_limit_key, default_limits=[limit], enabled=enabled)


limiter = create_limiter(settings.RATE_LIMIT, settings.RATE_LIMIT_ENABLED)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_origin_regex=settings.cors_origin_regex if settings.is_production else None,
    allow_credentials=settings.is_production,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(PortfolioException, portfolio_exception_handler)
app.add_exception_handler(SupabaseClientError, supabase_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints (/health and /api/health/*)
app.include_router(
    health.router,
    tags=["Health"]
)

# Route inventory / CORS diagnostics
app.include_router(
    diagnostics.router,
    prefix="/api",
    tags=["Diagnostics"]
)

# Public projects
app.include_router(
    projects.router,
    prefix="/api/projects",
    tags=["Projects"]
)

# Contact form
app.include_router(
    contact.router,
    prefix="/api/contact",
    tags=["Contact"]
)

# Analytics capture and reporting
app.include_router(
    analytics.router,
    prefix="/api/analytics",
    tags=["Analytics"]
)

# Admin login / verify (no token needed for login)
app.include_router(
    auth_routes.router,
    prefix="/api",
)

# Admin panel
app.include_router(
    admin.router,
    prefix="/api/admin",
    tags=["Admin"]
)

# File uploads
app.include_router(
    uploads.router,
    prefix="/api/uploads",
    tags=["Uploads"],
    dependencies=require_admin,
)

# Public content (mounted last: its paths sit directly under /api)
app.include_router(
    public.router,
    prefix="/api",
    tags=["Public"]
)

# Locally stored uploads, when the deployment has any
if os.path.isdir(settings.STATIC_UPLOADS_DIR):
    app.mount("/uploads", StaticFiles(directory=settings.STATIC_UPLOADS_DIR), name="uploads")


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Portfolio API",
        "version": API_VERSION,
        "docs": "/api/docs",
        "health": "/api/health",
    }
