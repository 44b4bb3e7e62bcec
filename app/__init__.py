# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware, rate limiting, error handlers
# - config.py: Environment variable loading and settings
# - exceptions.py: Error hierarchy and database error mapping
# - auth/: Admin login and the Bearer token guard
# - routers/: Public, admin, upload and health endpoints
#
# Routes validate input and hand off to core/services; they never build
# database queries themselves.
# =============================================================================
