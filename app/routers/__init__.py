# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - diagnostics.py: Route inventory and CORS diagnostics
# - public.py: Public portfolio content (personal info, skills, hero, ...)
# - projects.py: Public project listing and detail
# - contact.py: Contact form submission
# - analytics.py: Event capture and admin reporting
# - uploads.py: Image and resume uploads (admin)
# - admin/: Admin panel API (token required)
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import diagnostics
from . import public
from . import projects
from . import contact
from . import analytics
from . import uploads
from . import admin

__all__ = [
    "health",
    "diagnostics",
    "public",
    "projects",
    "contact",
    "analytics",
    "uploads",
    "admin",
]
