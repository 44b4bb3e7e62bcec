# =============================================================================
# app/routers/admin/ - Admin API
# =============================================================================
# Everything under /api/admin except login/verify (app/auth/routes.py).
# Every route here requires a valid admin Bearer token: the guard is set
# once on the aggregate router.
#
# - dashboard.py: counts, stats, activity feed
# - projects.py / skills.py / experiences.py: content CRUD
# - messages.py: contact message triage
# - personal.py / hero.py / settings.py: singleton rows
# - resume.py: resume upload
# =============================================================================

from fastapi import APIRouter

from app.dependencies import require_admin

from . import dashboard, experiences, hero, messages, personal, projects, resume, settings, skills

router = APIRouter(dependencies=require_admin)

router.include_router(dashboard.router, prefix="/dashboard")
router.include_router(projects.router, prefix="/projects")
router.include_router(skills.router, prefix="/skills")
router.include_router(experiences.router, prefix="/experiences")
router.include_router(messages.router, prefix="/messages")
router.include_router(personal.router, prefix="/personal-info")
router.include_router(hero.router, prefix="/hero")
router.include_router(settings.router, prefix="/settings")
router.include_router(resume.router, prefix="/upload")

__all__ = ["router"]
