"""
API Routes - Combines the resource route modules into single router.

The /auth group is exported separately because it is mounted at the root,
not under /api.
"""

from fastapi import APIRouter

from cohort_api.api.routes.cohort_routes import router as cohort_router
from cohort_api.api.routes.student_routes import router as student_router
from cohort_api.api.routes.auth_routes import router as auth_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(cohort_router)
api_router.include_router(student_router)

__all__ = ["api_router", "auth_router"]
