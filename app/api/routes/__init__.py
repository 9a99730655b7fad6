"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from app.api.routes.health_routes import router as health_router
from app.api.routes.profile_routes import router as profile_router
from app.api.routes.student_profile_routes import router as student_profile_router
from app.api.routes.company_routes import router as company_router
from app.api.routes.job_routes import router as job_router
from app.api.routes.resume_routes import router as resume_router
from app.api.routes.application_routes import router as application_router
from app.api.routes.interview_routes import router as interview_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health_router)
api_router.include_router(profile_router)
api_router.include_router(student_profile_router)
api_router.include_router(company_router)
api_router.include_router(job_router)
api_router.include_router(resume_router)
api_router.include_router(application_router)
api_router.include_router(interview_router)
