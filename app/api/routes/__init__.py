"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from app.api.routes.auth_routes import router as auth_router
from app.api.routes.cv_routes import router as cv_router
from app.api.routes.post_routes import router as post_router
from app.api.routes.placeholder_routes import router as placeholder_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(cv_router)
api_router.include_router(post_router)
api_router.include_router(placeholder_router)
