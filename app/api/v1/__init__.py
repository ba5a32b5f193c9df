"""
API v1 Router

Aggregates all v1 API routes. Everything under /admin requires an admin token.
"""
from fastapi import APIRouter, Depends
from app.api.v1 import auth, bookings, dashboard, images, public, vehicles
from app.core.dependencies import get_current_admin

# Create main v1 router
api_router = APIRouter()

# Include sub-routers
api_router.include_router(
    public.router,
    prefix="/public",
    tags=["Public - Landing Page"]
)

api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Auth - Admin Sign-in"]
)

admin_only = [Depends(get_current_admin)]

api_router.include_router(
    vehicles.router,
    prefix="/admin/vehicles",
    tags=["Admin - Fleet"],
    dependencies=admin_only
)

api_router.include_router(
    images.router,
    prefix="/admin/images",
    tags=["Admin - Images"],
    dependencies=admin_only
)

api_router.include_router(
    bookings.admin_router,
    prefix="/admin/bookings",
    tags=["Admin - Bookings"],
    dependencies=admin_only
)

api_router.include_router(
    dashboard.router,
    prefix="/admin/dashboard",
    tags=["Admin - Dashboard"],
    dependencies=admin_only
)
