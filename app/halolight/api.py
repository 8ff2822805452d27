from fastapi import APIRouter

from app.halolight.routers.health import router as health_router
from app.halolight.routers.navigation import router as navigation_router
from app.halolight.routers.permissions import router as permissions_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(navigation_router, prefix="/halolight/navigation", tags=["navigation"])
api_router.include_router(permissions_router, prefix="/halolight/permissions", tags=["permissions"])
