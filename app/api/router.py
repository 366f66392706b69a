from fastapi import APIRouter
from app.api.v1.auth import router as auth_router
from app.api.v1.providers import router as providers_router
from app.api.v1.quotes import router as quotes_router
from app.api.v1.projects import router as projects_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(providers_router, prefix="/providers", tags=["providers"])
api_router.include_router(quotes_router, tags=["quotes"])
api_router.include_router(projects_router, tags=["projects"])
