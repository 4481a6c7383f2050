from fastapi import APIRouter
from app.api.v1 import health, auth, users, skills, search, swap_requests
from app.core.config import settings


def build_api_router() -> APIRouter:
    api_router = APIRouter(prefix=settings.API_V1_PREFIX)
    api_router.include_router(health.router, tags=['health'])
    api_router.include_router(auth.router)
    api_router.include_router(users.router)
    api_router.include_router(skills.router)
    api_router.include_router(search.router)
    api_router.include_router(swap_requests.router)
    return api_router
