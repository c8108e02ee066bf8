"""API v1 router aggregation."""

from fastapi import APIRouter

from dailyarc.api.v1.endpoints import health, nutrition, readiness, skills, tools

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(skills.router, prefix="/skills", tags=["skills"])
api_router.include_router(readiness.router, prefix="/readiness", tags=["readiness"])
api_router.include_router(nutrition.router, prefix="/nutrition", tags=["nutrition"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
