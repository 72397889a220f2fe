from fastapi import APIRouter

from .assessment import assessment_router
from .health import health_check

v1_router = APIRouter(prefix="/api/v1", tags=["v1"])
v1_router.include_router(assessment_router, prefix="/assessments")
v1_router.include_router(health_check, prefix="/health")

__all__ = ["v1_router"]
