from fastapi import APIRouter

from app.config import settings
from app.models.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    return {
        "status": "healthy",
        "environment": settings.environment,
        "default_rule_set": settings.default_rule_set,
    }
