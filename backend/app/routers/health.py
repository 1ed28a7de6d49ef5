"""Health check endpoint for load balancers and monitoring."""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Lightweight health check. Returns 200 OK if the service is running."""
    return {
        "status": "ok",
        "service": "Apiary Scheduler",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
    }
