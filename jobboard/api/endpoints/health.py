"""
Health check endpoints.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict
from fastapi import APIRouter, Depends, status
from sqlalchemy import text
from sqlalchemy.orm import Session

from jobboard.core.config import settings
from jobboard.core.database import get_db

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


@router.get("/")
async def root() -> Dict[str, str]:
    """Root endpoint - API health check"""
    return {
        "message": "Job Board API is running",
        "version": settings.VERSION,
        "status": "healthy"
    }


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Health check with database connectivity.

    Returns "degraded" instead of failing when the database is unreachable.
    """
    database = "healthy"
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        database = "unhealthy"

    return {
        "status": "healthy" if database == "healthy" else "degraded",
        "database": database,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
