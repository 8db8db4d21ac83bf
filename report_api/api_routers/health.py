"""Health check and status endpoints.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

from datetime import datetime
from typing import Dict, Any
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from utils.config import config
from ..api_utils import get_reviewer, is_initialized

router = APIRouter(tags=["Health"])


def check_reviewer() -> Dict[str, Any]:
    """Check whether the report reviewer is ready."""
    if not is_initialized():
        return {"status": "error", "initialized": False}
    return {
        "status": "healthy",
        "initialized": True,
        "model": get_reviewer().client.model
    }


def check_uploads_directory() -> Dict[str, Any]:
    """Check that the uploads directory exists."""
    try:
        uploads_dir = config.get_uploads_dir()
        return {
            "status": "healthy" if uploads_dir.exists() else "warning",
            "uploads_dir_exists": uploads_dir.exists(),
            "uploads_dir_path": str(uploads_dir)
        }
    except Exception as e:
        return {"status": "error", "error": str(e)}


@router.get("/health", operation_id="health_check")
async def health_check():
    """Health check with reviewer and storage status.

    Returns 200 when the reviewer is ready, 503 otherwise.
    """
    checks = {
        "reviewer": check_reviewer(),
        "uploads": check_uploads_directory()
    }
    healthy = checks["reviewer"]["status"] == "healthy"

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "degraded",
            "timestamp": datetime.now().isoformat(),
            "checks": checks
        }
    )
