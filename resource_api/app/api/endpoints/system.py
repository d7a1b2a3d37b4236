"""
Service-level endpoints: health check and root metadata.

These routes live outside the ``/api`` prefix and never touch the
store.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """Report that the process is up and serving requests."""
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return {
        "status": "OK",
        "message": "Server is running",
        "timestamp": timestamp.replace("+00:00", "Z"),
    }


@router.get("/")
async def root(request: Request) -> Dict[str, Any]:
    settings = request.app.state.settings
    return {
        "message": "Welcome to CRUD API",
        "version": settings.api_version,
        "endpoints": {
            "health": "/health",
            "resources": "/api/resources",
        },
    }
