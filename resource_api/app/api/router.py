"""
Top-level router for the ``/api`` prefix.

Domain routers are included here; the application mounts this router
under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import resources

router = APIRouter()

router.include_router(resources.router, prefix="/resources", tags=["resources"])
