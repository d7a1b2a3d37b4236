"""
Endpoint modules.

Each module defines an ``APIRouter``.  Domain routers are aggregated
in ``api/router.py``; ``system`` is included by the application
directly.
"""
