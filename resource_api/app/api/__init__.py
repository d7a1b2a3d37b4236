"""
API package.

``router`` aggregates the domain routers mounted under ``/api``;
``endpoints`` holds one module per domain plus the service-level
routes.
"""
