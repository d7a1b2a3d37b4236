"""
Application package initializer.

The service is split into ``core`` (configuration, logging, store
handle, error envelopes), ``schemas`` (request and response models),
``services`` (data access) and ``api`` (routers and handlers).
"""

from .main import app  # noqa: F401
