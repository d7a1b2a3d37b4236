"""
Top-level package for the Resource API.

All functionality lives in submodules under ``app``; the package
itself exports nothing.
"""

__all__ = []
