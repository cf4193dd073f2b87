"""
Dashboard Routes
================

API route handlers for the Dashboard Service.
"""

from services.dashboard.routes import cache, frameworks


__all__ = ["cache", "frameworks"]
