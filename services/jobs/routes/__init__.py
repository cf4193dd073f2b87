"""
Jobs Routes
===========

API route handlers for the Jobs Service.
"""

from services.jobs.routes import tasks


__all__ = ["tasks"]
