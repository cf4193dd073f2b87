"""
Marketing Routes
================

API route handlers for the Marketing Service.
"""

from services.marketing.routes import waitlist


__all__ = ["waitlist"]
