"""
Marketing Services
==================

Business logic for the marketing site.

Services:
- WaitlistService: waitlist signup intake
"""

from services.marketing.services.waitlist import (
    AlreadyRegisteredError,
    WaitlistService,
    build_waitlist_service,
    display_name_from_email,
    get_waitlist_service,
)

__all__ = [
    "AlreadyRegisteredError",
    "WaitlistService",
    "build_waitlist_service",
    "display_name_from_email",
    "get_waitlist_service",
]
