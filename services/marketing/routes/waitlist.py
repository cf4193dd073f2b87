"""
Waitlist Routes
===============

Signup form submission for the marketing site.

Version: 0.1.0
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from services.marketing.services.waitlist import WaitlistService, get_waitlist_service
from shared.logging import get_logger
from shared.models.common import EmailAddress


logger = get_logger(__name__)

router = APIRouter()


class WaitlistRequest(BaseModel):
    """Waitlist form body."""

    email: EmailAddress


class WaitlistResponse(BaseModel):
    """Waitlist form result."""

    success: bool = True


@router.post("", response_model=WaitlistResponse)
async def join_waitlist(
    request: WaitlistRequest,
    service: WaitlistService = Depends(get_waitlist_service),
) -> WaitlistResponse:
    """
    Join the waitlist.

    Returns 409 if the address is already registered and 502 if a provider
    call fails.
    """
    await service.join(request.email)
    return WaitlistResponse(success=True)
