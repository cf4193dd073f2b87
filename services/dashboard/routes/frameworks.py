"""
Framework Routes
================

Framework overview page for the session user's organization.

Version: 0.1.0
"""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from services.dashboard.services.framework_page import load_framework_page
from shared.auth import User, get_session_user
from shared.logging import bind_context, get_logger
from shared.models.framework import FrameworkPage


logger = get_logger(__name__)

router = APIRouter()

LOGIN_PATH = "/login"
HOME_PATH = "/"


@router.get(
    "/{framework_id}",
    response_model=FrameworkPage,
    responses={307: {"description": "Redirect to login or home"}},
)
async def framework_page(
    framework_id: str,
    user: User | None = Depends(get_session_user),
) -> Any:
    """
    Framework overview and control list.

    Redirects to the login page without a session or organization, and to
    the home page when the framework does not exist or has not been adopted
    by the organization.
    """
    if user is None or not user.organization_id:
        return RedirectResponse(LOGIN_PATH)

    bind_context(organization_id=user.organization_id)

    page = await load_framework_page(framework_id, user.organization_id)
    if page is None:
        return RedirectResponse(HOME_PATH)

    logger.debug(
        "framework_page_rendered",
        framework_id=framework_id,
        categories=len(page.categories),
    )
    return page
