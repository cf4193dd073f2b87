"""
Authentication Module
=====================

Session token handling and route protection for Bubba services.

Usage:
    from shared.auth import get_session_user, require_admin, User

    @router.get("/frameworks/{framework_id}")
    async def page(user: User | None = Depends(get_session_user)):
        if user is None or user.organization_id is None:
            return RedirectResponse("/login")
"""

from shared.auth.dependencies import (
    User,
    get_current_user,
    get_session_user,
    oauth2_scheme,
    require_admin,
    require_roles,
)
from shared.auth.jwt import TokenData, create_access_token, decode_token


__all__ = [
    # JWT
    "create_access_token",
    "decode_token",
    "TokenData",
    # Dependencies
    "User",
    "get_session_user",
    "get_current_user",
    "require_roles",
    "require_admin",
    "oauth2_scheme",
]
