"""
FastAPI Authentication Dependencies
===================================

Dependency injection for route protection.

Dashboard pages redirect instead of failing, so they use the optional
`get_session_user`; API endpoints use `get_current_user` / `require_roles`,
which raise 401/403.

Version: 0.1.0
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel, Field

from shared.auth.jwt import decode_token
from shared.logging import get_logger


logger = get_logger(__name__)

# Bearer token extraction from the Authorization header
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/auth/token",
    auto_error=False,
)


class User(BaseModel):
    """Authenticated user model for dependency injection."""

    id: str = Field(..., description="User ID")
    email: str | None = Field(default=None, description="User email")
    roles: list[str] = Field(default_factory=list, description="User roles")
    organization_id: str | None = Field(default=None, description="Active organization ID")


async def get_session_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> User | None:
    """
    Resolve the session user, or None when there is no valid session.

    Args:
        token: JWT token from Authorization header
    """
    if token is None:
        return None

    token_data = decode_token(token)
    if token_data is None:
        return None

    logger.debug("user_authenticated", user_id=token_data.sub)

    return User(
        id=token_data.sub,
        email=token_data.email,
        roles=token_data.roles,
        organization_id=token_data.organization_id,
    )


async def get_current_user(
    user: Annotated[User | None, Depends(get_session_user)],
) -> User:
    """
    Require an authenticated user.

    Raises:
        HTTPException: 401 if token is missing or invalid
    """
    if user is None:
        logger.warning("auth_token_missing_or_invalid")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def require_roles(
    required_roles: list[str],
    require_all: bool = False,
) -> Callable[[User], Awaitable[User]]:
    """
    Create a dependency that requires specific roles.

    Args:
        required_roles: List of role names required
        require_all: If True, user must have ALL roles. If False, ANY role suffices.

    Usage:
        @app.post("/admin")
        async def admin_only(user: User = Depends(require_roles(["admin"]))):
            ...
    """

    async def role_checker(
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> User:
        user_roles = set(current_user.roles)
        required = set(required_roles)

        if require_all:
            has_roles = required.issubset(user_roles)
        else:
            has_roles = bool(required.intersection(user_roles))

        if not has_roles:
            logger.warning(
                "insufficient_roles",
                user_id=current_user.id,
                user_roles=sorted(user_roles),
                required_roles=required_roles,
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )

        return current_user

    return role_checker


require_admin = require_roles(["admin", "owner"])
