"""
Cache Routes
============

Tag invalidation for the framework query cache, called after screens that
change organization progress.

Version: 0.1.0
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from services.dashboard.services.queries import CACHE_TAGS
from shared.auth import User, require_admin
from shared.cache import invalidate_tags
from shared.logging import get_logger
from shared.models.common import BaseResponse


logger = get_logger(__name__)

router = APIRouter()


class InvalidateRequest(BaseModel):
    """Tags to invalidate; defaults to every framework cache tag."""

    tags: list[str] = Field(default_factory=lambda: list(CACHE_TAGS), min_length=1)


@router.post("/invalidate", response_model=BaseResponse[dict[str, int]])
async def invalidate_cache(
    request: InvalidateRequest,
    user: User = Depends(require_admin),
) -> BaseResponse[dict[str, int]]:
    """Drop cached entries registered under the given tags."""
    deleted = await invalidate_tags(request.tags)

    logger.info("cache_invalidated", user_id=user.id, tags=request.tags)
    return BaseResponse(data=deleted)
