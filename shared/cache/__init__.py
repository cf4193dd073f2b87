"""
Cache Module
============

Redis-backed memoization for async query functions with tag-based
invalidation.

Usage:
    from shared.cache import cached, invalidate_tag

    @cached(tags=["framework-cache"])
    async def get_framework(framework_id: str) -> FrameworkView | None:
        ...

    await invalidate_tag("framework-cache")
"""

from shared.cache.decorator import cached
from shared.cache.invalidation import invalidate_tag, invalidate_tags
from shared.cache.keys import build_cache_key, tag_key


__all__ = [
    "cached",
    "invalidate_tag",
    "invalidate_tags",
    "build_cache_key",
    "tag_key",
]
