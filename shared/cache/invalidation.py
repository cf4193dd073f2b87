"""
Cache Invalidation
==================

Tag-scoped invalidation: every cached entry is indexed in a Redis set per
tag, so dropping a tag deletes exactly the entries registered under it.

Version: 0.1.0
"""

from collections.abc import Iterable

from shared.cache.keys import tag_key
from shared.database.redis import RedisClient
from shared.logging import get_logger


logger = get_logger(__name__)


async def invalidate_tag(tag: str) -> int:
    """
    Delete all cache entries registered under a tag.

    Args:
        tag: Cache tag (e.g., "framework-cache")

    Returns:
        Number of entries deleted.
    """
    client = RedisClient.get_client()
    index_key = tag_key(tag)

    keys = await client.smembers(index_key)
    deleted = 0
    if keys:
        deleted = await client.delete(*keys)
    await client.delete(index_key)

    logger.info("cache_tag_invalidated", tag=tag, deleted=deleted)
    return deleted


async def invalidate_tags(tags: Iterable[str]) -> dict[str, int]:
    """Invalidate several tags, returning the deleted count per tag."""
    return {tag: await invalidate_tag(tag) for tag in tags}
