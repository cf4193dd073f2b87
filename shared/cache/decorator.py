"""
Cache Decorator
===============

Compute-or-return-cached wrapper for async functions.

Values are stored as JSON produced by a pydantic TypeAdapter built from the
function's return annotation, so hits come back as the same model types a
miss would return. If Redis is unreachable the wrapped function runs
uncached and a warning is logged.

Version: 0.1.0
"""

import functools
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar, get_type_hints

from pydantic import TypeAdapter, ValidationError
from redis.exceptions import RedisError

from shared.cache.keys import build_cache_key, tag_key
from shared.config import settings
from shared.database.redis import RedisClient
from shared.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T")


def cached(
    tags: Sequence[str],
    ttl_seconds: int | None = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Memoize an async function in Redis.

    Args:
        tags: Tags the entries are registered under for invalidation
        ttl_seconds: Entry lifetime (default from settings.cache)

    Usage:
        @cached(tags=["framework-cache"])
        async def get_framework(framework_id: str) -> FrameworkView | None:
            ...
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.cache
        def adapter() -> TypeAdapter[Any]:
            return TypeAdapter(get_type_hints(func).get("return", Any))

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            if not settings.cache.enabled:
                return await func(*args, **kwargs)

            key = build_cache_key(func, args, kwargs)
            client = RedisClient.get_client()

            try:
                raw = await client.get(key)
            except RedisError as e:
                logger.warning("cache_get_failed", key=key, error=str(e))
                return await func(*args, **kwargs)

            if raw is not None:
                try:
                    value = adapter().validate_json(raw)
                except ValidationError as e:
                    logger.warning("cache_decode_failed", key=key, errors=e.error_count())
                else:
                    logger.debug("cache_hit", key=key)
                    return value

            logger.debug("cache_miss", key=key)
            result = await func(*args, **kwargs)

            ttl = ttl_seconds or settings.cache.ttl_seconds
            try:
                await client.set(key, adapter().dump_json(result).decode(), ex=ttl)
                for tag in tags:
                    await client.sadd(tag_key(tag), key)
                    await client.expire(tag_key(tag), ttl)
            except RedisError as e:
                logger.warning("cache_set_failed", key=key, error=str(e))

            return result

        wrapper.cache_tags = tuple(tags)  # type: ignore[attr-defined]
        return wrapper

    return decorator
