"""
Database Module
===============

Async clients for the Bubba data stores.

Clients:
- PostgreSQL (asyncpg + SQLAlchemy)
- Redis (redis.asyncio)

Usage:
    from shared.database import postgres_session

    async with postgres_session() as session:
        result = await session.execute(select(Framework))
        ...
"""

from shared.database.postgres import (
    Base,
    PostgresClient,
    postgres_session,
)
from shared.database.redis import RedisClient


__all__ = [
    # PostgreSQL
    "postgres_session",
    "PostgresClient",
    "Base",
    # Redis
    "RedisClient",
]
