#!/usr/bin/env python3
"""
Database Initialization Script
==============================

Create the Bubba schema, verify Redis, and seed framework reference data.

Usage:
    python scripts/init_databases.py
    python scripts/init_databases.py --seed
    python scripts/init_databases.py --seed --demo-organization "Acme Inc"

Version: 0.1.0
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shared.logging import get_logger, setup_logging

setup_logging(log_level="INFO", json_logs=False, service_name="init-db")
logger = get_logger(__name__)


# Reference data: framework -> categories -> controls (code, name, domain)
SEED_FRAMEWORKS: dict[str, dict] = {
    "SOC 2": {
        "description": "AICPA Trust Services Criteria for security, availability and confidentiality.",
        "version": "2017",
        "categories": [
            {
                "code": "CC1",
                "name": "Control Environment",
                "controls": [
                    ("CC1.1", "Integrity and Ethical Values", "Governance"),
                    ("CC1.2", "Board Oversight", "Governance"),
                    ("CC1.3", "Organizational Structure", "Governance"),
                ],
            },
            {
                "code": "CC6",
                "name": "Logical and Physical Access Controls",
                "controls": [
                    ("CC6.1", "Logical Access Security", "Access Control"),
                    ("CC6.2", "User Registration and Authorization", "Access Control"),
                    ("CC6.3", "Access Removal", "Access Control"),
                ],
            },
            {
                "code": "CC7",
                "name": "System Operations",
                "controls": [
                    ("CC7.1", "Vulnerability Detection", "Operations"),
                    ("CC7.2", "Security Event Monitoring", "Operations"),
                ],
            },
        ],
    },
}


async def init_postgres() -> bool:
    """Create all tables."""
    import services.dashboard.models  # noqa: F401  registers tables
    from shared.database.postgres import Base, PostgresClient

    logger.info("postgres_init_started")

    try:
        engine = PostgresClient.get_engine()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("postgres_init_completed", tables=len(Base.metadata.tables))
        return True

    except Exception as e:
        logger.error("postgres_init_failed", error=str(e))
        return False


async def init_redis() -> bool:
    """Verify the Redis connection."""
    from shared.database.redis import RedisClient

    logger.info("redis_init_started")

    try:
        client = RedisClient.get_client()
        await client.ping()
        info = await client.info("server")

        logger.info("redis_init_completed", redis_version=info.get("redis_version"))
        return True

    except Exception as e:
        logger.error("redis_init_failed", error=str(e))
        return False


async def seed_data(demo_organization: str | None) -> bool:
    """Seed frameworks and, optionally, a demo organization adopting them."""
    from sqlalchemy import select

    from services.dashboard.models import (
        ControlModel,
        FrameworkCategoryModel,
        FrameworkModel,
        OrganizationControlModel,
        OrganizationFrameworkModel,
        OrganizationModel,
    )
    from services.dashboard.services.queries import CACHE_TAGS
    from shared.cache import invalidate_tags
    from shared.database.postgres import postgres_session

    logger.info("seed_started")

    try:
        async with postgres_session() as session:
            frameworks: list[FrameworkModel] = []

            for name, spec in SEED_FRAMEWORKS.items():
                existing = await session.execute(
                    select(FrameworkModel).where(FrameworkModel.name == name)
                )
                if existing.scalar_one_or_none() is not None:
                    logger.info("seed_framework_exists", framework=name)
                    continue

                framework = FrameworkModel(
                    name=name,
                    description=spec["description"],
                    version=spec["version"],
                    categories=[
                        FrameworkCategoryModel(
                            code=category["code"],
                            name=category["name"],
                            controls=[
                                ControlModel(code=code, name=control_name, domain=domain)
                                for code, control_name, domain in category["controls"]
                            ],
                        )
                        for category in spec["categories"]
                    ],
                )
                session.add(framework)
                frameworks.append(framework)
                logger.info("seed_framework_created", framework=name)

            if demo_organization and frameworks:
                await session.flush()
                organization = OrganizationModel(name=demo_organization)
                session.add(organization)
                await session.flush()

                for framework in frameworks:
                    adoption = OrganizationFrameworkModel(
                        organization_id=organization.id,
                        framework_id=framework.id,
                    )
                    session.add(adoption)
                    await session.flush()

                    # Only the first control of each category gets a record so
                    # the dashboard shows both stored and default statuses.
                    for category in framework.categories:
                        session.add(
                            OrganizationControlModel(
                                organization_id=organization.id,
                                organization_framework_id=adoption.id,
                                control_id=category.controls[0].id,
                            )
                        )

                logger.info("seed_organization_created", organization_id=organization.id)

        await invalidate_tags(CACHE_TAGS)
        logger.info("seed_completed")
        return True

    except Exception as e:
        logger.error("seed_failed", error=str(e))
        return False


async def main(args: argparse.Namespace) -> int:
    """Main initialization function."""
    results = {
        "postgres": await init_postgres(),
        "redis": await init_redis(),
    }

    if args.seed:
        results["seed"] = await seed_data(args.demo_organization)

    failed = [name for name, success in results.items() if not success]
    logger.info("init_summary", results=results)

    if failed:
        logger.error("init_failed", failed=failed)
        return 1

    return 0


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Initialize Bubba databases",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--seed",
        action="store_true",
        help="Seed framework reference data",
    )
    parser.add_argument(
        "--demo-organization",
        default=None,
        help="Also create an organization with this name adopting the seeded frameworks",
    )

    return parser.parse_args()


if __name__ == "__main__":
    sys.exit(asyncio.run(main(parse_args())))
