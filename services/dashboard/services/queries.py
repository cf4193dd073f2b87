"""
Framework Queries
=================

Cached reads behind the framework overview page. Each query opens its own
session so the three can run concurrently, and returns pydantic read models
so results can be stored in the query cache.

Version: 0.1.0
"""

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from services.dashboard.models import (
    ControlModel,
    FrameworkCategoryModel,
    FrameworkModel,
    OrganizationControlModel,
    OrganizationFrameworkModel,
)
from services.dashboard.services.progress import project_categories
from shared.cache import cached
from shared.database.postgres import postgres_session
from shared.logging import get_logger
from shared.models.framework import CategoryProgress, FrameworkView, OrganizationFrameworkView


logger = get_logger(__name__)

FRAMEWORK_CACHE_TAG = "framework-cache"
ORGANIZATION_FRAMEWORK_CACHE_TAG = "org-framework-cache"
FRAMEWORK_CATEGORIES_CACHE_TAG = "framework-categories-cache"

CACHE_TAGS = (
    FRAMEWORK_CACHE_TAG,
    ORGANIZATION_FRAMEWORK_CACHE_TAG,
    FRAMEWORK_CATEGORIES_CACHE_TAG,
)


@cached(tags=[FRAMEWORK_CACHE_TAG])
async def get_framework(framework_id: str) -> FrameworkView | None:
    """Framework with its categories and their controls."""
    query = (
        select(FrameworkModel)
        .where(FrameworkModel.id == framework_id)
        .options(
            selectinload(FrameworkModel.categories).selectinload(FrameworkCategoryModel.controls),
        )
    )

    async with postgres_session() as session:
        result = await session.execute(query)
        framework = result.scalar_one_or_none()
        if framework is None:
            return None
        return FrameworkView.model_validate(framework)


@cached(tags=[ORGANIZATION_FRAMEWORK_CACHE_TAG])
async def get_organization_framework(
    framework_id: str,
    organization_id: str,
) -> OrganizationFrameworkView | None:
    """The organization's adoption record with its controls and artifacts."""
    query = (
        select(OrganizationFrameworkModel)
        .where(
            OrganizationFrameworkModel.framework_id == framework_id,
            OrganizationFrameworkModel.organization_id == organization_id,
        )
        .options(
            selectinload(OrganizationFrameworkModel.organization_controls).options(
                selectinload(OrganizationControlModel.control),
                selectinload(OrganizationControlModel.artifacts),
            ),
        )
        .limit(1)
    )

    async with postgres_session() as session:
        result = await session.execute(query)
        organization_framework = result.scalars().first()
        if organization_framework is None:
            return None
        return OrganizationFrameworkView.model_validate(organization_framework)


@cached(tags=[FRAMEWORK_CATEGORIES_CACHE_TAG])
async def get_framework_categories(
    framework_id: str,
    organization_id: str,
) -> list[CategoryProgress]:
    """Categories of a framework with each control's status for the organization."""
    organization_controls = ControlModel.organization_controls.and_(
        OrganizationControlModel.organization_id == organization_id,
    )
    query = (
        select(FrameworkCategoryModel)
        .where(FrameworkCategoryModel.framework_id == framework_id)
        .order_by(FrameworkCategoryModel.code)
        .options(
            selectinload(FrameworkCategoryModel.controls)
            .selectinload(organization_controls)
            .selectinload(OrganizationControlModel.artifacts),
        )
    )

    async with postgres_session() as session:
        result = await session.execute(query)
        categories = result.scalars().all()
        projected = project_categories(categories, organization_id)

    logger.debug(
        "framework_categories_loaded",
        framework_id=framework_id,
        categories=len(projected),
    )
    return projected
