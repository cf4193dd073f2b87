"""
Framework Page Aggregation
==========================

Loads the three framework reads concurrently and assembles the overview
page. A missing framework or a framework the organization has not adopted
yields None so the route can redirect.

Version: 0.1.0
"""

import asyncio

from services.dashboard.services import queries
from services.dashboard.services.progress import summarize_progress
from shared.logging import get_logger
from shared.models.framework import FrameworkPage


logger = get_logger(__name__)


async def load_framework_page(framework_id: str, organization_id: str) -> FrameworkPage | None:
    """
    Build the framework overview for an organization.

    Args:
        framework_id: Framework to show
        organization_id: Organization of the session user

    Returns:
        FrameworkPage, or None if the framework or the organization's
        adoption of it does not exist
    """
    framework, organization_framework, categories = await asyncio.gather(
        queries.get_framework(framework_id),
        queries.get_organization_framework(framework_id, organization_id),
        queries.get_framework_categories(framework_id, organization_id),
    )

    if framework is None or organization_framework is None:
        logger.info(
            "framework_page_not_found",
            framework_id=framework_id,
            organization_id=organization_id,
            framework_found=framework is not None,
        )
        return None

    return FrameworkPage(
        framework=framework,
        organization_framework=organization_framework,
        categories=categories,
        progress=summarize_progress(categories),
    )
