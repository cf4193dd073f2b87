"""
New Organization Task
=====================

Runs after an organization is created.

Version: 0.1.0
"""

from uuid import UUID

from pydantic import BaseModel

from services.jobs.registry import task
from shared.logging import get_logger


logger = get_logger(__name__)

NEW_ORGANIZATION_TASK_ID = "new-organization"


class NewOrganizationPayload(BaseModel):
    """Payload of the new organization task."""

    organization_id: UUID
    user_id: UUID


@task(NEW_ORGANIZATION_TASK_ID, NewOrganizationPayload)
async def new_organization(payload: NewOrganizationPayload) -> None:
    """Log the organization's creation."""
    logger.info(
        "new_organization_task_started",
        organization_id=str(payload.organization_id),
        user_id=str(payload.user_id),
    )

    logger.info(
        "new_organization_task_completed",
        organization_id=str(payload.organization_id),
        user_id=str(payload.user_id),
    )
