"""
Background Tasks
================

Importing this package registers every task.
"""

from services.jobs.tasks.introduction import (
    INTRODUCTION_EMAIL_TASK_ID,
    IntroductionEmailPayload,
    introduction_email,
)
from services.jobs.tasks.organization import (
    NEW_ORGANIZATION_TASK_ID,
    NewOrganizationPayload,
    new_organization,
)

__all__ = [
    "INTRODUCTION_EMAIL_TASK_ID",
    "IntroductionEmailPayload",
    "introduction_email",
    "NEW_ORGANIZATION_TASK_ID",
    "NewOrganizationPayload",
    "new_organization",
]
