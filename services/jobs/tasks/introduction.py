"""
Introduction Email Task
=======================

Welcome email for new waitlist signups.

Version: 0.1.0
"""

from pydantic import BaseModel

from services.jobs.registry import task
from shared.integrations.resend import ResendClient
from shared.logging import get_logger
from shared.models.common import EmailAddress


logger = get_logger(__name__)

INTRODUCTION_EMAIL_TASK_ID = "introduction-email"

INTRODUCTION_SUBJECT = "Welcome to Bubba"

INTRODUCTION_TEXT = """Hi,

Thanks for joining the Bubba waitlist. We're building the easiest way to get
and stay compliant with frameworks like SOC 2 and ISO 27001, and we'll let
you know as soon as your spot opens up.

Reply to this email if there is anything you'd like us to know.

The Bubba team
"""


class IntroductionEmailPayload(BaseModel):
    """Payload of the introduction email task."""

    email: EmailAddress


@task(INTRODUCTION_EMAIL_TASK_ID, IntroductionEmailPayload)
async def introduction_email(payload: IntroductionEmailPayload) -> dict[str, str]:
    """Send the welcome email to a new signup."""
    logger.info("introduction_email_started", email=payload.email)

    async with ResendClient() as resend:
        email_id = await resend.send_email(
            to=[payload.email],
            subject=INTRODUCTION_SUBJECT,
            text=INTRODUCTION_TEXT,
        )

    logger.info("introduction_email_completed", email=payload.email, email_id=email_id)
    return {"email_id": email_id}
