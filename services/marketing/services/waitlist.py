"""
Waitlist Service
================

Registers a marketing-site signup with the waitlist audience and fans out
the follow-ups: the introduction email task, a Discord notification and an
analytics event.

The audience is the single source of truth for duplicates. The membership
check and the insert are separate calls, so two concurrent signups of the
same address can both pass the check.

Version: 0.1.0
"""

from collections.abc import AsyncGenerator

from services.jobs.tasks.introduction import INTRODUCTION_EMAIL_TASK_ID, IntroductionEmailPayload
from shared.config import Settings, settings
from shared.integrations import (
    AnalyticsClient,
    ConfigurationError,
    DiscordWebhook,
    ExternalServiceError,
    ResendClient,
    TriggerClient,
)
from shared.logging import get_logger


logger = get_logger(__name__)

SIGNUP_EVENT = "waitlist_signup"
SIGNUP_CHANNEL = "web"


class AlreadyRegisteredError(Exception):
    """The email address is already in the waitlist audience."""

    def __init__(self, email: str) -> None:
        super().__init__("Email already in audience")
        self.email = email


def display_name_from_email(email: str) -> str:
    """
    Derive a first name from an email address.

    The first character is upper-cased and the rest of the local part is
    kept as is: "alice@example.com" -> "Alice".
    """
    local_part = email.split("@")[0]
    return email[:1].upper() + local_part[1:]


class WaitlistService:
    """
    Waitlist intake.

    Example:
        service = build_waitlist_service()
        try:
            await service.join("alice@example.com")
        finally:
            await service.close()
    """

    def __init__(
        self,
        audience: ResendClient,
        jobs: TriggerClient,
        analytics: AnalyticsClient,
        audience_id: str,
        webhook: DiscordWebhook | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            audience: Contact list provider
            jobs: Task queue client
            analytics: Event tracker
            audience_id: Waitlist audience in the contact provider
            webhook: Signup notification webhook, if configured

        Raises:
            ConfigurationError: If no audience ID is configured
        """
        if not audience_id:
            raise ConfigurationError("Resend audience ID not configured")

        self._audience = audience
        self._jobs = jobs
        self._analytics = analytics
        self._audience_id = audience_id
        self._webhook = webhook

    async def join(self, email: str) -> None:
        """
        Add an email address to the waitlist.

        Args:
            email: Validated email address

        Raises:
            AlreadyRegisteredError: If the address is already in the audience
            ExternalServiceError: If the audience, task queue or analytics call fails
        """
        contacts = await self._audience.list_contacts(self._audience_id)
        if any(contact.email == email for contact in contacts):
            logger.info("waitlist_already_registered", email=email)
            raise AlreadyRegisteredError(email)

        await self._audience.create_contact(
            self._audience_id,
            email=email,
            first_name=display_name_from_email(email),
        )

        await self._jobs.trigger(
            INTRODUCTION_EMAIL_TASK_ID,
            IntroductionEmailPayload(email=email),
        )

        if self._webhook is not None:
            await self._notify(email)

        await self._analytics.track(
            email,
            SIGNUP_EVENT,
            {"channel": SIGNUP_CHANNEL, "email": email},
        )

        logger.info("waitlist_signup_completed", email=email)

    async def _notify(self, email: str) -> None:
        """Post the signup to the webhook; failures are logged, not raised."""
        try:
            await self._webhook.notify(f"New waitlist signup: {email}")  # type: ignore[union-attr]
        except ExternalServiceError as e:
            logger.warning("waitlist_webhook_failed", email=email, error=str(e))

    async def close(self) -> None:
        """Release the HTTP clients."""
        await self._audience.close()
        await self._jobs.close()
        await self._analytics.close()
        if self._webhook is not None:
            await self._webhook.close()


def build_waitlist_service(config: Settings | None = None) -> WaitlistService:
    """
    Build a WaitlistService from settings.

    Raises:
        ConfigurationError: If Resend or Trigger credentials are missing
    """
    config = config or settings
    webhook_url = config.discord.webhook_url

    return WaitlistService(
        audience=ResendClient(
            api_key=config.resend.api_key.get_secret_value(),
            api_url=config.resend.api_url,
        ),
        jobs=TriggerClient(
            secret_key=config.trigger.secret_key.get_secret_value(),
            api_url=config.trigger.api_url,
        ),
        analytics=AnalyticsClient(
            client_id=config.analytics.client_id,
            client_secret=config.analytics.client_secret.get_secret_value(),
            api_url=config.analytics.api_url,
        ),
        audience_id=config.resend.audience_id,
        webhook=DiscordWebhook(webhook_url) if webhook_url else None,
    )


async def get_waitlist_service() -> AsyncGenerator[WaitlistService, None]:
    """Dependency that yields a WaitlistService for one request."""
    service = build_waitlist_service()
    try:
        yield service
    finally:
        await service.close()
