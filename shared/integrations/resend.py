"""
Resend Client
=============

Contacts (audience) and transactional email via the Resend REST API.

Version: 0.1.0
"""

from datetime import datetime
from typing import Any

import httpx
from pydantic import BaseModel

from shared.config import settings
from shared.integrations.base import ConfigurationError, IntegrationClient
from shared.logging import get_logger


logger = get_logger(__name__)


class Contact(BaseModel):
    """A contact in a Resend audience."""

    id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    unsubscribed: bool = False
    created_at: datetime | None = None


class ContactList(BaseModel):
    """Body of a contact listing."""

    data: list[Contact] | None = None


class CreatedObject(BaseModel):
    """Body returned when Resend creates a contact or an email."""

    id: str


class ResendClient(IntegrationClient):
    """
    Resend API client.

    Example:
        async with ResendClient() as resend:
            contacts = await resend.list_contacts(audience_id)
    """

    service_name = "resend"

    def __init__(
        self,
        api_key: str | None = None,
        api_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize Resend client.

        Args:
            api_key: Resend API key (default from settings)
            api_url: API base URL (default from settings)
            transport: Optional httpx transport

        Raises:
            ConfigurationError: If no API key is configured
        """
        key = api_key if api_key is not None else settings.resend.api_key.get_secret_value()
        if not key:
            raise ConfigurationError("Resend not initialized - missing API key")

        super().__init__(
            base_url=api_url or settings.resend.api_url,
            headers={"Authorization": f"Bearer {key}"},
            transport=transport,
            **kwargs,
        )

    async def list_contacts(self, audience_id: str) -> list[Contact]:
        """List every contact in an audience."""
        response = await self._request_idempotent("GET", f"/audiences/{audience_id}/contacts")
        contacts = self._parse(response, ContactList).data or []

        logger.debug("resend_contacts_listed", audience_id=audience_id, count=len(contacts))
        return contacts

    async def create_contact(
        self,
        audience_id: str,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> str:
        """
        Add a contact to an audience.

        Returns:
            The new contact ID
        """
        payload: dict[str, Any] = {"email": email, "unsubscribed": False}
        if first_name:
            payload["first_name"] = first_name
        if last_name:
            payload["last_name"] = last_name

        response = await self._request(
            "POST",
            f"/audiences/{audience_id}/contacts",
            json=payload,
        )
        contact_id = self._parse(response, CreatedObject).id

        logger.info("resend_contact_created", audience_id=audience_id, contact_id=contact_id)
        return contact_id

    async def send_email(
        self,
        to: list[str],
        subject: str,
        text: str,
        html: str | None = None,
        from_address: str | None = None,
    ) -> str:
        """
        Send a transactional email.

        Returns:
            The Resend email ID
        """
        payload: dict[str, Any] = {
            "from": from_address or settings.resend.from_address,
            "to": to,
            "subject": subject,
            "text": text,
        }
        if html:
            payload["html"] = html

        response = await self._request("POST", "/emails", json=payload)
        email_id = self._parse(response, CreatedObject).id

        logger.info("resend_email_sent", email_id=email_id, recipients=len(to))
        return email_id
