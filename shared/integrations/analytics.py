"""
Analytics Client
================

Server-side event tracking through the OpenPanel track API. Without client
credentials the client is disabled and `track` only logs.

Version: 0.1.0
"""

from typing import Any

import httpx

from shared.config import settings
from shared.integrations.base import IntegrationClient
from shared.logging import get_logger


logger = get_logger(__name__)


class AnalyticsClient(IntegrationClient):
    """OpenPanel event tracker."""

    service_name = "openpanel"

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        api_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        client_id = client_id if client_id is not None else settings.analytics.client_id
        client_secret = (
            client_secret
            if client_secret is not None
            else settings.analytics.client_secret.get_secret_value()
        )
        self.enabled = bool(client_id and client_secret)

        super().__init__(
            base_url=api_url or settings.analytics.api_url,
            headers={
                "openpanel-client-id": client_id,
                "openpanel-client-secret": client_secret,
            },
            transport=transport,
            **kwargs,
        )

    async def track(
        self,
        subject_id: str,
        event: str,
        properties: dict[str, Any] | None = None,
    ) -> None:
        """
        Record an event for a subject (user or email).

        Args:
            subject_id: Profile the event is attributed to
            event: Event name (e.g. "waitlist_signup")
            properties: Event properties
        """
        if not self.enabled:
            logger.debug("analytics_disabled", analytics_event=event)
            return

        await self._request(
            "POST",
            "/track",
            json={
                "type": "track",
                "payload": {
                    "name": event,
                    "profileId": subject_id,
                    "properties": properties or {},
                },
            },
        )
        logger.debug("analytics_event_tracked", analytics_event=event)
