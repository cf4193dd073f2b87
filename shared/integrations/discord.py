"""
Discord Webhook
===============

Plain-text notifications to a Discord channel webhook.

Version: 0.1.0
"""

from typing import Any

import httpx

from shared.integrations.base import IntegrationClient


class DiscordWebhook(IntegrationClient):
    """Posts messages to a single Discord webhook URL."""

    service_name = "discord"

    def __init__(
        self,
        webhook_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(transport=transport, **kwargs)
        self._webhook_url = webhook_url

    async def notify(self, content: str) -> None:
        """Post a message to the channel."""
        await self._request("POST", self._webhook_url, json={"content": content})
