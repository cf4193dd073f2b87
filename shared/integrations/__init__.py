"""
Integrations Module
===================

Async clients for the SaaS providers Bubba talks to.

Clients:
- ResendClient: audience contacts and transactional email
- TriggerClient: background task queue
- DiscordWebhook: signup notifications
- AnalyticsClient: server-side event tracking (OpenPanel)

All clients raise `ExternalServiceError` on failed calls and
`ConfigurationError` when constructed without required credentials.
"""

from shared.integrations.analytics import AnalyticsClient
from shared.integrations.base import (
    ConfigurationError,
    ExternalServiceError,
    IntegrationClient,
)
from shared.integrations.discord import DiscordWebhook
from shared.integrations.resend import Contact, ResendClient
from shared.integrations.trigger import TaskHandle, TriggerClient


__all__ = [
    "AnalyticsClient",
    "ConfigurationError",
    "Contact",
    "DiscordWebhook",
    "ExternalServiceError",
    "IntegrationClient",
    "ResendClient",
    "TaskHandle",
    "TriggerClient",
]
