"""
Trigger Client
==============

Enqueues background tasks on the Trigger.dev task queue. Delivery, retries
and execution belong to the queue; this client only submits a run with a
well-formed payload.

Version: 0.1.0
"""

from typing import Any

import httpx
from pydantic import BaseModel

from shared.config import settings
from shared.integrations.base import ConfigurationError, IntegrationClient
from shared.logging import get_logger


logger = get_logger(__name__)


class TriggeredRun(BaseModel):
    """Body returned by the trigger endpoint."""

    id: str


class TaskHandle(BaseModel):
    """Handle for a triggered task run."""

    id: str
    task_id: str


class TriggerClient(IntegrationClient):
    """Trigger.dev REST client."""

    service_name = "trigger"

    def __init__(
        self,
        secret_key: str | None = None,
        api_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        key = secret_key if secret_key is not None else settings.trigger.secret_key.get_secret_value()
        if not key:
            raise ConfigurationError("Trigger not initialized - missing secret key")

        super().__init__(
            base_url=api_url or settings.trigger.api_url,
            headers={"Authorization": f"Bearer {key}"},
            transport=transport,
            **kwargs,
        )

    async def trigger(self, task_id: str, payload: BaseModel | dict[str, Any]) -> TaskHandle:
        """
        Trigger a task run.

        Args:
            task_id: Registered task identifier (e.g. "introduction-email")
            payload: Task payload; pydantic models are dumped in JSON mode

        Returns:
            TaskHandle with the run ID
        """
        body = payload.model_dump(mode="json") if isinstance(payload, BaseModel) else payload

        response = await self._request(
            "POST",
            f"/api/v1/tasks/{task_id}/trigger",
            json={"payload": body},
        )
        run = self._parse(response, TriggeredRun)
        handle = TaskHandle(id=run.id, task_id=task_id)

        logger.info("task_triggered", task_id=task_id, run_id=handle.id)
        return handle
