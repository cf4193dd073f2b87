"""
Task Registry
=============

Background tasks are declared with a payload schema and registered by id.
The task queue runs them at-least-once by calling the jobs service, which
looks the task up here and validates the payload before running it.

Usage:
    class WelcomePayload(BaseModel):
        email: EmailAddress

    @task("welcome", WelcomePayload)
    async def welcome(payload: WelcomePayload) -> None:
        ...

Version: 0.1.0
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from shared.logging import get_logger


logger = get_logger(__name__)

P = TypeVar("P", bound=BaseModel)


@dataclass(frozen=True)
class TaskDefinition(Generic[P]):
    """A registered background task."""

    id: str
    schema: type[P]
    run: Callable[[P], Awaitable[Any]]

    def payload(self, data: dict[str, Any]) -> P:
        """
        Validate raw payload data.

        Raises:
            pydantic.ValidationError: If the payload does not match the schema
        """
        return self.schema.model_validate(data)


_registry: dict[str, TaskDefinition[Any]] = {}


def task(task_id: str, schema: type[P]) -> Callable[[Callable[[P], Awaitable[Any]]], TaskDefinition[P]]:
    """Register a coroutine as a background task with a payload schema."""

    def decorator(func: Callable[[P], Awaitable[Any]]) -> TaskDefinition[P]:
        if task_id in _registry:
            raise ValueError(f"Task already registered: {task_id}")
        definition = TaskDefinition(id=task_id, schema=schema, run=func)
        _registry[task_id] = definition
        logger.debug("task_registered", task_id=task_id, schema=schema.__name__)
        return definition

    return decorator


def get_task(task_id: str) -> TaskDefinition[Any] | None:
    """Look up a registered task."""
    return _registry.get(task_id)


def registered_tasks() -> list[str]:
    """Ids of all registered tasks."""
    return sorted(_registry)
