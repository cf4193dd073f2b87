"""
Task Routes
===========

Entry point for the task queue worker.

Version: 0.1.0
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import ValidationError

from services.jobs.registry import get_task, registered_tasks
from shared.auth import User, require_roles
from shared.logging import bind_context, get_logger
from shared.models.common import BaseResponse


logger = get_logger(__name__)

router = APIRouter()

require_worker = require_roles(["worker", "admin"])


@router.get("", response_model=BaseResponse[list[str]])
async def list_tasks(
    user: User = Depends(require_worker),
) -> BaseResponse[list[str]]:
    """Ids of all registered tasks."""
    return BaseResponse(data=registered_tasks())


@router.post("/{task_id}/run", response_model=BaseResponse[Any])
async def run_task(
    task_id: str,
    payload: dict[str, Any] = Body(...),
    user: User = Depends(require_worker),
) -> BaseResponse[Any]:
    """
    Run a registered task with the given payload.

    Returns 404 for an unknown task and 422 for a payload that does not
    match the task's schema.
    """
    definition = get_task(task_id)
    if definition is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Task not found: {task_id}",
        )

    bind_context(task_id=task_id)

    try:
        validated = definition.payload(payload)
    except ValidationError as e:
        logger.warning("task_payload_invalid", task_id=task_id, errors=e.error_count())
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid payload for task {task_id}",
        ) from e

    logger.info("task_run_started", task_id=task_id, user_id=user.id)
    result = await definition.run(validated)

    return BaseResponse(data=result, message=f"Task {task_id} completed")
