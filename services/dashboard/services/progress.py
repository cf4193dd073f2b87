"""
Control Progress Projection
===========================

Projects framework controls onto an organization's progress. A control with
no organization record is a normal state and resolves to `not_started` with
no artifacts.

Version: 0.1.0
"""

from collections import Counter
from collections.abc import Iterable
from typing import Any

from shared.models.framework import (
    ArtifactView,
    CategoryProgress,
    ControlProgress,
    ControlStatus,
    ControlView,
    FrameworkProgress,
)


def project_control(control: Any, organization_id: str) -> ControlProgress:
    """
    Resolve one control's status and artifacts for an organization.

    Args:
        control: Control row exposing `organization_controls`
        organization_id: Organization whose record is used

    Returns:
        ControlProgress from the first matching organization record, or
        the not_started default when there is none.
    """
    definition = ControlView.model_validate(control).model_dump()
    record = next(
        (oc for oc in control.organization_controls if oc.organization_id == organization_id),
        None,
    )

    if record is None:
        return ControlProgress(**definition)

    return ControlProgress(
        **definition,
        status=record.status or ControlStatus.NOT_STARTED,
        artifacts=[ArtifactView.model_validate(a) for a in record.artifacts or []],
    )


def project_categories(categories: Iterable[Any], organization_id: str) -> list[CategoryProgress]:
    """Project every control of every category for an organization."""
    return [
        CategoryProgress(
            id=category.id,
            name=category.name,
            code=category.code,
            description=category.description,
            framework_id=category.framework_id,
            controls=[project_control(control, organization_id) for control in category.controls],
        )
        for category in categories
    ]


def summarize_progress(categories: Iterable[CategoryProgress]) -> FrameworkProgress:
    """
    Count controls per status across categories.

    Controls marked not_applicable are left out of the compliant percentage.
    """
    counts = Counter(control.status for category in categories for control in category.controls)
    total = sum(counts.values())
    applicable = total - counts[ControlStatus.NOT_APPLICABLE]
    compliant = counts[ControlStatus.COMPLIANT]

    return FrameworkProgress(
        total_controls=total,
        by_status={status: counts.get(status, 0) for status in ControlStatus},
        compliant_percentage=round(compliant / applicable * 100, 1) if applicable else 0.0,
    )
