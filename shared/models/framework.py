"""
Framework Models
================

Read models for compliance frameworks and an organization's progress
against them. These are the shapes the dashboard renders and the query
cache stores; they are built from ORM rows with `from_attributes`.

Version: 0.1.0
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ControlStatus(str, Enum):
    """Implementation status of a control within an organization."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLIANT = "compliant"
    NON_COMPLIANT = "non_compliant"
    NOT_APPLICABLE = "not_applicable"


class FrameworkStatus(str, Enum):
    """Overall status of an organization's framework adoption."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLIANT = "compliant"
    NON_COMPLIANT = "non_compliant"


class ArtifactType(str, Enum):
    """Kinds of evidence attached to a control."""

    POLICY = "policy"
    EVIDENCE = "evidence"
    PROCEDURE = "procedure"
    TRAINING = "training"


class ArtifactView(BaseModel):
    """Evidence attached to an organization control."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    type: ArtifactType
    url: str | None = None
    created_at: datetime | None = None


class ControlView(BaseModel):
    """A control as defined by the framework."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    code: str
    description: str | None = None
    domain: str | None = None
    framework_category_id: str


class CategoryView(BaseModel):
    """A framework category with its controls."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    code: str | None = None
    description: str | None = None
    framework_id: str
    controls: list[ControlView] = Field(default_factory=list)


class FrameworkView(BaseModel):
    """A framework with its categories and controls (reference data)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    version: str | None = None
    categories: list[CategoryView] = Field(default_factory=list)


class OrganizationControlView(BaseModel):
    """An organization's record for one control."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    control_id: str
    status: ControlStatus = ControlStatus.NOT_STARTED
    control: ControlView
    artifacts: list[ArtifactView] = Field(default_factory=list)


class OrganizationFrameworkView(BaseModel):
    """An organization's adoption of a framework."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    organization_id: str
    framework_id: str
    status: FrameworkStatus = FrameworkStatus.NOT_STARTED
    adopted_at: datetime | None = None
    last_assessed: datetime | None = None
    next_assessment: datetime | None = None
    organization_controls: list[OrganizationControlView] = Field(default_factory=list)


class ControlProgress(ControlView):
    """A control projected with the organization's status and artifacts."""

    status: ControlStatus = ControlStatus.NOT_STARTED
    artifacts: list[ArtifactView] = Field(default_factory=list)


class CategoryProgress(BaseModel):
    """A category whose controls carry organization progress."""

    id: str
    name: str
    code: str | None = None
    description: str | None = None
    framework_id: str
    controls: list[ControlProgress] = Field(default_factory=list)


class FrameworkProgress(BaseModel):
    """Overview numbers for an organization's framework progress."""

    total_controls: int = 0
    by_status: dict[ControlStatus, int] = Field(default_factory=dict)
    compliant_percentage: float = Field(default=0.0, ge=0, le=100)


class FrameworkPage(BaseModel):
    """Everything the framework overview page renders."""

    framework: FrameworkView
    organization_framework: OrganizationFrameworkView
    categories: list[CategoryProgress]
    progress: FrameworkProgress
