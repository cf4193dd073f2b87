"""
Shared Models
=============

Pydantic models shared across Bubba services.

Models:
- Framework read models (FrameworkView, OrganizationFrameworkView)
- Projected progress models (CategoryProgress, ControlProgress, FrameworkPage)
- Common response envelopes (BaseResponse, ErrorResponse, HealthResponse)
"""

from shared.models.common import (
    BaseResponse,
    EmailAddress,
    ErrorResponse,
    HealthResponse,
)
from shared.models.framework import (
    ArtifactType,
    ArtifactView,
    CategoryProgress,
    CategoryView,
    ControlProgress,
    ControlStatus,
    ControlView,
    FrameworkPage,
    FrameworkProgress,
    FrameworkStatus,
    FrameworkView,
    OrganizationControlView,
    OrganizationFrameworkView,
)

__all__ = [
    # Framework
    "ArtifactType",
    "ArtifactView",
    "CategoryProgress",
    "CategoryView",
    "ControlProgress",
    "ControlStatus",
    "ControlView",
    "FrameworkPage",
    "FrameworkProgress",
    "FrameworkStatus",
    "FrameworkView",
    "OrganizationControlView",
    "OrganizationFrameworkView",
    # Common
    "BaseResponse",
    "EmailAddress",
    "ErrorResponse",
    "HealthResponse",
]
