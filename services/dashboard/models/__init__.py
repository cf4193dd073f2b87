"""
Dashboard Database Models
=========================

SQLAlchemy ORM models behind the framework dashboard.

Tables:
- frameworks, framework_categories, controls: seeded reference data
- organizations, organization_frameworks, organization_controls, artifacts:
  per-tenant progress

Version: 0.1.0
"""

from services.dashboard.models.framework import (
    ControlModel,
    FrameworkCategoryModel,
    FrameworkModel,
)
from services.dashboard.models.organization import (
    ArtifactModel,
    OrganizationControlModel,
    OrganizationFrameworkModel,
    OrganizationModel,
)

__all__ = [
    # Reference data
    "FrameworkModel",
    "FrameworkCategoryModel",
    "ControlModel",
    # Tenant data
    "OrganizationModel",
    "OrganizationFrameworkModel",
    "OrganizationControlModel",
    "ArtifactModel",
]
