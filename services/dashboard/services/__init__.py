"""
Dashboard Services
==================

Business logic for the framework dashboard.

Services:
- progress: control status projection and overview counts
- queries: cached framework reads
- framework_page: concurrent aggregation of the overview page
"""

from services.dashboard.services.progress import (
    project_categories,
    project_control,
    summarize_progress,
)
from services.dashboard.services.framework_page import load_framework_page

__all__ = [
    "load_framework_page",
    "project_categories",
    "project_control",
    "summarize_progress",
]
