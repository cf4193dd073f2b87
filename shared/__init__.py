"""
Bubba Shared Library
====================

Common utilities, configurations, and abstractions shared across all Bubba services.

Modules:
    - config: Configuration management with Pydantic Settings
    - logging: Structured logging with structlog
    - auth: Session tokens and route protection
    - database: PostgreSQL and Redis clients
    - cache: Redis-backed query cache with tag invalidation
    - integrations: Resend, Trigger.dev, Discord and OpenPanel clients
    - models: Shared Pydantic models

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Bubba Team"

from shared.config import settings
from shared.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "get_logger",
    "setup_logging",
    "__version__",
]
