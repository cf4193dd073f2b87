"""
Dashboard Service
=================

Multi-tenant compliance dashboard.

Features:
- Framework overview with per-organization control status
- Cached framework reads with tag invalidation

Port: 8010
"""

__version__ = "0.1.0"
