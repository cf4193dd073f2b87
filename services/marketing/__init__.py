"""
Marketing Service
=================

Backend for the public marketing site.

Features:
- Waitlist signup with audience registration, welcome email task,
  Discord notification and analytics

Port: 8011
"""

__version__ = "0.1.0"
