"""
Jobs Service
============

Background task definitions executed on behalf of the task queue.

Tasks:
- introduction-email: welcome email for waitlist signups
- new-organization: post-creation hook for organizations

Port: 8012
"""

__version__ = "0.1.0"
