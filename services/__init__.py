"""
Bubba Services
==============

FastAPI services of the Bubba compliance platform.

Services:
    - dashboard: framework and control tracking (port 8010)
    - marketing: marketing site actions, waitlist (port 8011)
    - jobs: background task execution (port 8012)
"""
