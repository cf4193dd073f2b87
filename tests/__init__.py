"""
Bubba Test Suite
================

Test organization:
- tests/unit/              - Shared library tests (auth, cache, integrations)
- tests/services/<svc>/    - Service tests (projection, routes, waitlist, jobs)

Run tests:
    pytest                          # All tests
    pytest tests/unit               # Unit tests only
    pytest tests/services/marketing # One service
"""
