"""Test suite for the storefront application.

Test structure:
- unit/: Unit tests - domain logic, dispatcher, handlers in isolation
- integration/: Integration tests - repositories and event flows against
  an in-memory SQLite database
"""
