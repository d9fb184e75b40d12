"""Infrastructure layer - adapters for domain protocols.

- events/: Event dispatcher and event handlers
- logging/: Structured logging adapters (structlog)
- persistence/: SQLAlchemy models, database and repositories
"""
