"""Persistence infrastructure (SQLAlchemy models, database, repositories)."""
