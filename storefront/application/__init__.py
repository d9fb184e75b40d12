"""Application layer - use cases.

Commands describe intent; command handlers orchestrate domain entities,
repositories and the event dispatcher, returning Result types.
"""
