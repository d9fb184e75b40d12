"""Core layer - cross-cutting concerns shared by every other layer."""
