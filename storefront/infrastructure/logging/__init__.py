"""Structured logging adapters."""
