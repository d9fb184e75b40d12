"""Storefront - domain-driven e-commerce checkout sample.

Layers:
- core/: Configuration, result types, errors, dependency container
- domain/: Entities, value objects, domain events, protocols (ports)
- application/: Commands and command handlers (use cases)
- infrastructure/: Event dispatcher, event handlers, logging, persistence
"""
