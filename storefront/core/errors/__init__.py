"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from storefront.core.errors import DomainError, ValidationError, NotFoundError
"""

from storefront.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from storefront.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
