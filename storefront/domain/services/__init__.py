"""Domain services (operations spanning several entities)."""

from storefront.domain.services.order_service import OrderService

__all__ = ["OrderService"]
