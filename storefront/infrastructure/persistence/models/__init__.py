"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from storefront.infrastructure.persistence.base import BaseModel, BaseMutableModel
from storefront.infrastructure.persistence.models.customer import CustomerModel
from storefront.infrastructure.persistence.models.order import (
    OrderItemModel,
    OrderModel,
)
from storefront.infrastructure.persistence.models.product import ProductModel

__all__ = [
    "BaseModel",
    "BaseMutableModel",
    "CustomerModel",
    "OrderItemModel",
    "OrderModel",
    "ProductModel",
]
