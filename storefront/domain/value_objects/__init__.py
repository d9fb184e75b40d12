"""Value objects for the storefront domain.

Value objects are immutable and compared by value, not identity.
"""

from storefront.domain.value_objects.address import Address

__all__ = ["Address"]
