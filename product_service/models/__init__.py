"""Data models module."""

from product_service.models.product import ITEM_ATTRIBUTES, Product, ProductInput

__all__ = ["ITEM_ATTRIBUTES", "Product", "ProductInput"]
