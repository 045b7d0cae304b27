"""Request handlers for the product resource."""

from product_service.handlers.products import ProductHandlers

__all__ = ["ProductHandlers"]
