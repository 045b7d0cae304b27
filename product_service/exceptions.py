"""Product service exceptions.

Raised by the validation and store layers. The handlers catch these and
translate them into status codes and JSON error bodies.
"""


class ProductServiceError(Exception):
    """Base class for product service failures."""
    pass


class ValidationError(ProductServiceError):
    """Request payload failed the product field constraints."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreError(ProductServiceError):
    """The backing store failed (network, throttling, malformed key, ...).

    Carries the underlying message verbatim.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProductNotFoundError(ProductServiceError):
    """No product is stored under the requested ProductId."""

    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id
