"""
Products module exceptions.
"""

from shared.exceptions import NotFoundError


class ProductNotFoundError(NotFoundError):
    """Raised when a product is not found."""

    def __init__(self, product_id: int):
        super().__init__(
            "Product not found",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )
