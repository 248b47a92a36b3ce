"""
Orders module exceptions.
"""

from shared.exceptions import NotFoundError


class OrderNotFoundError(NotFoundError):
    """Raised when an order is not found."""

    def __init__(self, order_id: int):
        super().__init__(
            "Order not found",
            code="ORDER_NOT_FOUND",
            details={"order_id": order_id},
        )
