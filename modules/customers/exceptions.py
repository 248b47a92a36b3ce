"""
Customers module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class CustomerNotFoundError(NotFoundError):
    """Raised when a customer is not found."""

    def __init__(self, customer_id: int):
        super().__init__(
            "Customer not found",
            code="CUSTOMER_NOT_FOUND",
            details={"customer_id": customer_id},
        )


class CustomerEmailTakenError(ConflictError):
    """Raised when another customer already uses the email."""

    def __init__(self, email: str):
        super().__init__(
            "Email already registered",
            code="EMAIL_TAKEN",
            details={"email": email},
        )
