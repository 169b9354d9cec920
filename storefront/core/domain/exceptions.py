"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
They are translated to HTTP responses in storefront.api.exception_handlers.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INSUFFICIENT_STOCK")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "success": False,
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Use for invalid entity states, value object creation failures, etc.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundException(DomainException):
    """
    Raised when an entity is not found.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "NOT_FOUND",
            {"entity_type": entity_type, "entity_id": entity_id},
        )


class ProductNotFoundException(EntityNotFoundException):
    def __init__(self, product_id: int):
        super().__init__("Product", product_id)
        self.product_id = product_id


class OrderNotFoundException(EntityNotFoundException):
    def __init__(self, order_id: int):
        super().__init__("Order", order_id)
        self.order_id = order_id


class UserNotFoundException(EntityNotFoundException):
    def __init__(self, user_id: int):
        super().__init__("User", user_id)
        self.user_id = user_id


class InsufficientStockException(DomainException):
    """Raised when there's not enough stock for an operation."""

    def __init__(self, product_id: int, requested: int, available: int):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for product {product_id}. Requested: {requested}, Available: {available}",
            "INSUFFICIENT_STOCK",
            {
                "product_id": product_id,
                "requested": requested,
                "available": available,
            },
        )


class InvalidStatusException(DomainException):
    """Raised when a status value is not one of the allowed values."""

    def __init__(self, status: Any, allowed: list[str]):
        self.status = status
        self.allowed = allowed
        super().__init__(
            f"Invalid status '{status}'. Must be one of: {', '.join(allowed)}",
            "INVALID_STATUS",
            {"status": str(status), "allowed": allowed},
        )


class ConflictException(DomainException):
    """Raised when an operation is refused because other records depend on the target."""

    def __init__(self, entity_type: str, entity_id: Any, message: str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} {entity_id} is referenced by other records"
        super().__init__(
            msg,
            "CONFLICT",
            {"entity_type": entity_type, "entity_id": entity_id},
        )


class DuplicateEntityException(DomainException):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: Any):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(
            f"{entity_type} with {field}='{value}' already exists",
            "DUPLICATE_ENTITY",
            {
                "entity_type": entity_type,
                "field": field,
                "value": str(value),
            },
        )


class InvalidCredentialsException(DomainException):
    """Raised when an email/password pair does not authenticate.

    The message is the same whether the email or the password was wrong.
    """

    def __init__(self):
        super().__init__("Invalid email or password", "INVALID_CREDENTIALS")


class AuthenticationException(DomainException):
    """Raised when a request carries no usable identity."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, "UNAUTHORIZED")


class AuthorizationException(DomainException):
    """Raised when a user is not authorized to perform an operation."""

    def __init__(self, operation: str, resource: str | None = None, user_id: int | None = None):
        self.operation = operation
        self.resource = resource
        self.user_id = user_id
        msg = f"Not authorized to perform '{operation}'"
        if resource:
            msg += f" on '{resource}'"
        super().__init__(
            msg,
            "FORBIDDEN",
            {
                "operation": operation,
                "resource": resource,
            },
        )


class PersistenceException(DomainException):
    """Raised when the store or its transaction fails for reasons unrelated to caller input."""

    def __init__(self, operation: str, original_error: Exception | None = None):
        self.operation = operation
        self.original_error = original_error
        super().__init__(
            f"Could not complete '{operation}', please retry",
            "PERSISTENCE_ERROR",
            {"operation": operation},
        )
