"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from storefront.core.domain.entities import (
    AggregateRoot,
    Entity,
    SoftDeletableEntity,
)
from storefront.core.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ConflictException,
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    InsufficientStockException,
    InvalidCredentialsException,
    InvalidStatusException,
    OrderNotFoundException,
    PersistenceException,
    ProductNotFoundException,
    UserNotFoundException,
    ValidationException,
)
from storefront.core.domain.value_objects import (
    Email,
    Money,
    StatusEnum,
    ValueObject,
)

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "SoftDeletableEntity",
    # Value Objects
    "ValueObject",
    "Money",
    "Email",
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "ProductNotFoundException",
    "OrderNotFoundException",
    "UserNotFoundException",
    "InsufficientStockException",
    "InvalidStatusException",
    "ConflictException",
    "DuplicateEntityException",
    "InvalidCredentialsException",
    "AuthenticationException",
    "AuthorizationException",
    "PersistenceException",
]
