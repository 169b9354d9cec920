"""
Order Status Value Object for E-commerce Domain
"""

from typing import Any

from storefront.core.domain import InvalidStatusException, StatusEnum


class OrderStatus(StatusEnum):
    """
    Order lifecycle states.

    Any status may be set from any other by an administrator.
    """

    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: Any) -> "OrderStatus":
        """
        Resolve a raw status value.

        Matching is exact: "Completed" or " pending" are rejected.

        Raises:
            InvalidStatusException: If value is not one of the known statuses
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for status in cls:
                if status.value == value:
                    return status
        raise InvalidStatusException(value, cls.values())
