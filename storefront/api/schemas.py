"""
Shared API schema base.
"""

from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Largest value an INTEGER column holds (PostgreSQL int4)
MAX_DB_INT = 2**31 - 1

# Id taken from the URL path
PathId = Annotated[int, Path(le=MAX_DB_INT)]


class CamelModel(BaseModel):
    """
    Base schema exchanging camelCase JSON keys.

    Requests accept both camelCase and snake_case field names; responses
    are serialized with camelCase aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
