"""
Base schemas shared by every API module.
"""

import math

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema serialized with camelCase keys, accepting either case on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationMeta(CamelModel):
    """Pagination metadata for list responses."""

    page: int = Field(..., ge=1, description="Current page (1-indexed)")
    limit: int = Field(..., ge=1, description="Items per page")
    total: int = Field(..., ge=0, description="Total matching items")
    pages: int = Field(..., ge=0, description="Total number of pages")

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        return cls(page=page, limit=limit, total=total, pages=page_count(total, limit))


def page_count(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` items, ``limit`` per page."""
    return math.ceil(total / limit) if total > 0 else 0


def page_offset(page: int, limit: int) -> int:
    """Rows to skip before the first item of ``page``."""
    return (page - 1) * limit
