"""Pagination schemas shared by paginated list responses."""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PageRequest(BaseModel):
    """Normalized page/limit pair derived from raw query values."""
    page: int
    limit: int


class PaginationMeta(BaseModel):
    """Position of a page within the full result set. Serialized in camelCase."""
    total_docs: int
    limit: int
    page: int
    total_pages: int
    paging_counter: int
    has_prev_page: bool
    has_next_page: bool
    prev_page: Optional[int] = None
    next_page: Optional[int] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
