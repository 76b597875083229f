from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.schemas.pagination import PaginationMeta


class UserSummaryOut(BaseModel):
    id: int
    name: str
    post_count: int = 0

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserPostSummaryData(BaseModel):
    users: List[UserSummaryOut]
    pagination: PaginationMeta


class UserPostSummaryResponse(BaseModel):
    data: UserPostSummaryData


class ErrorResponse(BaseModel):
    """Body returned (with HTTP 200) when listing fails for any reason."""
    error: str
