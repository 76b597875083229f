from app.schemas.pagination import PageRequest, PaginationMeta
from app.schemas.user import (
    UserSummaryOut,
    UserPostSummaryData,
    UserPostSummaryResponse,
    ErrorResponse,
)

__all__ = [
    "PageRequest",
    "PaginationMeta",
    "UserSummaryOut",
    "UserPostSummaryData",
    "UserPostSummaryResponse",
    "ErrorResponse",
]
