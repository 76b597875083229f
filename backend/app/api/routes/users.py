"""User listing routes."""

from typing import Union

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_page_request, get_user_post_summary_service
from app.schemas.pagination import PageRequest
from app.schemas.user import ErrorResponse, UserPostSummaryResponse
from app.services.user_post_summary import UserPostSummaryService

logger = structlog.get_logger()

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=Union[UserPostSummaryResponse, ErrorResponse],
    responses={200: {"description": "Page of users, or an error body when listing failed"}},
)
def list_users_with_post_count(
    page_request: PageRequest = Depends(get_page_request),
    service: UserPostSummaryService = Depends(get_user_post_summary_service),
):
    """
    List users with the number of posts each has written.

    Failures are reported as ``{"error": "..."}`` with status 200, never as an
    HTTP error status.
    """
    try:
        data = service.get_page(page_request.page, page_request.limit)
    except Exception as e:
        logger.exception(
            "users.list_failed",
            page=page_request.page,
            limit=page_request.limit,
            error=str(e),
        )
        return JSONResponse(status_code=200, content=ErrorResponse(error=str(e)).model_dump())
    return UserPostSummaryResponse(data=data)
