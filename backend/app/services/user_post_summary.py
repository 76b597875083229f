"""
User Post Summary Service

Builds one page of users annotated with how many posts each of them wrote,
together with the pagination metadata for that page.
"""

import structlog

from app.repositories.posts import PostsRepository
from app.repositories.users import UsersRepository
from app.schemas.user import UserPostSummaryData, UserSummaryOut
from app.services.pagination import build_pagination_meta

logger = structlog.get_logger()


class UserPostSummaryService:
    """
    Service producing paginated user summaries with post counts.

    Both stores are injected; the service keeps no state between calls and
    never writes to either store.
    """

    def __init__(self, users: UsersRepository, posts: PostsRepository) -> None:
        self._users = users
        self._posts = posts

    def get_page(self, page: int, limit: int) -> UserPostSummaryData:
        """
        Load one page of users with their post counts.

        Steps:
        1. Fetch the page window of users (skip ``(page - 1) * limit``, take ``limit``)
        2. Count posts per owner for the ids on that page
        3. Default users missing from the counts to 0
        4. Count all users and derive the pagination metadata

        Store errors are not caught here; the caller decides how to report them.

        Args:
            page: 1-indexed page number
            limit: Page size

        Returns:
            Users in retrieval order plus pagination metadata
        """
        skip = (page - 1) * limit
        users = self._users.find_page(skip, limit)

        user_ids = [user.id for user in users]
        post_counts = self._posts.count_grouped_by_owner(user_ids) if user_ids else {}

        summaries = [
            UserSummaryOut(id=user.id, name=user.name, post_count=post_counts.get(user.id, 0))
            for user in users
        ]

        total_docs = self._users.count_all()
        pagination = build_pagination_meta(total_docs, page, limit)

        logger.info(
            "users.page_loaded",
            page=page,
            limit=limit,
            returned=len(summaries),
            total_docs=total_docs,
        )
        return UserPostSummaryData(users=summaries, pagination=pagination)
