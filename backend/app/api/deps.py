from typing import Generator, Optional

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.db.session import SessionLocal
from app.repositories.posts import PostsRepository, SqlAlchemyPostsRepository
from app.repositories.users import SqlAlchemyUsersRepository, UsersRepository
from app.schemas.pagination import PageRequest
from app.services.pagination import resolve_page_request
from app.services.user_post_summary import UserPostSummaryService


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_users_repository(db: Session = Depends(get_db)) -> UsersRepository:
    return SqlAlchemyUsersRepository(db)


def get_posts_repository(db: Session = Depends(get_db)) -> PostsRepository:
    return SqlAlchemyPostsRepository(db)


def get_user_post_summary_service(
    users: UsersRepository = Depends(get_users_repository),
    posts: PostsRepository = Depends(get_posts_repository),
) -> UserPostSummaryService:
    return UserPostSummaryService(users=users, posts=posts)


def get_page_request(
    page: Optional[str] = Query(None, description="1-indexed page number"),
    limit: Optional[str] = Query(None, description="Users per page"),
    settings: Settings = Depends(get_settings),
) -> PageRequest:
    """Read ``page``/``limit`` as raw strings so bad values fall back to defaults instead of 422."""
    return resolve_page_request(
        page,
        limit,
        default_page=settings.default_page,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )
