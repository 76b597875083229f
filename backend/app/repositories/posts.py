from __future__ import annotations

from collections import Counter
from typing import Iterable, Protocol

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.post import Post


class PostsRepository(Protocol):
    """Read-only interface over post records."""

    def count_grouped_by_owner(self, owner_ids: Iterable[int]) -> dict[int, int]: ...


class InMemoryPostsRepository:
    """Simplistic in-memory repository for prototyping and tests."""

    def __init__(self, posts: Iterable[Post] = ()) -> None:
        self._posts: list[Post] = list(posts)

    def add(self, post: Post) -> Post:
        self._posts.append(post)
        return post

    def count_grouped_by_owner(self, owner_ids: Iterable[int]) -> dict[int, int]:
        wanted = set(owner_ids)
        counts = Counter(post.user_id for post in self._posts if post.user_id in wanted)
        return dict(counts)


class SqlAlchemyPostsRepository:
    """SQLAlchemy-backed repository for post aggregates."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def count_grouped_by_owner(self, owner_ids: Iterable[int]) -> dict[int, int]:
        ids = list(owner_ids)
        if not ids:
            return {}
        stmt = (
            select(Post.user_id, func.count(Post.id))
            .where(Post.user_id.in_(ids))
            .group_by(Post.user_id)
        )
        return {user_id: count for user_id, count in self._session.execute(stmt).all()}
