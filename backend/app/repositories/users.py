from __future__ import annotations

from typing import Iterable, Protocol

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.user import User


class UsersRepository(Protocol):
    """Read-only interface over user records."""

    def count_all(self) -> int: ...

    def find_page(self, skip: int, limit: int) -> list[User]:
        """
        Users ordered by id, skipping ``skip`` and taking up to ``limit``.

        A negative ``skip`` counts as 0. A ``limit`` below 1 gives an empty page.
        """
        ...


def _window(skip: int, limit: int) -> tuple[int, int] | None:
    if limit < 1:
        return None
    return max(skip, 0), limit


class InMemoryUsersRepository:
    """Simplistic in-memory repository for prototyping and tests."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[int, User] = {}
        for user in users:
            self.add(user)

    def add(self, user: User) -> User:
        if user.id is None:
            user.id = max(self._users, default=0) + 1
        self._users[user.id] = user
        return user

    def count_all(self) -> int:
        return len(self._users)

    def find_page(self, skip: int, limit: int) -> list[User]:
        window = _window(skip, limit)
        if window is None:
            return []
        start, size = window
        ordered = [self._users[key] for key in sorted(self._users)]
        return ordered[start:start + size]


class SqlAlchemyUsersRepository:
    """SQLAlchemy-backed repository for user reads."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def count_all(self) -> int:
        return self._session.execute(select(func.count()).select_from(User)).scalar_one()

    def find_page(self, skip: int, limit: int) -> list[User]:
        window = _window(skip, limit)
        if window is None:
            return []
        start, size = window
        # Explicit id order keeps page windows stable across calls
        stmt = select(User).order_by(User.id.asc()).offset(start).limit(size)
        return list(self._session.execute(stmt).scalars().all())
