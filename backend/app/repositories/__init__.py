"""
Store layer for the users-with-post-count endpoint.

Each store is described by a Protocol and ships an in-memory implementation
for prototyping plus a SQLAlchemy implementation bound to a request session.
"""

from app.repositories.users import (
    UsersRepository,
    InMemoryUsersRepository,
    SqlAlchemyUsersRepository,
)
from app.repositories.posts import (
    PostsRepository,
    InMemoryPostsRepository,
    SqlAlchemyPostsRepository,
)

__all__ = [
    "UsersRepository",
    "InMemoryUsersRepository",
    "SqlAlchemyUsersRepository",
    "PostsRepository",
    "InMemoryPostsRepository",
    "SqlAlchemyPostsRepository",
]
