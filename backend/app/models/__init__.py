from app.models.user import User
from app.models.post import Post

__all__ = [
    "User",
    "Post",
]
