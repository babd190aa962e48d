# Import all repositories to maintain a single import point
from blog.repositories.blog import (
    CategoryRepository,
    PostRepository,
    TagRepository,
)
from blog.repositories.user import UserRepository

__all__ = [
    # Blog repositories
    "CategoryRepository",
    "PostRepository",
    "TagRepository",
    # User repositories
    "UserRepository",
]
