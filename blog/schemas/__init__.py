from __future__ import annotations

# Re-export common schema classes for convenient imports
from .auth import AuthResponse, LoginRequest  # noqa: F401
from .categories import CategoryDto, CreateCategoryRequest  # noqa: F401
from .posts import AuthorRef, CategoryRef, CreatePostRequest, PostDto  # noqa: F401
from .tags import CreateTagsRequest, TagDto, TagRef  # noqa: F401

__all__ = [
    # auth
    "AuthResponse",
    "LoginRequest",
    # categories
    "CategoryDto",
    "CreateCategoryRequest",
    # posts
    "AuthorRef",
    "CategoryRef",
    "CreatePostRequest",
    "PostDto",
    # tags
    "CreateTagsRequest",
    "TagDto",
    "TagRef",
]
