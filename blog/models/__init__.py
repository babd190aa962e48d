from __future__ import annotations

import secrets


def generate_hex_id(length: int = 32) -> str:
    """Generate a secure random hex string of specified length."""
    return secrets.token_hex(length // 2)


from blog.models.user import User
from blog.models.blog import Category, Post, PostStatus, Tag, post_tags

__all__ = [
    "generate_hex_id",
    "User",
    "Category",
    "Post",
    "PostStatus",
    "Tag",
    "post_tags",
]
