"""Conversions between persisted models and their API representations."""
from __future__ import annotations

from typing import Iterable

from blog.models.blog import Category, Post, PostStatus, Tag
from blog.schemas.categories import CategoryDto, CreateCategoryRequest
from blog.schemas.posts import AuthorRef, CategoryRef, PostDto
from blog.schemas.tags import TagDto, TagRef


def count_published_posts(posts: Iterable[Post] | None) -> int:
    """Number of posts whose status is exactly PUBLISHED. ``None`` counts as zero."""
    if posts is None:
        return 0
    return sum(1 for post in posts if post.status == PostStatus.PUBLISHED)


def category_to_dto(category: Category) -> CategoryDto:
    return CategoryDto(
        id=category.hex_id,
        name=category.name,
        post_count=count_published_posts(getattr(category, "posts", None)),
    )


def create_request_to_category(request: CreateCategoryRequest) -> Category:
    # Identifier is assigned by the store on flush
    return Category(name=request.name)


def tag_to_dto(tag: Tag) -> TagDto:
    return TagDto(
        id=tag.hex_id,
        name=tag.name,
        post_count=count_published_posts(getattr(tag, "posts", None)),
    )


def post_to_dto(post: Post) -> PostDto:
    return PostDto(
        id=post.hex_id,
        title=post.title,
        content=post.content,
        status=post.status,
        reading_time=post.reading_time,
        created_at=post.created_at,
        updated_at=post.updated_at,
        author=AuthorRef(id=post.author.hex_id, name=post.author.name) if post.author else None,
        category=CategoryRef(id=post.category.hex_id, name=post.category.name) if post.category else None,
        tags=[TagRef(id=t.hex_id, name=t.name) for t in sorted(post.tags, key=lambda t: t.name.lower())],
    )
