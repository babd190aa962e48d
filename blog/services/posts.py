from __future__ import annotations

import math

import structlog
from sqlalchemy.exc import SQLAlchemyError

from blog.errors import ForbiddenError, NotFoundError
from blog.models.blog import Post, PostStatus
from blog.models.user import User
from blog.repositories.blog import CategoryRepository, PostRepository, TagRepository
from blog.schemas.posts import CreatePostRequest
from blog.services.tags import TagService

log = structlog.get_logger(__name__)

WORDS_PER_MINUTE = 200


def calculate_reading_time(content: str | None) -> int:
    """Estimated reading time in whole minutes, rounded up."""
    if not content or not content.strip():
        return 0
    return math.ceil(len(content.split()) / WORDS_PER_MINUTE)


class PostService:
    def __init__(
        self,
        posts: PostRepository,
        categories: CategoryRepository,
        tags: TagRepository,
        tag_service: TagService,
    ) -> None:
        self.posts = posts
        self.categories = categories
        self.tags = tags
        self.tag_service = tag_service

    def list_published_posts(self, *, category_id: str | None = None, tag_id: str | None = None) -> list[Post]:
        category_pk = None
        tag_pk = None
        if category_id:
            category = self.categories.get_by_hex_id(category_id)
            if category is None:
                raise NotFoundError(f"Category {category_id} not found")
            category_pk = category.id
        if tag_id:
            tag = self.tags.get_by_hex_id(tag_id)
            if tag is None:
                raise NotFoundError(f"Tag {tag_id} not found")
            tag_pk = tag.id
        return self.posts.list_posts(status=PostStatus.PUBLISHED, category_id=category_pk, tag_id=tag_pk)

    def list_drafts(self, user: User) -> list[Post]:
        return self.posts.list_drafts(user.id)

    def get_post(self, hex_id: str, viewer: User | None = None) -> Post:
        post = self.posts.get_by_hex_id(hex_id)
        if post is None:
            raise NotFoundError(f"Post {hex_id} not found")
        # Drafts are private to their author
        if post.status == PostStatus.DRAFT and (viewer is None or viewer.id != post.author_id):
            raise NotFoundError(f"Post {hex_id} not found")
        return post

    def create_post(self, author: User, request: CreatePostRequest) -> Post:
        category = self.categories.get_by_hex_id(request.category_id)
        if category is None:
            raise NotFoundError(f"Category {request.category_id} not found")
        tags = self.tag_service.get_tags_by_ids(request.tag_ids)

        post = Post(
            title=request.title,
            content=request.content,
            status=request.status,
            reading_time=calculate_reading_time(request.content),
            author=author,
            category=category,
            tags=tags,
        )
        try:
            self.posts.add(post)
            self.posts.commit()
        except SQLAlchemyError:
            self.posts.rollback()
            raise
        log.info("post_created", post_id=post.hex_id, category_id=category.hex_id, status=post.status.value)
        return post

    def delete_post(self, hex_id: str, user: User) -> None:
        post = self.posts.get_by_hex_id(hex_id)
        if post is None:
            raise NotFoundError(f"Post {hex_id} not found")
        if post.author_id != user.id:
            raise ForbiddenError("Only the author can delete this post")
        self.posts.delete(post)
        self.posts.commit()
        log.info("post_deleted", post_id=hex_id)
